"""Configuration and environment defaults for the Q&A layer.

Loads environment variables (.env via python-dotenv) and exposes constants used
across the fetcher, the answer generators and the HTTP host.
"""

import os
from dotenv import load_dotenv

load_dotenv()

GITHUB_API = os.getenv("GITHUB_API", "https://api.github.com")
DEFAULT_TZ = os.getenv("REPO_QA_TZ", "UTC")
HTTP_TIMEOUT = float(os.getenv("REPO_QA_HTTP_TIMEOUT", "20"))
LOG_LEVEL = os.getenv("REPO_QA_LOG_LEVEL", "INFO").upper()

# Code search page size used by technical answers.
SEARCH_PAGE_SIZE = 5
# Open issue count above which a cleanup suggestion is emitted.
ISSUE_THRESHOLD = 20
