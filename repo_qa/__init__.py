"""Repo Q&A package public API.

Exposes the orchestrator, the data and dependency models, the error types and
the markdown renderer.
"""

from .core import answer_question
from .models import Answer, Deps, QueryRequest, QuestionType, RelatedFile, RepositoryInfo
from .errors import MissingCredentialError, OperationError, RepoQAError, UpstreamError
from .render import render_markdown
from .manifest import build_manifest
from .config import DEFAULT_TZ
