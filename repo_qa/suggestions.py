"""Repository improvement hints derived from missing or unhealthy metadata."""

from typing import List, Optional

from .config import ISSUE_THRESHOLD
from .models import RepositoryInfo

ADD_DESCRIPTION = "Add a repository description to help users understand the project better"
ADD_HOMEPAGE = "Consider adding a homepage or enabling GitHub Pages"
ADD_TOPICS = "Add repository topics to improve discoverability"
ADDRESS_ISSUES = "Consider addressing some open issues to improve repository health"


def generate_suggestions(
    info: RepositoryInfo, question: str, context: Optional[str] = None
) -> List[str]:
    """Return the advisories whose condition holds, in a fixed order.

    ``question`` and ``context`` are accepted for parity with the other
    generators; the checks only look at ``info``.
    """
    out: List[str] = []
    if not info.description:
        out.append(ADD_DESCRIPTION)
    if not info.homepage and not info.has_pages:
        out.append(ADD_HOMEPAGE)
    if not info.topics:
        out.append(ADD_TOPICS)
    if info.open_issues_count > ISSUE_THRESHOLD:
        out.append(ADDRESS_ISSUES)
    return out
