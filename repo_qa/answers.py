"""Answer generators: general, technical (code search) and statistics."""

import logging
import re
from typing import List, Optional, Tuple

import httpx

from .config import DEFAULT_TZ
from .github import search_code
from .models import RelatedFile, RepositoryInfo
from .utils import local_date

logger = logging.getLogger(__name__)

NO_FILES_FOUND = "I could not find any relevant code files for your technical question."
NO_DESCRIPTION = "I found some general information about the repository, but it has no description."


def generate_general(info: RepositoryInfo, question: str) -> str:
    if "about" in question.lower():
        parts = [
            f"This repository is {info.description or 'a project'} "
            f"written primarily in {info.language or 'an unspecified language'}."
        ]
        if info.homepage:
            parts.append(f"You can find more information at {info.homepage}.")
        if info.topics:
            parts.append(f"It's tagged with the following topics: {', '.join(info.topics)}.")
        return " ".join(parts)

    if not info.description:
        return NO_DESCRIPTION
    return f"I found some general information about the repository: {info.description}"


def _search_query(question: str, full_name: str) -> str:
    # Punctuation would be read as search qualifiers.
    cleaned = re.sub(r"[^\w\s]", " ", question)
    return f"{cleaned} repo:{full_name}"


async def generate_technical(
    client: httpx.AsyncClient, info: RepositoryInfo, question: str, token: Optional[str]
) -> Tuple[str, List[RelatedFile]]:
    """Search the repository's code for the question and list the hits."""
    files = await search_code(client, _search_query(question, info.full_name), token)
    logger.info("Code search in %s returned %d file(s)", info.full_name, len(files))
    if not files:
        return NO_FILES_FOUND, []
    listing = "\n".join(f"- {f.path} ({f.url})" for f in files)
    return f"I found some relevant files that might help answer your question:\n\n{listing}", files


def generate_statistics(info: RepositoryInfo, question: str, tz: str = DEFAULT_TZ) -> str:
    stats = {
        "size": info.size,
        "stars": info.stargazers_count,
        "forks": info.forks_count,
        "issues": info.open_issues_count,
        "languages": len(info.languages),
        "created": local_date(info.created_at, tz),
        "updated": local_date(info.updated_at, tz),
    }
    q = question.lower()

    if "language" in q:
        return f"The repository uses {stats['languages']} languages: {', '.join(info.languages)}"
    if "popular" in q or "stars" in q:
        return f"The repository has {stats['stars']} stars and {stats['forks']} forks"
    if "issue" in q:
        return f"There are currently {stats['issues']} open issues"

    return (
        "Repository statistics:\n"
        f"- Size: {stats['size']}KB\n"
        f"- Stars: {stats['stars']}\n"
        f"- Forks: {stats['forks']}\n"
        f"- Open Issues: {stats['issues']}\n"
        f"- Created: {stats['created']}\n"
        f"- Last Updated: {stats['updated']}"
    )
