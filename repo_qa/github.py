"""GitHub REST calls: repository snapshot (metadata, languages, topics) and code search."""

import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx

from .config import GITHUB_API, SEARCH_PAGE_SIZE
from .errors import UpstreamError
from .models import RelatedFile, RepositoryInfo
from .utils import _headers, _json_or_error

logger = logging.getLogger(__name__)


async def _get_json(
    client: httpx.AsyncClient, url: str, token: Optional[str], params: Optional[Dict[str, Any]] = None
) -> Any:
    try:
        r = await client.get(url, params=params, headers=_headers(token))
    except httpx.HTTPError as e:
        logger.warning("GitHub request failed: %s %s", url, e)
        raise UpstreamError(str(e) or e.__class__.__name__) from e
    try:
        return _json_or_error(r)
    except UpstreamError as e:
        logger.warning("GitHub returned %s for %s: %s", e.status_code, url, e.message)
        raise


async def fetch_repository_info(
    client: httpx.AsyncClient, owner: str, repo: str, token: Optional[str]
) -> RepositoryInfo:
    """Fetch metadata, language byte counts and topics, merged into one snapshot.

    The three calls are independent and run concurrently; any single failure
    aborts the whole fetch with ``UpstreamError``.
    """
    base = f"{GITHUB_API}/repos/{owner}/{repo}"
    tasks = [
        asyncio.ensure_future(_get_json(client, base, token)),
        asyncio.ensure_future(_get_json(client, f"{base}/languages", token)),
        asyncio.ensure_future(_get_json(client, f"{base}/topics", token)),
    ]
    try:
        repo_json, languages, topics = await asyncio.gather(*tasks)
    finally:
        # A failed call cancels its siblings; none outlive the fetch.
        for t in tasks:
            if not t.done():
                t.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    if not isinstance(repo_json, dict):
        raise UpstreamError("Unexpected repository payload from GitHub")
    fields = {k: repo_json[k] for k in RepositoryInfo.model_fields if repo_json.get(k) is not None}
    fields.update(
        full_name=repo_json.get("full_name") or f"{owner}/{repo}",
        languages=languages or {},
        topics=(topics or {}).get("names") or [],
    )
    info = RepositoryInfo(**fields)
    logger.debug(
        "Fetched %s: %d languages, %d topics", info.full_name, len(info.languages), len(info.topics)
    )
    return info


async def search_code(
    client: httpx.AsyncClient, query: str, token: Optional[str], per_page: int = SEARCH_PAGE_SIZE
) -> List[RelatedFile]:
    """Run a code search and map each hit to a ``RelatedFile``."""
    js = await _get_json(
        client,
        f"{GITHUB_API}/search/code",
        token,
        params={"q": query, "per_page": per_page},
    )
    items = js.get("items", []) if isinstance(js, dict) else []
    return [
        RelatedFile(name=it.get("name", ""), path=it.get("path", ""), url=it.get("html_url", ""))
        for it in items
    ]
