"""Utility helpers for HTTP headers, date conversion, and JSON/error handling."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

import httpx
from zoneinfo import ZoneInfo

from .config import DEFAULT_TZ
from .errors import UpstreamError


def _headers(token: Optional[str]) -> Dict[str, str]:
    h = {
        "Accept": "application/vnd.github+json",
        "User-Agent": "repo-qa/1.0",
    }
    if token:
        h["Authorization"] = f"Bearer {token}"
    return h


def local_date(ts_utc: Optional[str], tz_name: str = DEFAULT_TZ) -> str:
    """Render an ISO-8601 UTC timestamp as a calendar date in ``tz_name``."""
    if not ts_utc:
        return "unknown"
    dt = datetime.fromisoformat(ts_utc.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(ZoneInfo(tz_name)).date().isoformat()


def _json_or_error(resp: httpx.Response) -> Any:
    if resp.status_code >= 400:
        detail_text = None
        try:
            j = resp.json()
            detail_text = (j.get("message") if isinstance(j, dict) else None) or resp.text
        except ValueError:
            detail_text = resp.text
        rl = resp.headers.get("X-RateLimit-Remaining")
        msg_lower = (detail_text or "").lower()
        if resp.status_code in (403, 429) and (rl == "0" or "rate limit" in msg_lower):
            raise UpstreamError(
                f"GitHub API rate limit exceeded: {detail_text or resp.status_code}",
                status_code=resp.status_code,
            )
        raise UpstreamError(detail_text or "GitHub request failed", status_code=resp.status_code)
    try:
        return resp.json()
    except ValueError:
        raise UpstreamError("Invalid JSON from GitHub", status_code=resp.status_code)
