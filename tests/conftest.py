from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

import httpx
import pytest

from repo_qa.models import RepositoryInfo

REPO_PAYLOAD: Dict[str, Any] = {
    "full_name": "octo/widgets",
    "description": "A test tool",
    "homepage": None,
    "language": "Go",
    "size": 1234,
    "stargazers_count": 42,
    "forks_count": 7,
    "open_issues_count": 3,
    "created_at": "2020-01-15T10:00:00Z",
    "updated_at": "2024-06-01T23:30:00Z",
    "has_pages": False,
    "topics": ["ignored-here"],
    "owner": {"login": "octo"},
}


class FakeGitHub:
    """Route table for ``httpx.MockTransport`` that records every request."""

    def __init__(self) -> None:
        self.calls: List[httpx.Request] = []
        self.routes: Dict[str, Tuple[int, Any]] = {
            "/repos/octo/widgets": (200, dict(REPO_PAYLOAD)),
            "/repos/octo/widgets/languages": (200, {"Go": 9000, "Shell": 120}),
            "/repos/octo/widgets/topics": (200, {"names": []}),
            "/search/code": (200, {"total_count": 0, "items": []}),
        }

    def set(self, path: str, status: int, body: Any) -> None:
        self.routes[path] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        status, body = self.routes.get(request.url.path, (404, {"message": "Not Found"}))
        return httpx.Response(status, json=body)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def make_info() -> Callable[..., RepositoryInfo]:
    def _make(**overrides: Any) -> RepositoryInfo:
        data = {**REPO_PAYLOAD, "topics": [], "languages": {"Go": 9000, "Shell": 120}}
        data.update(overrides)
        return RepositoryInfo(**data)

    return _make
