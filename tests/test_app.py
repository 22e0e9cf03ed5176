"""Tests for the FastAPI host."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

import app as app_module
from repo_qa import answer_question


@pytest.fixture
def client(github, monkeypatch) -> TestClient:
    seen = []

    async def _answer(req, deps):
        seen.append(deps)
        async with github.client() as gh:
            return await answer_question(req, deps, client=gh)

    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.setattr(app_module, "answer_question", _answer)
    test_client = TestClient(app_module.app)
    test_client.seen_deps = seen  # type: ignore[attr-defined]
    return test_client


BODY = {"owner": "octo", "repo": "widgets", "question": "What is this repository about?"}


def test_health_endpoint(client: TestClient) -> None:
    assert client.get("/health").json() == {"ok": True}


def test_manifest_endpoint(client: TestClient) -> None:
    data = client.get("/manifest").json()
    assert data["name"] == "answer_repository_question"


def test_answer_uses_header_token(client: TestClient, github) -> None:
    response = client.post("/answer", json=BODY, headers={"X-GitHub-Token": "tok"})
    assert response.status_code == 200
    data = response.json()
    assert data["text"].startswith("This repository is A test tool")
    assert data["relatedFiles"] == []
    assert data["suggestions"] == []
    assert github.calls[0].headers["Authorization"] == "Bearer tok"


def test_answer_falls_back_to_env_token(client: TestClient, monkeypatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "env-tok")
    response = client.post("/answer", json=BODY)
    assert response.status_code == 200
    assert client.seen_deps[0].github_token == "env-tok"  # type: ignore[attr-defined]


def test_missing_token_is_unauthorized(client: TestClient, github) -> None:
    response = client.post("/answer", json=BODY)
    assert response.status_code == 401
    assert response.json()["detail"] == "GitHub token is required"
    assert github.calls == []


def test_upstream_failure_is_bad_gateway(client: TestClient, github) -> None:
    github.set("/repos/octo/widgets", 404, {"message": "Not Found"})
    response = client.post("/answer", json=BODY, headers={"X-GitHub-Token": "tok"})
    assert response.status_code == 502
    assert response.json()["detail"] == "Failed to answer question: Not Found"


def test_invalid_body(client: TestClient) -> None:
    response = client.post("/answer", json={"owner": "octo", "repo": "", "question": "x"}, headers={"X-GitHub-Token": "tok"})
    assert response.status_code == 422


def test_markdown_endpoint(client: TestClient) -> None:
    body = {**BODY, "context": "docs review"}
    response = client.post("/answer/markdown", json=body, headers={"X-GitHub-Token": "tok"})
    assert response.status_code == 200
    md = response.json()["markdown"]
    assert md.startswith("## Repository Answer\n")
    assert "## Suggestions" in md
    assert "## Related Files" not in md


def test_timezone_comes_from_config(client: TestClient) -> None:
    from repo_qa.config import DEFAULT_TZ

    client.post("/answer", json=BODY, headers={"X-GitHub-Token": "tok"})
    assert client.seen_deps[0].tz == DEFAULT_TZ  # type: ignore[attr-defined]
