"""
Server-side entrypoint (FastAPI).

- Exposes `/health`, `/manifest`, `/answer` and `/answer/markdown`.
- Takes the GitHub token from the `X-GitHub-Token` header (falling back to the
  `GITHUB_TOKEN` environment variable) and passes it to the orchestrator as
  `Deps`, never as part of the request body.
- Delegates all GitHub logic to the `repo_qa/` package; this file stays thin
  and only handles HTTP and request/response wiring.
"""
import logging
import os
from typing import Optional

from fastapi import FastAPI, Header, HTTPException
from pydantic import BaseModel

from repo_qa import (
    Answer,
    DEFAULT_TZ,
    Deps,
    MissingCredentialError,
    OperationError,
    QueryRequest,
    answer_question,
    build_manifest,
    render_markdown,
)
from repo_qa.config import LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Repo Q&A", version="1.0.0")


class MarkdownAnswer(BaseModel):
    markdown: str


@app.get("/health")
async def health() -> dict:
    return {"ok": True}


@app.get("/manifest")
async def manifest() -> dict:
    return build_manifest()


async def _run(req: QueryRequest, token: Optional[str]) -> Answer:
    deps = Deps(github_token=token or os.getenv("GITHUB_TOKEN"), tz=DEFAULT_TZ)
    logger.info("Question for %s/%s", req.owner, req.repo)
    try:
        return await answer_question(req, deps)
    except MissingCredentialError as e:
        raise HTTPException(401, str(e))
    except OperationError as e:
        raise HTTPException(502, str(e))


@app.post("/answer", response_model=Answer)
async def answer(
    req: QueryRequest, x_github_token: Optional[str] = Header(None)
) -> Answer:
    return await _run(req, x_github_token)


@app.post("/answer/markdown", response_model=MarkdownAnswer)
async def answer_markdown(
    req: QueryRequest, x_github_token: Optional[str] = Header(None)
) -> MarkdownAnswer:
    result = await _run(req, x_github_token)
    return MarkdownAnswer(markdown=render_markdown(result))
