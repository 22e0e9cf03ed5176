"""Orchestrator: the single entry point hosts call to answer a question.

Flow: credential check -> fetch snapshot -> classify -> one answer generator
-> suggestions (only when the request carries context).
"""

import logging
from typing import Optional

import httpx

from .answers import generate_general, generate_statistics, generate_technical
from .classify import classify
from .config import HTTP_TIMEOUT
from .errors import MissingCredentialError, OperationError
from .github import fetch_repository_info
from .models import Answer, Deps, QueryRequest, QuestionType
from .suggestions import generate_suggestions

logger = logging.getLogger(__name__)


async def answer_question(
    request: QueryRequest, deps: Deps, client: Optional[httpx.AsyncClient] = None
) -> Answer:
    """Answer ``request`` using the token carried in ``deps``.

    Raises ``MissingCredentialError`` before touching the network when no token
    is set; any later failure is re-raised as ``OperationError``.
    """
    if not deps.github_token:
        raise MissingCredentialError()

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=HTTP_TIMEOUT) as own_client:
                return await _answer(own_client, request, deps)
        return await _answer(client, request, deps)
    except Exception as e:
        logger.warning("Failed to answer question for %s/%s: %s", request.owner, request.repo, e)
        raise OperationError(e) from e


async def _answer(client: httpx.AsyncClient, request: QueryRequest, deps: Deps) -> Answer:
    info = await fetch_repository_info(client, request.owner, request.repo, deps.github_token)
    question_type = classify(request.question)
    logger.info("Answering %s question about %s", question_type.value, info.full_name)

    text, files = "", []
    if question_type is QuestionType.TECHNICAL:
        text, files = await generate_technical(client, info, request.question, deps.github_token)
    elif question_type is QuestionType.STATISTICS:
        text = generate_statistics(info, request.question, deps.tz)
    else:
        text = generate_general(info, request.question)

    suggestions = []
    if request.context:
        suggestions = generate_suggestions(info, request.question, request.context)
    return Answer(text=text, related_files=files, suggestions=suggestions)
