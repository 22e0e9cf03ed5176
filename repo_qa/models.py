"""Core data models for the Q&A layer.

This module defines:

- ``QueryRequest``: the inbound question (owner, repo, question, optional
  context). FastAPI uses it as the request body for ``/answer`` and the CLI
  builds the same payload.

- ``RepositoryInfo``: the merged snapshot of repository metadata, language
  byte counts and topics. Only the fields the answer generators read are
  declared; everything else in the GitHub payload is dropped on construction.

- ``Answer`` / ``RelatedFile``: the single output artifact. Serialized with the
  ``relatedFiles`` key so hosts see the same shape for every question type.

- ``QuestionType``: the classification outcome.

- ``Deps``: per-request side channel carrying the GitHub token and timezone.
  The token is kept out of ``QueryRequest`` so it never shows up in request
  bodies or logs.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .config import DEFAULT_TZ


class QuestionType(str, Enum):
    GENERAL = "general"
    TECHNICAL = "technical"
    STATISTICS = "statistics"


class QueryRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    owner: str = Field(..., min_length=1, description="GitHub repository owner")
    repo: str = Field(..., min_length=1, description="GitHub repository name")
    question: str = Field(..., min_length=1, description="The question about the repository")
    context: Optional[str] = Field(None, description="Additional context for the question")


class RepositoryInfo(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    full_name: str
    description: Optional[str] = None
    homepage: Optional[str] = None
    language: Optional[str] = None
    topics: List[str] = Field(default_factory=list)
    # Language name -> bytes of code.
    languages: Dict[str, int] = Field(default_factory=dict)
    size: int = 0
    stargazers_count: int = 0
    forks_count: int = 0
    open_issues_count: int = 0
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    has_pages: bool = False


class RelatedFile(BaseModel):
    name: str
    path: str
    url: str


class Answer(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(description="Rendered answer text.")
    related_files: List[RelatedFile] = Field(
        default_factory=list,
        alias="relatedFiles",
        description="Code search hits, only populated for technical questions.",
    )
    suggestions: List[str] = Field(
        default_factory=list,
        description="Repository improvement hints, only when context was given.",
    )


@dataclass
class Deps:
    # GitHub Personal Access Token (string) or None if not set.
    github_token: Optional[str]
    # Timezone name (e.g. "Europe/Berlin") used for calendar dates.
    tz: str = DEFAULT_TZ
