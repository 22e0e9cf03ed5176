"""Error taxonomy.

Every failure surfaces to the caller as one of these; nothing is retried and
no partial answer is ever returned.
"""

from typing import Optional


class RepoQAError(Exception):
    """Base class for all Q&A errors."""


class MissingCredentialError(RepoQAError):
    """No GitHub token was supplied. Raised before any API call."""

    def __init__(self, message: str = "GitHub token is required") -> None:
        super().__init__(message)


class UpstreamError(RepoQAError):
    """A GitHub API call failed (not found, auth, rate limit, network)."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class OperationError(RepoQAError):
    """Top-level wrap of any failure while answering a question."""

    def __init__(self, cause: BaseException) -> None:
        self.original_message = str(cause)
        super().__init__(f"Failed to answer question: {self.original_message}")
