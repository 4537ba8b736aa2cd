"""
Exceptions raised by the task extraction engine.

Every error carries a human-readable message plus a ``details`` dict that the
HTTP layer returns verbatim, so callers have enough context to recover by hand.
"""

from __future__ import annotations

from typing import Any

EXCERPT_LIMIT = 500


def excerpt(content: str, limit: int = EXCERPT_LIMIT) -> str:
    """Return at most *limit* characters of *content* for error reports."""
    return content[:limit]


class TaskExtractionError(Exception):
    """Base exception for all extraction errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class InvalidInput(TaskExtractionError):
    """Raised when the text or project name is missing."""

    def __init__(self, message: str, field: str | None = None):
        details = {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class CredentialMissing(TaskExtractionError):
    """Raised when a strategy needs a credential that is not configured."""

    def __init__(self, strategy: str):
        super().__init__(
            f"No API key configured for the {strategy} strategy",
            {"strategy": strategy},
        )


class ServiceUnavailable(TaskExtractionError):
    """Raised when the remote service cannot be reached or answers with an error."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        content: str | None = None,
    ):
        details: dict[str, Any] = {}
        if status_code is not None:
            details["status_code"] = status_code
        if content:
            details["content"] = excerpt(content)
        super().__init__(message, details)


class MalformedResponse(TaskExtractionError):
    """Raised when a remote or relayed answer holds no usable task."""

    def __init__(self, message: str, content: str = ""):
        super().__init__(message, {"content": excerpt(content)})
        self.content = content
