"""Domain exception hierarchy.

Every exception carries an :class:`ErrorKind`.  Inner layers raise these;
the httpx boundary translates transport failures and error statuses into
them.  Only :class:`NotFoundError` is ever down-converted to a boolean,
and only by the status mappers in :mod:`github_rest.services.status_mapping`.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from github_rest.domain.value_objects import RawResponse


class ErrorKind(str, Enum):
    """The four failure classes a caller can observe."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    HTTP = "http"
    TRANSPORT = "transport"


class GitHubClientError(Exception):
    """Base exception for the entire client."""

    kind: ErrorKind


# ── Input validation ────────────────────────────────────────────────────────


class ValidationError(GitHubClientError, ValueError):
    """A required argument was rejected before any request was sent."""

    kind = ErrorKind.VALIDATION

    def __init__(self, argument: str, message: str) -> None:
        super().__init__(f"{message}: '{argument}'")
        self.argument = argument


class ArgumentNullError(ValidationError):
    """A required argument was ``None``."""

    def __init__(self, argument: str) -> None:
        super().__init__(argument, "Argument must not be None")


class EmptyArgumentError(ValidationError):
    """A required string argument was empty or blank."""

    def __init__(self, argument: str) -> None:
        super().__init__(argument, "String argument must not be empty")


class ArgumentOutOfRangeError(ValidationError):
    """A numeric argument was outside its allowed range."""

    def __init__(self, argument: str, value: object) -> None:
        super().__init__(argument, f"Expected a positive integer, got {value!r}")
        self.value = value


# ── HTTP status errors ──────────────────────────────────────────────────────


class ApiError(GitHubClientError):
    """The API answered with a non-success status (404 has its own subclass)."""

    kind = ErrorKind.HTTP

    def __init__(self, message: str, response: RawResponse) -> None:
        super().__init__(message)
        self.message = message
        self.response = response

    @property
    def status_code(self) -> int:
        return self.response.status_code


class NotFoundError(ApiError):
    """The remote resource does not exist (404)."""

    kind = ErrorKind.NOT_FOUND


class AuthorizationError(ApiError):
    """Missing or bad credentials (401)."""


class ForbiddenError(ApiError):
    """The credentials are valid but not allowed to do this (403)."""


class RateLimitExceededError(ApiError):
    """Rate limit exhausted (403 with ``x-ratelimit-remaining: 0``, or 429)."""


class ApiValidationError(ApiError):
    """The API rejected the request payload (422)."""


# ── Transport errors ────────────────────────────────────────────────────────


class TransportError(GitHubClientError):
    """The request never produced a status code (DNS, connect, read, ...)."""

    kind = ErrorKind.TRANSPORT
