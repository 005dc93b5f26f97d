"""Translate error statuses into the domain exception hierarchy."""

from __future__ import annotations

import logging

from github_rest.domain.exceptions import (
    ApiError,
    ApiValidationError,
    AuthorizationError,
    ForbiddenError,
    NotFoundError,
    RateLimitExceededError,
)
from github_rest.domain.value_objects import RawResponse

logger = logging.getLogger(__name__)

_STATUS_ERRORS: dict[int, type[ApiError]] = {
    401: AuthorizationError,
    403: ForbiddenError,
    404: NotFoundError,
    422: ApiValidationError,
    429: RateLimitExceededError,
}


def _error_message(response: RawResponse) -> str:
    """Prefer the API's own ``message`` field over a generic status line."""
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return f"API returned HTTP {response.status_code}"


def _is_rate_limited(response: RawResponse) -> bool:
    return response.headers.get("x-ratelimit-remaining") == "0"


def translate(response: RawResponse) -> ApiError:
    """Build the exception matching an error *response*."""
    status = response.status_code
    if status == 403 and _is_rate_limited(response):
        error_type: type[ApiError] = RateLimitExceededError
    else:
        error_type = _STATUS_ERRORS.get(status, ApiError)
    return error_type(_error_message(response), response)


def raise_for_status(response: RawResponse) -> None:
    """Raise the translated error unless *response* is 2xx."""
    if response.is_success:
        return
    error = translate(response)
    if not isinstance(error, NotFoundError):
        logger.warning("%s (HTTP %d): %s", type(error).__name__, error.status_code, error)
    raise error
