"""Status mappers — turn an :data:`ApiResult` into the boolean a domain client returns.

Two conventions are shared by the domain clients:

* **existence check** — the resource answered, so it exists; a not-found
  means it does not.
* **toggle** — only ``204 No Content`` confirms a change; a not-found or
  any other success status (including ``200``) reports no change.

In both, a :class:`Failure` re-raises its original error untouched.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from github_rest.domain.results import ApiResult, Failure, NotFound, Success

logger = logging.getLogger(__name__)


def _unwrap_failure(result: ApiResult[Any]) -> None:
    if isinstance(result, Failure):
        raise result.error


def is_present(result: ApiResult[Any]) -> bool:
    """Existence check: ``Success`` → True, ``NotFound`` → False."""
    _unwrap_failure(result)
    if isinstance(result, NotFound):
        logger.debug("Resource not found, reporting absent: %s", result.error)
        return False
    return True


def status_signals_change(status_code: int) -> bool:
    return status_code == HTTPStatus.NO_CONTENT


def change_applied(result: ApiResult[int]) -> bool:
    """Toggle: ``Success(204)`` → True, everything else that is not a failure → False."""
    _unwrap_failure(result)
    if isinstance(result, Success):
        return status_signals_change(result.value)
    logger.debug("Resource already absent, no change: %s", result.error)
    return False
