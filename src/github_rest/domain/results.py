"""Explicit outcome of an API call: success, not-found, or any other failure.

:func:`capture` is the only place a raised :class:`NotFoundError` is turned
into a value; the status mappers then decide what each variant means.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Generic, TypeVar, Union

from github_rest.domain.exceptions import ApiError, NotFoundError, TransportError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class NotFound:
    error: NotFoundError


@dataclass(frozen=True, slots=True)
class Failure:
    error: ApiError | TransportError


ApiResult = Union[Success[T], NotFound, Failure]


async def capture(call: Awaitable[T]) -> ApiResult[T]:
    """Await *call* and fold its outcome into an :data:`ApiResult`.

    Validation errors are not captured: they are raised before the call
    is even built and always reach the caller directly.
    """
    try:
        return Success(await call)
    except NotFoundError as exc:
        return NotFound(exc)
    except (ApiError, TransportError) as exc:
        return Failure(exc)
