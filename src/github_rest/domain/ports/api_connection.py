"""Port: typed API connection used by every domain client."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, TypeVar

from github_rest.domain.ports.connection import Connection
from github_rest.domain.value_objects import NO_PAGE_LIMIT, ApiOptions, Endpoint

T = TypeVar("T")


class ApiConnection(Protocol):
    """Typed facade over a :class:`Connection`.

    ``model`` is the per-call type descriptor the response body is
    validated into.
    """

    connection: Connection

    async def get(
        self, endpoint: Endpoint, model: type[T], params: Mapping[str, str] | None = None
    ) -> T:
        """GET a single item."""
        ...

    async def get_all(
        self,
        endpoint: Endpoint,
        model: type[T],
        options: ApiOptions = NO_PAGE_LIMIT,
        params: Mapping[str, str] | None = None,
    ) -> list[T]:
        """GET every page allowed by *options*, in server order."""
        ...

    async def put(self, endpoint: Endpoint, model: type[T], body: Any = None) -> T:
        """PUT *body* and return the deserialised response."""
        ...

    async def post(self, endpoint: Endpoint, model: type[T], body: Any = None) -> T:
        """POST *body* and return the deserialised response."""
        ...

    async def delete(self, endpoint: Endpoint) -> int:
        """DELETE and return the raw status code for the caller to interpret."""
        ...
