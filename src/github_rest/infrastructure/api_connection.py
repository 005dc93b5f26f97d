"""Typed API connection — implements the ApiConnection port."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping, TypeVar

from pydantic import TypeAdapter

from github_rest.domain.guards import ensure_not_none
from github_rest.domain.ports.connection import Connection
from github_rest.domain.value_objects import NO_PAGE_LIMIT, ApiOptions, Endpoint, RawResponse
from github_rest.infrastructure.pagination import Page, PageRequest, collect_pages

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(model: Any) -> TypeAdapter[Any]:
    return TypeAdapter(model)


def _load(response: RawResponse, model: type[T]) -> T:
    return _adapter(model).validate_json(response.body)


class HttpApiConnection:
    """Deserialises responses of a :class:`Connection` into the requested model."""

    def __init__(self, connection: Connection) -> None:
        self.connection = ensure_not_none(connection, "connection")

    async def get(
        self, endpoint: Endpoint, model: type[T], params: Mapping[str, str] | None = None
    ) -> T:
        response = await self.connection.send("GET", endpoint, params=params)
        return _load(response, model)

    async def get_all(
        self,
        endpoint: Endpoint,
        model: type[T],
        options: ApiOptions = NO_PAGE_LIMIT,
        params: Mapping[str, str] | None = None,
    ) -> list[T]:
        """Collect every page allowed by *options* into one list."""
        options = ensure_not_none(options, "options")

        async def fetch(request: PageRequest) -> Page[T]:
            response = await self.connection.send("GET", request.target, params=request.params)
            return Page(_load(response, list[model]), response.links.get("next"))  # type: ignore[valid-type]

        return await collect_pages(fetch, endpoint, options, params)

    async def put(self, endpoint: Endpoint, model: type[T], body: Any = None) -> T:
        response = await self.connection.send("PUT", endpoint, body=body)
        return _load(response, model)

    async def post(self, endpoint: Endpoint, model: type[T], body: Any = None) -> T:
        response = await self.connection.send("POST", endpoint, body=body)
        return _load(response, model)

    async def delete(self, endpoint: Endpoint) -> int:
        return await self.connection.delete(endpoint)
