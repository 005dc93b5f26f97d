"""Port: untyped HTTP connection — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Any, Mapping, Protocol

from github_rest.domain.value_objects import Endpoint, RawResponse


class Connection(Protocol):
    """Sends one request and returns the raw response of a 2xx exchange.

    Non-2xx statuses raise the classified :class:`ApiError` subclasses and
    network failures raise :class:`TransportError`.
    """

    async def send(
        self,
        method: str,
        endpoint: Endpoint | str,
        *,
        params: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> RawResponse:
        """Issue *method* against *endpoint* (relative, or an absolute next-page URL)."""
        ...

    async def delete(self, endpoint: Endpoint) -> int:
        """Issue a DELETE and return the status code."""
        ...
