"""Client wiring — builds the connection stack from settings."""

from __future__ import annotations

import logging
from types import TracebackType

import httpx

from github_rest.domain.guards import ensure_not_none
from github_rest.domain.ports.api_connection import ApiConnection
from github_rest.infrastructure.api_connection import HttpApiConnection
from github_rest.infrastructure.config import Settings, get_settings
from github_rest.infrastructure.httpx_connection import HttpxConnection
from github_rest.services.activity_client import ActivityClient

logger = logging.getLogger(__name__)


class GitHubClient:
    """Entry point grouping the API clients over one shared connection.

    Use :meth:`from_settings` to build the full httpx-backed stack, then
    ``async with`` (or :meth:`aclose`) to release it.
    """

    def __init__(
        self,
        api_connection: ApiConnection,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.connection = ensure_not_none(api_connection, "api_connection")
        self.activity = ActivityClient(self.connection)
        self._owned_http_client = http_client

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> GitHubClient:
        """Wire httpx → HttpxConnection → HttpApiConnection → domain clients.

        A caller-supplied *http_client* is left open on :meth:`aclose`.
        """
        settings = settings or get_settings()
        owned = None
        if http_client is None:
            http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(settings.request_timeout),
                follow_redirects=True,
            )
            owned = http_client

        token = settings.github_token.get_secret_value() if settings.github_token else None
        connection = HttpxConnection(
            http_client,
            base_url=settings.github_api_url,
            token=token,
            user_agent=settings.user_agent,
        )
        logger.debug(
            "GitHub client for %s (%s)",
            settings.github_api_url,
            "authenticated" if token else "anonymous",
        )
        return cls(HttpApiConnection(connection), http_client=owned)

    async def aclose(self) -> None:
        """Release the httpx client if this instance created it."""
        if self._owned_http_client is not None:
            await self._owned_http_client.aclose()
            self._owned_http_client = None

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
