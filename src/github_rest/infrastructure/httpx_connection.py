"""httpx-backed connection — implements the Connection port."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx
from pydantic import BaseModel

from github_rest.domain.exceptions import TransportError
from github_rest.domain.value_objects import Endpoint, RawResponse
from github_rest.infrastructure.exception_translator import raise_for_status

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"


def _to_raw_response(resp: httpx.Response) -> RawResponse:
    links = {rel: link["url"] for rel, link in resp.links.items() if "url" in link}
    return RawResponse(
        status_code=resp.status_code,
        headers=dict(resp.headers.items()),
        body=resp.text,
        content_type=resp.headers.get("content-type"),
        links=links,
    )


def _serialize(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json")
    return body


class HttpxConnection:
    """Concrete ``Connection`` on top of a shared :class:`httpx.AsyncClient`.

    The instance keeps no per-request state, so one connection can serve
    any number of concurrent calls.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        base_url: str = _GITHUB_API,
        token: str | None = None,
        user_agent: str = "github-rest/0.1",
    ) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._headers: dict[str, str] = {
            "Accept": "application/vnd.github+json",
            "User-Agent": user_agent,
        }
        if token:
            self._headers["Authorization"] = f"Bearer {token}"

    def _url(self, endpoint: Endpoint | str) -> str:
        path = str(endpoint)
        if path.startswith(("http://", "https://")):
            return path
        return f"{self._base_url}/{path.lstrip('/')}"

    async def send(
        self,
        method: str,
        endpoint: Endpoint | str,
        *,
        params: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> RawResponse:
        """Perform one request with error translation."""
        url = self._url(endpoint)
        try:
            resp = await self._client.request(
                method,
                url,
                headers=self._headers,
                params=params,
                json=_serialize(body),
            )
        except httpx.HTTPError as exc:
            raise TransportError(f"Network error on {method} {url}: {exc}") from exc

        logger.debug("%s %s -> %d", method, url, resp.status_code)
        response = _to_raw_response(resp)
        raise_for_status(response)
        return response

    async def delete(self, endpoint: Endpoint) -> int:
        response = await self.send("DELETE", endpoint)
        return response.status_code
