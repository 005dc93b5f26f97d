"""
Shared pytest fixtures for all tests.
"""
from typing import Callable

import httpx
import pytest

from github_rest.infrastructure.api_connection import HttpApiConnection
from github_rest.infrastructure.httpx_connection import HttpxConnection

Handler = Callable[[httpx.Request], httpx.Response]

API = "https://api.github.com"


def next_link(url: str) -> dict[str, str]:
    """Headers for a page that has a following page at *url*."""
    return {"link": f'<{url}>; rel="next", <{API}/ignored?page=99>; rel="last"'}


def repo_json(repo_id: int, name: str = "club", owner: str = "fight") -> dict:
    return {
        "id": repo_id,
        "name": name,
        "full_name": f"{owner}/{name}",
        "owner": {"login": owner, "id": 1},
        "private": False,
    }


def user_json(user_id: int, login: str | None = None) -> dict:
    return {"id": user_id, "login": login or f"user{user_id}"}


@pytest.fixture
def sent() -> list[httpx.Request]:
    """Every request that reached the mock transport, in order."""
    return []


@pytest.fixture
def make_api(sent: list[httpx.Request]) -> Callable[..., HttpApiConnection]:
    """Build an HttpApiConnection whose transport answers with *handler*."""

    def factory(handler: Handler, **connection_kwargs) -> HttpApiConnection:
        def recording(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(recording))
        return HttpApiConnection(HttpxConnection(client, **connection_kwargs))

    return factory
