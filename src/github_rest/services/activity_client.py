"""Activity API group — watching and starring."""

from __future__ import annotations

from github_rest.domain.guards import ensure_not_none
from github_rest.domain.ports.api_connection import ApiConnection
from github_rest.services.starred_client import StarredClient
from github_rest.services.watched_client import WatchedClient


class ActivityClient:
    def __init__(self, api_connection: ApiConnection) -> None:
        api_connection = ensure_not_none(api_connection, "api_connection")
        self.watching = WatchedClient(api_connection)
        self.starring = StarredClient(api_connection)
