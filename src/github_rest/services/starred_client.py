"""Starring API — stargazers of a repository and repositories a user starred.

The star state endpoints answer with bodiless ``204`` / ``404`` responses,
so every state call is a toggle over the raw status code.

See https://docs.github.com/rest/activity/starring
"""

from __future__ import annotations

import logging

from github_rest.domain.entities import Repository, User
from github_rest.domain.guards import ensure_not_none
from github_rest.domain.ports.api_connection import ApiConnection
from github_rest.domain.results import capture
from github_rest.domain.value_objects import NO_PAGE_LIMIT, ApiOptions, Endpoint
from github_rest.services.status_mapping import change_applied

logger = logging.getLogger(__name__)

_CURRENT_STARRED = "user/starred"
_USER_STARRED = "users/{login}/starred"
_REPO_STARGAZERS = "repos/{owner}/{name}/stargazers"
_STARRED_REPO = "user/starred/{owner}/{name}"


class StarredClient:
    def __init__(self, api_connection: ApiConnection) -> None:
        self._api = ensure_not_none(api_connection, "api_connection")

    async def get_all_stargazers(
        self, owner: str, name: str, options: ApiOptions = NO_PAGE_LIMIT
    ) -> list[User]:
        endpoint = Endpoint.resolve(_REPO_STARGAZERS, owner=owner, name=name)
        ensure_not_none(options, "options")
        return await self._api.get_all(endpoint, User, options)

    async def get_all_for_current(self, options: ApiOptions = NO_PAGE_LIMIT) -> list[Repository]:
        ensure_not_none(options, "options")
        return await self._api.get_all(Endpoint(_CURRENT_STARRED), Repository, options)

    async def get_all_for_user(
        self, user: str, options: ApiOptions = NO_PAGE_LIMIT
    ) -> list[Repository]:
        endpoint = Endpoint.resolve(_USER_STARRED, login=user)
        ensure_not_none(options, "options")
        return await self._api.get_all(endpoint, Repository, options)

    async def _status(self, method: str, endpoint: Endpoint) -> int:
        response = await self._api.connection.send(method, endpoint)
        return response.status_code

    async def check_starred(self, owner: str, name: str) -> bool:
        """True when the authenticated user has starred the repository."""
        endpoint = Endpoint.resolve(_STARRED_REPO, owner=owner, name=name)
        return change_applied(await capture(self._status("GET", endpoint)))

    async def star_repo(self, owner: str, name: str) -> bool:
        endpoint = Endpoint.resolve(_STARRED_REPO, owner=owner, name=name)
        logger.info("Starring %s/%s", owner, name)
        return change_applied(await capture(self._status("PUT", endpoint)))

    async def remove_star_from_repo(self, owner: str, name: str) -> bool:
        endpoint = Endpoint.resolve(_STARRED_REPO, owner=owner, name=name)
        logger.info("Removing star from %s/%s", owner, name)
        return change_applied(await capture(self._api.delete(endpoint)))
