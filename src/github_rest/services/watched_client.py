"""Watching API — repositories the user is subscribed to, and their watchers.

See https://docs.github.com/rest/activity/watching
"""

from __future__ import annotations

import logging

from github_rest.domain.entities import NewSubscription, Repository, Subscription, User
from github_rest.domain.guards import ensure_not_none
from github_rest.domain.ports.api_connection import ApiConnection
from github_rest.domain.results import capture
from github_rest.domain.value_objects import NO_PAGE_LIMIT, ApiOptions, Endpoint
from github_rest.services.status_mapping import change_applied, is_present

logger = logging.getLogger(__name__)

_CURRENT_SUBSCRIPTIONS = "user/subscriptions"
_USER_SUBSCRIPTIONS = "users/{login}/subscriptions"
_REPO_SUBSCRIBERS = "repos/{owner}/{name}/subscribers"
_REPO_SUBSCRIPTION = "repos/{owner}/{name}/subscription"


class WatchedClient:
    """Thin composition of :class:`ApiConnection` calls for the watching endpoints."""

    def __init__(self, api_connection: ApiConnection) -> None:
        self._api = ensure_not_none(api_connection, "api_connection")

    # ── Listings ────────────────────────────────────────────────────────

    async def get_all_for_current(self, options: ApiOptions = NO_PAGE_LIMIT) -> list[Repository]:
        """Repositories watched by the authenticated user."""
        ensure_not_none(options, "options")
        return await self._api.get_all(Endpoint(_CURRENT_SUBSCRIPTIONS), Repository, options)

    async def get_all_for_user(
        self, user: str, options: ApiOptions = NO_PAGE_LIMIT
    ) -> list[Repository]:
        """Repositories watched by *user*."""
        endpoint = Endpoint.resolve(_USER_SUBSCRIPTIONS, login=user)
        ensure_not_none(options, "options")
        return await self._api.get_all(endpoint, Repository, options)

    async def get_all_watchers(
        self, owner: str, name: str, options: ApiOptions = NO_PAGE_LIMIT
    ) -> list[User]:
        """Users watching the repository *owner*/*name*."""
        endpoint = Endpoint.resolve(_REPO_SUBSCRIBERS, owner=owner, name=name)
        ensure_not_none(options, "options")
        return await self._api.get_all(endpoint, User, options)

    # ── Subscription state ──────────────────────────────────────────────

    async def check_watched(self, owner: str, name: str) -> bool:
        """Whether the authenticated user has a subscription for the repository."""
        endpoint = Endpoint.resolve(_REPO_SUBSCRIPTION, owner=owner, name=name)
        return is_present(await capture(self._api.get(endpoint, Subscription)))

    async def watch_repo(
        self, owner: str, name: str, new_subscription: NewSubscription
    ) -> Subscription:
        """Create or replace the subscription for the repository."""
        endpoint = Endpoint.resolve(_REPO_SUBSCRIPTION, owner=owner, name=name)
        ensure_not_none(new_subscription, "new_subscription")
        logger.info("Watching %s/%s", owner, name)
        return await self._api.put(endpoint, Subscription, new_subscription)

    async def unwatch_repo(self, owner: str, name: str) -> bool:
        """Delete the subscription; True only when the API confirms with 204."""
        endpoint = Endpoint.resolve(_REPO_SUBSCRIPTION, owner=owner, name=name)
        logger.info("Unwatching %s/%s", owner, name)
        return change_applied(await capture(self._api.delete(endpoint)))
