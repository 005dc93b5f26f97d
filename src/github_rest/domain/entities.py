"""Domain entities — pydantic models for the payloads the client reads and writes.

Only the fields the client works with are declared; anything else the API
sends is ignored.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class _ReadModel(BaseModel):
    """Immutable model produced only by deserialising a response body."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class User(_ReadModel):
    """An account as returned by listing endpoints (owners, watchers, stargazers)."""

    login: str
    id: int
    avatar_url: str | None = None
    html_url: str | None = None
    url: str | None = None
    type: str = "User"
    site_admin: bool = False


class Repository(_ReadModel):
    """A repository as returned by the watched / starred listings."""

    id: int
    name: str
    full_name: str
    owner: User | None = None
    private: bool = False
    fork: bool = False
    description: str | None = None
    html_url: str | None = None
    url: str | None = None
    default_branch: str | None = None
    stargazers_count: int = 0
    watchers_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Subscription(_ReadModel):
    """Watch state of the current user for one repository."""

    subscribed: bool
    ignored: bool
    reason: str | None = None
    created_at: datetime | None = None
    url: str | None = None
    repository_url: str | None = None


class NewSubscription(BaseModel):
    """Request body for watching a repository.

    ``subscribed=True`` receives notifications; ``ignored=True`` blocks them.
    """

    subscribed: bool = False
    ignored: bool = False
