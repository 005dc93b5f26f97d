"""Value objects — self-validating request and response primitives."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping
from urllib.parse import quote

from github_rest.domain.exceptions import ArgumentOutOfRangeError
from github_rest.domain.guards import ensure_not_empty


@dataclass(frozen=True, slots=True)
class Endpoint:
    """Relative API path such as ``repos/octokit/octokit.net/subscription``.

    Build instances with :meth:`resolve` so every identifier is checked
    before a request can be issued.
    """

    path: str

    @classmethod
    def resolve(cls, template: str, **segments: str | None) -> Endpoint:
        """Substitute validated *segments* into a ``str.format`` template.

        Each segment is percent-encoded as a single path component, so
        ``/``, ``?`` and ``#`` cannot change the path. Raises
        ``ArgumentNullError`` for a ``None`` segment and
        ``EmptyArgumentError`` for a blank one, naming the argument.
        """
        checked = {
            name: quote(ensure_not_empty(value, name), safe="")
            for name, value in segments.items()
        }
        return cls(template.format(**checked))

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True, slots=True)
class ApiOptions:
    """Pagination limits for a listing call.

    ``None`` means "server default" for *page_size* and "no limit" for
    *page_count*; *start_page* is 1-based.
    """

    start_page: int | None = None
    page_count: int | None = None
    page_size: int | None = None

    def __post_init__(self) -> None:
        for name in ("start_page", "page_count", "page_size"):
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ArgumentOutOfRangeError(name, value)

    def to_params(self) -> dict[str, str]:
        """Query parameters for the first page request."""
        params: dict[str, str] = {}
        if self.page_size is not None:
            params["per_page"] = str(self.page_size)
        if self.start_page is not None:
            params["page"] = str(self.start_page)
        return params


NO_PAGE_LIMIT = ApiOptions()
"""Default listing options: start at the first page and fetch every page."""


@dataclass(frozen=True, slots=True)
class RawResponse:
    """Snapshot of a single HTTP exchange, discarded after translation."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str = ""
    content_type: str | None = None
    links: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Decode the body, or ``None`` when there is none (e.g. 204)."""
        if not self.body.strip():
            return None
        return json.loads(self.body)
