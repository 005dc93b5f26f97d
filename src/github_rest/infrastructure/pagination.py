"""Sequential page collection for listing endpoints.

A listing stops when any of these holds:

* a page holds fewer items than the requested ``page_size``;
* ``page_count`` pages have been fetched;
* the server sent no ``Link: rel="next"`` relation.

Pages are never fetched concurrently, so the result keeps server order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, Mapping, TypeVar

from github_rest.domain.value_objects import ApiOptions, Endpoint

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    """One fetched page and the URL of the page after it, if any."""

    items: list[T]
    next_url: str | None = None


@dataclass(frozen=True, slots=True)
class PageRequest:
    target: Endpoint | str
    params: Mapping[str, str] | None = None


PageFetcher = Callable[[PageRequest], Awaitable[Page[T]]]


def first_page_request(
    endpoint: Endpoint,
    options: ApiOptions,
    params: Mapping[str, str] | None = None,
) -> PageRequest:
    """Request for the first page: caller params plus ``page``/``per_page``."""
    merged = {**(params or {}), **options.to_params()}
    return PageRequest(endpoint, merged or None)


def is_last_page(page: Page[T], fetched: int, options: ApiOptions) -> bool:
    if options.page_count is not None and fetched >= options.page_count:
        return True
    if options.page_size is not None and len(page.items) < options.page_size:
        return True
    return page.next_url is None


async def collect_pages(
    fetch: PageFetcher[T],
    endpoint: Endpoint,
    options: ApiOptions,
    params: Mapping[str, str] | None = None,
) -> list[T]:
    """Fetch pages one after another and concatenate their items."""
    request = first_page_request(endpoint, options, params)
    items: list[T] = []
    fetched = 0

    while True:
        page = await fetch(request)
        fetched += 1
        items.extend(page.items)
        logger.debug(
            "Paginating %s: page %d, %d items so far", endpoint, fetched, len(items)
        )
        if is_last_page(page, fetched, options):
            return items
        # The next link already carries page and per_page.
        request = PageRequest(page.next_url)  # type: ignore[arg-type]
