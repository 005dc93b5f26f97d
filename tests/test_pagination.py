"""Tests for sequential page collection."""

import pytest

from github_rest.domain.value_objects import NO_PAGE_LIMIT, ApiOptions, Endpoint
from github_rest.infrastructure.pagination import (
    Page,
    PageRequest,
    collect_pages,
    first_page_request,
    is_last_page,
)

ENDPOINT = Endpoint("user/subscriptions")


def make_fetcher(pages):
    """Serve *pages* in order and record each request."""
    requests = []

    async def fetch(request: PageRequest) -> Page:
        requests.append(request)
        return pages[len(requests) - 1]

    return fetch, requests


class TestFirstPageRequest:
    def test_unlimited_sends_no_paging_params(self):
        request = first_page_request(ENDPOINT, NO_PAGE_LIMIT)

        assert request.target == ENDPOINT
        assert request.params is None

    def test_merges_caller_params(self):
        request = first_page_request(
            ENDPOINT, ApiOptions(start_page=2, page_size=5), {"sort": "created"}
        )

        assert request.params == {"sort": "created", "per_page": "5", "page": "2"}


class TestIsLastPage:
    def test_page_count_reached(self):
        page = Page([1, 2], next_url="next")

        assert is_last_page(page, 1, ApiOptions(page_count=1))
        assert not is_last_page(page, 1, ApiOptions(page_count=2))

    def test_short_page(self):
        assert is_last_page(Page([1], next_url="next"), 1, ApiOptions(page_size=2))
        assert not is_last_page(Page([1, 2], next_url="next"), 1, ApiOptions(page_size=2))

    def test_no_next_link(self):
        assert is_last_page(Page([1, 2, 3]), 1, NO_PAGE_LIMIT)


class TestCollectPages:
    @pytest.mark.asyncio
    async def test_follows_next_links_in_order(self):
        fetch, requests = make_fetcher(
            [
                Page([1, 2], next_url="https://api.github.com/user/subscriptions?page=2"),
                Page([3, 4], next_url="https://api.github.com/user/subscriptions?page=3"),
                Page([5]),
            ]
        )

        items = await collect_pages(fetch, ENDPOINT, NO_PAGE_LIMIT)

        assert items == [1, 2, 3, 4, 5]
        assert [r.target for r in requests] == [
            ENDPOINT,
            "https://api.github.com/user/subscriptions?page=2",
            "https://api.github.com/user/subscriptions?page=3",
        ]
        assert all(r.params is None for r in requests[1:])

    @pytest.mark.asyncio
    async def test_stops_at_page_count(self):
        fetch, requests = make_fetcher(
            [Page([1], next_url="p2"), Page([2], next_url="p3"), Page([3], next_url="p4")]
        )

        items = await collect_pages(fetch, ENDPOINT, ApiOptions(page_count=2))

        assert items == [1, 2]
        assert len(requests) == 2

    @pytest.mark.asyncio
    async def test_stops_on_short_page(self):
        fetch, requests = make_fetcher([Page([1, 2], next_url="p2"), Page([3], next_url="p3")])

        items = await collect_pages(fetch, ENDPOINT, ApiOptions(page_size=2))

        assert items == [1, 2, 3]
        assert len(requests) == 2

    @pytest.mark.asyncio
    async def test_empty_listing(self):
        fetch, requests = make_fetcher([Page([])])

        assert await collect_pages(fetch, ENDPOINT, NO_PAGE_LIMIT) == []
        assert len(requests) == 1
