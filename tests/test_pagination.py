"""
tests.test_pagination

Unit tests for sort parsing, page arithmetic and pagination headers.
"""

from __future__ import annotations

import pytest
from starlette.datastructures import URL

from sea_transport.api.pagination import pagination_headers
from sea_transport.pagination import Page, PageRequest, SortOrder, parse_sort


@pytest.mark.parametrize(
    ("expressions", "expected"),
    [
        ([], ()),
        (["id"], (SortOrder("id"),)),
        (["id,desc"], (SortOrder("id", descending=True),)),
        (["maxWeight,ASC"], (SortOrder("max_weight"),)),
        (["deck_size,desc"], (SortOrder("deck_size", descending=True),)),
        (
            ["speed,deckSize,desc"],
            (SortOrder("speed", descending=True), SortOrder("deck_size", descending=True)),
        ),
        (["speed", "id,desc"], (SortOrder("speed"), SortOrder("id", descending=True))),
        ([",", ""], ()),
    ],
)
def test_parse_sort(expressions: list[str], expected: tuple[SortOrder, ...]) -> None:
    assert parse_sort(expressions) == expected


def test_page_request_offset() -> None:
    assert PageRequest(page=3, size=25).offset == 75


@pytest.mark.parametrize(
    ("number", "total", "pages", "has_next", "has_previous"),
    [
        (0, 0, 0, False, False),
        (0, 10, 1, False, False),
        (0, 11, 2, True, False),
        (1, 11, 2, False, True),
        (1, 30, 3, True, True),
    ],
)
def test_page_navigation(
    number: int, total: int, pages: int, has_next: bool, has_previous: bool
) -> None:
    page = Page(content=[], number=number, size=10, total_elements=total)

    assert page.total_pages == pages
    assert page.has_next is has_next
    assert page.has_previous is has_previous


def test_pagination_headers_first_page() -> None:
    url = URL("http://api.local/api/transports?page=0&size=10")
    page = Page(content=[], number=0, size=10, total_elements=25)

    headers = pagination_headers(url, page)

    assert headers["X-Total-Count"] == "25"
    assert headers["Link"] == (
        '<http://api.local/api/transports?page=1&size=10>; rel="next",'
        '<http://api.local/api/transports?page=2&size=10>; rel="last",'
        '<http://api.local/api/transports?page=0&size=10>; rel="first"'
    )


def test_pagination_headers_escape_separators() -> None:
    url = URL("http://api.local/api/ports?sort=portName,asc")
    page = Page(content=[], number=0, size=20, total_elements=1)

    link = pagination_headers(url, page)["Link"]

    first = link.split(",")[-1]
    assert first == '<http://api.local/api/ports?sort=portName%2Casc&page=0&size=20>; rel="first"'
