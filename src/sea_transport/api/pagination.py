"""
sea_transport.api.pagination

HTTP side of paging.

Responsibilities:
- Turn `page`, `size` and repeated `sort` query parameters into a `PageRequest`.
- Render `X-Total-Count` and RFC 5988 `Link` headers for a `Page`.
"""

from __future__ import annotations

from typing import Any

from fastapi import Depends, Query
from starlette.datastructures import URL

from sea_transport.api.deps import settings_dep
from sea_transport.pagination import Page, PageRequest, parse_sort
from sea_transport.settings import Settings

TOTAL_COUNT_HEADER = "X-Total-Count"


def page_request(
    page: int = Query(default=0, ge=0),
    size: int | None = Query(default=None, ge=1),
    sort: list[str] | None = Query(default=None),
    settings: Settings = Depends(settings_dep),
) -> PageRequest:
    # Oversized pages are clamped rather than rejected.
    effective_size = min(size or settings.default_page_size, settings.max_page_size)
    return PageRequest(page=page, size=effective_size, sort=parse_sort(sort or []))


def _page_uri(url: URL, page: int, size: int) -> str:
    uri = str(url.include_query_params(page=page, size=size))
    return uri.replace(",", "%2C").replace(";", "%3B")


def _link(url: URL, page: int, size: int, rel: str) -> str:
    return f'<{_page_uri(url, page, size)}>; rel="{rel}"'


def pagination_headers(url: URL, page: Page[Any]) -> dict[str, str]:
    links: list[str] = []
    if page.has_next:
        links.append(_link(url, page.number + 1, page.size, "next"))
    if page.has_previous:
        links.append(_link(url, page.number - 1, page.size, "prev"))
    last_page = max(page.total_pages - 1, 0)
    links.append(_link(url, last_page, page.size, "last"))
    links.append(_link(url, 0, page.size, "first"))
    return {
        TOTAL_COUNT_HEADER: str(page.total_elements),
        "Link": ",".join(links),
    }


# --- Module Notes -----------------------------------------------------------
# Clients follow `Link` for infinite scroll and read X-Total-Count for pagers.
