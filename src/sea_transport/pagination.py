"""
sea_transport.pagination

Paging value types shared by repositories, services and the API layer.

Responsibilities:
- Describe a page request (0-based page, size, sort orders).
- Describe a page of results and the navigation facts derived from it.
- Parse `property[,property...][,asc|desc]` sort expressions.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from pydantic.alias_generators import to_snake

T = TypeVar("T")

_DIRECTIONS = {"asc": False, "desc": True}


@dataclass(frozen=True, slots=True)
class SortOrder:
    # Attribute name on the mapped class (snake_case).
    prop: str
    descending: bool = False


@dataclass(frozen=True, slots=True)
class PageRequest:
    page: int = 0
    size: int = 20
    sort: tuple[SortOrder, ...] = ()

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    content: list[T]
    number: int
    size: int
    total_elements: int
    sort: tuple[SortOrder, ...] = field(default=())

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 1
        return math.ceil(self.total_elements / self.size)

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0


def parse_sort(expressions: Iterable[str]) -> tuple[SortOrder, ...]:
    """
    Parse repeated ``sort`` query values.

    ``"id,desc"`` -> id descending; ``"portName"`` -> port_name ascending;
    ``"speed,deckSize,desc"`` applies the trailing direction to both properties.
    JSON (camelCase) and attribute (snake_case) spellings are both accepted.
    """

    orders: list[SortOrder] = []
    for expr in expressions:
        parts = [p.strip() for p in expr.split(",") if p.strip()]
        if not parts:
            continue
        descending = False
        if parts[-1].lower() in _DIRECTIONS:
            descending = _DIRECTIONS[parts.pop().lower()]
        orders.extend(SortOrder(prop=to_snake(p), descending=descending) for p in parts)
    return tuple(orders)
