"""Pagination models — Page requests, sort orders and result pages.

A ``PageRequest`` describes one slice of an ordered result set (zero-based
page index, page size and sort keys).  The repository turns it into the
engine-native ``from`` / ``size`` / ``sort`` parameters and returns a
``Page`` carrying the items, the total match count and the original request.

Example::

    request = PageRequest(page=2, size=25, sort=Sort.by("createdAt", direction=Direction.DESC))
    request.offset  # 50
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 20


class Direction(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"

    @property
    def is_ascending(self) -> bool:
        return self is Direction.ASC


class Order(BaseModel):
    """A single sort key: field name plus direction."""

    model_config = ConfigDict(frozen=True)

    field: str = Field(min_length=1, description="Field name in the caller's naming convention")
    direction: Direction = Field(default=Direction.ASC, description="Sort direction")

    @classmethod
    def asc(cls, field: str) -> Order:
        return cls(field=field, direction=Direction.ASC)

    @classmethod
    def desc(cls, field: str) -> Order:
        return cls(field=field, direction=Direction.DESC)


class Sort(BaseModel):
    """Ordered list of sort keys."""

    model_config = ConfigDict(frozen=True)

    orders: tuple[Order, ...] = Field(default=(), description="Sort keys, most significant first")

    @classmethod
    def by(cls, *fields: str, direction: Direction = Direction.ASC) -> Sort:
        """Build a sort over *fields*, all in the same *direction*."""
        return cls(orders=tuple(Order(field=f, direction=direction) for f in fields))

    @classmethod
    def unsorted(cls) -> Sort:
        return cls()

    @property
    def is_sorted(self) -> bool:
        return bool(self.orders)

    def first(self) -> Order | None:
        """Return the most significant sort key, or ``None`` when unsorted."""
        return self.orders[0] if self.orders else None


class PageRequest(BaseModel):
    """Request for one page of results."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=0, ge=0, description="Zero-based page index")
    size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, description="Number of items per page")
    sort: Sort = Field(default_factory=Sort.unsorted, description="Sort specification")

    @property
    def offset(self) -> int:
        """Index of the first item of this page in the full result set."""
        return self.page * self.size

    def next(self) -> PageRequest:
        return self.model_copy(update={"page": self.page + 1})

    def previous_or_first(self) -> PageRequest:
        return self.model_copy(update={"page": max(self.page - 1, 0)})

    def first(self) -> PageRequest:
        return self.model_copy(update={"page": 0})


class Page(BaseModel, Generic[T]):
    """One page of results together with the total number of matches.

    ``total`` and ``items`` come from two separate requests (count, then
    search), so they may reflect slightly different points in time.

    ``error`` is set when the backend call failed and the page was degraded
    to an empty result; a page with no matches has ``error is None``.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    items: list[T] = Field(default_factory=list, description="Entities on this page")
    total: int = Field(default=0, ge=0, description="Total number of matching documents")
    page_request: PageRequest = Field(default_factory=PageRequest, description="Request that produced this page")
    error: str | None = Field(default=None, description="Backend failure message, if the page was degraded")

    @classmethod
    def empty(cls, page_request: PageRequest | None = None, error: str | None = None) -> Page[Any]:
        return cls(items=[], total=0, page_request=page_request or PageRequest(), error=error)

    # ── Metadata ─────────────────────────────────────────────────────────

    @property
    def number(self) -> int:
        return self.page_request.page

    @property
    def size(self) -> int:
        return self.page_request.size

    @property
    def number_of_elements(self) -> int:
        return len(self.items)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size)

    @property
    def has_content(self) -> bool:
        return bool(self.items)

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next

    @property
    def failed(self) -> bool:
        return self.error is not None

    def __len__(self) -> int:
        return len(self.items)
