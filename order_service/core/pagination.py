"""
Pagination primitives shared by the relational and search repositories.
Challenge: One page/size/sort contract for listing and search, plus the
X-Total-Count and Link headers clients use to walk pages.
"""

import math
from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar
from urllib.parse import quote

from fastapi import HTTPException, Query, status

from order_service.config import get_settings

settings = get_settings()

T = TypeVar("T")
U = TypeVar("U")

SORT_DIRECTIONS = ("asc", "desc")


@dataclass(frozen=True)
class Order:
    """Single sort criterion, e.g. Order("quantity", "desc")."""

    property: str
    direction: str = "asc"

    @property
    def descending(self) -> bool:
        return self.direction == "desc"


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page number, page size and optional sort criteria."""

    page: int = 0
    size: int = 20
    sort: tuple[Order, ...] = ()

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class Page(Generic[T]):
    """One page of results plus the total number of matching records."""

    content: list[T]
    total: int
    request: PageRequest = field(default_factory=PageRequest)

    @property
    def number(self) -> int:
        return self.request.page

    @property
    def size(self) -> int:
        return self.request.size

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size)

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        return Page([fn(x) for x in self.content], self.total, self.request)


def parse_sort(values: list[str], allowed: set[str] | frozenset[str]) -> tuple[Order, ...]:
    """Parse ``property[,direction]`` strings. Raises ValueError on unknown property or direction."""
    orders = []
    for value in values:
        parts = [p.strip() for p in value.split(",") if p.strip()]
        if not parts:
            continue
        prop = parts[0]
        direction = parts[1].lower() if len(parts) > 1 else "asc"
        if prop not in allowed:
            raise ValueError(f"Cannot sort by '{prop}'")
        if direction not in SORT_DIRECTIONS:
            raise ValueError(f"Invalid sort direction '{direction}'")
        orders.append(Order(prop, direction))
    return tuple(orders)


def page_request_dependency(sortable: set[str] | frozenset[str]):
    """Build a FastAPI dependency reading page/size/sort query params into a PageRequest."""

    def dependency(
        page: int = Query(0, ge=0),
        size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
        sort: list[str] | None = Query(None),
    ) -> PageRequest:
        try:
            orders = parse_sort(sort or [], sortable)
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        return PageRequest(page=page, size=size, sort=orders)

    return dependency


def _generate_uri(base_url: str, page: int, size: int) -> str:
    return f"{base_url}?page={page}&size={size}"


def _link_header(page: Page, uri: Callable[[int], str]) -> str:
    links = []
    if page.number + 1 < page.total_pages:
        links.append(f'<{uri(page.number + 1)}>; rel="next"')
    if page.number > 0:
        links.append(f'<{uri(page.number - 1)}>; rel="prev"')
    last_page = page.total_pages - 1 if page.total_pages > 0 else 0
    links.append(f'<{uri(last_page)}>; rel="last"')
    links.append(f'<{uri(0)}>; rel="first"')
    return ",".join(links)


def pagination_headers(page: Page, base_url: str) -> dict[str, str]:
    """X-Total-Count and Link (next/prev/last/first) for a listing endpoint."""
    return {
        "X-Total-Count": str(page.total),
        "Link": _link_header(page, lambda n: _generate_uri(base_url, n, page.size)),
    }


def search_pagination_headers(query: str, page: Page, base_url: str) -> dict[str, str]:
    """Same as pagination_headers, with the url-encoded search query carried in every link."""
    escaped = quote(query, safe="")
    return {
        "X-Total-Count": str(page.total),
        "Link": _link_header(
            page, lambda n: _generate_uri(base_url, n, page.size) + "&query=" + escaped
        ),
    }

