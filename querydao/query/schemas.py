# querydao/query/schemas.py
"""
Query configuration and result types.

A caller describes a query by building one of these configurations with the
chained ``with_*`` methods and hands it to an operation in
``querydao.query.engine``:

- ``ListQueryConfig``: paginated listing (page, ordering, filters, preloads,
  post-fetch hooks)
- ``PointQueryConfig``: single-row lookup, existence check and delete
  (filters and preloads only)
- ``ListQueryResult``: the outcome of a paginated listing

Field names are stable snake_case so the configurations can be exchanged with
external config sources (see ``querydao.query.payloads``).

Configurations are plain mutable objects and are not safe for concurrent
mutation. Build one completely, then share it read-only.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Iterable, List, TypeVar

T = TypeVar("T")

# A post-fetch transform. Raising signals failure; the row then keeps its
# pre-hook value and the listing still succeeds.
Hook = Callable[[T], T]

DEFAULT_PAGE_SIZE = 10
DEFAULT_PAGE = 1
DEFAULT_ORDER_BY = "updated_at"


class Order(str, Enum):
    """Sort direction for listings."""

    DESC = "desc"
    ASC = "asc"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Filter:
    """
    One additive where-condition.

    ``query`` is raw predicate text with a single ``?`` placeholder and ``args``
    the value bound to it, e.g. ``Filter("name = ?", "alice")`` or
    ``Filter("id IN ?", [1, 2, 3])``. The text is passed to the database
    unmodified; only the argument is escaped (as a bound parameter). Never build
    ``query`` from untrusted input.
    """

    query: str
    args: Any = None


@dataclass
class ListQueryConfig(Generic[T]):
    """Paginated listing: page, ordering, filters, preloads and hooks."""

    page_size: int = DEFAULT_PAGE_SIZE
    page: int = DEFAULT_PAGE
    order_by: str = DEFAULT_ORDER_BY
    order: Order = Order.DESC
    wheres: List[Filter] = field(default_factory=list)
    preloads: List[str] = field(default_factory=list)
    hooks: List[Hook] = field(default_factory=list)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    def with_page_size(self, page_size: int) -> "ListQueryConfig[T]":
        """Set the page size; non-positive values are ignored."""
        if page_size > 0:
            self.page_size = page_size
        return self

    def with_page(self, page: int) -> "ListQueryConfig[T]":
        """Set the 1-based page number; non-positive values are ignored."""
        if page > 0:
            self.page = page
        return self

    def with_order_by(self, order_by: str) -> "ListQueryConfig[T]":
        self.order_by = order_by
        return self

    def with_order(self, order: Order) -> "ListQueryConfig[T]":
        self.order = Order(order)
        return self

    def with_wheres(self, wheres: Iterable[Filter]) -> "ListQueryConfig[T]":
        self.wheres.extend(wheres)
        return self

    def with_preloads(self, preloads: Iterable[str]) -> "ListQueryConfig[T]":
        self.preloads.extend(preloads)
        return self

    def with_hooks(self, hooks: Iterable[Hook]) -> "ListQueryConfig[T]":
        self.hooks.extend(hooks)
        return self


@dataclass
class PointQueryConfig:
    """Single-row lookup: filters and preloads."""

    wheres: List[Filter] = field(default_factory=list)
    preloads: List[str] = field(default_factory=list)

    def with_wheres(self, wheres: Iterable[Filter]) -> "PointQueryConfig":
        self.wheres.extend(wheres)
        return self

    def with_preloads(self, preloads: Iterable[str]) -> "PointQueryConfig":
        self.preloads.extend(preloads)
        return self


@dataclass(frozen=True)
class ListQueryResult(Generic[T]):
    """One page of a listing.

    ``total`` is the filtered row count ignoring pagination, ``page`` echoes the
    requested page and ``data`` holds at most ``page_size`` rows.
    """

    total: int
    page: int
    data: List[T] = field(default_factory=list)


def new_list_config() -> ListQueryConfig:
    """Return a fresh listing configuration with the default values."""
    return ListQueryConfig()


def new_point_config() -> PointQueryConfig:
    """Return a fresh single-row configuration."""
    return PointQueryConfig()
