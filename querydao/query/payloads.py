# querydao/query/payloads.py
"""Pydantic models for exchanging query configurations and results as JSON."""

from typing import Any, Generic, List, Literal, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .schemas import (
    DEFAULT_ORDER_BY,
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    Filter,
    ListQueryConfig,
    ListQueryResult,
    Order,
    PointQueryConfig,
)

ItemT = TypeVar("ItemT", bound=BaseModel)


class FilterPayload(BaseModel):
    """A raw predicate with one ``?`` placeholder and its argument."""

    query: str
    args: Any = None

    def to_filter(self) -> Filter:
        return Filter(query=self.query, args=self.args)


class ListQueryPayload(BaseModel):
    """Serializable part of a ``ListQueryConfig``; hooks are code and stay out."""

    page_size: int = DEFAULT_PAGE_SIZE
    page: int = DEFAULT_PAGE
    order_by: str = DEFAULT_ORDER_BY
    order: Literal["asc", "desc"] = "desc"
    wheres: List[FilterPayload] = Field(default_factory=list)
    preloads: List[str] = Field(default_factory=list)

    def to_config(self) -> ListQueryConfig:
        """Build a fresh config through the builder, so bad page values fall back to defaults."""
        return (
            ListQueryConfig()
            .with_page_size(self.page_size)
            .with_page(self.page)
            .with_order_by(self.order_by)
            .with_order(Order(self.order))
            .with_wheres(w.to_filter() for w in self.wheres)
            .with_preloads(self.preloads)
        )

    @classmethod
    def from_config(cls, config: ListQueryConfig) -> "ListQueryPayload":
        return cls(
            page_size=config.page_size,
            page=config.page,
            order_by=config.order_by,
            order=Order(config.order).value,
            wheres=[FilterPayload(query=w.query, args=w.args) for w in config.wheres],
            preloads=list(config.preloads),
        )


class PointQueryPayload(BaseModel):
    """Serializable form of a ``PointQueryConfig``."""

    wheres: List[FilterPayload] = Field(default_factory=list)
    preloads: List[str] = Field(default_factory=list)

    def to_config(self) -> PointQueryConfig:
        return (
            PointQueryConfig()
            .with_wheres(w.to_filter() for w in self.wheres)
            .with_preloads(self.preloads)
        )


class ListQueryResponse(BaseModel, Generic[ItemT]):
    """A ``ListQueryResult`` with its rows converted to response schemas."""

    model_config = ConfigDict(frozen=True)

    total: int
    page: int
    data: List[ItemT] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: ListQueryResult, item_schema: Type[ItemT]) -> "ListQueryResponse[ItemT]":
        """
        Validate each row with ``item_schema``, reading ORM attributes.

        Called on an already parametrized class (or a subclass of one) the
        response keeps that class; otherwise it is parametrized with ``item_schema``.
        """
        data = [item_schema.model_validate(row, from_attributes=True) for row in result.data]
        response_cls = cls[item_schema] if cls.__pydantic_generic_metadata__["parameters"] else cls
        return response_cls(total=result.total, page=result.page, data=data)
