# querydao/query/builder.py
"""
Compiles query configurations into SQLAlchemy statements.

Both the count and the fetch of a listing go through the same ``apply_wheres``
so the two queries always share one predicate. Nothing here touches a session;
the statements are executed by ``querydao.query.engine``.
"""

import re
from typing import Any, Iterable, List, Optional, Type

from sqlalchemy import bindparam, func, inspect, select, text
from sqlalchemy.orm import RelationshipProperty, selectinload
from sqlalchemy.sql import Select
from sqlalchemy.sql.elements import TextClause

from querydao.core.exceptions import InvalidPreloadError

from .schemas import Filter, ListQueryConfig, Order, PointQueryConfig

PLACEHOLDER = "?"

# "IN (?)" with a sequence argument; the expanding parameter renders its own parentheses
_PARENTHESIZED_PLACEHOLDER = re.compile(r"\(\s*\?\s*\)")

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def compile_where(where: Filter, name: str) -> TextClause:
    """
    Turn one filter into a text clause.

    Every ``?`` in the predicate becomes the bind parameter ``name`` carrying
    ``where.args``; a list, tuple or set argument is bound as an expanding
    parameter so ``col IN ?`` works. The rest of the predicate text is used
    verbatim; colons in it are escaped so ``text()`` never reads ``:word`` as
    a bind parameter. A predicate without a placeholder ignores its argument.
    """
    query = where.query.replace(":", "\\:")
    if PLACEHOLDER not in query:
        return text(query)

    expanding = isinstance(where.args, _SEQUENCE_TYPES)
    value: Any = where.args
    if expanding:
        query = _PARENTHESIZED_PLACEHOLDER.sub(PLACEHOLDER, query)
        value = list(where.args)

    clause = text(query.replace(PLACEHOLDER, f":{name}"))
    return clause.bindparams(bindparam(name, value=value, expanding=expanding))


class QueryBuilder:
    """
    Builds the statements behind each engine operation for one mapped class.

    The builder is stateless apart from the model, so one instance may be
    shared between threads.
    """

    def __init__(self, model: Type[Any]):
        self.model = model

    # ===== CLAUSES =====

    def apply_wheres(self, stmt: Select, wheres: Iterable[Filter]) -> Select:
        """AND every filter onto the statement in declaration order."""
        for index, where in enumerate(wheres):
            stmt = stmt.where(compile_where(where, f"where_{index}"))
        return stmt

    def apply_preloads(self, stmt: Select, preloads: Iterable[str]) -> Select:
        """Eager-load each named relationship; dotted names load nested ones."""
        options = [self._preload_option(path) for path in preloads]
        if options:
            stmt = stmt.options(*options)
        return stmt

    def apply_order(self, stmt: Select, order_by: str, order: Order) -> Select:
        """Append ``ORDER BY <order_by> <direction>``; the field is raw text."""
        if not order_by or not order_by.strip():
            return stmt
        return stmt.order_by(text(f"{order_by} {Order(order)}"))

    def apply_page(self, stmt: Select, offset: int, limit: int) -> Select:
        return stmt.offset(offset).limit(limit)

    # ===== STATEMENTS =====

    def build_count_query(self, wheres: Iterable[Filter]) -> Select:
        """Count of rows matching the filters, without ordering or paging."""
        stmt = select(func.count()).select_from(self.model)
        return self.apply_wheres(stmt, wheres)

    def build_list_query(self, config: ListQueryConfig) -> Select:
        """One page of rows: filters, preloads, ordering, offset and limit."""
        stmt = select(self.model)
        stmt = self.apply_wheres(stmt, config.wheres)
        stmt = self.apply_preloads(stmt, config.preloads)
        stmt = self.apply_order(stmt, config.order_by, config.order)
        return self.apply_page(stmt, config.offset, config.page_size)

    def build_first_query(self, config: Optional[PointQueryConfig] = None) -> Select:
        """First matching row by primary key."""
        stmt = select(self.model)
        if config is not None:
            stmt = self.apply_wheres(stmt, config.wheres)
            stmt = self.apply_preloads(stmt, config.preloads)
        return stmt.order_by(*self.primary_key_columns()).limit(1)

    # ===== HELPERS =====

    def primary_key_columns(self) -> List[Any]:
        return list(inspect(self.model).primary_key)

    def _preload_option(self, path: str):
        loader = None
        current = self.model
        for name in path.split("."):
            attribute = getattr(current, name, None) if name else None
            relationship = getattr(attribute, "property", None)
            if not isinstance(relationship, RelationshipProperty):
                raise InvalidPreloadError(self.model, path)

            loader = selectinload(attribute) if loader is None else loader.selectinload(attribute)
            current = relationship.mapper.class_
        return loader
