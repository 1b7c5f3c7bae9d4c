# querydao/query/engine.py
"""
Query engine: list, get-one, exists, create, update and delete for any mapped class.

Each operation takes the session (the store-client handle) and the mapped class
explicitly, builds its statement through ``QueryBuilder`` and executes it
synchronously. Store errors (``sqlalchemy.exc.SQLAlchemyError``) propagate
unwrapped and nothing is retried or committed here; the owner of the session
decides on commit and rollback.
"""

import logging
from typing import Optional, Type, TypeVar

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from querydao.core.exceptions import NoClientError

from .builder import QueryBuilder
from .schemas import ListQueryConfig, ListQueryResult, PointQueryConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _require_client(db: Optional[Session]) -> Session:
    if db is None:
        raise NoClientError()
    return db


def _hook_name(hook) -> str:
    return getattr(hook, "__qualname__", None) or repr(hook)


def _fill_unset_columns(entity) -> None:
    """Give every column attribute the caller never set its scalar default, or None."""
    state = inspect(entity)
    for attr in state.mapper.column_attrs:
        if attr.key in state.dict:
            continue
        column = attr.columns[0]
        if column.default is not None and column.default.is_scalar:
            setattr(entity, attr.key, column.default.arg)
        elif column.onupdate is None:
            setattr(entity, attr.key, None)
        # columns with onupdate are left to generate their own value


# ===== READS =====


def query_list(
    count_db: Optional[Session],
    fetch_db: Optional[Session],
    model: Type[T],
    config: Optional[ListQueryConfig] = None,
) -> ListQueryResult:
    """
    Fetch one page of ``model`` rows plus the total number of matching rows.

    The count runs on ``count_db`` (filters only) and the page on ``fetch_db``
    (filters, preloads, ordering, offset, limit). The same session may be
    passed for both. The two reads are separate statements: unless both
    sessions share a transaction, rows written in between can make ``total``
    disagree with ``data``. No isolation level is assumed.

    Hooks run in configuration order over every row in fetch order. A hook
    that raises is logged as a warning and the row keeps the value it had
    before that hook; the listing itself still succeeds. Changes a failing
    hook made to the row object in place are not undone.
    """
    count_db = _require_client(count_db)
    fetch_db = _require_client(fetch_db)
    config = config if config is not None else ListQueryConfig()
    builder = QueryBuilder(model)
    count_stmt = builder.build_count_query(config.wheres)
    list_stmt = builder.build_list_query(config)

    total = count_db.execute(count_stmt).scalar_one()

    logger.debug(
        "Listing %s page=%d page_size=%d offset=%d filters=%d",
        model.__name__, config.page, config.page_size, config.offset, len(config.wheres),
    )
    rows = list(fetch_db.execute(list_stmt).scalars().all())

    for hook in config.hooks:
        for index, row in enumerate(rows):
            try:
                rows[index] = hook(row)
            except Exception as e:
                logger.warning(
                    "Hook %s failed on %s row %d: %s", _hook_name(hook), model.__name__, index, e
                )

    return ListQueryResult(total=int(total or 0), page=config.page, data=rows)


def query_one(
    db: Optional[Session], model: Type[T], config: Optional[PointQueryConfig] = None
) -> Optional[T]:
    """
    Fetch the first row (by primary key) matching the configuration.

    Returns ``None`` when nothing matches; that is not an error. Any other
    store failure raises.
    """
    db = _require_client(db)
    stmt = QueryBuilder(model).build_first_query(config)
    return db.execute(stmt).scalars().first()


def exists(db: Optional[Session], model: Type[T], config: Optional[PointQueryConfig] = None) -> bool:
    """True when at least one row matches the filters. A failed count raises."""
    db = _require_client(db)
    wheres = config.wheres if config is not None else []
    count = db.execute(QueryBuilder(model).build_count_query(wheres)).scalar_one()
    return count > 0


# ===== WRITES =====


def create(db: Optional[Session], entity: T) -> T:
    """Insert ``entity`` and flush so insertion errors surface here."""
    db = _require_client(db)
    db.add(entity)
    db.flush()
    return entity


def update(db: Optional[Session], entity: T) -> T:
    """
    Save the whole row by primary key.

    This is a full-row write (insert when no row has the key), not a partial
    patch: columns left unset on ``entity`` are written as their scalar default
    or NULL, except ``onupdate`` columns, which regenerate. Returns the
    persistent instance, which may differ from ``entity``.
    """
    db = _require_client(db)
    _fill_unset_columns(entity)
    persistent = db.merge(entity)
    db.flush()
    return persistent


def delete(db: Optional[Session], model: Type[T], config: Optional[PointQueryConfig]) -> Optional[T]:
    """
    Delete the first row matching ``config``.

    Deleting nothing is a successful no-op and returns ``None``; otherwise the
    deleted row is returned. The lookup and the delete are two statements, so
    another writer may remove the row in between.
    """
    db = _require_client(db)
    if config is None:
        raise ValueError("delete requires a PointQueryConfig")

    row = query_one(db, model, config)
    if row is None:
        return None

    db.delete(row)
    db.flush()
    return row
