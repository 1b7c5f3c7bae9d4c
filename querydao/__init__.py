"""
querydao: generic SQLAlchemy data-access helpers.

Paginated listing, filtered single-row lookup, existence checks and
create/update/delete for any mapped class, driven by fluently built query
configurations.
"""

from querydao.query import (
    Filter,
    ListQueryConfig,
    ListQueryResult,
    Order,
    PointQueryConfig,
    QueryBuilder,
    create,
    delete,
    exists,
    new_list_config,
    new_point_config,
    query_list,
    query_one,
    update,
)
from querydao.core.base_dao import BaseDAO
from querydao.core.exceptions import InvalidPreloadError, NoClientError, QueryDAOError

__version__ = "0.1.0"

__all__ = [
    "BaseDAO",
    "Filter",
    "InvalidPreloadError",
    "ListQueryConfig",
    "ListQueryResult",
    "NoClientError",
    "Order",
    "PointQueryConfig",
    "QueryBuilder",
    "QueryDAOError",
    "create",
    "delete",
    "exists",
    "new_list_config",
    "new_point_config",
    "query_list",
    "query_one",
    "update",
]
