"""
Query configuration, compilation and execution.

Main Components:
- Schemas: ``ListQueryConfig``, ``PointQueryConfig``, ``Filter``, ``ListQueryResult``
- QueryBuilder: compiles a configuration into SQLAlchemy statements
- Engine: ``query_list``, ``query_one``, ``exists``, ``create``, ``update``, ``delete``
- Payloads: pydantic models for exchanging configurations and results
"""

from .builder import QueryBuilder
from .engine import create, delete, exists, query_list, query_one, update
from .payloads import FilterPayload, ListQueryPayload, ListQueryResponse, PointQueryPayload
from .schemas import (
    Filter,
    Hook,
    ListQueryConfig,
    ListQueryResult,
    Order,
    PointQueryConfig,
    new_list_config,
    new_point_config,
)

__all__ = [
    # Configuration and result types
    "Filter",
    "Hook",
    "ListQueryConfig",
    "ListQueryResult",
    "Order",
    "PointQueryConfig",
    "new_list_config",
    "new_point_config",
    # Compilation
    "QueryBuilder",
    # Operations
    "query_list",
    "query_one",
    "exists",
    "create",
    "update",
    "delete",
    # Interchange
    "FilterPayload",
    "ListQueryPayload",
    "PointQueryPayload",
    "ListQueryResponse",
]
