# querydao/core/base_dao.py
"""Generic base DAO binding one mapped class to one session."""

from abc import ABC
from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from querydao.query import engine
from querydao.query.schemas import ListQueryConfig, ListQueryResult, PointQueryConfig

ModelType = TypeVar("ModelType")


class BaseDAO(Generic[ModelType], ABC):
    """
    Generic DAO for the common list/get/exists/create/update/delete operations.

    Subclasses either set ``model`` on the class or pass it to ``__init__``:

        class UserDAO(BaseDAO[User]):
            model = User

        users = UserDAO(db).list(ListQueryConfig().with_page(2))
    """

    model: Optional[Type[Any]] = None

    def __init__(self, db: Optional[Session], model: Optional[Type[ModelType]] = None):
        self.db = db
        if model is not None:
            self.model = model
        if self.model is None:
            raise TypeError(f"{type(self).__name__} has no model")

    def list(
        self, config: Optional[ListQueryConfig] = None, count_db: Optional[Session] = None
    ) -> ListQueryResult:
        """One page of records; counts on ``count_db`` when given, otherwise on the bound session."""
        return engine.query_list(count_db if count_db is not None else self.db, self.db, self.model, config)

    def get_one(self, config: Optional[PointQueryConfig] = None) -> Optional[ModelType]:
        """First matching record, or None."""
        return engine.query_one(self.db, self.model, config)

    def exists(self, config: Optional[PointQueryConfig] = None) -> bool:
        return engine.exists(self.db, self.model, config)

    def create(self, entity: ModelType) -> ModelType:
        return engine.create(self.db, entity)

    def update(self, entity: ModelType) -> ModelType:
        """Save the whole record by primary key."""
        return engine.update(self.db, entity)

    def delete(self, config: PointQueryConfig) -> Optional[ModelType]:
        """Delete the first matching record; returns it, or None when nothing matched."""
        return engine.delete(self.db, self.model, config)
