# querydao/core/exceptions.py
"""Errors raised by the data-access layer itself.

Failures coming from the store (``sqlalchemy.exc.SQLAlchemyError`` and the
driver errors it carries) are never wrapped; callers see them unchanged.
"""


class QueryDAOError(Exception):
    """Base class for errors raised by querydao."""


class NoClientError(QueryDAOError):
    """The session handle passed to an operation is missing."""

    def __init__(self, message: str = "get db client failed"):
        super().__init__(message)


class InvalidPreloadError(QueryDAOError):
    """A preload name does not resolve to a relationship on the model."""

    def __init__(self, model: type, path: str):
        self.model = model
        self.path = path
        super().__init__(f"'{path}' is not a relationship of {model.__name__}")
