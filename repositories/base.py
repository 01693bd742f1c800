"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from typing import Generic, TypeVar, Type
from contextlib import contextmanager
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from abc import ABC

from app.exceptions import StoreError

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository holding the session and model.
    All repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    @contextmanager
    def store_errors(self):
        """
        Roll back and translate any SQLAlchemy failure into StoreError.

        Usage:
            with self.store_errors():
                self.db.execute(...)
                self.db.commit()
        """
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError(code="STORE_ERROR") from exc
