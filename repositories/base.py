"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from typing import Generic, TypeVar, List, Type
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from abc import ABC

from domain.session import SessionToken

ModelType = TypeVar("ModelType")


def require_token(token: SessionToken) -> str:
    """Return the raw token value, refusing anything that is not a SessionToken."""
    if not isinstance(token, SessionToken):
        raise TypeError(
            f"Scoped operations require a SessionToken, got {type(token).__name__}"
        )
    return token.value


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations.
    All repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_all(self) -> List[ModelType]:
        """Get all entities in storage order"""
        return self.db.query(self.model).all()

    def create(self, entity: ModelType) -> ModelType:
        """Create new entity"""
        try:
            self.db.add(entity)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(entity)
        return entity

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
