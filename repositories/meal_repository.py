"""
Meal Repository - session-scoped data access for meal logs.

Every query filters on the owning session token. Lookups that miss return
``None`` and writes that miss affect zero rows; neither is an error, so a
caller cannot tell "does not exist" apart from "belongs to someone else".
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from domain.models import Meal
from domain.session import SessionToken
from repositories.base import BaseRepository, require_token

# Columns a partial update may touch
UPDATABLE_FIELDS = frozenset({"name", "description", "time_meal", "diet"})


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def _scoped(self, token: SessionToken):
        return self.db.query(Meal).filter(Meal.session_id == require_token(token))

    def create_meal(
        self,
        token: SessionToken,
        name: str,
        time_meal: datetime,
        diet: bool,
        description: Optional[str] = None,
    ) -> Meal:
        """
        Create a new meal owned by ``token``.

        Args:
            token: Owning session token
            name: Meal name
            time_meal: When the meal was eaten
            diet: True when on-diet
            description: Optional free-form text

        Returns:
            Created Meal instance
        """
        meal = Meal(
            name=name,
            description=description,
            time_meal=time_meal,
            diet=bool(diet),
            session_id=require_token(token),
        )
        return self.create(meal)

    def get_meal(self, token: SessionToken, meal_id: UUID) -> Optional[Meal]:
        """Get a meal by ID within the session scope"""
        return self._scoped(token).filter(Meal.meal_id == meal_id).first()

    def list_meals(self, token: SessionToken) -> List[Meal]:
        """All meals of a session, in storage order"""
        return self._scoped(token).all()

    def update_meal(
        self, token: SessionToken, meal_id: UUID, fields: Dict[str, Any]
    ) -> int:
        """
        Apply a partial update to a meal within the session scope.

        Returns:
            Number of rows changed (0 when the id is unknown or not owned)
        """
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update meal fields: {sorted(unknown)}")
        count = (
            self._scoped(token)
            .filter(Meal.meal_id == meal_id)
            .update(dict(fields), synchronize_session=False)
        )
        self._commit()
        return count

    def delete_meal(self, token: SessionToken, meal_id: UUID) -> int:
        """Delete a meal within the session scope; returns rows removed"""
        count = (
            self._scoped(token)
            .filter(Meal.meal_id == meal_id)
            .delete(synchronize_session=False)
        )
        self._commit()
        return count
