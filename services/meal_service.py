from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from domain.models import Meal
from domain.schemas.meal_schemas import MealCreate, MealUpdate, MealSummary
from domain.session import SessionToken
from repositories import MealRepository
from services.streak_analyzer import summarize
from app.exceptions import ServiceValidationError

logger = logging.getLogger("dailydiet.meals")


class MealService:
    """Business logic for session-scoped meal logging"""

    @staticmethod
    def create_meal(db: Session, token: SessionToken, meal_data: MealCreate) -> Meal:
        """Log a meal for the session owning ``token``."""
        meal = MealRepository(db).create_meal(
            token,
            name=meal_data.name,
            description=meal_data.description,
            time_meal=meal_data.time_meal,
            diet=meal_data.diet,
        )
        logger.info(f"meal_created meal_id={meal.meal_id} session={token.short}")
        return meal

    @staticmethod
    def update_meal(
        db: Session, token: SessionToken, meal_id: UUID, meal_data: MealUpdate
    ) -> None:
        """
        Apply a partial update to a meal.

        A meal that does not exist or belongs to another session is left
        untouched and no error is raised.

        Raises:
            ServiceValidationError: If the update carries no fields
        """
        changes = meal_data.changes()
        if not changes:
            raise ServiceValidationError(
                "No fields to update", code="EMPTY_UPDATE"
            )

        count = MealRepository(db).update_meal(token, meal_id, changes)
        if count:
            logger.info(
                f"meal_updated meal_id={meal_id} fields={sorted(changes)} "
                f"session={token.short}"
            )
        else:
            logger.debug(f"meal_update_no_match meal_id={meal_id} session={token.short}")

    @staticmethod
    def delete_meal(db: Session, token: SessionToken, meal_id: UUID) -> None:
        """Delete a meal; a miss is a silent no-op."""
        count = MealRepository(db).delete_meal(token, meal_id)
        if count:
            logger.info(f"meal_deleted meal_id={meal_id} session={token.short}")
        else:
            logger.debug(f"meal_delete_no_match meal_id={meal_id} session={token.short}")

    @staticmethod
    def list_meals(db: Session, token: SessionToken) -> List[Meal]:
        return MealRepository(db).list_meals(token)

    @staticmethod
    def get_meal(db: Session, token: SessionToken, meal_id: UUID) -> Optional[Meal]:
        return MealRepository(db).get_meal(token, meal_id)

    @staticmethod
    def build_summary(db: Session, token: SessionToken) -> MealSummary:
        """Aggregate statistics and best on-diet streak for one session."""
        meals = MealRepository(db).list_meals(token)
        summary = summarize(meals)
        logger.info(
            f"summary_built session={token.short} total={summary.total_meals} "
            f"best_sequence={summary.best_sequence}"
        )
        return summary
