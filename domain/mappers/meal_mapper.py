"""
Meal domain mappers.
Handles transformation between Meal ORM rows and meal DTOs.
"""

from typing import Iterable, Optional

from domain.models import Meal
from domain.schemas.meal_schemas import (
    MealResponse,
    MealListResponse,
    MealDetailResponse,
)


class MealMapper:
    """Mapper for meal transformations."""

    @staticmethod
    def to_response(meal: Meal) -> MealResponse:
        """
        Convert a Meal ORM row to MealResponse.

        Args:
            meal: Meal ORM instance

        Returns:
            MealResponse without the owning session token
        """
        return MealResponse(
            id=meal.meal_id,
            name=meal.name,
            description=meal.description,
            time_meal=meal.time_meal,
            diet=bool(meal.diet),
            created_at=meal.created_at,
        )

    @staticmethod
    def to_list_response(meals: Iterable[Meal]) -> MealListResponse:
        return MealListResponse(meals=[MealMapper.to_response(m) for m in meals])

    @staticmethod
    def to_detail_response(meal: Optional[Meal]) -> MealDetailResponse:
        if meal is None:
            return MealDetailResponse(meal=None)
        return MealDetailResponse(meal=MealMapper.to_response(meal))
