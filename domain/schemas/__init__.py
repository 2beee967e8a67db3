"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealResponse,
    MealListResponse,
    MealDetailResponse,
    MealSummary,
)
from domain.schemas.user_schemas import (
    UserCreate,
    UserResponse,
    UserListResponse,
    UserDetailResponse,
)

__all__ = [
    # Meal schemas
    "MealCreate",
    "MealUpdate",
    "MealResponse",
    "MealListResponse",
    "MealDetailResponse",
    "MealSummary",
    # User schemas
    "UserCreate",
    "UserResponse",
    "UserListResponse",
    "UserDetailResponse",
]
