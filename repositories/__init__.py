"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository, require_token
from repositories.user_repository import UserRepository
from repositories.meal_repository import MealRepository

__all__ = [
    "BaseRepository",
    "require_token",
    "UserRepository",
    "MealRepository",
]
