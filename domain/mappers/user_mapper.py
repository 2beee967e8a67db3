"""
User domain mappers.
Handles transformation between ORM models and DTOs for user-related entities.
"""

from domain.models import AppUser
from domain.schemas.user_schemas import UserResponse


class UserMapper:
    """Mapper for user-related transformations."""

    @staticmethod
    def to_response(user: AppUser) -> UserResponse:
        """
        Convert AppUser ORM model to UserResponse DTO.

        The session token stored on the user is deliberately left out.
        """
        return UserResponse(
            id=user.user_id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
        )
