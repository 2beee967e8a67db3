"""
User Repository - Data access layer for user-related operations
"""

from typing import Optional, List
from uuid import UUID
from sqlalchemy.orm import Session

from repositories.base import BaseRepository, require_token
from domain.models import AppUser
from domain.session import SessionToken


class UserRepository(BaseRepository[AppUser]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, AppUser)

    def get_by_id(self, user_id: UUID) -> Optional[AppUser]:
        """Get user by ID"""
        return self.db.query(AppUser).filter(AppUser.user_id == user_id).first()

    def get_by_session(self, token: SessionToken) -> List[AppUser]:
        """Get every user registered under a session token"""
        return (
            self.db.query(AppUser)
            .filter(AppUser.session_id == require_token(token))
            .all()
        )

    def create_user(self, name: str, email: str, token: SessionToken) -> AppUser:
        """Create a new user bound to the given session token"""
        user = AppUser(name=name, email=email, session_id=require_token(token))
        return self.create(user)

    def delete_user(self, user_id: UUID) -> int:
        """Delete a user by ID; returns the number of rows removed"""
        count = self.db.query(AppUser).filter(AppUser.user_id == user_id).delete()
        self._commit()
        return count
