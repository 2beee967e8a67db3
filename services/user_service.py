from typing import List, Optional, Tuple
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from domain.models import AppUser
from domain.schemas.user_schemas import UserCreate
from domain.session import SessionToken
from repositories import UserRepository

logger = logging.getLogger("dailydiet.users")


class UserService:
    """Business logic for registration and the session identity lifecycle"""

    @staticmethod
    def register_user(
        db: Session, user_data: UserCreate, presented: Optional[SessionToken] = None
    ) -> Tuple[AppUser, SessionToken, bool]:
        """
        Register a user under a session token.

        If the caller already holds a token it is reused as-is, which binds an
        additional user to the same session. Otherwise a new token is minted.

        Returns:
            (user, token, issued) where ``issued`` is True when a new token
            was minted and must be handed to the client.
        """
        issued = presented is None
        token = SessionToken.issue() if issued else presented

        user = UserRepository(db).create_user(user_data.name, user_data.email, token)

        if issued:
            logger.info(f"user_registered user_id={user.user_id} session_issued={token.short}")
        else:
            logger.info(f"user_registered user_id={user.user_id} session_reused={token.short}")
        return user, token, issued

    @staticmethod
    def get_all_users(db: Session) -> List[AppUser]:
        """Return all users (no pagination)."""
        return UserRepository(db).get_all()

    @staticmethod
    def get_user(db: Session, user_id: UUID) -> Optional[AppUser]:
        user = UserRepository(db).get_by_id(user_id)
        if not user:
            logger.warning(f"user_not_found user_id={user_id}")
        return user

    @staticmethod
    def delete_user(db: Session, user_id: UUID) -> bool:
        """Delete a user. Meals logged under its token are not touched."""
        deleted = UserRepository(db).delete_user(user_id) > 0
        logger.info(f"user_delete user_id={user_id} deleted={deleted}")
        return deleted
