"""
User-related database models.
"""

from sqlalchemy import Column, Text, TIMESTAMP, Uuid
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


class AppUser(Base):
    """Registered user, bound to the session token issued at registration"""

    __tablename__ = "app_user"

    user_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    # Not unique: several users may share one token
    session_id = Column(Text, index=True)
    created_at = Column(TIMESTAMP(timezone=False), server_default=func.now())
