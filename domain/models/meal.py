"""
Meal log database model.
"""

from sqlalchemy import Column, Text, Boolean, TIMESTAMP, Uuid
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


class Meal(Base):
    """A logged meal, owned by the session token that created it"""

    __tablename__ = "meal"

    meal_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    description = Column(Text)
    time_meal = Column(TIMESTAMP(timezone=False), nullable=False)
    diet = Column(Boolean, nullable=False)
    # Joined to app_user.session_id by equality, not by foreign key
    session_id = Column(Text, nullable=False, index=True)
    created_at = Column(TIMESTAMP(timezone=False), server_default=func.now())
