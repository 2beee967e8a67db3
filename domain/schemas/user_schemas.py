from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from domain.schemas.meal_schemas import CAMEL_CONFIG


class UserCreate(BaseModel):
    name: str
    email: str


class UserResponse(BaseModel):
    # The session token is a credential and is never echoed back
    id: UUID
    name: str
    email: str
    created_at: Optional[datetime] = None

    model_config = CAMEL_CONFIG


class UserListResponse(BaseModel):
    users: List[UserResponse]


class UserDetailResponse(BaseModel):
    user: Optional[UserResponse] = None
