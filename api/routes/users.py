"""User registration and management routes"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import Optional
from uuid import UUID

from api.dependencies import get_db, get_optional_session_token
from app.config import settings
from domain.mappers import UserMapper
from domain.schemas.user_schemas import (
    UserCreate,
    UserListResponse,
    UserDetailResponse,
)
from domain.session import SessionToken
from services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def register_user(
    user: UserCreate,
    presented: Optional[SessionToken] = Depends(get_optional_session_token),
    db: Session = Depends(get_db),
):
    """
    Register a user.

    A client without a session cookie receives a freshly issued one; it must
    send it back on every meal request. A client that already has a cookie
    keeps it, and the new user is bound to the same session.
    """
    _, token, issued = UserService.register_user(db, user, presented)

    response = Response(status_code=status.HTTP_201_CREATED)
    if issued:
        response.set_cookie(
            key=settings.session_cookie_name,
            value=token.value,
            max_age=settings.session_max_age_seconds,
            path="/",
            httponly=settings.session_cookie_httponly,
            secure=settings.session_cookie_secure,
            samesite="lax",
        )
    return response


@router.get("", response_model=UserListResponse)
def get_all_users(db: Session = Depends(get_db)):
    """Return all users."""
    users = UserService.get_all_users(db)
    return UserListResponse(users=[UserMapper.to_response(u) for u in users])


@router.get("/{user_id}", response_model=UserDetailResponse)
def get_user(user_id: UUID, db: Session = Depends(get_db)):
    """Get a user by ID; ``user`` is null when there is no such user."""
    user = UserService.get_user(db, user_id)
    return UserDetailResponse(user=UserMapper.to_response(user) if user else None)


@router.delete(
    "/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
def delete_user(user_id: UUID, db: Session = Depends(get_db)):
    """Delete a user. Deleting an unknown user is not an error."""
    UserService.delete_user(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
