"""Meal logging routes, all scoped to the caller's session cookie"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from uuid import UUID

from api.dependencies import SessionRequiredRoute, get_db, require_session_token
from api.responses import SESSION_ERROR_RESPONSES
from domain.mappers import MealMapper
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealListResponse,
    MealDetailResponse,
    MealSummary,
)
from domain.session import SessionToken
from services.meal_service import MealService

router = APIRouter(
    prefix="/meals",
    tags=["Meals"],
    responses=SESSION_ERROR_RESPONSES,
    route_class=SessionRequiredRoute,
)


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_meal(
    meal_data: MealCreate,
    token: SessionToken = Depends(require_session_token),
    db: Session = Depends(get_db),
):
    """Log a meal for the current session."""
    MealService.create_meal(db, token, meal_data)
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("", response_model=MealListResponse)
def list_meals(
    token: SessionToken = Depends(require_session_token),
    db: Session = Depends(get_db),
):
    """List every meal of the current session."""
    return MealMapper.to_list_response(MealService.list_meals(db, token))


@router.get("/summary", response_model=MealSummary)
def get_summary(
    token: SessionToken = Depends(require_session_token),
    db: Session = Depends(get_db),
):
    """
    Diet statistics for the current session.

    Returns totals of all, on-diet and off-diet meals, plus ``bestSequence``:
    the longest run of consecutive on-diet meals ordered by meal time.
    """
    return MealService.build_summary(db, token)


@router.get("/{meal_id}", response_model=MealDetailResponse)
def get_meal(
    meal_id: UUID,
    token: SessionToken = Depends(require_session_token),
    db: Session = Depends(get_db),
):
    """Get one meal; ``meal`` is null when it is missing or not owned."""
    return MealMapper.to_detail_response(MealService.get_meal(db, token, meal_id))


@router.put(
    "/{meal_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
def update_meal(
    meal_id: UUID,
    meal_data: MealUpdate,
    token: SessionToken = Depends(require_session_token),
    db: Session = Depends(get_db),
):
    """
    Partially update a meal.

    Succeeds even when no meal with this id belongs to the session; the
    response does not reveal whether anything changed.
    """
    MealService.update_meal(db, token, meal_id, meal_data)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{meal_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
def delete_meal(
    meal_id: UUID,
    token: SessionToken = Depends(require_session_token),
    db: Session = Depends(get_db),
):
    """Delete a meal. Missing or foreign meals are a silent no-op."""
    MealService.delete_meal(db, token, meal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
