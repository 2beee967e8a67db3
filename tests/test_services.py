"""
Tests for the service layer: registration/session lifecycle and meal logic.
"""

import uuid
from datetime import datetime

import pytest
from sqlalchemy.orm import Session

from test_helpers import unique_email
from app.exceptions import ServiceValidationError
from domain.schemas import MealCreate, MealUpdate, UserCreate
from domain.session import SessionToken
from services import MealService, UserService


def new_meal(**overrides) -> MealCreate:
    values = {
        "name": "Omelete",
        "timeMeal": "2023-08-08T08:00:00",
        "diet": True,
    }
    values.update(overrides)
    return MealCreate.model_validate(values)


# =============================================================================
# USER SERVICE
# =============================================================================


def test_register_without_token_issues_one(db_session: Session):
    user, token, issued = UserService.register_user(
        db_session, UserCreate(name="Raj Patel", email=unique_email("raj"))
    )

    assert issued is True
    assert isinstance(token, SessionToken)
    assert user.session_id == token.value


def test_register_with_token_reuses_it(db_session: Session):
    """
    Verifies:
    - A presented token is kept unchanged
    - The second user is bound to the same token (two rows, one session)
    """
    _, token, _ = UserService.register_user(
        db_session, UserCreate(name="Profile One", email=unique_email("one"))
    )

    user, reused, issued = UserService.register_user(
        db_session, UserCreate(name="Profile Two", email=unique_email("two")), token
    )

    assert issued is False
    assert reused == token
    assert user.session_id == token.value
    assert len(UserService.get_all_users(db_session)) == 2


def test_get_and_delete_user(db_session: Session):
    user, _, _ = UserService.register_user(
        db_session, UserCreate(name="Emma Johnson", email=unique_email("emma"))
    )
    user_id = user.user_id

    assert UserService.get_user(db_session, user_id).name == "Emma Johnson"
    assert UserService.delete_user(db_session, user_id) is True
    assert UserService.get_user(db_session, user_id) is None
    assert UserService.delete_user(db_session, user_id) is False


def test_deleting_user_keeps_meals_reachable_by_token(db_session: Session):
    user, token, _ = UserService.register_user(
        db_session, UserCreate(name="Sarah Martinez", email=unique_email("sarah"))
    )
    MealService.create_meal(db_session, token, new_meal())

    UserService.delete_user(db_session, user.user_id)

    assert len(MealService.list_meals(db_session, token)) == 1


# =============================================================================
# MEAL SERVICE
# =============================================================================


def test_create_and_get_meal(db_session: Session):
    token = SessionToken.issue()

    meal = MealService.create_meal(db_session, token, new_meal(description="Com queijo"))

    fetched = MealService.get_meal(db_session, token, meal.meal_id)
    assert fetched.name == "Omelete"
    assert fetched.description == "Com queijo"
    assert fetched.time_meal == datetime(2023, 8, 8, 8, 0)


def test_create_meal_stores_utc_meal_time(db_session: Session):
    token = SessionToken.issue()

    meal = MealService.create_meal(
        db_session, token, new_meal(timeMeal="2023-08-08T09:00:00-03:00")
    )

    assert meal.time_meal == datetime(2023, 8, 8, 12, 0)


def test_update_meal_writes_only_supplied_fields(db_session: Session):
    token = SessionToken.issue()
    meal = MealService.create_meal(db_session, token, new_meal(description="Original"))

    MealService.update_meal(
        db_session, token, meal.meal_id, MealUpdate.model_validate({"diet": False})
    )

    db_session.expire_all()
    updated = MealService.get_meal(db_session, token, meal.meal_id)
    assert updated.diet is False
    assert updated.description == "Original"
    assert updated.name == "Omelete"


def test_update_meal_can_clear_description(db_session: Session):
    token = SessionToken.issue()
    meal = MealService.create_meal(db_session, token, new_meal(description="Original"))

    MealService.update_meal(
        db_session, token, meal.meal_id, MealUpdate.model_validate({"description": None})
    )

    db_session.expire_all()
    assert MealService.get_meal(db_session, token, meal.meal_id).description is None


def test_update_meal_rejects_empty_update(db_session: Session):
    token = SessionToken.issue()
    meal = MealService.create_meal(db_session, token, new_meal())

    with pytest.raises(ServiceValidationError):
        MealService.update_meal(db_session, token, meal.meal_id, MealUpdate())


def test_update_and_delete_missing_meal_do_not_raise(db_session: Session):
    token = SessionToken.issue()

    MealService.update_meal(
        db_session, token, uuid.uuid4(), MealUpdate.model_validate({"name": "Nada"})
    )
    MealService.delete_meal(db_session, token, uuid.uuid4())

    assert MealService.list_meals(db_session, token) == []


def test_build_summary_uses_only_session_meals(db_session: Session):
    token = SessionToken.issue()
    other = SessionToken.issue()
    for hour, diet in [(8, True), (12, True), (16, False), (20, True)]:
        MealService.create_meal(
            db_session, token, new_meal(timeMeal=f"2023-08-08T{hour:02d}:00:00", diet=diet)
        )
    MealService.create_meal(db_session, other, new_meal(diet=False))

    summary = MealService.build_summary(db_session, token)

    assert summary.total_meals == 4
    assert summary.total_meals_on_diet == 3
    assert summary.total_meals_off_diet == 1
    assert summary.best_sequence == 2
