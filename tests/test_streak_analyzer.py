"""
Tests for the on-diet streak fold and meal summary.

These are pure unit tests: meals are plain objects carrying ``diet`` and
``time_meal``, no database involved.
"""

from datetime import datetime, timedelta
from types import SimpleNamespace

import pytest

from services.streak_analyzer import (
    StreakState,
    advance,
    chronological,
    longest_on_diet_streak,
    summarize,
)

START = datetime(2023, 8, 8, 7, 0)


def make_meals(*flags, start=START):
    """Meals one hour apart, in the given chronological order"""
    return [
        SimpleNamespace(diet=flag, time_meal=start + timedelta(hours=i))
        for i, flag in enumerate(flags)
    ]


# =============================================================================
# STREAK FOLD
# =============================================================================


@pytest.mark.parametrize(
    "flags, expected",
    [
        ([True, True, False, True], 2),
        ([], 0),
        ([False, False], 0),
        ([True], 1),
        ([False, True, True, True], 3),
        ([True, True, True, False], 3),
        ([True, False, True, False, True], 1),
        ([True, True, False, False, True, True, True, False, True], 3),
    ],
)
def test_longest_on_diet_streak(flags, expected):
    assert longest_on_diet_streak(flags) == expected


def test_advance_increments_and_closes_runs():
    """
    Verifies:
    - On-diet meals extend the open run
    - Off-diet meals close the run and keep the best length
    """
    state = StreakState()
    state = advance(state, True)
    state = advance(state, True)
    assert state == StreakState(current=2, best=0)

    state = advance(state, False)
    assert state == StreakState(current=0, best=2)

    state = advance(state, True)
    assert state == StreakState(current=1, best=2)
    assert state.close() == StreakState(current=0, best=2)


def test_longest_streak_accepts_generators():
    assert longest_on_diet_streak(flag for flag in [True, False, True, True]) == 2


# =============================================================================
# SUMMARY
# =============================================================================


def test_summarize_counts_and_best_sequence():
    summary = summarize(make_meals(True, True, False, True))

    assert summary.total_meals == 4
    assert summary.total_meals_on_diet == 3
    assert summary.total_meals_off_diet == 1
    assert summary.best_sequence == 2


def test_summarize_empty_history():
    summary = summarize([])

    assert summary.total_meals == 0
    assert summary.total_meals_on_diet == 0
    assert summary.total_meals_off_diet == 0
    assert summary.best_sequence == 0


def test_summarize_single_on_diet_meal():
    summary = summarize(make_meals(True))

    assert summary.best_sequence == 1
    assert summary.total_meals_on_diet == 1
    assert summary.total_meals_off_diet == 0


def test_summarize_only_off_diet_meals():
    summary = summarize(make_meals(False, False))

    assert summary.total_meals_off_diet == 2
    assert summary.best_sequence == 0


def test_summarize_orders_by_meal_time_not_storage_order():
    """
    Verifies:
    - Meals are sorted by time_meal before the streak is computed
    - Storage order (off, on, on, on) would give 3; chronological gives 2
    """
    meals = [
        SimpleNamespace(diet=False, time_meal=START + timedelta(hours=2)),
        SimpleNamespace(diet=True, time_meal=START),
        SimpleNamespace(diet=True, time_meal=START + timedelta(hours=3)),
        SimpleNamespace(diet=True, time_meal=START + timedelta(hours=1)),
    ]

    summary = summarize(meals)

    assert summary.best_sequence == 2
    assert summary.total_meals == 4


def test_chronological_keeps_storage_order_on_ties():
    first = SimpleNamespace(diet=True, time_meal=START, name="first")
    second = SimpleNamespace(diet=False, time_meal=START, name="second")
    earlier = SimpleNamespace(diet=True, time_meal=START - timedelta(hours=1), name="earlier")

    ordered = chronological([first, second, earlier])

    assert [m.name for m in ordered] == ["earlier", "first", "second"]


def test_summary_serializes_camel_case():
    summary = summarize(make_meals(True))

    assert summary.model_dump(by_alias=True) == {
        "totalMeals": 1,
        "totalMealsOnDiet": 1,
        "totalMealsOffDiet": 0,
        "bestSequence": 1,
    }
