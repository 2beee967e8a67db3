"""
Diet statistics over a session's meal history.

The longest on-diet streak is a single left fold over meals sorted by meal
time. The fold state holds only the current run and the best closed run, so
the pass uses constant extra space regardless of history length.
"""

from functools import reduce
from operator import attrgetter
from typing import Iterable, NamedTuple, Protocol

from domain.schemas.meal_schemas import MealSummary


class DietEntry(Protocol):
    """Anything carrying a diet flag and a meal time (ORM rows, DTOs, ...)"""

    diet: bool
    time_meal: object


class StreakState(NamedTuple):
    current: int = 0
    best: int = 0

    def close(self) -> "StreakState":
        """End the open run, keeping it if it is the longest so far."""
        return StreakState(0, max(self.best, self.current))


def advance(state: StreakState, on_diet: bool) -> StreakState:
    """One step of the streak fold."""
    if on_diet:
        return StreakState(state.current + 1, state.best)
    return state.close()


def longest_on_diet_streak(flags: Iterable[bool]) -> int:
    """Length of the longest run of consecutive True values.

    ``flags`` must already be in chronological order.

    >>> longest_on_diet_streak([True, True, False, True])
    2
    >>> longest_on_diet_streak([])
    0
    """
    return reduce(advance, flags, StreakState()).close().best


def chronological(meals: Iterable[DietEntry]) -> list:
    """Meals ascending by meal time; ties keep their storage order."""
    return sorted(meals, key=attrgetter("time_meal"))


def summarize(meals: Iterable[DietEntry]) -> MealSummary:
    """Build the summary for one session's meals (read once, any order)."""
    ordered = chronological(meals)
    on_diet = sum(1 for meal in ordered if meal.diet)
    return MealSummary(
        total_meals=len(ordered),
        total_meals_on_diet=on_diet,
        total_meals_off_diet=len(ordered) - on_diet,
        best_sequence=longest_on_diet_streak(bool(meal.diet) for meal in ordered),
    )
