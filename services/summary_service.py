"""
Meal summary: totals and the longest run of consecutive in-diet meals.
"""

from dataclasses import dataclass
from typing import Iterable

from domain.models import Meal
from repositories import MealRepository
from services.meal_service import MealService


@dataclass(frozen=True)
class MealSummary:
    total_meals: int = 0
    meals_in_diet: int = 0
    meals_out_diet: int = 0
    best_sequence: int = 0


def best_in_diet_sequence(meals: Iterable[Meal]) -> int:
    """
    Length of the longest run of consecutive in-diet meals.

    Meals are ordered by created_at; sorted() is stable so meals sharing a
    timestamp keep their storage order.
    """
    current = 0
    best = 0
    for meal in sorted(meals, key=lambda m: m.created_at):
        if meal.in_diet:
            current += 1
            best = max(best, current)
        else:
            current = 0
    return best


class SummaryService:
    @staticmethod
    def summarize(repo: MealRepository, session_id: str) -> MealSummary:
        """Aggregate all meals of a session; zero meals gives all zeros"""
        meals = MealService.list_meals(repo, session_id)
        total = len(meals)
        in_diet = sum(1 for meal in meals if meal.in_diet)
        return MealSummary(
            total_meals=total,
            meals_in_diet=in_diet,
            meals_out_diet=total - in_diet,
            best_sequence=best_in_diet_sequence(meals),
        )
