from typing import List, Optional
from datetime import datetime
import uuid

from domain.models import Meal
from repositories import MealRepository
from app.exceptions import ServiceValidationError

CREATED_AT_FORMAT = "%Y-%m-%dT%H:%M:%S"


def combine_date_time(date: str, time: str) -> datetime:
    """
    Build the meal timestamp from the literal string "{date}T{time}:00".

    No timezone is attached. Raises ServiceValidationError when the
    combination does not parse.
    """
    raw = f"{date}T{time}:00"
    try:
        return datetime.strptime(raw, CREATED_AT_FORMAT)
    except ValueError as e:
        raise ServiceValidationError(
            f"Invalid meal date/time: {raw}",
            details={"date": date, "time": time},
            code="INVALID_DATETIME",
        ) from e


class MealService:
    """Session-scoped meal operations over an injected MealRepository"""

    @staticmethod
    def create_meal(
        repo: MealRepository,
        session_id: str,
        name: str,
        description: str,
        in_diet: bool,
        date: str,
        time: str,
    ) -> uuid.UUID:
        """
        Register a meal for the session.

        Returns:
            The new meal id

        Raises:
            ServiceValidationError: empty name or unparseable date/time
            StoreError: if the insert fails
        """
        if not name:
            raise ServiceValidationError("Meal name must not be empty", code="EMPTY_NAME")
        created_at = combine_date_time(date, time)
        meal = repo.create_meal(
            session_id=session_id,
            name=name,
            description=description,
            in_diet=in_diet,
            created_at=created_at,
        )
        return meal.id

    @staticmethod
    def get_meal(
        repo: MealRepository, session_id: str, meal_id: uuid.UUID
    ) -> Optional[Meal]:
        """Return the meal, or None if absent or owned by another session"""
        return repo.get_for_session(session_id, meal_id)

    @staticmethod
    def list_meals(repo: MealRepository, session_id: str) -> List[Meal]:
        return repo.list_for_session(session_id)

    @staticmethod
    def update_meal(
        repo: MealRepository,
        session_id: str,
        meal_id: uuid.UUID,
        name: str,
        description: str,
        in_diet: bool,
    ) -> bool:
        """Overwrite name/description/in_diet; False when not found"""
        if not name:
            raise ServiceValidationError("Meal name must not be empty", code="EMPTY_NAME")
        return repo.update_for_session(
            session_id, meal_id, name=name, description=description, in_diet=in_diet
        )

    @staticmethod
    def delete_meal(
        repo: MealRepository, session_id: str, meal_id: uuid.UUID
    ) -> bool:
        return repo.delete_for_session(session_id, meal_id)
