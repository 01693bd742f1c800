"""
Meal Repository - Data access layer for session-scoped meal records.

Every lookup and mutation filters on both the meal id and the owning
session, in a single statement, so a caller can never observe or change a
meal belonging to another session.
"""

from typing import List, Optional
from uuid import UUID
from datetime import datetime
from sqlalchemy.orm import Session
from sqlalchemy import and_

from repositories.base import BaseRepository
from domain.models import Meal


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def _owned(self, session_id: str, meal_id: UUID):
        return self.db.query(Meal).filter(
            and_(Meal.id == meal_id, Meal.session_id == session_id)
        )

    def create_meal(
        self,
        session_id: str,
        name: str,
        description: str,
        in_diet: bool,
        created_at: datetime,
    ) -> Meal:
        """Insert a new meal owned by session_id"""
        meal = Meal(
            name=name,
            description=description,
            in_diet=in_diet,
            created_at=created_at,
            session_id=session_id,
        )
        with self.store_errors():
            self.db.add(meal)
            self.db.commit()
            self.db.refresh(meal)
        return meal

    def get_for_session(self, session_id: str, meal_id: UUID) -> Optional[Meal]:
        """Get a meal by ID, only if owned by session_id"""
        with self.store_errors():
            return self._owned(session_id, meal_id).first()

    def list_for_session(self, session_id: str) -> List[Meal]:
        """Get all meals of a session in storage order"""
        with self.store_errors():
            return self.db.query(Meal).filter(Meal.session_id == session_id).all()

    def update_for_session(
        self,
        session_id: str,
        meal_id: UUID,
        name: str,
        description: str,
        in_diet: bool,
    ) -> bool:
        """
        Overwrite name, description and in_diet of an owned meal.

        Issues a single UPDATE ... WHERE id = ? AND session_id = ?.
        created_at and id are never part of the SET clause.

        Returns:
            True if a row was updated, False if absent or not owned
        """
        with self.store_errors():
            count = self._owned(session_id, meal_id).update(
                {
                    Meal.name: name,
                    Meal.description: description,
                    Meal.in_diet: in_diet,
                },
                synchronize_session="evaluate",
            )
            self.db.commit()
        return count > 0

    def delete_for_session(self, session_id: str, meal_id: UUID) -> bool:
        """Delete an owned meal with a single scoped DELETE"""
        with self.store_errors():
            count = self._owned(session_id, meal_id).delete(synchronize_session="evaluate")
            self.db.commit()
        return count > 0
