"""
Tests for MealRepository against a real (in-memory SQLite) session.

Covers:
- create and scoped get
- storage-order listing per session
- scoped update and delete, including cross-session attempts
- translation of SQLAlchemy failures into StoreError
"""

import pytest
import uuid
from datetime import datetime
from unittest.mock import Mock
from sqlalchemy.exc import OperationalError

from repositories import MealRepository
from domain.models import Meal
from app.exceptions import StoreError

BREAKFAST = datetime(2025, 11, 13, 6, 0)


# =============================================================================
# CREATE / GET
# =============================================================================


def test_create_and_get_for_session(meal_repo: MealRepository):
    """
    Verifies:
    - create_meal() assigns a UUID id and stores all fields
    - get_for_session() returns the meal for its owner
    - get_for_session() returns None for another session
    """
    meal = meal_repo.create_meal("session-a", "Comida 1", "Arroz", True, BREAKFAST)

    assert isinstance(meal.id, uuid.UUID)

    fetched = meal_repo.get_for_session("session-a", meal.id)
    assert fetched is not None
    assert fetched.name == "Comida 1"
    assert fetched.description == "Arroz"
    assert fetched.in_diet is True
    assert fetched.created_at == BREAKFAST

    assert meal_repo.get_for_session("session-b", meal.id) is None


def test_get_unknown_id_returns_none(meal_repo: MealRepository):
    assert meal_repo.get_for_session("session-a", uuid.uuid4()) is None


def test_list_for_session_only_returns_owned_meals(meal_repo: MealRepository):
    first = meal_repo.create_meal("session-a", "Comida 1", "", True, BREAKFAST)
    meal_repo.create_meal("session-b", "Outra", "", False, BREAKFAST)
    second = meal_repo.create_meal(
        "session-a", "Comida 2", "", False, datetime(2025, 11, 12, 20, 0)
    )

    meals = meal_repo.list_for_session("session-a")

    # Storage order, not timestamp order
    assert [m.id for m in meals] == [first.id, second.id]
    assert meal_repo.list_for_session("session-c") == []


# =============================================================================
# UPDATE / DELETE
# =============================================================================


def test_update_for_session_keeps_id_and_created_at(meal_repo: MealRepository, db_session):
    meal = meal_repo.create_meal("session-a", "Comida 1", "", True, BREAKFAST)
    meal_id = meal.id

    assert meal_repo.update_for_session(
        "session-a", meal_id, name="Comida 2", description="Pizza", in_diet=False
    )

    db_session.expire_all()
    updated = meal_repo.get_for_session("session-a", meal_id)
    assert updated.id == meal_id
    assert updated.name == "Comida 2"
    assert updated.description == "Pizza"
    assert updated.in_diet is False
    assert updated.created_at == BREAKFAST


def test_update_other_session_is_rejected(meal_repo: MealRepository, db_session):
    meal = meal_repo.create_meal("session-a", "Comida 1", "", True, BREAKFAST)

    assert not meal_repo.update_for_session(
        "session-b", meal.id, name="Hijack", description="", in_diet=False
    )

    db_session.expire_all()
    assert meal_repo.get_for_session("session-a", meal.id).name == "Comida 1"


def test_update_unknown_id_returns_false(meal_repo: MealRepository):
    assert not meal_repo.update_for_session(
        "session-a", uuid.uuid4(), name="x", description="", in_diet=True
    )


def test_delete_for_session(meal_repo: MealRepository):
    meal = meal_repo.create_meal("session-a", "Comida 1", "", True, BREAKFAST)

    assert not meal_repo.delete_for_session("session-b", meal.id)
    assert meal_repo.get_for_session("session-a", meal.id) is not None

    assert meal_repo.delete_for_session("session-a", meal.id)
    assert meal_repo.get_for_session("session-a", meal.id) is None
    assert not meal_repo.delete_for_session("session-a", meal.id)


# =============================================================================
# STORE ERRORS
# =============================================================================


def _broken_session():
    db = Mock()
    db.query.side_effect = OperationalError("SELECT", {}, Exception("database is locked"))
    db.commit.side_effect = OperationalError("COMMIT", {}, Exception("database is locked"))
    return db


def test_store_failures_raise_store_error():
    """
    Verifies:
    - every repository operation surfaces SQLAlchemy errors as StoreError
    - the session is rolled back
    - the error message carries no storage diagnostics
    """
    db = _broken_session()
    repo = MealRepository(db)

    operations = [
        lambda: repo.create_meal("s", "n", "", True, BREAKFAST),
        lambda: repo.get_for_session("s", uuid.uuid4()),
        lambda: repo.list_for_session("s"),
        lambda: repo.update_for_session("s", uuid.uuid4(), "n", "", True),
        lambda: repo.delete_for_session("s", uuid.uuid4()),
    ]
    for operation in operations:
        with pytest.raises(StoreError) as excinfo:
            operation()
        assert "locked" not in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, OperationalError)

    assert db.rollback.call_count == len(operations)


def test_empty_name_violates_check_constraint(meal_repo: MealRepository):
    with pytest.raises(StoreError):
        meal_repo.create_meal("session-a", "", "", True, BREAKFAST)
    # Session is usable again after the rollback
    assert meal_repo.list_for_session("session-a") == []
