"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and points
the application at an in-memory SQLite database before it is imported.
"""

import os
import sys
from pathlib import Path

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"

import pytest
from typing import Generator
from sqlalchemy.orm import Session

from domain.models import Base, engine, SessionLocal
from repositories import MealRepository


@pytest.fixture(autouse=True)
def reset_database() -> Generator[None, None, None]:
    """Give every test an empty schema"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """
    Create a database session for integration tests.

    Yields:
        Session: SQLAlchemy session bound to the in-memory test database
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def meal_repo(db_session: Session) -> MealRepository:
    return MealRepository(db_session)


@pytest.fixture
def client():
    from test_fixtures import new_client

    return new_client()
