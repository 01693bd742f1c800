"""
API dependencies for dependency injection
"""

from typing import Generator, Optional
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import UnauthorizedError
from domain.models import get_db_session
from repositories import MealRepository
from services.session_service import SessionService, SessionIdentity


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_meal_repository(db: Session = Depends(get_db)) -> MealRepository:
    return MealRepository(db)


def _presented_token(request: Request) -> Optional[str]:
    return request.cookies.get(settings.session_cookie_name)


def resolve_session(request: Request) -> SessionIdentity:
    """Resolve the caller's session, minting a new token if the cookie is absent"""
    return SessionService.resolve(_presented_token(request))


def require_session(request: Request) -> SessionIdentity:
    """Resolve the caller's session; reject requests without a session cookie"""
    token = _presented_token(request)
    if not token:
        raise UnauthorizedError(code="UNAUTHORIZED")
    return SessionService.resolve(token)
