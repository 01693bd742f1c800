"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    DailyDietError,
    ServiceValidationError,
    NotFoundError,
    UnauthorizedError,
    StoreError,
)

__all__ = [
    "settings",
    "DailyDietError",
    "ServiceValidationError",
    "NotFoundError",
    "UnauthorizedError",
    "StoreError",
]
