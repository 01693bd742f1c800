"""Services package - Business logic layer"""

from services.session_service import SessionService, SessionIdentity
from services.meal_service import MealService, combine_date_time
from services.summary_service import SummaryService, MealSummary, best_in_diet_sequence

__all__ = [
    "SessionService",
    "SessionIdentity",
    "MealService",
    "combine_date_time",
    "SummaryService",
    "MealSummary",
    "best_in_diet_sequence",
]
