"""Meal routes, scoped to the caller's session cookie"""

from fastapi import APIRouter, Depends, Response, status
import logging
from uuid import UUID

from api.dependencies import get_meal_repository, resolve_session, require_session
from app.config import settings
from app.exceptions import NotFoundError
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealResponse,
    MealListResponse,
    MealDetailResponse,
    MealSummaryResponse,
)
from repositories import MealRepository
from services.meal_service import MealService
from services.session_service import SessionIdentity
from services.summary_service import SummaryService

router = APIRouter(prefix="/meals", tags=["Meals"])
logger = logging.getLogger("dailydiet.api.meals")


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_meal(
    payload: MealCreate,
    session: SessionIdentity = Depends(resolve_session),
    repo: MealRepository = Depends(get_meal_repository),
):
    """
    Register a meal for the caller's session.

    The first request without a session cookie mints a token and sets it as
    a cookie valid for seven days.
    """
    meal_id = MealService.create_meal(
        repo,
        session.token,
        name=payload.name,
        description=payload.description,
        in_diet=payload.in_diet,
        date=payload.date,
        time=payload.time,
    )
    logger.info(f"meal_created meal_id={meal_id} new_session={session.is_new}")

    response = Response(status_code=status.HTTP_201_CREATED)
    if session.is_new:
        response.set_cookie(
            key=settings.session_cookie_name,
            value=session.token,
            max_age=settings.session_cookie_max_age,
            path=settings.session_cookie_path,
        )
    return response


@router.get("", response_model=MealListResponse)
def list_meals(
    session: SessionIdentity = Depends(require_session),
    repo: MealRepository = Depends(get_meal_repository),
):
    """List all meals of the caller's session"""
    meals = MealService.list_meals(repo, session.token)
    return MealListResponse(meals=[MealResponse.model_validate(m) for m in meals])


# Declared before /{meal_id} so "summary" is not parsed as an id
@router.get("/summary", response_model=MealSummaryResponse)
def get_summary(
    session: SessionIdentity = Depends(require_session),
    repo: MealRepository = Depends(get_meal_repository),
):
    """Totals and best in-diet sequence for the caller's meals"""
    summary = SummaryService.summarize(repo, session.token)
    return MealSummaryResponse.model_validate(summary)


@router.get("/{meal_id}", response_model=MealDetailResponse)
def get_meal(
    meal_id: UUID,
    session: SessionIdentity = Depends(require_session),
    repo: MealRepository = Depends(get_meal_repository),
):
    meal = MealService.get_meal(repo, session.token, meal_id)
    if meal is None:
        raise NotFoundError()
    return MealDetailResponse(meal=MealResponse.model_validate(meal))


@router.put("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def update_meal(
    meal_id: UUID,
    payload: MealUpdate,
    session: SessionIdentity = Depends(require_session),
    repo: MealRepository = Depends(get_meal_repository),
):
    """Update name, description and in_diet; the meal timestamp is kept"""
    updated = MealService.update_meal(
        repo,
        session.token,
        meal_id,
        name=payload.name,
        description=payload.description,
        in_diet=payload.in_diet,
    )
    if not updated:
        raise NotFoundError()
    logger.info(f"meal_updated meal_id={meal_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_meal(
    meal_id: UUID,
    session: SessionIdentity = Depends(require_session),
    repo: MealRepository = Depends(get_meal_repository),
):
    if not MealService.delete_meal(repo, session.token, meal_id):
        raise NotFoundError()
    logger.info(f"meal_deleted meal_id={meal_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
