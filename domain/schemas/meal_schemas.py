from pydantic import BaseModel, Field, StrictBool
from typing import List
from datetime import datetime
from uuid import UUID


class MealCreate(BaseModel):
    """Schema for registering a new meal"""

    name: str = Field(..., min_length=1, description="Meal name")
    description: str = Field(..., description="Free text description, may be empty")
    in_diet: StrictBool = Field(..., description="Whether the meal is within the diet")
    date: str = Field(..., description="Calendar date, YYYY-MM-DD", examples=["2025-11-13"])
    time: str = Field(..., description="Time of day, HH:MM", examples=["06:00"])


class MealUpdate(BaseModel):
    """Schema for updating a meal; the timestamp cannot be changed"""

    name: str = Field(..., min_length=1, description="Meal name")
    description: str = Field(..., description="Free text description, may be empty")
    in_diet: StrictBool = Field(..., description="Whether the meal is within the diet")


class MealResponse(BaseModel):
    """Schema for meal response"""

    id: UUID
    name: str
    description: str
    in_diet: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class MealListResponse(BaseModel):
    meals: List[MealResponse]


class MealDetailResponse(BaseModel):
    meal: MealResponse


class MealSummaryResponse(BaseModel):
    """Aggregate counts and best in-diet streak for the session's meals"""

    total_meals: int = Field(..., serialization_alias="totalMeals")
    meals_in_diet: int = Field(..., serialization_alias="mealsInDiet")
    meals_out_diet: int = Field(..., serialization_alias="mealsOutDiet")
    best_sequence: int = Field(..., serialization_alias="bestSequence")

    model_config = {"from_attributes": True}
