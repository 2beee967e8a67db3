"""Schemas for meal logging requests and responses"""

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime, timezone
from uuid import UUID

# camelCase on the wire, snake_case in Python
CAMEL_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
    "from_attributes": True,
}


def to_naive_utc(value: datetime) -> datetime:
    """Store meal times as naive UTC so they read back unchanged."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class MealCreate(BaseModel):
    """Schema for logging a new meal"""

    name: str = Field(..., description="Meal name")
    description: Optional[str] = Field(None, description="Free-form description")
    time_meal: datetime = Field(..., description="When the meal was eaten")
    diet: bool = Field(..., description="True when the meal is within the diet")

    model_config = CAMEL_CONFIG

    @field_validator("time_meal")
    @classmethod
    def normalize_time_meal(cls, v: datetime) -> datetime:
        return to_naive_utc(v)


class MealUpdate(BaseModel):
    """Partial meal update; only fields present in the body are written"""

    name: Optional[str] = None
    description: Optional[str] = None
    time_meal: Optional[datetime] = None
    diet: Optional[bool] = None

    model_config = CAMEL_CONFIG

    @field_validator("name", "time_meal", "diet")
    @classmethod
    def reject_explicit_null(cls, v, info):
        # Validators only run for supplied values, so None here was sent as null
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    @field_validator("time_meal")
    @classmethod
    def normalize_time_meal(cls, v: datetime) -> datetime:
        return to_naive_utc(v)

    def changes(self) -> dict:
        """Column values explicitly supplied by the caller"""
        return self.model_dump(exclude_unset=True)


class MealResponse(BaseModel):
    """A single meal as returned to its owner"""

    id: UUID
    name: str
    description: Optional[str] = None
    time_meal: datetime
    diet: bool
    created_at: Optional[datetime] = None

    model_config = CAMEL_CONFIG


class MealListResponse(BaseModel):
    meals: List[MealResponse]


class MealDetailResponse(BaseModel):
    """Lookup result; ``meal`` is null when absent or owned by another session"""

    meal: Optional[MealResponse] = None


class MealSummary(BaseModel):
    """Aggregate diet statistics for one session"""

    total_meals: int = Field(..., ge=0)
    total_meals_on_diet: int = Field(..., ge=0)
    total_meals_off_diet: int = Field(..., ge=0)
    best_sequence: int = Field(
        ..., ge=0, description="Longest run of consecutive on-diet meals"
    )

    model_config = CAMEL_CONFIG
