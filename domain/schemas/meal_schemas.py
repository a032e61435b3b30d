from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator
from datetime import datetime, timezone
from uuid import UUID


class MealCreate(BaseModel):
    """Schema for logging a new meal"""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    is_inside: StrictBool = Field(
        ..., alias="isInside", description="Whether the meal counts toward the diet"
    )


class MealUpdate(MealCreate):
    """Full replacement payload for an existing meal"""

    created_at: datetime = Field(..., alias="createdAt")

    @field_validator("created_at", mode="before")
    @classmethod
    def parse_created_at(cls, v):
        """Accept ISO-8601 strings only; aware values are stored as naive UTC."""
        if not isinstance(v, str):
            raise ValueError("Invalid ISO datetime format")
        try:
            parsed = datetime.fromisoformat(v.strip())
        except ValueError:
            raise ValueError("Invalid ISO datetime format")
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        return parsed


class MealResponse(BaseModel):
    """Schema for meal responses"""

    id: UUID
    user_id: UUID
    name: str
    description: str
    is_inside: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class MealMetricsResponse(BaseModel):
    """Per-user meal counters and best in-diet streak"""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    total: int = Field(..., ge=0)
    total_inside: int = Field(..., ge=0, alias="totalInside")
    total_outside: int = Field(..., ge=0, alias="totalOutside")
    best_sequence: int = Field(..., ge=0, alias="bestSequence")
