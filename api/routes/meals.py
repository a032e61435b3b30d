"""Meal ledger routes. Every route requires a session cookie."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from uuid import UUID
from typing import List

from api.dependencies import get_current_user, get_db_session
from domain.models import User
from domain.schemas.meal_schemas import (
    MealCreate,
    MealMetricsResponse,
    MealResponse,
    MealUpdate,
)
from services.meal_service import MealService

router = APIRouter(prefix="/meals", tags=["Meals"])


@router.get("", response_model=List[MealResponse])
def get_meals(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db_session),
):
    """List the caller's meals, oldest first."""
    meals = MealService.get_meals(db, current_user)
    return [MealResponse.model_validate(m) for m in meals]


# Declared before /{meal_id} so "metrics" is not parsed as an id
@router.get("/metrics", response_model=MealMetricsResponse)
def get_metrics(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db_session),
):
    """Totals in and out of the diet plus the best in-diet streak."""
    metrics = MealService.get_metrics(db, current_user)
    return MealMetricsResponse(
        total=metrics.total,
        total_inside=metrics.total_inside,
        total_outside=metrics.total_outside,
        best_sequence=metrics.best_sequence,
    )


@router.get("/{meal_id}", response_model=MealResponse)
def get_meal(
    meal_id: UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db_session),
):
    """
    Get one of the caller's meals.

    An unknown id (or another user's meal) answers 200 with an empty body.
    """
    meal = MealService.get_meal(db, current_user, meal_id)
    if meal is None:
        return Response(status_code=status.HTTP_200_OK)
    return MealResponse.model_validate(meal)


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_meal(
    meal: MealCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db_session),
):
    """Log a meal for the caller."""
    MealService.create_meal(db, current_user, meal)
    return Response(status_code=status.HTTP_201_CREATED)


@router.put("/{meal_id}", response_class=Response)
def update_meal(
    meal_id: UUID,
    meal: MealUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db_session),
):
    """Replace a meal's fields. Unknown ids are a silent no-op."""
    MealService.update_meal(db, current_user, meal_id, meal)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{meal_id}", response_class=Response)
def delete_meal(
    meal_id: UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db_session),
):
    """Delete a meal. Unknown ids are a silent no-op."""
    MealService.delete_meal(db, current_user, meal_id)
    return Response(status_code=status.HTTP_200_OK)
