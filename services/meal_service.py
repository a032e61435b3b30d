from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from domain.models import Meal, User
from domain.schemas.meal_schemas import MealCreate, MealUpdate
from repositories import MealRepository
from services.metrics import MealMetrics, summarize

logger = logging.getLogger("dailydiet.meals")


class MealService:
    """Business logic for the meal ledger. Every call is scoped to `user`."""

    @staticmethod
    def get_meals(db: Session, user: User) -> List[Meal]:
        return MealRepository(db).get_by_user_id(user.id)

    @staticmethod
    def get_meal(db: Session, user: User, meal_id: UUID) -> Optional[Meal]:
        """Return the user's meal, or None when it does not exist or is not theirs"""
        meal = MealRepository(db).get_for_user(meal_id, user.id)
        if meal is None:
            logger.info(f"meal_not_found meal_id={meal_id} user_id={user.id}")
        return meal

    @staticmethod
    def create_meal(db: Session, user: User, data: MealCreate) -> Meal:
        meal = MealRepository(db).create_meal(
            user_id=user.id,
            name=data.name,
            description=data.description,
            is_inside=data.is_inside,
        )
        logger.info(f"meal_created meal_id={meal.id} user_id={user.id}")
        return meal

    @staticmethod
    def update_meal(db: Session, user: User, meal_id: UUID, data: MealUpdate) -> bool:
        """
        Replace name, description, flag and creation time of the user's meal.

        Returns False when no row matched; that is not an error.
        """
        count = MealRepository(db).update_for_user(
            meal_id,
            user.id,
            name=data.name,
            description=data.description,
            is_inside=data.is_inside,
            created_at=data.created_at,
        )
        logger.info(f"meal_updated meal_id={meal_id} user_id={user.id} rows={count}")
        return count > 0

    @staticmethod
    def delete_meal(db: Session, user: User, meal_id: UUID) -> bool:
        """Delete the user's meal. Returns False when no row matched."""
        count = MealRepository(db).delete_for_user(meal_id, user.id)
        logger.info(f"meal_deleted meal_id={meal_id} user_id={user.id} rows={count}")
        return count > 0

    @staticmethod
    def get_metrics(db: Session, user: User) -> MealMetrics:
        """Totals and best in-diet streak over the user's meals in creation order"""
        metrics = summarize(MealRepository(db).get_inside_flags(user.id))
        logger.debug(
            f"meal_metrics user_id={user.id} total={metrics.total} "
            f"best_sequence={metrics.best_sequence}"
        )
        return metrics
