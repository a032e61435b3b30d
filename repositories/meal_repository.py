"""
Meal Repository - Data access layer for the meal ledger.

Every query is scoped to the owning user; a meal id alone never
reaches another user's row.
"""

from typing import Any, List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
from sqlalchemy import and_

from repositories.base import BaseRepository
from domain.models import Meal, utcnow


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def _owned(self, meal_id: UUID, user_id: UUID):
        return self.db.query(Meal).filter(
            and_(Meal.id == meal_id, Meal.user_id == user_id)
        )

    def get_by_user_id(self, user_id: UUID) -> List[Meal]:
        """Get all meals for a user, oldest first"""
        return (
            self.db.query(Meal)
            .filter(Meal.user_id == user_id)
            .order_by(Meal.created_at.asc())
            .all()
        )

    def get_for_user(self, meal_id: UUID, user_id: UUID) -> Optional[Meal]:
        """Get a meal by id if it belongs to the user"""
        return self._owned(meal_id, user_id).first()

    def create_meal(
        self, user_id: UUID, name: str, description: str, is_inside: bool
    ) -> Meal:
        """Create a new meal for a user"""
        meal = Meal(
            user_id=user_id, name=name, description=description, is_inside=is_inside
        )
        return self.create(meal)

    def update_for_user(self, meal_id: UUID, user_id: UUID, **fields: Any) -> int:
        """Overwrite columns on the user's meal. Returns the number of rows changed."""
        fields.setdefault("updated_at", utcnow())
        count = self._owned(meal_id, user_id).update(
            fields, synchronize_session="fetch"
        )
        self.db.commit()
        return count

    def delete_for_user(self, meal_id: UUID, user_id: UUID) -> int:
        """Delete the user's meal. Returns the number of rows removed."""
        count = self._owned(meal_id, user_id).delete(synchronize_session="fetch")
        self.db.commit()
        return count

    def get_inside_flags(self, user_id: UUID) -> List[bool]:
        """In-diet flags of the user's meals in creation order"""
        rows = (
            self.db.query(Meal.is_inside)
            .filter(Meal.user_id == user_id)
            .order_by(Meal.created_at.asc())
            .all()
        )
        return [bool(row.is_inside) for row in rows]
