"""
User-related database models.
"""

from sqlalchemy import Column, DateTime, String, Text, Uuid
from sqlalchemy.orm import relationship
import uuid

from domain.models.database import Base, utcnow


class User(Base):
    """User account model"""

    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    session_id = Column(String(36), unique=True, nullable=True)
    name = Column(Text, nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash
    created_at = Column(DateTime, nullable=False, default=utcnow)

    # Relationships
    meals = relationship(
        "Meal",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="Meal.created_at",
    )
