"""
User Repository - Data access layer for user-related operations
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import User
from app.exceptions import ConflictError


class UserRepository(BaseRepository[User]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        return self.db.query(User).filter(User.email == email).first()

    def get_by_session_id(self, session_id: str) -> Optional[User]:
        """Get the user currently holding a session token"""
        return self.db.query(User).filter(User.session_id == session_id).first()

    def create_user(self, name: str, email: str, password_hash: str) -> User:
        """Create a new user"""
        user = User(name=name, email=email, password=password_hash)
        try:
            return self.create(user)
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("Email already in use.")

    def set_session_id(self, user: User, session_id: Optional[str]) -> User:
        """Store (or clear, with None) the user's session token"""
        user.session_id = session_id
        return self.update(user)
