from typing import List
from uuid import UUID, uuid4
from sqlalchemy.orm import Session
import logging

from domain.models import User
from domain.schemas.user_schemas import UserCreate
from repositories import UserRepository
from services.credentials import hash_password, verify_password
from app.exceptions import ConflictError, NotFoundError

logger = logging.getLogger("dailydiet.users")


class UserService:
    """Business logic for the user directory and sessions"""

    @staticmethod
    def get_all_users(db: Session) -> List[User]:
        """Return all users (no pagination)."""
        return UserRepository(db).get_all()

    @staticmethod
    def get_user(db: Session, user_id: UUID) -> User:
        """Return a user by id or raise NotFoundError"""
        user = UserRepository(db).get_by_id(user_id)
        if not user:
            logger.warning(f"user_not_found user_id={user_id}")
            raise NotFoundError("User not found")
        return user

    @staticmethod
    def register(db: Session, data: UserCreate, rounds: int = 12) -> User:
        """Create a user; the email must not be registered yet."""
        user_repo = UserRepository(db)

        if user_repo.get_by_email(data.email):
            logger.info("register_rejected reason=email_in_use")
            raise ConflictError("Email already in use.")

        user = user_repo.create_user(
            name=data.name,
            email=data.email,
            password_hash=hash_password(data.password, rounds=rounds),
        )
        logger.info(f"user_registered user_id={user.id}")
        return user

    @staticmethod
    def login(db: Session, email: str, password: str) -> str:
        """
        Check credentials and start a new session.

        Returns the new session token. An unknown email and a wrong
        password fail the same way.
        """
        user_repo = UserRepository(db)
        user = user_repo.get_by_email(email)

        if user is None or not verify_password(password, user.password):
            logger.warning("login_failed")
            raise NotFoundError("Incorrect email or password.")

        session_id = str(uuid4())
        user_repo.set_session_id(user, session_id)
        logger.info(f"login_succeeded user_id={user.id}")
        return session_id

    @staticmethod
    def resolve_session(db: Session, session_id: str) -> User:
        """Return the user holding the session token or raise NotFoundError"""
        user = UserRepository(db).get_by_session_id(session_id)
        if user is None:
            raise NotFoundError("User not found.")
        return user

    @staticmethod
    def logout(db: Session, user: User) -> None:
        """Clear the user's stored session token"""
        UserRepository(db).set_session_id(user, None)
        logger.info(f"logout user_id={user.id}")
