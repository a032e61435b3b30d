"""
API dependencies for dependency injection
"""

from typing import Generator
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.config import Settings
from app.exceptions import UnauthorizedError
from domain.models import User
from services.user_service import UserService


def get_settings(request: Request) -> Settings:
    """Settings the running app was built with"""
    return request.app.state.settings


def get_db_session(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db_session)):
            # Use db session here
            pass
    """
    yield from request.app.state.database.get_db_session()


def get_current_user(
    request: Request,
    db: Session = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> User:
    """
    Resolve the session cookie to a user.

    Raises UnauthorizedError (401) when the cookie is missing and
    NotFoundError (404) when no user holds the token.
    """
    session_id = request.cookies.get(settings.session_cookie_name)
    if not session_id:
        raise UnauthorizedError("Unauthorized")
    return UserService.resolve_session(db, session_id)
