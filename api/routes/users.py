"""User directory and session routes"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from uuid import UUID
from typing import List

from api.dependencies import get_current_user, get_db_session, get_settings
from app.config import Settings
from domain.models import User
from domain.schemas.user_schemas import UserCreate, UserLogin, UserResponse
from services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=List[UserResponse])
def get_all_users(db: Session = Depends(get_db_session)):
    """Return all users."""
    users = UserService.get_all_users(db)
    return [UserResponse.model_validate(u) for u in users]


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: UUID, db: Session = Depends(get_db_session)):
    """Get a single user by id."""
    return UserResponse.model_validate(UserService.get_user(db, user_id))


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_user(
    user: UserCreate,
    db: Session = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
):
    """Register a new user. Responds 201 with an empty body."""
    UserService.register(db, user, rounds=settings.bcrypt_rounds)
    return Response(status_code=status.HTTP_201_CREATED)


@router.post("/login", response_class=Response)
def login(
    credentials: UserLogin,
    db: Session = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
):
    """Check email and password and start a cookie session."""
    session_id = UserService.login(db, credentials.email, credentials.password)

    response = Response(status_code=status.HTTP_200_OK)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session_id,
        max_age=settings.session_cookie_max_age,
        path=settings.session_cookie_path,
        domain=settings.session_cookie_domain,
    )
    return response


@router.post("/logout", response_class=Response)
def logout(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
):
    """End the current session and clear the cookie."""
    UserService.logout(db, current_user)

    response = Response(status_code=status.HTTP_200_OK)
    response.delete_cookie(
        key=settings.session_cookie_name,
        path=settings.session_cookie_path,
        domain=settings.session_cookie_domain,
    )
    return response
