"""
Tests for the repository classes.

This test suite validates the data access layer with direct repository testing:
- UserRepository: create, lookups by email and session token, session updates
- MealRepository: owner-scoped get/update/delete, ordering, in-diet flags

All tests use real database sessions (via the db_session fixture) to ensure:
- Actual SQL operations work correctly
- Constraints are enforced
"""

import uuid
from datetime import datetime

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import ConflictError
from domain.models import Meal
from repositories import MealRepository, UserRepository
from test_fixtures import unique_email


def make_user(db_session: Session, name: str = "Sarah Martinez"):
    return UserRepository(db_session).create_user(
        name=name, email=unique_email("repo"), password_hash="not-a-real-hash"
    )


# =============================================================================
# USER REPOSITORY TESTS
# =============================================================================


def test_user_repository_create_and_get(db_session: Session):
    """
    Verifies:
    - create_user() returns a user with a UUID and creation timestamp
    - get_by_id() and get_by_email() find it
    - Lookups for unknown keys return None
    """
    repo = UserRepository(db_session)
    user = make_user(db_session)

    assert isinstance(user.id, uuid.UUID)
    assert user.created_at is not None
    assert user.session_id is None

    assert repo.get_by_id(user.id).email == user.email
    assert repo.get_by_email(user.email).id == user.id
    assert repo.get_by_id(uuid.uuid4()) is None
    assert repo.get_by_email(unique_email("nobody")) is None


def test_user_repository_duplicate_email(db_session: Session):
    """
    Verifies:
    - A second user with the same email raises ConflictError
    - The session is usable after the rollback
    """
    repo = UserRepository(db_session)
    email = unique_email("duplicate")
    repo.create_user(name="User One", email=email, password_hash="x")

    with pytest.raises(ConflictError):
        repo.create_user(name="User Two", email=email, password_hash="y")

    assert len(repo.get_all()) == 1


def test_user_repository_session_id(db_session: Session):
    """
    Verifies:
    - set_session_id() stores and clears the token
    - get_by_session_id() resolves only live tokens
    """
    repo = UserRepository(db_session)
    user = make_user(db_session)
    token = str(uuid.uuid4())

    repo.set_session_id(user, token)
    assert repo.get_by_session_id(token).id == user.id

    repo.set_session_id(user, None)
    assert repo.get_by_session_id(token) is None


def test_user_repository_get_all_in_creation_order(db_session: Session):
    first = make_user(db_session, "Sarah Martinez")
    second = make_user(db_session, "Michael Chen")

    users = UserRepository(db_session).get_all()
    assert [u.id for u in users] == [first.id, second.id]


# =============================================================================
# MEAL REPOSITORY TESTS
# =============================================================================


def test_meal_repository_create_and_scope(db_session: Session):
    """
    Verifies:
    - create_meal() stores the owner and timestamps
    - get_for_user() only finds meals owned by the given user
    """
    repo = MealRepository(db_session)
    owner = make_user(db_session)
    other = make_user(db_session, "Michael Chen")

    meal = repo.create_meal(owner.id, "Lunch", "Chicken and rice", True)
    assert isinstance(meal.id, uuid.UUID)
    assert meal.user_id == owner.id
    assert meal.created_at is not None and meal.updated_at is not None

    assert repo.get_for_user(meal.id, owner.id).id == meal.id
    assert repo.get_for_user(meal.id, other.id) is None
    assert repo.get_by_user_id(other.id) == []


def test_meal_repository_update_for_user(db_session: Session):
    """
    Verifies:
    - update_for_user() rewrites the owner's row and bumps updated_at
    - Another user's update touches zero rows
    """
    repo = MealRepository(db_session)
    owner = make_user(db_session)
    other = make_user(db_session, "Michael Chen")
    meal = repo.create_meal(owner.id, "Lunch", "Chicken and rice", True)
    original_updated_at = meal.updated_at

    assert repo.update_for_user(meal.id, other.id, name="Hijacked") == 0

    created_at = datetime(2024, 12, 25, 23, 40, 1)
    count = repo.update_for_user(
        meal.id,
        owner.id,
        name="Dinner",
        description="Eggs",
        is_inside=False,
        created_at=created_at,
    )
    assert count == 1

    db_session.expire_all()
    updated = repo.get_for_user(meal.id, owner.id)
    assert updated.name == "Dinner"
    assert updated.is_inside is False
    assert updated.created_at == created_at
    assert updated.updated_at >= original_updated_at


def test_meal_repository_delete_for_user(db_session: Session):
    repo = MealRepository(db_session)
    owner = make_user(db_session)
    other = make_user(db_session, "Michael Chen")
    meal = repo.create_meal(owner.id, "Snack", "Doughnut", False)

    assert repo.delete_for_user(meal.id, other.id) == 0
    assert repo.delete_for_user(meal.id, owner.id) == 1
    assert repo.get_by_user_id(owner.id) == []


def test_meal_repository_inside_flags_in_creation_order(db_session: Session):
    """
    Verifies:
    - get_inside_flags() and get_by_user_id() follow created_at, not insertion
    """
    repo = MealRepository(db_session)
    owner = make_user(db_session)
    late = repo.create_meal(owner.id, "Dinner", "Eggs", False)
    early = repo.create_meal(owner.id, "Breakfast", "Oats", True)

    repo.update_for_user(late.id, owner.id, created_at=datetime(2024, 1, 2, 20, 0))
    repo.update_for_user(early.id, owner.id, created_at=datetime(2024, 1, 2, 8, 0))
    db_session.expire_all()

    assert repo.get_inside_flags(owner.id) == [True, False]
    assert [m.id for m in repo.get_by_user_id(owner.id)] == [early.id, late.id]


def test_meal_requires_existing_user(db_session: Session):
    """
    Verifies:
    - The foreign key rejects meals for unknown users
    """
    meal = Meal(user_id=uuid.uuid4(), name="Orphan", description="None", is_inside=True)
    with pytest.raises(IntegrityError):
        MealRepository(db_session).create(meal)
