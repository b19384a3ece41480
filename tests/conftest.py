"""Shared pytest fixtures for follownet tests."""

from __future__ import annotations

from uuid import uuid4

import pytest

from follownet.domain.users import User
from follownet.services.following import FollowService
from tests.doubles import MissingUserRepository, RecordingUserRepository


@pytest.fixture
def john() -> User:
    return User(id=uuid4(), name="John")


@pytest.fixture
def jane() -> User:
    return User(id=uuid4(), name="Jane")


@pytest.fixture
def users() -> RecordingUserRepository:
    """Empty recording repository; tests add the users they need."""
    return RecordingUserRepository()


@pytest.fixture
def service(users: RecordingUserRepository) -> FollowService:
    return FollowService(users)


@pytest.fixture
def missing_users() -> MissingUserRepository:
    return MissingUserRepository()


@pytest.fixture
def missing_service(missing_users: MissingUserRepository) -> FollowService:
    return FollowService(missing_users)
