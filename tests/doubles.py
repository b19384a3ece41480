"""Test doubles for the ``UserRepository`` capability."""

from __future__ import annotations

from uuid import UUID

from follownet.domain.errors import UserNotFound
from follownet.domain.raising import Raise
from follownet.domain.repository import UserRepository
from follownet.domain.users import User


class RecordingUserRepository(UserRepository):
    """Dict-backed repository that records every find and save."""

    def __init__(self, *users: User) -> None:
        self.users: dict[UUID, User] = {user.id: user for user in users}
        self.find_calls: list[UUID] = []
        self.saved: list[User] = []

    def add(self, user: User) -> None:
        self.users[user.id] = user

    def find(self, errors: Raise[UserNotFound], user_id: UUID) -> User:
        self.find_calls.append(user_id)
        user = self.users.get(user_id)
        if user is None:
            errors.raise_(UserNotFound())
        return user

    def save(self, user: User) -> None:
        self.saved.append(user)
        self.users[user.id] = user


class MissingUserRepository(UserRepository):
    """Repository in which every lookup fails. Saving is a test failure."""

    def __init__(self) -> None:
        self.find_calls: list[UUID] = []

    def find(self, errors: Raise[UserNotFound], user_id: UUID) -> User:
        self.find_calls.append(user_id)
        errors.raise_(UserNotFound())

    def save(self, user: User) -> None:
        raise AssertionError(f"save must not be called on a failure path: {user!r}")

