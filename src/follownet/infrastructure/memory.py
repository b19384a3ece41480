"""Dict-backed ``UserRepository`` for embedding programs and tests."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from uuid import UUID

from follownet.domain.errors import UserNotFound
from follownet.domain.raising import Raise, ensure_not_none
from follownet.domain.repository import UserRepository
from follownet.domain.users import User

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """Stores users in a dict keyed by id. Not thread-safe."""

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: dict[UUID, User] = {}
        for user in users:
            self._users[user.id] = user

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._users

    def find(self, errors: Raise[UserNotFound], user_id: UUID) -> User:
        return ensure_not_none(errors, self._users.get(user_id), UserNotFound)

    def save(self, user: User) -> None:
        replaced = user.id in self._users
        self._users[user.id] = user
        logger.debug("Saved user %s (replaced=%s)", user.id, replaced)
