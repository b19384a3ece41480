"""UserRepository — the lookup/persist capability the use-cases consume.

Implementations own storage and any concurrency concerns. The contract:

- ``find`` is deterministic for a given stored state and raises
  ``UserNotFound`` through the caller's handle when the id is unknown.
- ``save`` never fails; it replaces any prior value with the same id.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from follownet.domain.errors import UserNotFound
    from follownet.domain.raising import Raise
    from follownet.domain.users import User


class UserRepository(ABC):
    """Abstract user store with a fallible lookup and a total save."""

    @abstractmethod
    def find(self, errors: Raise[UserNotFound], user_id: UUID) -> User:
        """Return the stored user with *user_id*, or raise ``UserNotFound``."""
        ...

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist *user*, replacing any prior value with the same id."""
        ...
