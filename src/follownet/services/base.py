"""BaseService — abstract foundation for follownet services.

Every service receives a :class:`UserRepository` at construction time and
reaches storage only through it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from follownet.domain.repository import UserRepository


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class GreetingService(BaseService):
            def greet(self, errors: Raise[UserNotFound], user_id: UUID) -> str:
                return f"Hi {self._users.find(errors, user_id).name}!"
    """

    def __init__(self, users: UserRepository) -> None:
        self._users = users
