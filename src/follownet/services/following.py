"""FollowService — the follow use-cases and their failure contracts.

Each public method shows one way of handling domain errors:

- ``find_user``: raises UserNotFound.
- ``follow``: raises UserNotFound and UserAlreadyFollowed.
- ``say_hello_to``: total, recovers UserNotFound.
- ``follow_with_full_error_recovering``: total, recovers both kinds.
- ``follow_with_partial_error_recovering``: recovers UserAlreadyFollowed,
  raises UserNotFound.

Lookups always run follower first, then followed. The first failure
aborts the use-case; ``save`` only runs after a successful follow.
"""

from __future__ import annotations

from typing import assert_never
from uuid import UUID

import structlog

from follownet.domain.errors import DomainError, UserAlreadyFollowed, UserNotFound
from follownet.domain.raising import Raise, recover
from follownet.domain.users import User
from follownet.services.base import BaseService

log = structlog.get_logger(__name__)

USER_NOT_FOUND_MESSAGE = "Sorry, user does not exists"
ALREADY_FOLLOWED_MESSAGE = "User already followed"


class FollowService(BaseService):
    """Finds users, follows them, and reports the outcome."""

    # ------------------------------------------------------------------
    # Propagation
    # ------------------------------------------------------------------

    def find_user(self, errors: Raise[UserNotFound], user_id: UUID) -> User:
        """Look up a user, propagating ``UserNotFound`` unchanged."""
        return self._users.find(errors, user_id)

    def follow(
        self,
        errors: Raise[UserNotFound | UserAlreadyFollowed],
        follower_id: UUID,
        followed_id: UUID,
    ) -> User:
        """Return the follower updated to follow *followed_id*. Does not save."""
        follower = self._users.find(errors, follower_id)
        followed = self._users.find(errors, followed_id)
        return follower.follow(errors, followed)

    # ------------------------------------------------------------------
    # Recovery
    # ------------------------------------------------------------------

    def say_hello_to(self, user_id: UUID) -> str:
        def greet(errors: Raise[UserNotFound]) -> str:
            user = self._users.find(errors, user_id)
            return f"Hi {user.name}!"

        def handle(error: UserNotFound) -> str:
            log.info("hello.recovered", error=error.code, user_id=str(user_id))
            return USER_NOT_FOUND_MESSAGE

        return recover(greet, handle)

    def follow_with_full_error_recovering(self, follower_id: UUID, followed_id: UUID) -> str:
        """Follow and save, turning every domain error into a message."""

        def handle(error: DomainError) -> str:
            log.info("follow.recovered", error=error.code, follower_id=str(follower_id))
            match error:
                case UserAlreadyFollowed():
                    return ALREADY_FOLLOWED_MESSAGE
                case UserNotFound():
                    return USER_NOT_FOUND_MESSAGE
                case _:
                    assert_never(error)

        return recover(
            lambda scope: self._follow_and_save(scope, follower_id, followed_id),
            handle,
        )

    def follow_with_partial_error_recovering(
        self,
        errors: Raise[UserNotFound],
        follower_id: UUID,
        followed_id: UUID,
    ) -> str:
        """Follow and save; recover ``UserAlreadyFollowed``, re-raise ``UserNotFound``."""

        def handle(error: DomainError) -> str:
            match error:
                case UserAlreadyFollowed():
                    log.info("follow.recovered", error=error.code, follower_id=str(follower_id))
                    return ALREADY_FOLLOWED_MESSAGE
                case UserNotFound():
                    log.debug("follow.propagated", error=error.code, follower_id=str(follower_id))
                    errors.raise_(error)
                case _:
                    assert_never(error)

        return recover(
            lambda scope: self._follow_and_save(scope, follower_id, followed_id),
            handle,
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _follow_and_save(
        self,
        errors: Raise[UserNotFound | UserAlreadyFollowed],
        follower_id: UUID,
        followed_id: UUID,
    ) -> str:
        follower = self._users.find(errors, follower_id)
        followed = self._users.find(errors, followed_id)
        updated = follower.follow(errors, followed)
        self._users.save(updated)
        log.debug("follow.saved", follower_id=str(follower.id), followed_id=str(followed.id))
        return f"{follower.name} follows {followed.name}!"
