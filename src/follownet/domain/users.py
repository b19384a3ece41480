"""User entity and the follow relationship.

INVARIANT: a ``User`` is immutable. ``follow`` returns a new value, so a
failed follow can never leave a partially-updated user observable.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel

from follownet.domain.errors import UserAlreadyFollowed
from follownet.domain.raising import Raise, ensure


class User(BaseModel):
    """A user and the ordered sequence of users they follow.

    ``following`` holds no duplicate id. The constructor does not check
    this; ``follow`` is the only operation that grows the sequence.
    """

    model_config = {"frozen": True}

    id: UUID
    name: str
    following: tuple[User, ...] = ()

    def is_following(self, other: User) -> bool:
        """Whether *other* (matched by id) is already followed."""
        return any(followed.id == other.id for followed in self.following)

    def follow(self, errors: Raise[UserAlreadyFollowed], other: User) -> User:
        """Return a copy of this user with *other* appended to ``following``.

        Raises ``UserAlreadyFollowed`` if *other* is already followed.
        Following oneself is not special-cased.
        """
        ensure(errors, not self.is_following(other), UserAlreadyFollowed)
        return self.model_copy(update={"following": (*self.following, other)})
