"""Closed taxonomy of domain error kinds.

INVARIANT: ``DomainError`` is a closed union. Adding a kind means adding it
to the alias below and to every ``match`` that ends in ``assert_never``;
the type checker reports each handler that was not updated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class UserNotFound:
    """A user lookup found no user with the requested id."""

    code: ClassVar[str] = "USER_NOT_FOUND"


@dataclass(frozen=True)
class UserAlreadyFollowed:
    """The follow target is already in the follower's ``following``."""

    code: ClassVar[str] = "USER_ALREADY_FOLLOWED"


type DomainError = UserNotFound | UserAlreadyFollowed
