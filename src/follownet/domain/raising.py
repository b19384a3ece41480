"""Raise capability and the either / recover / fold runners.

A fallible operation takes a ``Raise[E]`` handle as its first argument.
``E`` is the exact set of error kinds the operation may signal, so the
failure contract is part of the signature::

    def find(self, errors: Raise[UserNotFound], user_id: UUID) -> User: ...

``Raise`` is contravariant in ``E``: a handle for
``UserNotFound | UserAlreadyFollowed`` can be passed wherever a handle for
``UserNotFound`` is expected, never the other way round. A type checker
therefore rejects composing an operation into a context that does not
declare every kind the operation can raise.

Raising aborts the computation and carries the error value to the runner
that created the handle (``either``, ``recover``, ``fold``).

INVARIANT: a runner only intercepts raises aimed at its own handle. Raises
aimed at an enclosing handle, and every ordinary exception, pass through
unchanged.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import NoReturn, cast


class RaiseLeakedError(RuntimeError):
    """A ``Raise`` handle was used after the runner that owns it returned."""


class _Raised(BaseException):
    """Control-flow signal carrying a raised error to its owning runner.

    Not an ``Exception`` subclass: ``except Exception`` never intercepts it.
    """

    def __init__(self, scope: Raise[object], error: object) -> None:
        super().__init__(error)
        self.scope = scope
        self.error = error


@dataclass(frozen=True)
class Ok[A]:
    """Successful outcome of a fallible block."""

    value: A


@dataclass(frozen=True)
class Err[E]:
    """Failed outcome of a fallible block."""

    error: E


type Outcome[A, E] = Ok[A] | Err[E]


class Raise[E]:
    """Capability to raise errors of kind ``E`` into one runner scope."""

    __slots__ = ("_active",)

    def __init__(self) -> None:
        self._active = True

    def __repr__(self) -> str:
        state = "active" if self._active else "closed"
        return f"<Raise {state} at {id(self):#x}>"

    @property
    def active(self) -> bool:
        return self._active

    def raise_(self, error: E) -> NoReturn:
        """Abort the current computation with *error*."""
        if not self._active:
            msg = f"Raise handle used outside its scope (error: {error!r})"
            raise RaiseLeakedError(msg)
        raise _Raised(cast("Raise[object]", self), error)

    def bind[A](self, outcome: Outcome[A, E]) -> A:
        """Unwrap an ``Ok``, or raise the error of an ``Err`` into this scope."""
        match outcome:
            case Ok(value):
                return value
            case Err(error):
                self.raise_(error)

    def _close(self) -> None:
        self._active = False


def ensure[E](errors: Raise[E], condition: bool, error: Callable[[], E]) -> None:
    """Raise ``error()`` unless *condition* holds."""
    if not condition:
        errors.raise_(error())


def ensure_not_none[A, E](
    errors: Raise[E],
    value: A | None,
    error: Callable[[], E],
) -> A:
    """Return *value*, or raise ``error()`` when it is None."""
    if value is None:
        errors.raise_(error())
    return value


def either[A, E](block: Callable[[Raise[E]], A]) -> Outcome[A, E]:
    """Run *block* in a fresh scope and capture how it finished.

    Returns ``Ok(value)`` when the block completes, ``Err(error)`` when it
    raises through the handle it was given.
    """
    scope: Raise[E] = Raise()
    try:
        value = block(scope)
    except _Raised as raised:
        if raised.scope is not scope:
            raise
        return Err(cast("E", raised.error))
    finally:
        scope._close()
    return Ok(value)


def fold[A, B, E](
    block: Callable[[Raise[E]], A],
    on_error: Callable[[E], B],
    on_success: Callable[[A], B],
) -> B:
    """Run *block*, then map its error or its value into a single result.

    The block's scope is closed before either callback runs, so a callback
    can only raise through a handle of an enclosing scope.
    """
    match either(block):
        case Ok(value):
            return on_success(value)
        case Err(error):
            return on_error(error)


def recover[A, E](block: Callable[[Raise[E]], A], handler: Callable[[E], A]) -> A:
    """Run *block*; if it raises, return ``handler(error)`` instead.

    The handler must cover every kind in ``E``. A kind it does not convert
    to a value must be re-raised through an enclosing scope's handle, which
    requires that scope to declare the kind::

        def partial(errors: Raise[UserNotFound]) -> str:
            def handle(error: UserNotFound | UserAlreadyFollowed) -> str:
                match error:
                    case UserAlreadyFollowed():
                        return "User already followed"
                    case UserNotFound():
                        errors.raise_(error)

            return recover(block, handle)
    """
    return fold(block, handler, _identity)


def _identity[A](value: A) -> A:
    return value
