"""Option: a value that may be absent.

An ``Option`` is either ``Present(value)`` or ``Absent``. Instances are built
with :func:`present`, :func:`from_nullable` or the :data:`ABSENT` constant and
never change afterwards; every combinator returns a new container or a plain
value.

Example:
    match find_user(user_id).map(lambda u: u.email):
        case Present(email):
            send(email)
        case Absent():
            log.info("no such user")
"""

from __future__ import annotations

import dataclasses
import logging
import typing
from typing import TYPE_CHECKING, Any, Final

from unwrap_or._display import display
from unwrap_or._seal import SEAL, check_seal
from unwrap_or.errors import ExpectFailedError, UnwrapOnAbsentError
from unwrap_or.result import Failure, Success

if TYPE_CHECKING:
    from collections.abc import Callable

    from unwrap_or.result import Result

logger = logging.getLogger(__name__)

T = typing.TypeVar("T")


@dataclasses.dataclass(frozen=True, slots=True, init=False, repr=False)
class Present[T]:
    """An Option holding exactly one value.

    Example:
        present(2).map(lambda n: n * 10)  # Present(20)
    """

    value: T

    __match_args__ = ("value",)

    def __init__(self, value: T, *, _seal: object = None) -> None:
        check_seal("Present", _seal)
        object.__setattr__(self, "value", value)

    def __repr__(self) -> str:
        return f"Present({self.value!r})"

    def __str__(self) -> str:
        return f"Present({display(self.value)})"

    def is_some(self) -> bool:
        """Return True; this Option holds a value."""
        return True

    def is_none(self) -> bool:
        """Return False; this Option holds a value."""
        return False

    def is_some_and(self, predicate: Callable[[T], object]) -> bool:
        """Return whether the held value satisfies *predicate*."""
        return bool(predicate(self.value))

    def is_none_or(self, predicate: Callable[[T], object]) -> bool:
        """Return whether the held value satisfies *predicate*."""
        return bool(predicate(self.value))

    def and_[U](self, other: Option[U]) -> Option[U]:
        """Return *other* unchanged, whichever variant it is."""
        return other

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Call *f* with the held value and return its Option."""
        return f(self.value)

    def or_(self, other: Option[T]) -> Present[T]:  # noqa: ARG002
        """Return a copy of this Option; *other* is ignored."""
        return Present(self.value, _seal=SEAL)

    def or_else(self, f: Callable[[], Option[T]]) -> Present[T]:  # noqa: ARG002
        """Return a copy of this Option without calling *f*."""
        return Present(self.value, _seal=SEAL)

    def xor(self, other: Option[T]) -> Option[T]:
        """Return this value if *other* is Absent, otherwise Absent."""
        if other.is_none():
            return Present(self.value, _seal=SEAL)
        return ABSENT

    def filter(self, predicate: Callable[[T], object]) -> Option[T]:
        """Keep the value only if *predicate* accepts it."""
        if predicate(self.value):
            return Present(self.value, _seal=SEAL)
        return ABSENT

    def flatten[U](self: Present[Option[U]]) -> Option[U]:
        """Remove one level of nesting from ``Present(Option)``.

        Raises:
            TypeError: The held value is not itself an Option.
        """
        inner = self.value
        if not isinstance(inner, (Present, Absent)):
            raise TypeError(
                f"flatten() requires Present(Option), got Present({type(inner).__name__})"
            )
        return inner

    def map[U](self, f: Callable[[T], U]) -> Present[U]:
        """Apply *f* to the held value."""
        return Present(f(self.value), _seal=SEAL)

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return ``f(value)``; *default* is only used for Absent."""
        return f(self.value)

    def map_or_else[U](
        self,
        default_f: Callable[[], U],  # noqa: ARG002
        f: Callable[[T], U],
    ) -> U:
        """Return ``f(value)`` without calling *default_f*."""
        return f(self.value)

    def inspect(self, f: Callable[[T], object]) -> Present[T]:
        """Call *f* with the held value for its side effect and return self."""
        f(self.value)
        return self

    def ok_or[E](self, err: E) -> Result[T, E]:  # noqa: ARG002
        """Convert to ``Success(value)``."""
        return Success(self.value, _seal=SEAL)

    def unwrap(self) -> T:
        """Return the held value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the held value; *default* is only used for Absent."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the held value without calling *f*."""
        return self.value

    def expect(self, msg: str) -> T:  # noqa: ARG002
        """Return the held value; *msg* is only used for Absent."""
        return self.value


@dataclasses.dataclass(frozen=True, slots=True, init=False, repr=False)
class Absent:
    """An Option holding nothing.

    Use the :data:`ABSENT` constant. All ``Absent`` instances are equal.
    """

    __match_args__ = ()

    def __init__(self, *, _seal: object = None) -> None:
        check_seal("Absent", _seal)

    def __repr__(self) -> str:
        return "Absent"

    __str__ = __repr__

    def is_some(self) -> bool:
        """Return False; nothing is held."""
        return False

    def is_none(self) -> bool:
        """Return True; nothing is held."""
        return True

    def is_some_and(self, predicate: Callable[[Any], object]) -> bool:  # noqa: ARG002
        """Return False without calling *predicate*."""
        return False

    def is_none_or(self, predicate: Callable[[Any], object]) -> bool:  # noqa: ARG002
        """Return True without calling *predicate*."""
        return True

    def and_(self, other: Option[Any]) -> Absent:  # noqa: ARG002
        return ABSENT

    def and_then(self, f: Callable[[Any], Option[Any]]) -> Absent:  # noqa: ARG002
        return ABSENT

    def or_[T](self, other: Option[T]) -> Option[T]:
        return other

    def or_else[T](self, f: Callable[[], Option[T]]) -> Option[T]:
        return f()

    def xor[T](self, other: Option[T]) -> Option[T]:
        if other.is_some():
            return other
        return ABSENT

    def filter(self, predicate: Callable[[Any], object]) -> Absent:  # noqa: ARG002
        return ABSENT

    def flatten(self) -> Absent:
        return ABSENT

    def map(self, f: Callable[[Any], Any]) -> Absent:  # noqa: ARG002
        return ABSENT

    def map_or[U](self, default: U, f: Callable[[Any], U]) -> U:  # noqa: ARG002
        return default

    def map_or_else[U](
        self,
        default_f: Callable[[], U],
        f: Callable[[Any], U],  # noqa: ARG002
    ) -> U:
        return default_f()

    def inspect(self, f: Callable[[Any], object]) -> Absent:  # noqa: ARG002
        return self

    def ok_or[E](self, err: E) -> Result[Any, E]:
        """Convert to ``Failure(err)``."""
        return Failure(err, _seal=SEAL)

    def unwrap(self) -> typing.NoReturn:
        """Raise ``UnwrapOnAbsentError``; there is no value to return."""
        logger.debug("unwrap() called on Absent")
        raise UnwrapOnAbsentError

    def unwrap_or[T](self, default: T) -> T:
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        return f()

    def expect(self, msg: str) -> typing.NoReturn:
        """Raise ``ExpectFailedError`` carrying *msg* verbatim."""
        logger.debug("expect() called on Absent: %s", msg)
        raise ExpectFailedError(msg)


ABSENT: Final[Absent] = Absent(_seal=SEAL)
"""The canonical empty Option."""

Option = Present[T] | Absent


def present[T](value: T) -> Present[T]:
    """Wrap *value* in a ``Present`` Option."""
    return Present(value, _seal=SEAL)


def from_nullable[T](value: T | None) -> Option[T]:
    """Return ``ABSENT`` for None and ``present(value)`` for anything else."""
    if value is None:
        return ABSENT
    return Present(value, _seal=SEAL)
