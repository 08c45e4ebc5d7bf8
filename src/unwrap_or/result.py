"""Result: success or failure as a value.

A ``Result`` is either ``Success(value)`` or ``Failure(error)``. The error can
be any object, not only an exception. Build instances with :func:`success`,
:func:`failure` or the :func:`as_result` decorator.

Unlike ``Option``, the fallbacks ``or_else`` and ``unwrap_or_else`` receive the
error value, because a failure always has one to inspect.
"""

from __future__ import annotations

import dataclasses
import functools
import logging
import typing
from typing import TYPE_CHECKING, Any

from unwrap_or._display import display, render_payload
from unwrap_or._seal import SEAL, check_seal
from unwrap_or.errors import (
    ExpectFailedError,
    UnwrapErrOnSuccessError,
    UnwrapOnFailureError,
)

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

T = typing.TypeVar("T")
E = typing.TypeVar("E")


@dataclasses.dataclass(frozen=True, slots=True, init=False, repr=False)
class Success[T]:
    """A successful Result holding a value."""

    value: T

    __match_args__ = ("value",)

    def __init__(self, value: T, *, _seal: object = None) -> None:
        check_seal("Success", _seal)
        object.__setattr__(self, "value", value)

    def __repr__(self) -> str:
        return f"Success({self.value!r})"

    def __str__(self) -> str:
        return f"Success({display(self.value)})"

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def is_ok_and(self, predicate: Callable[[T], object]) -> bool:
        """Return whether the value satisfies *predicate*."""
        return bool(predicate(self.value))

    def is_err_and(self, predicate: Callable[[Any], object]) -> bool:  # noqa: ARG002
        """Return False without calling *predicate*."""
        return False

    def and_[U, E](self, other: Result[U, E]) -> Result[U, E]:
        """Return *other* unchanged."""
        return other

    def and_then[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Call *f* with the value and return its Result."""
        return f(self.value)

    def or_(self, other: Result[T, Any]) -> Success[T]:  # noqa: ARG002
        """Return a copy of this Success; *other* is ignored."""
        return Success(self.value, _seal=SEAL)

    def or_else(self, f: Callable[[Any], Result[T, Any]]) -> Success[T]:  # noqa: ARG002
        """Return a copy of this Success without calling *f*."""
        return Success(self.value, _seal=SEAL)

    def map[U](self, f: Callable[[T], U]) -> Success[U]:
        """Apply *f* to the value."""
        return Success(f(self.value), _seal=SEAL)

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        return f(self.value)

    def map_or_else[U](
        self,
        default_f: Callable[[], U],  # noqa: ARG002
        f: Callable[[T], U],
    ) -> U:
        return f(self.value)

    def inspect(self, f: Callable[[T], object]) -> Success[T]:
        """Call *f* with the value for its side effect and return self."""
        f(self.value)
        return self

    def inspect_err(self, f: Callable[[Any], object]) -> Success[T]:  # noqa: ARG002
        return self

    def flatten[U, E](self: Success[Result[U, E]]) -> Result[U, E]:
        """Remove one level of nesting from ``Success(Result)``.

        Raises:
            TypeError: The value is not itself a Result.
        """
        inner = self.value
        if not isinstance(inner, (Success, Failure)):
            raise TypeError(
                f"flatten() requires Success(Result), got Success({type(inner).__name__})"
            )
        return inner

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> typing.NoReturn:
        """Raise ``UnwrapErrOnSuccessError``; there is no error to return."""
        logger.debug("unwrap_err() called on Success")
        raise UnwrapErrOnSuccessError(self.value)

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:  # noqa: ARG002
        return self.value

    def expect(self, msg: str) -> T:  # noqa: ARG002
        return self.value

    def expect_err(self, msg: str) -> typing.NoReturn:
        """Raise ``ExpectFailedError`` with *msg* and the rendered value."""
        logger.debug("expect_err() called on Success: %s", msg)
        raise ExpectFailedError(f"{msg}: {render_payload(self.value)}", payload=self.value)


@dataclasses.dataclass(frozen=True, slots=True, init=False, repr=False)
class Failure[E]:
    """A failed Result holding an error value."""

    error: E

    __match_args__ = ("error",)

    def __init__(self, error: E, *, _seal: object = None) -> None:
        check_seal("Failure", _seal)
        object.__setattr__(self, "error", error)

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"

    def __str__(self) -> str:
        return f"Failure({display(self.error)})"

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def is_ok_and(self, predicate: Callable[[Any], object]) -> bool:  # noqa: ARG002
        return False

    def is_err_and(self, predicate: Callable[[E], object]) -> bool:
        """Return whether the error satisfies *predicate*."""
        return bool(predicate(self.error))

    def and_(self, other: Result[Any, E]) -> Failure[E]:  # noqa: ARG002
        """Propagate this failure; *other* is ignored."""
        return self

    def and_then(self, f: Callable[[Any], Result[Any, E]]) -> Failure[E]:  # noqa: ARG002
        """Propagate this failure without calling *f*."""
        return self

    def or_[T, F](self, other: Result[T, F]) -> Result[T, F]:
        return other

    def or_else[T, F](self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Call *f* with the error and return its Result."""
        return f(self.error)

    def map(self, f: Callable[[Any], Any]) -> Failure[E]:  # noqa: ARG002
        return self

    def map_or[U](self, default: U, f: Callable[[Any], U]) -> U:  # noqa: ARG002
        return default

    def map_or_else[U](
        self,
        default_f: Callable[[], U],
        f: Callable[[Any], U],  # noqa: ARG002
    ) -> U:
        return default_f()

    def inspect(self, f: Callable[[Any], object]) -> Failure[E]:  # noqa: ARG002
        return self

    def inspect_err(self, f: Callable[[E], object]) -> Failure[E]:
        """Call *f* with the error for its side effect and return self."""
        f(self.error)
        return self

    def flatten(self) -> Failure[E]:
        return self

    def unwrap(self) -> typing.NoReturn:
        """Raise ``UnwrapOnFailureError``; there is no value to return."""
        logger.debug("unwrap() called on Failure")
        raise UnwrapOnFailureError(self.error)

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a fallback value from the error."""
        return f(self.error)

    def expect(self, msg: str) -> typing.NoReturn:
        """Raise ``ExpectFailedError`` with *msg* and the rendered error.

        Example:
            failure("bad").expect("want ok")  # ExpectFailedError: want ok: "bad"
        """
        logger.debug("expect() called on Failure: %s", msg)
        raise ExpectFailedError(f"{msg}: {render_payload(self.error)}", payload=self.error)

    def expect_err(self, msg: str) -> E:  # noqa: ARG002
        return self.error


Result = Success[T] | Failure[E]


def success[T](value: T) -> Success[T]:
    """Wrap *value* in a ``Success`` Result."""
    return Success(value, _seal=SEAL)


def failure[E](error: E) -> Failure[E]:
    """Wrap *error* in a ``Failure`` Result."""
    return Failure(error, _seal=SEAL)


def as_result[**P, R](
    *exceptions: type[Exception],
) -> Callable[[Callable[P, R]], Callable[P, Result[R, Exception]]]:
    """Turn a raising function into one that returns a Result.

    The decorated function returns ``Success(return_value)``, or
    ``Failure(exc)`` when it raises one of *exceptions* (default
    ``Exception``). Other exceptions propagate unchanged.

    Example:
        @as_result(ValueError)
        def parse(text: str) -> int:
            return int(text)

        parse("42")   # Success(42)
        parse("x")    # Failure(ValueError(...))
    """
    caught = exceptions or (Exception,)
    for exc_type in caught:
        if not (isinstance(exc_type, type) and issubclass(exc_type, Exception)):
            raise TypeError(f"as_result() expects Exception subclasses, got {exc_type!r}")

    def decorator(fn: Callable[P, R]) -> Callable[P, Result[R, Exception]]:
        @functools.wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[R, Exception]:
            try:
                value = fn(*args, **kwargs)
            except caught as exc:
                return Failure(exc, _seal=SEAL)
            return Success(value, _seal=SEAL)

        return wrapper

    return decorator
