"""Exception hierarchy for unwrap-or.

Every error here signals a broken contract at the call site, not a
recoverable runtime condition. Nothing in the library catches them.
"""

from __future__ import annotations

from typing import Any


class UnwrapOrError(Exception):
    """Base exception for all unwrap-or errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(UnwrapOrError):
    """Render configuration validation failed."""


class ConstructionError(UnwrapOrError, TypeError):
    """A variant class was called directly instead of through a factory."""


class UnwrapError(UnwrapOrError):
    """A value was extracted from the wrong side of a container."""


class UnwrapOnAbsentError(UnwrapError, TypeError):
    """``unwrap()`` was called on ``Absent``."""

    def __init__(self) -> None:
        super().__init__(
            "called unwrap on an absent value",
            hint="Use unwrap_or(), unwrap_or_else() or is_some() to handle Absent.",
        )


class UnwrapOnFailureError(UnwrapError, TypeError):
    """``unwrap()`` was called on a ``Failure``."""

    def __init__(self, error: Any) -> None:
        super().__init__(
            "called unwrap on a failure value",
            hint="Use unwrap_or(), unwrap_or_else() or is_ok() to handle Failure.",
        )
        self.error = error


class UnwrapErrOnSuccessError(UnwrapError, TypeError):
    """``unwrap_err()`` was called on a ``Success``."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            "called unwrap_err on a success value",
            hint="Check is_err() before calling unwrap_err().",
        )
        self.value = value


class ExpectFailedError(UnwrapError):
    """``expect()`` or ``expect_err()`` found the unexpected variant.

    The message is the caller's text verbatim; Result containers append a
    rendering of the unexpected payload, which is also kept on ``payload``.
    """

    def __init__(self, message: str, *, payload: Any = None) -> None:
        super().__init__(message)
        self.payload = payload
