from __future__ import annotations

import pytest

from unwrap_or.errors import (
    ConfigurationError,
    ConstructionError,
    ExpectFailedError,
    UnwrapErrOnSuccessError,
    UnwrapError,
    UnwrapOnAbsentError,
    UnwrapOnFailureError,
    UnwrapOrError,
)

pytestmark = pytest.mark.unit


def test_base_error_carries_optional_hint() -> None:
    err = UnwrapOrError("boom", hint="do this")
    assert str(err) == "boom"
    assert err.hint == "do this"
    assert UnwrapOrError("fail").hint is None


def test_unwrap_errors_have_fixed_messages() -> None:
    assert str(UnwrapOnAbsentError()) == "called unwrap on an absent value"
    assert str(UnwrapOnFailureError("e")) == "called unwrap on a failure value"
    assert str(UnwrapErrOnSuccessError(1)) == "called unwrap_err on a success value"


def test_unwrap_errors_keep_the_unexpected_payload() -> None:
    assert UnwrapOnFailureError({"code": 1}).error == {"code": 1}
    assert UnwrapErrOnSuccessError(42).value == 42


def test_expect_failed_keeps_message_verbatim() -> None:
    err = ExpectFailedError("must exist")
    assert str(err) == "must exist"
    assert err.payload is None
    assert err.hint is None


def test_subclass_hierarchy() -> None:
    """Every panic is catchable as UnwrapError and UnwrapOrError."""
    for err in (
        UnwrapOnAbsentError(),
        UnwrapOnFailureError("e"),
        UnwrapErrOnSuccessError(1),
        ExpectFailedError("m"),
    ):
        assert isinstance(err, UnwrapError)
        assert isinstance(err, UnwrapOrError)

    assert isinstance(UnwrapOnAbsentError(), TypeError)
    assert not isinstance(ExpectFailedError("m"), TypeError)
    assert isinstance(ConstructionError("x"), TypeError)
    assert not isinstance(ConfigurationError("x"), UnwrapError)
