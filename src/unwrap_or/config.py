"""Configuration: frozen render settings scoped to the current context."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
import logging
from typing import TYPE_CHECKING, Any, Literal, get_args

from unwrap_or.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

PayloadFormat = Literal["json", "repr"]

_MIN_PAYLOAD_CHARS = 4


@dataclass(frozen=True)
class RenderConfig:
    """Immutable settings for how panics render container payloads.

    Defaults render ``Failure("bad").expect("want ok")`` as
    ``want ok: "bad"``.

    Example:
        with render_config(payload_format="repr"):
            failure("bad").expect("want ok")  # want ok: 'bad'
    """

    #: ``json`` for compact JSON, ``repr`` for Python's ``repr()``.
    payload_format: PayloadFormat = "json"
    #: Truncate payload renderings longer than this; *None* disables.
    max_payload_chars: int | None = None

    def __post_init__(self) -> None:
        """Validate fields early for clear errors."""
        if self.payload_format not in get_args(PayloadFormat):
            raise ConfigurationError(
                f"Unknown payload_format: {self.payload_format!r}",
                hint="Supported formats: 'json', 'repr'",
            )
        limit = self.max_payload_chars
        if limit is not None and (
            isinstance(limit, bool) or not isinstance(limit, int)
        ):
            raise ConfigurationError(
                "max_payload_chars must be an integer or None",
                hint="Pass max_payload_chars=200 or leave it unset.",
            )
        if limit is not None and limit < _MIN_PAYLOAD_CHARS:
            raise ConfigurationError(
                f"max_payload_chars must be ≥ {_MIN_PAYLOAD_CHARS}, got {limit}",
                hint="Truncated payloads need room for at least one character and '...'.",
            )


_config_var: ContextVar[RenderConfig] = ContextVar(
    "unwrap_or_render_config",
    default=RenderConfig(),  # noqa: B039
)


def get_config() -> RenderConfig:
    """Return the render configuration active in this context."""
    return _config_var.get()


def configure(**changes: Any) -> RenderConfig:
    """Apply *changes* to the active configuration and return the previous one."""
    previous = _config_var.get()
    updated = replace(previous, **changes)
    _config_var.set(updated)
    logger.debug("Render configuration set: %s", updated)
    return previous


@contextmanager
def render_config(**changes: Any) -> Iterator[RenderConfig]:
    """Temporarily apply *changes*, restoring the previous configuration on exit."""
    token = _config_var.set(replace(_config_var.get(), **changes))
    try:
        yield _config_var.get()
    finally:
        _config_var.reset(token)
