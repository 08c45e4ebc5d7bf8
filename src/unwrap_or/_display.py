"""String rendering for containers and their payloads."""

from __future__ import annotations

from typing import Any

from pydantic_core import to_json

from unwrap_or.config import get_config


def display(value: Any, _seen: frozenset[int] = frozenset()) -> str:
    """Render *value* the way container ``__str__`` embeds it.

    Strings are quoted, lists and tuples become ``[a, b]`` with elements
    rendered recursively, and everything else uses ``str()``. A list or
    tuple that contains itself renders the repeated level as ``[...]``.
    """
    if isinstance(value, str):
        return repr(value)
    if isinstance(value, (list, tuple)):
        if id(value) in _seen:
            return "[...]"
        seen = _seen | {id(value)}
        return "[" + ", ".join(display(item, seen) for item in value) + "]"
    return str(value)


def render_payload(value: Any) -> str:
    """Render the payload appended to ``expect``/``expect_err`` messages."""
    config = get_config()
    if config.payload_format == "repr":
        text = repr(value)
    else:
        text = _to_compact_json(value)
    limit = config.max_payload_chars
    if limit is not None and len(text) > limit:
        text = text[: limit - 3] + "..."
    return text


def _to_compact_json(value: Any) -> str:
    try:
        return to_json(value, fallback=repr, inf_nan_mode="null").decode()
    except ValueError:
        # Values JSON cannot hold (e.g. circular references).
        return to_json(repr(value)).decode()
