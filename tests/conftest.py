"""Pytest configuration and fixtures.

Provides render-configuration isolation and logging capture helpers.
Fixtures marked autouse apply to every test.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING

import pytest

from unwrap_or import configure

if TYPE_CHECKING:
    from collections.abc import Iterator

# =============================================================================
# Configuration Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_render_config() -> Iterator[None]:
    """Restore the render configuration a test started with.

    ``configure()`` mutates the current context, which pytest shares between
    tests running on the same thread.
    """
    previous = configure()
    yield
    configure(**dataclasses.asdict(previous))


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG records from the ``unwrap_or`` logger tree."""
    caplog.set_level(logging.DEBUG, logger="unwrap_or")
    return caplog
