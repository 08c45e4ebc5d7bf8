"""unwrap-or: Option and Result containers with composable combinators.

Public API:
    - present() / ABSENT / from_nullable(): build an Option
    - success() / failure() / as_result(): build a Result
    - Present, Absent, Success, Failure: variant classes for isinstance/match
    - RenderConfig, configure(), render_config(): panic message rendering
"""

from __future__ import annotations

import logging

from unwrap_or.config import RenderConfig, configure, get_config, render_config
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
from unwrap_or.option import ABSENT, Absent, Option, Present, from_nullable, present
from unwrap_or.result import Failure, Result, Success, as_result, failure, success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("unwrap-or")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("unwrap_or").addHandler(logging.NullHandler())

__all__ = [
    "ABSENT",
    "Absent",
    "ConfigurationError",
    "ConstructionError",
    "ExpectFailedError",
    "Failure",
    "Option",
    "Present",
    "RenderConfig",
    "Result",
    "Success",
    "UnwrapErrOnSuccessError",
    "UnwrapError",
    "UnwrapOnAbsentError",
    "UnwrapOnFailureError",
    "UnwrapOrError",
    "as_result",
    "configure",
    "failure",
    "from_nullable",
    "get_config",
    "present",
    "render_config",
    "success",
]
