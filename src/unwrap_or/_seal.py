"""Construction seal shared by the four container variants.

Variant classes accept a keyword-only ``_seal`` argument and refuse to build
an instance unless it is the private ``SEAL`` object below, so only this
package's factories can construct containers.
"""

from __future__ import annotations

import logging
from typing import Final

from unwrap_or.errors import ConstructionError

logger = logging.getLogger(__name__)


class _Seal:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<unwrap_or seal>"


SEAL: Final = _Seal()

_FACTORIES: Final[dict[str, str]] = {
    "Present": "present(value)",
    "Absent": "ABSENT",
    "Success": "success(value)",
    "Failure": "failure(error)",
}


def check_seal(variant: str, seal: object) -> None:
    """Raise ``ConstructionError`` unless *seal* is the package seal."""
    if seal is SEAL:
        return
    factory = _FACTORIES[variant]
    logger.debug("Rejected direct construction of %s", variant)
    raise ConstructionError(
        f"{variant} cannot be constructed directly",
        hint=f"Use unwrap_or.{factory} instead.",
    )
