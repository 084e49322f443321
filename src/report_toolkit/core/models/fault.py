"""
Module: fault

Purpose:
    Sticky fault record kept by a RenderSession. A fault is set once by the
    first failing rendering call and then suppresses every later side effect
    until the caller inspects it after the full drawing sequence.

Key Classes:
    - FaultKind: Category of the failure
    - StickyFault: Immutable (kind, message) pair
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FaultKind(Enum):
    """Category of a rendering failure."""

    FONT = "font"        # Unknown family or unusable font
    STYLE = "style"      # Malformed style value (color, size, missing font)
    PAGE = "page"        # Drawing without an open page
    IMAGE = "image"      # Missing or undecodable image asset
    OUTPUT = "output"    # Document finalization failed


@dataclass(frozen=True, slots=True)
class StickyFault:
    """
    First rendering failure of a session.

    Example:
        >>> fault = StickyFault(FaultKind.FONT, "undefined font: comic")
        >>> str(fault)
        'font: undefined font: comic'
    """

    kind: FaultKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"
