"""
Module: cell

Purpose:
    Provides CellSpec - the immutable per-call description of one
    rectangular cell handed to RenderSession.draw_cell().

Key Classes:
    - CellSpec: Size, text, border, fill, alignment and advance mode

Used By:
    - layout.session.RenderSession
    - layout.cell: geometry helpers
    - report.builder: header and body rows
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .style import AdvanceMode, Align

BORDER_EDGES = "LTRB"

BorderSpec = Union[bool, str]


@dataclass(frozen=True, slots=True)
class CellSpec:
    """
    One cell to draw at the current cursor position.

    Attributes:
        width: Cell width in user units (0 allowed: spacing only)
        height: Cell height in user units (0 allowed)
        text: Text content, empty for border/fill only
        border: True for all four edges, False for none, or a subset of
            "LTRB" selecting individual edges
        fill: Paint the interior with the session fill color
        align: Horizontal text alignment
        advance: Cursor movement after drawing

    Invariants:
        - width >= 0 and height >= 0
        - a string border only contains the letters L, T, R, B

    Example:
        >>> spec = CellSpec(40, 7, "Qty", border=True, align=Align.CENTER)
        >>> spec.edges
        'LTRB'
    """

    width: float
    height: float
    text: str = ""
    border: BorderSpec = False
    fill: bool = False
    align: Align = Align.LEFT
    advance: AdvanceMode = AdvanceMode.RIGHT

    def __post_init__(self) -> None:
        """Validate cell on construction."""
        if self.width < 0:
            raise ValueError(f"width must be >= 0: {self.width}")
        if self.height < 0:
            raise ValueError(f"height must be >= 0: {self.height}")
        if isinstance(self.border, str):
            unknown = set(self.border.upper()) - set(BORDER_EDGES)
            if unknown:
                raise ValueError(f"Unknown border edges: {''.join(sorted(unknown))!r}")

    @property
    def edges(self) -> str:
        """Edges to stroke, in "LTRB" order."""
        if self.border is True:
            return BORDER_EDGES
        if not self.border:
            return ""
        letters = self.border.upper()
        return "".join(edge for edge in BORDER_EDGES if edge in letters)

    @property
    def is_degenerate(self) -> bool:
        """True when the cell has no visible area."""
        return self.width == 0 or self.height == 0
