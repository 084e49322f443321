"""
Module: style

Purpose:
    Value objects describing how cells are painted: horizontal text
    alignment, cursor advance mode, RGB colors, font descriptors and the
    section Style bundle applied to a RenderSession between the title,
    header and body of a report.

Key Classes:
    - Align: Horizontal text alignment inside a cell
    - AdvanceMode: Where the cursor goes after a cell is drawn
    - Color: Validated RGB triple (0-255 per channel)
    - FontSpec: Font family, style and size in points
    - Style: Font + fill color + text color + line width

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.models.cell.CellSpec
    - layout.session.RenderSession
    - report.config.ReportConfig
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Align(Enum):
    """
    Horizontal placement of text inside a cell.

    Values are the single-letter codes used in alignment tables
    ("L", "C", "R") so configuration files stay compact.

    Example:
        >>> Align.parse("r")
        <Align.RIGHT: 'R'>
    """

    LEFT = "L"
    CENTER = "C"
    RIGHT = "R"

    @classmethod
    def parse(cls, value: "Align | str") -> "Align":
        """Accept an Align or a one-letter / full-name code (case-insensitive)."""
        if isinstance(value, Align):
            return value
        code = str(value).strip().upper()
        for member in cls:
            if code in (member.value, member.name):
                return member
        raise ValueError(f"Unknown alignment: {value!r} (expected L, C or R)")


class AdvanceMode(Enum):
    """
    Cursor movement after a cell is drawn.

    Attributes:
        RIGHT: Continue to the right of the cell (same line)
        NEWLINE: Return to the left margin, one cell height lower
        BELOW: Stay at the cell's x, one cell height lower
    """

    RIGHT = "right"
    NEWLINE = "newline"
    BELOW = "below"


@dataclass(frozen=True, slots=True)
class Color:
    """
    RGB color with 0-255 integer channels.

    Invariants:
        - 0 <= red, green, blue <= 255

    Example:
        >>> Color(240, 240, 240).as_unit()
        (0.9411764705882353, 0.9411764705882353, 0.9411764705882353)
    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        """Validate channels on construction."""
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"{name} must be an integer in 0..255: {value!r}")

    def as_unit(self) -> tuple[float, float, float]:
        """Channels scaled to 0.0-1.0 as expected by PDF color operators."""
        return (self.red / 255, self.green / 255, self.blue / 255)

    @classmethod
    def gray(cls, level: int) -> "Color":
        return cls(level, level, level)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)

FONT_STYLES = ("", "B", "I", "BI")


@dataclass(frozen=True, slots=True)
class FontSpec:
    """
    Font selection request.

    The family is resolved by the document backend at selection time, so an
    unknown family is not rejected here; it becomes a sticky fault when the
    session tries to use it.

    Attributes:
        family: Family name such as "Times", "Helvetica" or a registered TTF
        style: "" (regular), "B", "I" or "BI" (order-insensitive)
        size: Size in points
    """

    family: str
    style: str = ""
    size: float = 12.0

    @property
    def normalized_style(self) -> str:
        """Style letters in canonical order, or the raw value if malformed."""
        letters = self.style.upper()
        canonical = ("B" if "B" in letters else "") + ("I" if "I" in letters else "")
        if len(canonical) != len(letters):
            return letters
        return canonical


@dataclass(frozen=True, slots=True)
class Style:
    """
    Drawing state applied to a session between report sections.

    Attributes:
        font: Font used for cell text
        fill_color: Interior color for filled cells
        text_color: Color of cell text
        line_width: Border stroke width in user units
    """

    font: FontSpec
    fill_color: Color = WHITE
    text_color: Color = BLACK
    line_width: float = 0.2
