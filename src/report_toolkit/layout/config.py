"""
Module: layout.config

Purpose:
    Configuration for the page layout engine.
    Defines paper size, orientation, measurement unit and margins, and
    derives the printable area and page-break trigger from them.

Key Classes:
    - PageConfig: Immutable page configuration

Dependencies:
    - reportlab.lib.pagesizes: Paper dimensions in points
    - reportlab.lib.units: Unit-to-point factors

Used By:
    - layout.cursor: LayoutCursor bounds
    - layout.session: Unit conversion for the backend
    - report.config: ReportConfig.page
"""

from __future__ import annotations

from dataclasses import dataclass

from reportlab.lib.pagesizes import A3, A4, A5, LEGAL, LETTER
from reportlab.lib.units import cm, inch, mm


# Paper dimensions in points, portrait
PAPER_SIZES = {
    "letter": LETTER,
    "legal": LEGAL,
    "a3": A3,
    "a4": A4,
    "a5": A5,
}

# Points per user unit
UNIT_SCALES = {
    "pt": 1.0,
    "mm": mm,
    "cm": cm,
    "in": inch,
}

ORIENTATIONS = ("P", "L")


@dataclass(frozen=True)
class PageConfig:
    """
    Configuration for page layout (immutable).

    All lengths except font sizes are expressed in ``unit``. The defaults
    give a landscape Letter page measured in millimetres with 10 mm side and
    top margins and a 20 mm bottom page-break margin.

    Attributes:
        orientation: "P" (portrait) or "L" (landscape)
        unit: "pt", "mm", "cm" or "in"
        paper: Paper name, see PAPER_SIZES
        margin_left: Left margin
        margin_top: Top margin (y after a page break)
        margin_right: Right margin
        margin_bottom: Distance from page bottom where pages break
        cell_padding: Horizontal text inset inside cells

    Example:
        >>> config = PageConfig()
        >>> round(config.page_width, 1), round(config.page_height, 1)
        (279.4, 215.9)
        >>> round(config.page_break_trigger, 1)
        195.9
    """

    orientation: str = "L"
    unit: str = "mm"
    paper: str = "letter"

    # Margins
    margin_left: float = 10.0
    margin_top: float = 10.0
    margin_right: float = 10.0
    margin_bottom: float = 20.0

    cell_padding: float = 1.0

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.orientation not in ORIENTATIONS:
            raise ValueError(f"orientation must be 'P' or 'L': {self.orientation!r}")
        if self.unit not in UNIT_SCALES:
            raise ValueError(f"Unknown unit: {self.unit!r}")
        if self.paper.lower() not in PAPER_SIZES:
            raise ValueError(f"Unknown paper size: {self.paper!r}")
        for name in ("margin_left", "margin_top", "margin_right", "margin_bottom", "cell_padding"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0: {getattr(self, name)}")
        if self.printable_width <= 0:
            raise ValueError("Margins exceed page width")
        if self.page_break_trigger <= self.margin_top:
            raise ValueError("Margins exceed page height")

    @property
    def scale(self) -> float:
        """Points per user unit."""
        return UNIT_SCALES[self.unit]

    @property
    def page_size_pt(self) -> tuple[float, float]:
        """(width, height) in points after applying orientation."""
        short, long = sorted(PAPER_SIZES[self.paper.lower()])
        if self.orientation == "L":
            return (long, short)
        return (short, long)

    @property
    def page_width(self) -> float:
        return self.page_size_pt[0] / self.scale

    @property
    def page_height(self) -> float:
        return self.page_size_pt[1] / self.scale

    @property
    def printable_width(self) -> float:
        """Width available for content (excluding side margins)."""
        return self.page_width - self.margin_left - self.margin_right

    @property
    def page_break_trigger(self) -> float:
        """Lowest y that content may reach before a page break."""
        return self.page_height - self.margin_bottom

    @property
    def printable_height(self) -> float:
        """Height available for content between top margin and trigger."""
        return self.page_break_trigger - self.margin_top
