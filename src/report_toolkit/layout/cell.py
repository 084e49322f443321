"""
Module: layout.cell

Purpose:
    Geometry of a single cell: where the border edges go and where the
    text baseline starts for a given alignment. Kept free of drawing so the
    placement rules can be checked with plain numbers.

Key Functions:
    - text_origin(): (x, baseline) of cell text in user units
    - edge_segments(): Line segments for a partial border

Used By:
    - layout.session.RenderSession.draw_cell
"""

from __future__ import annotations

from typing import List, Tuple

from report_toolkit.core.models import Align

# Baseline offset below the cell's vertical center, as a fraction of the
# font size. Centers cap-height text for the standard Type-1 fonts.
BASELINE_FACTOR = 0.3

Segment = Tuple[float, float, float, float]


def text_origin(
    x: float,
    y: float,
    width: float,
    height: float,
    text_width: float,
    font_size: float,
    align: Align,
    padding: float,
) -> tuple[float, float]:
    """
    Compute where cell text starts.

    Args:
        x, y: Top-left corner of the cell
        width, height: Cell size
        text_width: Width of the text in the same unit
        font_size: Font size in the same unit
        align: Horizontal alignment
        padding: Inset from the left/right cell edge

    Returns:
        (text_x, baseline_y)

    Example:
        >>> text_origin(10, 20, 40, 7, 8.0, 5.6, Align.RIGHT, 1.0)
        (41.0, 25.18)
    """
    if align is Align.RIGHT:
        dx = width - padding - text_width
    elif align is Align.CENTER:
        dx = (width - text_width) / 2
    else:
        dx = padding
    baseline = y + 0.5 * height + BASELINE_FACTOR * font_size
    return (x + dx, round(baseline, 6))


def edge_segments(x: float, y: float, width: float, height: float, edges: str) -> List[Segment]:
    """Line segments (x1, y1, x2, y2) for each requested edge in "LTRB"."""
    right = x + width
    bottom = y + height
    lines = {
        "L": (x, y, x, bottom),
        "T": (x, y, right, y),
        "R": (right, y, right, bottom),
        "B": (x, bottom, right, bottom),
    }
    return [lines[edge] for edge in edges]
