"""
Module: layout.cursor

Purpose:
    Track the current drawing position and page number of a document.
    Pure arithmetic: the cursor never draws and never fails. Overflow is
    resolved by page breaks, never reported as an error.

Key Classes:
    - LayoutCursor: Mutable (x, y, page) position with line/page advance

Algorithm:
    - advance_by(w): x += w (no implicit wrap; callers break lines)
    - new_line(h): x = left margin, y += h (h=None reuses last cell height)
    - needs_page_break(h): y + h passes the trigger below the page top
    - page_break_if_needed(h): if y + h passes the trigger, move to the
      top-left of a new page

Dependencies:
    - layout.config: PageConfig

Used By:
    - layout.session.RenderSession
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import PageConfig

logger = logging.getLogger(__name__)


class LayoutCursor:
    """
    Current drawing position in user units.

    Attributes:
        config: Page geometry providing margins and the break trigger
        x: Horizontal position from the page's left edge
        y: Vertical position from the page's top edge
        page: 1-based number of the current page (0 before the first page)
        last_height: Height of the most recently drawn cell, None if none

    Example:
        >>> cursor = LayoutCursor(PageConfig())
        >>> cursor.start_page()
        >>> cursor.advance_by(40)
        >>> cursor.x
        50.0
    """

    def __init__(self, config: PageConfig):
        self.config = config
        self.x: float = config.margin_left
        self.y: float = config.margin_top
        self.page: int = 0
        self.last_height: Optional[float] = None

    def __repr__(self) -> str:
        return f"LayoutCursor(x={self.x:g}, y={self.y:g}, page={self.page})"

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def at_page_top(self) -> bool:
        """True when nothing has been placed below the top margin yet."""
        return self.y <= self.config.margin_top

    def start_page(self) -> None:
        """Move to the top-left printable position of the next page."""
        self.page += 1
        self.x = self.config.margin_left
        self.y = self.config.margin_top

    def advance_by(self, width: float) -> None:
        """Move right by ``width``; never wraps."""
        self.x += width

    def move_down(self, height: float) -> None:
        """Move down by ``height`` keeping x (cell 'below' advance)."""
        self.y += height

    def record_cell(self, height: float) -> None:
        self.last_height = height

    def new_line(self, height: Optional[float] = None) -> bool:
        """
        Return to the left margin and move down.

        Args:
            height: Line height; None reuses the last drawn cell's height

        Returns:
            False when ``height`` is None and no cell was drawn yet, in
            which case the cursor is left untouched.
        """
        if height is None:
            if self.last_height is None:
                logger.debug("Auto line height requested before any cell; ignoring")
                return False
            height = self.last_height
        self.x = self.config.margin_left
        self.y += height
        return True

    def fits(self, needed_height: float) -> bool:
        return self.y + needed_height <= self.config.page_break_trigger

    def needs_page_break(self, needed_height: float) -> bool:
        """
        Whether ``needed_height`` would cross the break trigger.

        Content taller than the whole printable area is left where it is
        when the cursor is already at the top of a page; breaking again would
        not make it fit.
        """
        if self.fits(needed_height):
            return False
        if self.at_page_top:
            logger.warning(
                f"Content of height {needed_height:g} overflows page {self.page}: "
                f"{self.config.printable_height:g} available"
            )
            return False
        return True

    def page_break_if_needed(self, needed_height: float) -> bool:
        """
        Start a new page if ``needed_height`` would cross the break trigger.

        Returns:
            True if a page break was taken
        """
        if not self.needs_page_break(needed_height):
            return False
        self.start_page()
        return True
