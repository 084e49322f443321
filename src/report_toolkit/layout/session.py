"""
Module: layout.session

Purpose:
    RenderSession - the stateful drawing API of the layout engine.
    Translates logical operations (select font, draw cell, new line, page
    break, place image) into absolute page coordinates on a
    DocumentBackend, and accumulates failures as a sticky fault.

Key Classes:
    - RenderSession: Cursor + style state + sticky fault + backend
    - RenderError: Raised by raise_for_fault() after a faulted render

Error model:
    The first failing call stores a StickyFault. From then on every
    mutating call returns immediately without side effects, so callers
    can issue a long sequence of drawing calls and check once at the end:

        >>> session = RenderSession()
        >>> session.add_page()
        >>> session.set_font("Comic", "", 12)   # unknown family -> fault
        >>> session.cell(40, 7, "ignored")       # no-op
        >>> session.failed
        True

Dependencies:
    - layout.config: PageConfig
    - layout.cursor: LayoutCursor
    - layout.cell: text/border geometry
    - output.backend: DocumentBackend contract

Used By:
    - report.builder: build_report()
    - report.controller: generate_report()
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

from report_toolkit.core.models import (
    BLACK,
    WHITE,
    AdvanceMode,
    Align,
    CellSpec,
    Color,
    FaultKind,
    FontSpec,
    StickyFault,
    Style,
)
from report_toolkit.core.models.cell import BORDER_EDGES, BorderSpec
from report_toolkit.core.models.style import FONT_STYLES
from report_toolkit.output.backend import (
    BackendError,
    DocumentBackend,
    FontNotFoundError,
    ImageAssetError,
)
from report_toolkit.output.reportlab_backend import ReportLabBackend

from .cell import edge_segments, text_origin
from .config import PageConfig
from .cursor import LayoutCursor

logger = logging.getLogger(__name__)

DEFAULT_FONT_SIZE = 12.0
DEFAULT_LINE_WIDTH = 0.2
# Resolution assumed for images placed without an explicit size
DEFAULT_IMAGE_DPI = 96


class RenderError(RuntimeError):
    """Raised when a render session finished with a sticky fault."""

    def __init__(self, fault: StickyFault):
        super().__init__(str(fault))
        self.fault = fault


class RenderSession:
    """
    Stateful drawing session for one document.

    Args:
        config: Page geometry (defaults to landscape Letter in mm)
        backend: Drawing surface; defaults to a ReportLabBackend

    Attributes:
        config: Page configuration
        cursor: Current position and page number
        backend: Document backend receiving point coordinates
    """

    def __init__(
        self,
        config: Optional[PageConfig] = None,
        backend: Optional[DocumentBackend] = None,
    ):
        self.config = config or PageConfig()
        self.backend = backend if backend is not None else ReportLabBackend()
        self.cursor = LayoutCursor(self.config)

        self._fault: Optional[StickyFault] = None
        self._font: Optional[tuple[str, float]] = None  # (backend name, size pt)
        self._font_size = DEFAULT_FONT_SIZE
        self._fill_color = WHITE
        self._text_color = BLACK
        self._line_width = DEFAULT_LINE_WIDTH

    # ─────────────────────────────────────────────────────────────────────────
    # Sticky fault
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def fault(self) -> Optional[StickyFault]:
        return self._fault

    @property
    def failed(self) -> bool:
        return self._fault is not None

    def set_fault(self, kind: FaultKind, message: str) -> None:
        """Record a fault; only the first one is kept."""
        if self._fault is not None:
            logger.debug(f"Dropping secondary fault ({kind.value}): {message}")
            return
        self._fault = StickyFault(kind, message)
        logger.debug(f"Render session faulted: {self._fault}")

    def raise_for_fault(self) -> None:
        """Raise RenderError if any call failed during the session."""
        if self._fault is not None:
            raise RenderError(self._fault)

    @contextmanager
    def _guard(self) -> Iterator[None]:
        """Convert backend errors raised inside the block into a fault."""
        try:
            yield
        except FontNotFoundError as e:
            self.set_fault(FaultKind.FONT, str(e))
        except ImageAssetError as e:
            self.set_fault(FaultKind.IMAGE, str(e))
        except BackendError as e:
            self.set_fault(FaultKind.OUTPUT, str(e))

    # ─────────────────────────────────────────────────────────────────────────
    # Read-only state
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def x(self) -> float:
        return self.cursor.x

    @property
    def y(self) -> float:
        return self.cursor.y

    @property
    def page(self) -> int:
        """1-based number of the current page (0 before add_page)."""
        return self.cursor.page

    @property
    def font_size(self) -> float:
        """Active font size in points."""
        return self._font_size

    def string_width(self, text: str) -> float:
        """Width of ``text`` in user units for the active font (0 if none)."""
        if self._font is None:
            return 0.0
        name, size = self._font
        return self.backend.string_width(text, name, size) / self.config.scale

    # ─────────────────────────────────────────────────────────────────────────
    # Pages and style
    # ─────────────────────────────────────────────────────────────────────────

    def add_page(self) -> None:
        """Start a new page with the cursor at the top-left margin."""
        if self._fault:
            return
        with self._guard():
            self.backend.add_page(*self.config.page_size_pt)
            self.cursor.start_page()
            logger.debug(f"Started page {self.cursor.page}")

    def set_font(self, family: str, style: str = "", size: Optional[float] = None) -> None:
        """
        Select the font for subsequent cell text.

        Args:
            family: Font family ("Times", "Helvetica", "Courier", ...)
            style: "", "B", "I" or "BI"
            size: Size in points; None keeps the current size
        """
        if self._fault:
            return
        spec = FontSpec(family, style or "", self._font_size if size is None else size)
        normalized = spec.normalized_style
        if normalized not in FONT_STYLES:
            self.set_fault(FaultKind.STYLE, f"invalid font style {style!r} for {family}")
            return
        if not spec.size > 0:
            self.set_fault(FaultKind.STYLE, f"font size must be positive: {spec.size}")
            return
        with self._guard():
            name = self.backend.resolve_font(spec.family, normalized)
            self.backend.set_font(name, spec.size)
            self._font = (name, spec.size)
            self._font_size = spec.size

    def set_fill_color(self, red: int, green: int, blue: int) -> None:
        if self._fault:
            return
        color = self._make_color(red, green, blue)
        if color is not None:
            self._fill_color = color

    def set_text_color(self, red: int, green: int, blue: int) -> None:
        if self._fault:
            return
        color = self._make_color(red, green, blue)
        if color is not None:
            self._text_color = color

    def set_line_width(self, width: float) -> None:
        """Border stroke width in user units."""
        if self._fault:
            return
        if width < 0:
            self.set_fault(FaultKind.STYLE, f"line width must be >= 0: {width}")
            return
        self._line_width = width

    def apply_style(self, style: Style) -> None:
        """Apply a section style (font, colors, line width) in one call."""
        self.set_font(style.font.family, style.font.style, style.font.size)
        self.set_fill_color(style.fill_color.red, style.fill_color.green, style.fill_color.blue)
        self.set_text_color(style.text_color.red, style.text_color.green, style.text_color.blue)
        self.set_line_width(style.line_width)

    def _make_color(self, red: int, green: int, blue: int) -> Optional[Color]:
        try:
            return Color(red, green, blue)
        except ValueError as e:
            self.set_fault(FaultKind.STYLE, f"invalid color ({red}, {green}, {blue}): {e}")
            return None

    # ─────────────────────────────────────────────────────────────────────────
    # Cells and lines
    # ─────────────────────────────────────────────────────────────────────────

    def cell(
        self,
        width: float,
        height: float,
        text: str = "",
        *,
        border: BorderSpec = False,
        fill: bool = False,
        align: Union[Align, str] = Align.LEFT,
        advance: AdvanceMode = AdvanceMode.RIGHT,
    ) -> None:
        """Build a CellSpec from arguments and draw it."""
        if self._fault:
            return
        try:
            spec = CellSpec(
                width=width,
                height=height,
                text=text,
                border=border,
                fill=fill,
                align=Align.parse(align),
                advance=advance,
            )
        except ValueError as e:
            self.set_fault(FaultKind.STYLE, f"invalid cell: {e}")
            return
        self.draw_cell(spec)

    def draw_cell(self, spec: CellSpec) -> None:
        """
        Draw one cell at the cursor and advance per ``spec.advance``.

        Fill is painted under the border. Text is vertically centered and
        inset by ``config.cell_padding`` from the aligned edge. Zero-sized
        cells draw nothing but still move the cursor.
        """
        if self._fault:
            return
        if self.cursor.page == 0:
            self.set_fault(FaultKind.PAGE, "no page has been added")
            return
        if spec.text and self._font is None:
            self.set_fault(FaultKind.STYLE, "font has not been set; unable to render text")
            return

        if not spec.is_degenerate:
            with self._guard():
                self._paint_cell(spec)
            if self._fault:
                return

        self.cursor.record_cell(spec.height)
        if spec.advance is AdvanceMode.RIGHT:
            self.cursor.advance_by(spec.width)
        elif spec.advance is AdvanceMode.NEWLINE:
            self.cursor.new_line(spec.height)
        else:
            self.cursor.move_down(spec.height)

    def _paint_cell(self, spec: CellSpec) -> None:
        k = self.config.scale
        x, y = self.cursor.position
        edges = spec.edges
        full_border = edges == BORDER_EDGES
        line_width = self._line_width * k

        if spec.fill or full_border:
            self.backend.draw_rect(
                x * k, y * k, spec.width * k, spec.height * k,
                fill=spec.fill,
                stroke=full_border,
                fill_color=self._fill_color,
                line_width=line_width,
            )
        if edges and not full_border:
            for x1, y1, x2, y2 in edge_segments(x, y, spec.width, spec.height, edges):
                self.backend.draw_line(x1 * k, y1 * k, x2 * k, y2 * k, line_width=line_width)

        if spec.text:
            name, size = self._font
            text_x, baseline = text_origin(
                x, y, spec.width, spec.height,
                text_width=self.backend.string_width(spec.text, name, size) / k,
                font_size=size / k,
                align=spec.align,
                padding=self.config.cell_padding,
            )
            self.backend.draw_text(text_x * k, baseline * k, spec.text, color=self._text_color)

    def ln(self, height: Optional[float] = None) -> None:
        """
        Move to the start of the next line.

        Args:
            height: Line height in user units; None uses the height of the
                last drawn cell (no-op if no cell was drawn yet)
        """
        if self._fault:
            return
        self.cursor.new_line(height)

    def page_break_if_needed(self, needed_height: float) -> bool:
        """
        Start a new page if ``needed_height`` does not fit below the cursor.

        Returns:
            True if a new page was started
        """
        if self._fault:
            return False
        if not self.cursor.needs_page_break(needed_height):
            return False
        with self._guard():
            self.backend.add_page(*self.config.page_size_pt)
        if self._fault:
            return False
        self.cursor.start_page()
        logger.info(f"Page break: continuing on page {self.cursor.page}")
        return True

    # ─────────────────────────────────────────────────────────────────────────
    # Images and output
    # ─────────────────────────────────────────────────────────────────────────

    def image(
        self,
        path: Union[str, Path],
        x: float,
        y: float,
        width: float = 0,
        height: float = 0,
    ) -> None:
        """
        Place an image at an absolute position; the cursor is not moved.

        A zero width or height is derived from the image's aspect ratio;
        both zero sizes the image at 96 dpi.
        """
        if self._fault:
            return
        if self.cursor.page == 0:
            self.set_fault(FaultKind.PAGE, "no page has been added")
            return
        path = Path(path)
        with self._guard():
            px_width, px_height = self.backend.image_size(path)
            width, height = _fit_image(px_width, px_height, width, height, self.config.scale)
            k = self.config.scale
            self.backend.draw_image(path, x * k, y * k, width * k, height * k)
            logger.debug(f"Placed image {path.name} at ({x:g}, {y:g}) size {width:g}x{height:g}")

    def output(self) -> Optional[bytes]:
        """
        Finalize the document.

        Returns:
            PDF bytes, or None if the session is (or becomes) faulted
        """
        if self._fault:
            return None
        with self._guard():
            return self.backend.finalize()
        return None


def _fit_image(
    px_width: int,
    px_height: int,
    width: float,
    height: float,
    scale: float,
) -> tuple[float, float]:
    """Resolve missing image dimensions from the pixel aspect ratio."""
    if width == 0 and height == 0:
        points_per_px = 72.0 / DEFAULT_IMAGE_DPI
        return (px_width * points_per_px / scale, px_height * points_per_px / scale)
    if width == 0:
        return (height * px_width / px_height, height)
    if height == 0:
        return (width, width * px_height / px_width)
    return (width, height)
