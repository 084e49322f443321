"""
Module: output.reportlab_backend

Purpose:
    DocumentBackend implementation on top of ReportLab. Draws into an
    in-memory canvas and returns the PDF bytes on finalize(); writing the
    bytes to disk is left to output.writer.

Key Classes:
    - ReportLabBackend: Canvas-backed drawing surface

Dependencies:
    - reportlab: PDF generation, standard font metrics
    - PIL: Image probing

Used By:
    - layout.session.RenderSession (default backend)
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError
from reportlab.lib.fonts import tt2ps
from reportlab.lib.utils import ImageReader
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from report_toolkit.core.models import BLACK, Color

from .backend import (
    DocumentBackend,
    FinalizeError,
    FontNotFoundError,
    ImageAssetError,
)

logger = logging.getLogger(__name__)

# Family aliases accepted in addition to ReportLab's own names
FAMILY_ALIASES = {
    "arial": "helvetica",
}


class ReportLabBackend(DocumentBackend):
    """
    ReportLab canvas drawing surface.

    Coordinates arrive in points from the top-left corner and are flipped to
    PDF's bottom-left origin here.

    Args:
        title: Optional document title metadata
        author: Optional document author metadata

    Example:
        >>> backend = ReportLabBackend(title="Daily Report")
        >>> backend.add_page(792, 612)
        >>> data = backend.finalize()
        >>> data[:5]
        b'%PDF-'
    """

    def __init__(self, *, title: Optional[str] = None, author: Optional[str] = None):
        self._buffer = io.BytesIO()
        self._canvas: Optional[canvas.Canvas] = None
        self._page_height = 0.0
        self._font: Optional[tuple[str, float]] = None
        self._title = title
        self._author = author
        self._finalized = False
        self._pages = 0

    @property
    def page_count(self) -> int:
        return self._pages

    # ─────────────────────────────────────────────────────────────────────────
    # Pages and fonts
    # ─────────────────────────────────────────────────────────────────────────

    def add_page(self, width: float, height: float) -> None:
        if self._canvas is None:
            self._canvas = canvas.Canvas(self._buffer, pagesize=(width, height))
            if self._title:
                self._canvas.setTitle(self._title)
            if self._author:
                self._canvas.setAuthor(self._author)
        else:
            self._canvas.showPage()
        self._page_height = height
        self._pages += 1
        # showPage() resets the graphics state
        if self._font is not None:
            self._canvas.setFont(*self._font)

    def resolve_font(self, family: str, style: str) -> str:
        key = family.strip().lower()
        key = FAMILY_ALIASES.get(key, key)
        bold = 1 if "B" in style else 0
        italic = 1 if "I" in style else 0
        try:
            name = tt2ps(key, bold, italic)
        except ValueError:
            # Fonts registered by their face name (e.g. a single TTF)
            if not bold and not italic and family in pdfmetrics.getRegisteredFontNames():
                return family
            raise FontNotFoundError(f"undefined font: {family} {style}".rstrip())
        try:
            pdfmetrics.getFont(name)
        except KeyError as e:
            raise FontNotFoundError(f"font {name!r} is not registered") from e
        return name

    def string_width(self, text: str, font: str, size: float) -> float:
        return pdfmetrics.stringWidth(text, font, size)

    def set_font(self, font: str, size: float) -> None:
        self._font = (font, size)
        if self._canvas is not None:
            self._canvas.setFont(font, size)

    # ─────────────────────────────────────────────────────────────────────────
    # Drawing
    # ─────────────────────────────────────────────────────────────────────────

    def draw_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        *,
        fill: bool,
        stroke: bool,
        fill_color: Color,
        line_width: float,
    ) -> None:
        c = self._require_canvas()
        c.saveState()
        c.setFillColorRGB(*fill_color.as_unit())
        c.setStrokeColorRGB(*BLACK.as_unit())
        c.setLineWidth(line_width)
        c.rect(x, self._flip(y + height), width, height, stroke=int(stroke), fill=int(fill))
        c.restoreState()

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, *, line_width: float) -> None:
        c = self._require_canvas()
        c.saveState()
        c.setLineWidth(line_width)
        c.line(x1, self._flip(y1), x2, self._flip(y2))
        c.restoreState()

    def draw_text(self, x: float, baseline: float, text: str, *, color: Color) -> None:
        c = self._require_canvas()
        c.saveState()
        c.setFillColorRGB(*color.as_unit())
        c.drawString(x, self._flip(baseline), text)
        c.restoreState()

    def image_size(self, path: Path) -> tuple[int, int]:
        try:
            with Image.open(path) as img:
                return img.size
        except FileNotFoundError as e:
            raise ImageAssetError(f"image not found: {path}") from e
        except (UnidentifiedImageError, OSError) as e:
            raise ImageAssetError(f"cannot decode image {path}: {e}") from e

    def draw_image(self, path: Path, x: float, y: float, width: float, height: float) -> None:
        c = self._require_canvas()
        try:
            reader = ImageReader(str(path))
        except OSError as e:
            raise ImageAssetError(f"cannot read image {path}: {e}") from e
        c.drawImage(reader, x, self._flip(y + height), width=width, height=height, mask="auto")

    def finalize(self) -> bytes:
        if self._canvas is None:
            raise FinalizeError("document has no pages")
        if not self._finalized:
            try:
                self._canvas.save()
            except OSError as e:
                raise FinalizeError(f"cannot encode document: {e}") from e
            self._finalized = True
            logger.debug(f"Encoded {self.page_count} page(s), {len(self._buffer.getvalue())} bytes")
        return self._buffer.getvalue()

    # ─────────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────────

    def _require_canvas(self) -> canvas.Canvas:
        if self._canvas is None:
            raise FinalizeError("no page has been added")
        if self._finalized:
            raise FinalizeError("document already finalized")
        return self._canvas

    def _flip(self, y_top: float) -> float:
        """Convert a top-down y to ReportLab's bottom-up y."""
        return self._page_height - y_top
