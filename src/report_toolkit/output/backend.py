"""
Module: output.backend

Purpose:
    Contract between the layout engine and a document backend. The backend
    owns fonts, metrics, image decoding and byte encoding; the RenderSession
    only talks to it in points with a top-left origin.

Key Classes:
    - DocumentBackend: Abstract drawing surface
    - BackendError: Base error raised by backends
    - FontNotFoundError, ImageAssetError, FinalizeError: Specific failures

Used By:
    - layout.session.RenderSession: converts BackendError into sticky faults
    - output.reportlab_backend.ReportLabBackend
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from report_toolkit.core.models import Color


class BackendError(Exception):
    """Error raised by a document backend."""
    pass


class FontNotFoundError(BackendError):
    """Requested font family/style is not available."""
    pass


class ImageAssetError(BackendError):
    """Image file missing or not decodable."""
    pass


class FinalizeError(BackendError):
    """Document could not be encoded."""
    pass


class DocumentBackend(ABC):
    """
    Drawing surface used by a RenderSession.

    All coordinates and lengths are PDF points measured from the top-left
    corner of the current page. Y grows downward.
    """

    @abstractmethod
    def add_page(self, width: float, height: float) -> None:
        """Start a new page of the given size."""

    @abstractmethod
    def resolve_font(self, family: str, style: str) -> str:
        """
        Map (family, style) to a backend font name.

        Raises:
            FontNotFoundError: If the family/style is unknown
        """

    @abstractmethod
    def string_width(self, text: str, font: str, size: float) -> float:
        """Width of ``text`` in points."""

    @abstractmethod
    def set_font(self, font: str, size: float) -> None:
        """Select the font used by subsequent draw_text calls."""

    @abstractmethod
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
        """Draw a rectangle, optionally filled and/or stroked."""

    @abstractmethod
    def draw_line(self, x1: float, y1: float, x2: float, y2: float, *, line_width: float) -> None:
        """Stroke a straight line."""

    @abstractmethod
    def draw_text(self, x: float, baseline: float, text: str, *, color: Color) -> None:
        """Draw ``text`` with its baseline starting at (x, baseline)."""

    @abstractmethod
    def image_size(self, path: Path) -> tuple[int, int]:
        """
        Pixel size of an image asset.

        Raises:
            ImageAssetError: If the file is missing or not an image
        """

    @abstractmethod
    def draw_image(self, path: Path, x: float, y: float, width: float, height: float) -> None:
        """Place an image in the given box."""

    @abstractmethod
    def finalize(self) -> bytes:
        """
        Encode the document.

        Raises:
            FinalizeError: If the document cannot be produced
        """
