"""
Module: layout

Purpose:
    Document layout and rendering engine.
    Turns logical drawing operations into absolute page coordinates,
    paginates, and accumulates rendering errors as a sticky fault.

Key Classes:
    - PageConfig: Paper, orientation, unit and margins
    - LayoutCursor: Current position and page number
    - RenderSession: Drawing API with sticky-fault semantics
    - RenderError: Raised by RenderSession.raise_for_fault()

Dependencies:
    - reportlab: Paper sizes and units (config); default backend (session)
    - report_toolkit.output.backend: DocumentBackend contract

Used By:
    - report_toolkit.report.builder
    - report_toolkit.report.controller
"""

from .config import PageConfig
from .cursor import LayoutCursor
from .session import RenderError, RenderSession

__all__ = [
    "PageConfig",
    "LayoutCursor",
    "RenderSession",
    "RenderError",
]
