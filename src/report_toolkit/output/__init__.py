"""
Module: output

Purpose:
    Document backends and persistence.
    The RenderSession draws through a DocumentBackend; the finished bytes
    are written to disk by save_pdf().

Key Classes:
    - DocumentBackend: Abstract drawing surface
    - ReportLabBackend: ReportLab implementation
    - OutputError: Raised when the document cannot be written

Key Functions:
    - save_pdf(): Write finished bytes to a file

Dependencies:
    - reportlab: PDF generation
    - PIL: Image probing
"""

from .backend import (
    BackendError,
    DocumentBackend,
    FinalizeError,
    FontNotFoundError,
    ImageAssetError,
)
from .reportlab_backend import ReportLabBackend
from .writer import OutputError, save_pdf

__all__ = [
    "BackendError",
    "DocumentBackend",
    "FinalizeError",
    "FontNotFoundError",
    "ImageAssetError",
    "ReportLabBackend",
    "OutputError",
    "save_pdf",
]
