"""
Module: report

Purpose:
    Report pipeline: turns a Dataset into a titled, paginated PDF table.

Key Functions:
    - build_report(): Lay out a dataset on a RenderSession
    - render_pdf(): Dataset to PDF bytes
    - generate_report(): CSV file to PDF file
    - load_report_config(): ReportConfig from JSON

Key Classes:
    - ReportConfig: Configuration for a report
    - ImageSpec: Fixed image placement
    - ReportResult: Generated report summary
    - ReportError: Pipeline failure
    - ConfigurationError: Invalid configuration
"""

from report_toolkit.core.schemas import ConfigValidationError

from .builder import build_report
from .config import (
    ConfigurationError,
    ImageSpec,
    ReportConfig,
    default_alignments,
    format_report_date,
    load_report_config,
)
from .controller import ReportError, ReportResult, generate_report, render_pdf

__all__ = [
    # Config
    "ConfigurationError",
    "ConfigValidationError",
    "ImageSpec",
    "ReportConfig",
    "default_alignments",
    "format_report_date",
    "load_report_config",
    # Pipeline
    "build_report",
    "render_pdf",
    "generate_report",
    "ReportError",
    "ReportResult",
]
