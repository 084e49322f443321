"""
Module: report.controller

Purpose:
    Orchestrate the complete report pipeline.
    Load → Build → Check fault → Finalize → Save

Key Functions:
    - render_pdf(): Dataset to PDF bytes
    - generate_report(): Input file to PDF file

Key Classes:
    - ReportResult: Summary of a generated report
    - ReportError: Exception for pipeline failures

Dependencies:
    - loading: Dataset loading
    - layout: RenderSession
    - report.builder: Report layout
    - output: ReportLab backend and file writer

Used By:
    - report_toolkit.cli: Command line entry point
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional, Union

from report_toolkit.core.models import Dataset
from report_toolkit.layout import RenderError, RenderSession
from report_toolkit.loading import DEFAULT_INPUT, LoaderError, load_dataset
from report_toolkit.output import DocumentBackend, OutputError, ReportLabBackend, save_pdf

from .builder import build_report
from .config import ConfigurationError, ReportConfig

logger = logging.getLogger(__name__)


class ReportError(Exception):
    """Error during the report pipeline."""
    pass


@dataclass(frozen=True)
class ReportResult:
    """
    Generated report summary (immutable).

    Attributes:
        output_path: Where the PDF was written
        page_count: Number of pages in the document
        row_count: Number of body rows rendered
        byte_count: Size of the PDF in bytes
    """
    output_path: Path
    page_count: int
    row_count: int
    byte_count: int


def render_pdf(
    dataset: Dataset,
    config: Optional[ReportConfig] = None,
    *,
    today: Optional[date] = None,
    backend: Optional[DocumentBackend] = None,
) -> tuple[bytes, int]:
    """
    Render ``dataset`` to PDF bytes.

    Args:
        dataset: Table to render
        config: Report configuration
        today: Date printed under the title (default: today)
        backend: Drawing surface (default: ReportLabBackend)

    Returns:
        (pdf_bytes, page_count)

    Raises:
        ReportError: On configuration errors or a sticky render fault
    """
    config = config or ReportConfig()
    if backend is None:
        backend = ReportLabBackend(title=config.title, author=config.author)
    session = RenderSession(config.page, backend)

    try:
        build_report(session, dataset, config, today=today)
    except ConfigurationError as e:
        raise ReportError(f"Invalid report configuration: {e}") from e

    # Single check after the whole drawing sequence
    try:
        session.raise_for_fault()
        data = session.output()
        session.raise_for_fault()
    except RenderError as e:
        raise ReportError(f"Failed creating PDF report: {e}") from e

    return data, session.page


def generate_report(
    input_path: Optional[Union[str, Path]] = None,
    output_path: Optional[Union[str, Path]] = None,
    config: Optional[ReportConfig] = None,
    *,
    today: Optional[date] = None,
    backend: Optional[DocumentBackend] = None,
) -> ReportResult:
    """
    Build a report from a CSV file and save it as PDF.

    Pipeline:
    1. Load the dataset (fail fast)
    2. Lay out title, header, body and image on a render session
    3. Check the sticky fault once
    4. Finalize and write the PDF (fail fast)

    Args:
        input_path: CSV file (default: ordersReport.csv)
        output_path: PDF destination (default: config.output_path)
        config: Report configuration
        today: Date printed under the title (default: today)
        backend: Drawing surface (default: ReportLabBackend)

    Returns:
        ReportResult with path and counts

    Raises:
        ReportError: If any step fails

    Example:
        >>> result = generate_report("orders.csv", "out/report.pdf")
        >>> print(f"Generated {result.page_count} pages")
    """
    config = config or ReportConfig()
    input_path = Path(input_path) if input_path else DEFAULT_INPUT
    output_path = Path(output_path) if output_path else config.output_path
    start_time = time.perf_counter()

    logger.info(f"Starting report from {input_path}")

    try:
        dataset = load_dataset(input_path)
    except LoaderError as e:
        raise ReportError(str(e)) from e

    data, page_count = render_pdf(dataset, config, today=today, backend=backend)

    try:
        save_pdf(data, output_path)
    except OutputError as e:
        raise ReportError(str(e)) from e

    elapsed = time.perf_counter() - start_time
    logger.info(f"Report complete: {page_count} page(s) in {elapsed:.2f}s")

    return ReportResult(
        output_path=output_path,
        page_count=page_count,
        row_count=dataset.row_count,
        byte_count=len(data),
    )
