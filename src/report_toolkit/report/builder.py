"""
Module: report.builder

Purpose:
    Lay out a Dataset as a report on a RenderSession.
    Title → Header → Body → Image

Key Functions:
    - build_report(): Run all four phases in order

Phases:
    1. Title: title line and current date, borderless
    2. Header: one bordered, shaded cell per header field
    3. Body: bordered cells aligned per column, paginated row by row
    4. Image: fixed-position image, cursor untouched

    The phases always run in order. A sticky fault raised in one phase turns
    the later phases into no-ops; the caller checks the session once
    afterwards. Only a mismatched alignment table is raised immediately,
    before anything is drawn.

Dependencies:
    - layout.session: RenderSession
    - report.config: ReportConfig

Used By:
    - report.controller: render_pdf(), generate_report()
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from report_toolkit.core.models import Align, CellSpec, Dataset
from report_toolkit.layout.session import RenderSession

from .config import ImageSpec, ReportConfig, format_report_date

logger = logging.getLogger(__name__)


def build_report(
    session: RenderSession,
    dataset: Dataset,
    config: Optional[ReportConfig] = None,
    *,
    today: Optional[date] = None,
) -> None:
    """
    Draw the complete report for ``dataset`` on ``session``.

    Args:
        session: Fresh render session (no page added yet)
        dataset: Table with the header at row 0
        config: Report configuration (defaults reproduce the daily report)
        today: Date printed under the title (default: today)

    Raises:
        ConfigurationError: If the alignment table does not match the
            dataset's column count. Rendering failures are not raised;
            they are left on ``session.fault``.

    Example:
        >>> session = RenderSession(config.page)
        >>> build_report(session, dataset, config)
        >>> session.raise_for_fault()
    """
    config = config or ReportConfig()
    alignments = config.alignments_for(dataset.column_count)
    today = today or date.today()

    _title_phase(session, config, today)
    _header_phase(session, dataset.header, config)
    _body_phase(session, dataset.body, alignments, config)
    _image_phase(session, config.image)

    logger.info(
        f"Laid out {dataset.row_count} rows on {session.page} page(s)"
        + (f" (faulted: {session.fault})" if session.failed else "")
    )


def _title_phase(session: RenderSession, config: ReportConfig, today: date) -> None:
    session.add_page()

    session.apply_style(config.title_style)
    session.cell(config.title_width, config.title_height, config.title)
    session.ln(config.title_spacing)

    session.apply_style(config.subtitle_style)
    session.cell(config.title_width, config.title_height, format_report_date(today, config.date_format))
    session.ln(config.date_spacing)


def _header_phase(session: RenderSession, header: Sequence[str], config: ReportConfig) -> None:
    session.apply_style(config.header_style)
    for label in header:
        session.draw_cell(CellSpec(
            config.column_width,
            config.row_height,
            label,
            border=True,
            fill=True,
        ))
    # Auto height: the header row's height
    session.ln()


def _body_phase(
    session: RenderSession,
    rows: Sequence[Sequence[str]],
    alignments: Sequence[Align],
    config: ReportConfig,
) -> None:
    session.apply_style(config.body_style)
    for row in rows:
        # Whole rows move to the next page; cells are never split
        session.page_break_if_needed(config.row_height)
        for text, align in zip(row, alignments):
            session.draw_cell(CellSpec(
                config.column_width,
                config.row_height,
                text,
                border=True,
                fill=False,
                align=align,
            ))
        session.ln()


def _image_phase(session: RenderSession, image: Optional[ImageSpec]) -> None:
    if image is None:
        return
    session.image(image.path, image.x, image.y, image.width, image.height)
