"""
Command line entry point.

Usage:
    report-toolkit [INPUT]

Renders INPUT (default: ordersReport.csv) into report.pdf. Any failure is
logged and the process exits with status 1.
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from report_toolkit.loading import DEFAULT_INPUT, default_input_path
from report_toolkit.report import ReportError, generate_report

logger = logging.getLogger("report_toolkit")

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="report-toolkit",
        description="Render a CSV table into a formatted PDF report.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help=f"CSV file to render (default: {DEFAULT_INPUT})",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    input_path = default_input_path([args.input] if args.input else [])
    try:
        result = generate_report(input_path)
    except ReportError as e:
        logger.error(str(e))
        return 1

    logger.info(f"Saved {result.output_path} ({result.page_count} page(s), {result.row_count} rows)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
