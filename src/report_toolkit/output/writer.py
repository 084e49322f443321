"""
Module: output.writer

Purpose:
    Persist finished document bytes. Failures are reported immediately
    with OutputError; this is not part of the render session's sticky
    fault handling.

Key Functions:
    - save_pdf(): Write bytes to a file path

Used By:
    - report.controller: generate_report()
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class OutputError(Exception):
    """Error writing the finished document."""
    pass


def save_pdf(data: bytes, output_path: Union[str, Path]) -> Path:
    """
    Write PDF bytes to ``output_path``, creating parent directories.

    Args:
        data: Finalized document bytes
        output_path: Destination file

    Returns:
        The destination path

    Raises:
        OutputError: If the data is empty or the file cannot be written

    Example:
        >>> save_pdf(session.output(), Path("output/report.pdf"))
    """
    output_path = Path(output_path)
    if not data:
        raise OutputError(f"Refusing to write empty document to {output_path}")
    partial_path = output_path.with_name(output_path.name + ".part")
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(partial_path, "wb") as f:
            f.write(data)
        partial_path.replace(output_path)
    except OSError as e:
        # Destination is either complete or untouched
        if partial_path.is_file():
            partial_path.unlink()
        raise OutputError(f"Cannot save PDF to {output_path}: {e}") from e

    logger.info(f"Wrote {len(data)} bytes to {output_path}")
    return output_path
