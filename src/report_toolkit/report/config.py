"""
Module: report.config

Purpose:
    Configuration dataclasses for the report pipeline. Immutable
    configuration with validation on construction, plus loading from a
    schema-validated JSON file.

Key Classes:
    - ReportConfig: Title, section styles, table geometry, alignments,
      image and page settings
    - ImageSpec: Fixed image anchor and size
    - ConfigurationError: Invalid configuration (fail fast)

Key Functions:
    - default_alignments(): Alignment table for a column count
    - load_report_config(): Build a ReportConfig from a JSON file
    - format_report_date(): Date line text

Dependencies:
    - jsonschema (via core.schemas): Config file validation
    - layout.config: PageConfig

Used By:
    - report.builder: build_report()
    - report.controller: generate_report()
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, replace
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Union

from report_toolkit.core.models import WHITE, Align, Color, FontSpec, Style
from report_toolkit.core.schemas import validate_report_config
from report_toolkit.layout.config import PageConfig


class ConfigurationError(ValueError):
    """Report configuration does not match the data or is malformed."""
    pass


# Per-position column alignments used when none are configured
DEFAULT_ALIGNMENTS = (
    Align.LEFT,
    Align.CENTER,
    Align.LEFT,
    Align.RIGHT,
    Align.RIGHT,
    Align.RIGHT,
)

HEADER_SHADE = Color.gray(240)


def default_alignments(column_count: int) -> tuple[Align, ...]:
    """
    Alignment table for ``column_count`` columns.

    Raises:
        ConfigurationError: If the data has more columns than the default
            table covers

    Example:
        >>> [a.value for a in default_alignments(4)]
        ['L', 'C', 'L', 'R']
    """
    if column_count > len(DEFAULT_ALIGNMENTS):
        raise ConfigurationError(
            f"Default alignment table has {len(DEFAULT_ALIGNMENTS)} entries "
            f"but the data has {column_count} columns; configure alignments"
        )
    return DEFAULT_ALIGNMENTS[:column_count]


def format_report_date(day: date, date_format: Optional[str] = None) -> str:
    """
    Date line text, e.g. "Tue Jan 16, 2018".

    Args:
        day: Date to format
        date_format: Optional strftime pattern overriding the default
    """
    if date_format:
        return day.strftime(date_format)
    return f"{day:%a %b} {day.day}, {day:%Y}"


def _title_style() -> Style:
    return Style(FontSpec("Times", "B", 28))


def _subtitle_style() -> Style:
    return Style(FontSpec("Times", "", 20))


def _header_style() -> Style:
    return Style(FontSpec("Times", "B", 16), fill_color=HEADER_SHADE)


def _body_style() -> Style:
    return Style(FontSpec("Times", "", 16), fill_color=WHITE)


@dataclass(frozen=True)
class ImageSpec:
    """
    Image placed at a fixed position, independent of the cursor.

    Attributes:
        path: Image file (PNG, JPEG, GIF, ...)
        x, y: Top-left corner in user units
        width, height: Size in user units; 0 derives it from the aspect ratio
    """

    path: Path
    x: float = 225.0
    y: float = 10.0
    width: float = 25.0
    height: float = 25.0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Image size must be >= 0: {self.width}x{self.height}")


@dataclass(frozen=True)
class ReportConfig:
    """
    Configuration for one report (immutable).

    Lengths are in the page unit (millimetres by default); font sizes are
    in points.

    Attributes:
        title: Report title text
        author: Optional document author metadata
        date_format: strftime pattern for the date line (None: "Tue Jan 16, 2018")
        title_style: Style of the title line
        subtitle_style: Style of the date line
        header_style: Style of the header row (bold, shaded)
        body_style: Style of the body rows
        column_width: Width of every table column
        row_height: Height of header and body rows
        title_width: Width of the title and date cells
        title_height: Height of the title and date cells
        title_spacing: Line advance after the title
        date_spacing: Line advance after the date
        alignments: Per-column alignment table; None derives one from the
            column count
        image: Optional image placed on the last page once the table is drawn
        page: Page geometry
        output_path: Default destination of the PDF

    Example:
        >>> config = ReportConfig(title="Orders", alignments=("L", "C", "L", "R"))
        >>> config.alignments_for(4)[-1]
        <Align.RIGHT: 'R'>
    """

    title: str = "Daily Report"
    author: Optional[str] = None
    date_format: Optional[str] = None

    # Section styles
    title_style: Style = field(default_factory=_title_style)
    subtitle_style: Style = field(default_factory=_subtitle_style)
    header_style: Style = field(default_factory=_header_style)
    body_style: Style = field(default_factory=_body_style)

    # Geometry
    column_width: float = 40.0
    row_height: float = 7.0
    title_width: float = 40.0
    title_height: float = 10.0
    title_spacing: float = 12.0
    date_spacing: float = 20.0

    alignments: Optional[Sequence[Union[Align, str]]] = None
    image: Optional[ImageSpec] = field(default_factory=lambda: ImageSpec(Path("stats.png")))
    page: PageConfig = field(default_factory=PageConfig)
    output_path: Path = Path("report.pdf")

    def __post_init__(self) -> None:
        """Validate and normalize configuration on construction."""
        if self.column_width <= 0:
            raise ValueError(f"column_width must be positive: {self.column_width}")
        if self.row_height <= 0:
            raise ValueError(f"row_height must be positive: {self.row_height}")
        for name in ("title_width", "title_height", "title_spacing", "date_spacing"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0: {getattr(self, name)}")
        if self.alignments is not None:
            if not self.alignments:
                raise ValueError("alignments must not be empty")
            # Frozen: normalize through object.__setattr__
            object.__setattr__(
                self, "alignments", tuple(Align.parse(a) for a in self.alignments)
            )
        object.__setattr__(self, "output_path", Path(self.output_path))

    def alignments_for(self, column_count: int) -> tuple[Align, ...]:
        """
        Alignment table for a dataset with ``column_count`` columns.

        Raises:
            ConfigurationError: If a configured table has a different length,
                or no table is configured and the default one is too short
        """
        if self.alignments is None:
            return default_alignments(column_count)
        if len(self.alignments) != column_count:
            raise ConfigurationError(
                f"Alignment table has {len(self.alignments)} entries "
                f"but the data has {column_count} columns"
            )
        return tuple(self.alignments)


# ─────────────────────────────────────────────────────────────────────────────
# JSON loading
# ─────────────────────────────────────────────────────────────────────────────

_STYLE_KEYS = {
    "title": "title_style",
    "subtitle": "subtitle_style",
    "header": "header_style",
    "body": "body_style",
}


def _merge_style(base: Style, data: Dict[str, Any]) -> Style:
    font = base.font
    if "font" in data:
        font_data = data["font"]
        font = FontSpec(
            family=font_data["family"],
            style=font_data.get("style", ""),
            size=font_data.get("size", base.font.size),
        )
    return Style(
        font=font,
        fill_color=Color(*data["fill_color"]) if "fill_color" in data else base.fill_color,
        text_color=Color(*data["text_color"]) if "text_color" in data else base.text_color,
        line_width=data.get("line_width", base.line_width),
    )


def config_from_dict(data: Dict[str, Any], *, base_dir: Optional[Path] = None) -> ReportConfig:
    """
    Build a ReportConfig from validated JSON data.

    Keys not present keep their defaults. A relative image path is resolved
    against ``base_dir`` when given.

    Raises:
        ConfigValidationError: If data violates the schema
        ConfigurationError: If values pass the schema but are inconsistent
    """
    validate_report_config(data)
    defaults = ReportConfig()
    kwargs: Dict[str, Any] = {}

    simple = {f.name for f in fields(ReportConfig)} - set(_STYLE_KEYS.values()) - {"image", "page"}
    for key in simple:
        if key in data:
            kwargs[key] = data[key]

    for key, attr in _STYLE_KEYS.items():
        style_data = data.get("styles", {}).get(key)
        if style_data is not None:
            kwargs[attr] = _merge_style(getattr(defaults, attr), style_data)

    if "image" in data:
        image_data = data["image"]
        if image_data is None:
            kwargs["image"] = None
        else:
            image_path = Path(image_data["path"])
            if base_dir is not None and not image_path.is_absolute():
                image_path = base_dir / image_path
            kwargs["image"] = replace(
                ImageSpec(image_path),
                **{k: v for k, v in image_data.items() if k != "path"},
            )

    try:
        if "page" in data:
            kwargs["page"] = PageConfig(**data["page"])
        return ReportConfig(**kwargs)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e


def load_report_config(path: Union[str, Path]) -> ReportConfig:
    """
    Load a ReportConfig from a JSON file.

    Relative image paths are resolved against the file's directory.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
        ConfigValidationError: If the content violates the schema
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"Cannot read config '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Config '{path}' is not valid JSON: {e}") from e
    return config_from_dict(data, base_dir=path.parent)

