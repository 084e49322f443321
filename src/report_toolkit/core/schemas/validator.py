"""
Schema Validation Utilities

Validates report configuration files against the bundled JSON schema
before they are turned into ReportConfig objects. Fails fast on any
schema violation, reporting the JSON path of the offending value.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ConfigValidationError(Exception):
    """Raised when configuration data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_report_config(data: Any) -> None:
    """
    Validate report configuration data against the schema.

    All violations are collected; the message names the first one.

    Args:
        data: Parsed JSON document

    Raises:
        ConfigValidationError: If data is invalid
    """
    schema = _load_schema("report_config")
    validator = jsonschema.Draft7Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
    if not errors:
        return

    first = errors[0]
    path = ".".join(str(p) for p in first.absolute_path)
    raise ConfigValidationError(
        f"Invalid report config at '{path or '<root>'}': {first.message}",
        path=path,
        errors=[e.message for e in errors],
    )
