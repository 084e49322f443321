"""JSON schemas and validation for report configuration files."""

from .validator import ConfigValidationError, validate_report_config

__all__ = ["ConfigValidationError", "validate_report_config"]
