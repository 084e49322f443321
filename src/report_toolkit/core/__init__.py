"""Core value objects and schema validation for report_toolkit."""
