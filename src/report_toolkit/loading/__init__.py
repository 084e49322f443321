"""Tabular input loading."""

from .loader import DEFAULT_INPUT, LoaderError, default_input_path, load_dataset

__all__ = [
    "DEFAULT_INPUT",
    "LoaderError",
    "default_input_path",
    "load_dataset",
]
