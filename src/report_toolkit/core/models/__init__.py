"""
Core Models Package

Immutable, validated value objects shared by the layout engine, the
loader and the report builder.

All models in this package are frozen dataclasses, so they can be passed
around freely while a RenderSession holds the only mutable state.
"""

from .cell import CellSpec
from .dataset import Dataset
from .fault import FaultKind, StickyFault
from .style import BLACK, WHITE, AdvanceMode, Align, Color, FontSpec, Style

__all__ = [
    "AdvanceMode",
    "Align",
    "BLACK",
    "CellSpec",
    "Color",
    "Dataset",
    "FaultKind",
    "FontSpec",
    "StickyFault",
    "Style",
    "WHITE",
]
