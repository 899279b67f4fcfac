# File: src/deck_designer/core/__init__.py
"""
Core types shared across the deck designer.

The project file schema lives in ``deck_designer.core.json_schemas`` and is
imported from there directly.
"""

from .errors import (
    DeckDesignerError,
    InvalidSpacingError,
    InvalidMeasurementError,
    ProjectFileError,
    ComputationError,
)

__all__ = [
    "DeckDesignerError",
    "InvalidSpacingError",
    "InvalidMeasurementError",
    "ProjectFileError",
    "ComputationError",
]
