# File: src/deck_designer/__init__.py
"""
Deck Designer: turns a sketched deck footprint into a framing layout and a
bill of materials.

Example:
    >>> from deck_designer import SpacingConfig, layout, compute_bom
    >>> square = [(0, 0), (600, 0), (600, 600), (0, 600)]
    >>> bom = compute_bom(square, SpacingConfig())
    >>> bom.total_boards
    170
"""

__version__ = "0.1.0"

from deck_designer.config.spacing import DeckColor, SpacingConfig
from deck_designer.framing_elements.framing_generator import layout
from deck_designer.materials.bill_of_materials import compute_bom, bom_to_csv

__all__ = [
    "DeckColor",
    "SpacingConfig",
    "layout",
    "compute_bom",
    "bom_to_csv",
]
