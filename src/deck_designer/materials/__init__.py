# File: src/deck_designer/materials/__init__.py
"""
Materials takeoff for deck designs: deck board products, board packing and
the bill of materials.
"""

from .decking_profiles import (
    DeckBoard,
    StockLength,
    DECK_BOARD,
    STOCK_LENGTHS,
    BOARD_WIDTH,
    FASTENERS_PER_BOARD,
    get_stock_length,
    stock_lengths_descending,
)
from .board_packing import BoardRequirement, pack_deck_boards
from .bill_of_materials import BOMLine, BillOfMaterials, compute_bom, bom_to_csv

__all__ = [
    "DeckBoard",
    "StockLength",
    "DECK_BOARD",
    "STOCK_LENGTHS",
    "BOARD_WIDTH",
    "FASTENERS_PER_BOARD",
    "get_stock_length",
    "stock_lengths_descending",
    "BoardRequirement",
    "pack_deck_boards",
    "BOMLine",
    "BillOfMaterials",
    "compute_bom",
    "bom_to_csv",
]
