# File: src/deck_designer/materials/decking_profiles.py
"""
Deck board product and stock lengths.

Defines the PVC deck board sold for the deck surface, the stock lengths it
comes in, and the fastener allowance per board.

Usage:
    from deck_designer.materials.decking_profiles import (
        DECK_BOARD, STOCK_LENGTHS, get_stock_length
    )
"""

from dataclasses import dataclass, field
from typing import Dict, List

from deck_designer.config.units import meters_to_feet


@dataclass(frozen=True)
class StockLength:
    """
    A purchasable board length.

    Attributes:
        name: Size identifier (e.g., "20ft")
        length_m: Board length in meters
    """
    name: str
    length_m: float

    @property
    def length_feet(self) -> float:
        return meters_to_feet(self.length_m)


@dataclass
class DeckBoard:
    """
    Definition of a deck board product.

    Attributes:
        name: Product identifier
        display_name: Human-readable name used on the BOM
        thickness_inches: Nominal board thickness
        width_inches: Nominal board face width
        coverage_width_m: Face width used for area coverage, in meters
        fasteners_per_board: Hidden fasteners allowed per board
        properties: Additional product properties
    """
    name: str
    display_name: str
    thickness_inches: float
    width_inches: float
    coverage_width_m: float
    fasteners_per_board: int = 2
    properties: Dict[str, str] = field(default_factory=dict)

    def describe(self, stock: StockLength, color: str) -> str:
        """BOM detail text, e.g. ``American Pro PVC 1" x 5.5" x 20 ft (Khaki)``."""
        return (
            f"{self.display_name} {self.thickness_inches:g}\" x {self.width_inches:g}\" "
            f"x {stock.length_feet:.0f} ft ({color})"
        )


# =============================================================================
# Stock Lengths
# =============================================================================

STOCK_LENGTHS: Dict[str, StockLength] = {
    "12ft": StockLength("12ft", 3.6576),
    "16ft": StockLength("16ft", 4.8768),
    "20ft": StockLength("20ft", 6.096),
}


def stock_lengths_descending() -> List[StockLength]:
    """Stock lengths ordered longest first, the order the packer consumes them."""
    return sorted(STOCK_LENGTHS.values(), key=lambda s: s.length_m, reverse=True)


def get_stock_length(length_m: float, tolerance: float = 1e-6) -> StockLength:
    """
    Find the stock entry for a length in meters.

    Raises:
        KeyError: If no stock length matches
    """
    for stock in STOCK_LENGTHS.values():
        if abs(stock.length_m - length_m) <= tolerance:
            return stock
    raise KeyError(f"No stock board of length {length_m} m")


# =============================================================================
# Deck Board Product
# =============================================================================

DECK_BOARD = DeckBoard(
    name="american_pro_pvc_1x5_5",
    display_name="American Pro PVC",
    thickness_inches=1,
    width_inches=5.5,
    coverage_width_m=0.1397,   # 5.5"
    fasteners_per_board=2,     # hidden fasteners
    properties={"material": "PVC", "warranty": "25-Year"},
)

BOARD_WIDTH = DECK_BOARD.coverage_width_m
FASTENERS_PER_BOARD = DECK_BOARD.fasteners_per_board
