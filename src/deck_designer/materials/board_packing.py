# File: src/deck_designer/materials/board_packing.py
"""
Deck board quantity estimation.

Boards are packed first-fit-decreasing against the stock lengths: the
longest stock length covers as much of the deck area as it can (rounded up
to whole boards), and whatever area remains goes to the next shorter
length. Because the first pass rounds up, a single stock length usually
covers the whole deck. This is a quantity estimate, not a cutting-stock
optimization; waste from cutting boards to the footprint is not modeled.
"""

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional

from deck_designer.utils.logging_config import get_logger
from .decking_profiles import BOARD_WIDTH, StockLength, stock_lengths_descending

logger = get_logger(__name__)


@dataclass
class BoardRequirement:
    """
    Boards needed of one stock length.

    Attributes:
        stock: Stock length purchased
        count: Number of boards
    """
    stock: StockLength
    count: int

    @property
    def length_m(self) -> float:
        return self.stock.length_m

    @property
    def coverage_m2(self) -> float:
        return self.count * self.stock.length_m * BOARD_WIDTH

    def to_dict(self):
        return {
            "length_m": self.stock.length_m,
            "length_ft": round(self.stock.length_feet),
            "count": self.count,
        }


def pack_deck_boards(
    deck_area_m2: float,
    board_width: float = BOARD_WIDTH,
    stock_lengths: Optional[Iterable[StockLength]] = None,
) -> List[BoardRequirement]:
    """
    Estimate deck boards for an area.

    For each stock length, longest first:
    ``boards = ceil(remaining / (length * width))``; when positive, record
    the boards and subtract the area they cover.

    Args:
        deck_area_m2: Area to cover in square meters
        board_width: Board face width in meters
        stock_lengths: Stock lengths to use (default: all, longest first)

    Returns:
        Board requirements in the order they were packed; empty for no area
    """
    lengths = sorted(
        stock_lengths if stock_lengths is not None else stock_lengths_descending(),
        key=lambda s: s.length_m,
        reverse=True,
    )

    requirements = []
    remaining = deck_area_m2
    for stock in lengths:
        board_area = stock.length_m * board_width
        boards = math.ceil(remaining / board_area)
        if boards > 0:
            requirements.append(BoardRequirement(stock=stock, count=boards))
            remaining -= boards * board_area
            logger.debug(
                f"{boards} x {stock.name} boards, {max(remaining, 0.0):.3f} m2 left"
            )

    return requirements
