# File: src/deck_designer/materials/bill_of_materials.py
"""
Bill of materials for a deck.

compute_bom() derives deck boards, framing members, railing length and
fasteners from the footprint polygon and a SpacingConfig. Member counts
come from the same placement grid the 3D layout uses
(``floor(extent / spacing) + 1`` per axis).

Usage:
    from deck_designer.materials import compute_bom, bom_to_csv

    bom = compute_bom(points, SpacingConfig())
    csv_text = bom_to_csv(bom)
"""

import csv
import io
import traceback
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from deck_designer.config.framing import MemberType, POST_HEIGHT, PROFILES
from deck_designer.config.spacing import DeckColor, SpacingConfig
from deck_designer.config.units import meters_to_feet
from deck_designer.core.errors import ComputationError
from deck_designer.framing_elements.beams import beam_count
from deck_designer.framing_elements.framing_generator import coerce_config
from deck_designer.framing_elements.joists import joist_count
from deck_designer.framing_elements.posts import post_count
from deck_designer.utils.geometry_helpers import (
    bounds_meters,
    perimeter_meters,
    polygon_area_m2,
    to_polygon,
)
from deck_designer.utils.logging_config import get_logger
from .board_packing import BoardRequirement, pack_deck_boards
from .decking_profiles import DECK_BOARD, FASTENERS_PER_BOARD

logger = get_logger(__name__)

CSV_HEADER = ["Item", "Quantity", "Unit", "Details"]


@dataclass
class BOMLine:
    """
    One row of the bill of materials.

    Attributes:
        item: Item kind ("Deck Board", "Joists", ...)
        quantity: Count, or length for items sold by the meter
        unit: "Each" or "Meters"
        details: Product description
    """
    item: str
    quantity: Union[int, float]
    unit: str
    details: str

    def to_row(self) -> List[str]:
        quantity = f"{self.quantity:.1f}" if isinstance(self.quantity, float) else str(self.quantity)
        return [self.item, quantity, self.unit, self.details]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "item": self.item,
            "quantity": self.quantity,
            "unit": self.unit,
            "details": self.details,
        }


@dataclass
class BillOfMaterials:
    """
    Materials list for one deck.

    Attributes:
        boards: Deck boards per stock length, longest first
        joist_count: Number of joists
        joist_length: Length of each joist in meters (Z extent)
        beam_count: Number of beams
        beam_length: Length of each beam in meters (X extent)
        post_count: Number of posts
        post_length: Length of each post in meters
        railing_length: Total railing length in meters (0 without railings)
        total_fasteners: Hidden fasteners for all boards
        deck_area_m2: Footprint area
        deck_color: Board color
        errors: Recoverable errors raised while computing the BOM
    """
    boards: List[BoardRequirement] = field(default_factory=list)
    joist_count: int = 0
    joist_length: float = 0.0
    beam_count: int = 0
    beam_length: float = 0.0
    post_count: int = 0
    post_length: float = POST_HEIGHT
    railing_length: float = 0.0
    total_fasteners: int = 0
    deck_area_m2: float = 0.0
    deck_color: DeckColor = DeckColor.DRIFTWOOD
    errors: List[str] = field(default_factory=list)

    @property
    def total_boards(self) -> int:
        return sum(b.count for b in self.boards)

    @property
    def deck_area_sqft(self) -> float:
        return self.deck_area_m2 * meters_to_feet(1.0) ** 2

    @property
    def is_empty(self) -> bool:
        return (
            not self.boards
            and self.joist_count == 0
            and self.beam_count == 0
            and self.post_count == 0
            and self.railing_length == 0
        )

    def to_lines(self) -> List[BOMLine]:
        """Itemized rows in export order."""
        color = self.deck_color.value
        lines = [
            BOMLine("Deck Board", b.count, "Each", DECK_BOARD.describe(b.stock, color))
            for b in self.boards
        ]
        joist = PROFILES[MemberType.JOIST].name
        beam = PROFILES[MemberType.BEAM].name
        post = PROFILES[MemberType.POST].name
        lines.append(BOMLine("Joists", self.joist_count, "Each", f"{joist} x {self.joist_length:.1f} m"))
        lines.append(BOMLine("Beams", self.beam_count, "Each", f"{beam} x {self.beam_length:.1f} m"))
        lines.append(BOMLine("Posts", self.post_count, "Each", f"{post} x {self.post_length} m"))
        if self.railing_length:
            lines.append(BOMLine("Railing", float(self.railing_length), "Meters", "Standard Railing"))
        lines.append(BOMLine("Fasteners", self.total_fasteners, "Each", "Hidden Fasteners"))
        return lines

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "boards": [b.to_dict() for b in self.boards],
            "total_boards": self.total_boards,
            "joist_count": self.joist_count,
            "joist_length": self.joist_length,
            "beam_count": self.beam_count,
            "beam_length": self.beam_length,
            "post_count": self.post_count,
            "post_length": self.post_length,
            "railing_length": self.railing_length,
            "total_fasteners": self.total_fasteners,
            "deck_area_m2": self.deck_area_m2,
            "deck_area_sqft": self.deck_area_sqft,
            "deck_color": self.deck_color.value,
            "lines": [line.to_dict() for line in self.to_lines()],
            "errors": list(self.errors),
        }


def compute_bom(
    polygon: Sequence[Any],
    config: Union[SpacingConfig, Mapping[str, Any], None] = None,
) -> BillOfMaterials:
    """
    Compute the bill of materials for a deck footprint.

    Fewer than three points, or a footprint whose bounding box has no area,
    gives a zeroed BOM. Unexpected failures are logged and reported on
    ``errors`` with a zeroed BOM instead of raising.

    Args:
        polygon: Footprint points in canvas units
        config: SpacingConfig, mapping of its fields, or None for defaults

    Returns:
        BillOfMaterials for the footprint

    Raises:
        InvalidSpacingError: If a spacing is not a positive number
        ValueError: If a point cannot be read
    """
    points = to_polygon(polygon)
    config = coerce_config(config)

    try:
        return _compute(points, config)
    except Exception as e:
        error = ComputationError("bill of materials", e)
        logger.error(f"{error.detail}\n{traceback.format_exc()}")
        return BillOfMaterials(deck_color=config.deck_color, errors=[error.detail])


def _compute(points, config: SpacingConfig) -> BillOfMaterials:
    if len(points) < 3:
        return BillOfMaterials(deck_color=config.deck_color)

    bounds = bounds_meters(points)
    if bounds.is_degenerate:
        logger.warning("Deck footprint has no area; returning an empty bill of materials")
        return BillOfMaterials(deck_color=config.deck_color)

    deck_area = polygon_area_m2(points)
    boards = pack_deck_boards(deck_area)

    bom = BillOfMaterials(
        boards=boards,
        joist_count=joist_count(bounds, config.joist_spacing),
        joist_length=bounds.z_extent,
        beam_count=beam_count(bounds, config.beam_spacing),
        beam_length=bounds.x_extent,
        post_count=post_count(bounds, config.post_spacing),
        railing_length=perimeter_meters(points) if config.has_railings else 0.0,
        total_fasteners=sum(b.count for b in boards) * FASTENERS_PER_BOARD,
        deck_area_m2=deck_area,
        deck_color=config.deck_color,
    )
    logger.info(
        f"BOM: {bom.total_boards} boards, {bom.joist_count} joists, "
        f"{bom.beam_count} beams, {bom.post_count} posts"
    )
    return bom


def bom_to_csv(bom: BillOfMaterials, deck_color: Optional[Union[DeckColor, str]] = None) -> str:
    """
    Render the BOM as CSV text with the header ``Item,Quantity,Unit,Details``.

    Args:
        bom: Bill of materials
        deck_color: Override for the color named on board rows

    Returns:
        CSV document as a string
    """
    if deck_color is not None:
        bom = replace(bom, deck_color=DeckColor.parse(deck_color))

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for line in bom.to_lines():
        writer.writerow(line.to_row())
    return buffer.getvalue()
