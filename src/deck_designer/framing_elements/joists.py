# File: src/deck_designer/framing_elements/joists.py
"""
Joist placement.

Joists run along Z and are tiled across X. They hang directly beneath the
deck surface: the top face of every joist sits at deck elevation.
"""

from typing import List

from deck_designer.config.framing import (
    DECK_ELEVATION,
    JOIST_HEIGHT,
    JOIST_WIDTH,
    MemberType,
    PROFILES,
)
from deck_designer.utils.geometry_helpers import Bounds
from deck_designer.utils.logging_config import get_logger
from .layout_primitives import grid_count, interior_positions
from .structural_member import StructuralMember

logger = get_logger(__name__)


def calculate_joist_locations(bounds: Bounds, joist_spacing: float) -> List[float]:
    """
    X positions of the joists drawn inside the bounds.

    One joist every ``joist_spacing`` from ``min_x``, strictly between the
    two X edges of the bounds.
    """
    return interior_positions(bounds.min_x, bounds.max_x, joist_spacing)


def joist_count(bounds: Bounds, joist_spacing: float) -> int:
    """Number of joists to purchase: ``floor(x_extent / spacing) + 1``."""
    return grid_count(bounds.x_extent, joist_spacing)


class JoistGenerator:
    """
    Generates the joists for a deck.

    Attributes:
        bounds: Bounding box of the deck in meters
        joist_spacing: Distance between joists in meters
    """

    def __init__(self, bounds: Bounds, joist_spacing: float):
        self.bounds = bounds
        self.joist_spacing = joist_spacing
        self.profile = PROFILES[MemberType.JOIST]

    def generate_joists(self) -> List[StructuralMember]:
        """
        Create one joist per X location, each spanning the full Z extent.

        Returns:
            List of joist members, ordered by increasing X
        """
        locations = calculate_joist_locations(self.bounds, self.joist_spacing)
        center_y = DECK_ELEVATION - JOIST_HEIGHT / 2

        joists = []
        for i, x in enumerate(locations):
            logger.trace(f"joist_{i} at x={x:.4f}")
            joists.append(StructuralMember(
                id=f"joist_{i}",
                member_type=MemberType.JOIST,
                profile=self.profile.name,
                position=(x, center_y, self.bounds.center_z),
                width=JOIST_WIDTH,
                height=JOIST_HEIGHT,
                depth=self.bounds.z_extent,
            ))

        logger.debug(f"Generated {len(joists)} joists at {self.joist_spacing:.4f} m spacing")
        return joists
