# File: src/deck_designer/framing_elements/beams.py
"""
Beam placement.

Beams run along X beneath the joists and are tiled across Z.
"""

from typing import List

from deck_designer.config.framing import (
    BEAM_HEIGHT,
    BEAM_WIDTH,
    DECK_ELEVATION,
    JOIST_HEIGHT,
    MemberType,
    PROFILES,
)
from deck_designer.utils.geometry_helpers import Bounds
from deck_designer.utils.logging_config import get_logger
from .layout_primitives import grid_count, interior_positions
from .structural_member import StructuralMember

logger = get_logger(__name__)


def calculate_beam_locations(bounds: Bounds, beam_spacing: float) -> List[float]:
    """Z positions of the beams drawn strictly inside the bounds."""
    return interior_positions(bounds.min_z, bounds.max_z, beam_spacing)


def beam_count(bounds: Bounds, beam_spacing: float) -> int:
    """Number of beams to purchase: ``floor(z_extent / spacing) + 1``."""
    return grid_count(bounds.z_extent, beam_spacing)


def beam_center_elevation() -> float:
    """Center height of a beam hung below the joists."""
    return DECK_ELEVATION - BEAM_HEIGHT - JOIST_HEIGHT / 2


class BeamGenerator:
    """Generates the beams for a deck, one per Z location, each spanning the full X extent."""

    def __init__(self, bounds: Bounds, beam_spacing: float):
        self.bounds = bounds
        self.beam_spacing = beam_spacing
        self.profile = PROFILES[MemberType.BEAM]

    def generate_beams(self) -> List[StructuralMember]:
        locations = calculate_beam_locations(self.bounds, self.beam_spacing)
        center_y = beam_center_elevation()

        beams = [
            StructuralMember(
                id=f"beam_{i}",
                member_type=MemberType.BEAM,
                profile=self.profile.name,
                position=(self.bounds.center_x, center_y, z),
                width=self.bounds.x_extent,
                height=BEAM_HEIGHT,
                depth=BEAM_WIDTH,
            )
            for i, z in enumerate(locations)
        ]

        logger.debug(f"Generated {len(beams)} beams at {self.beam_spacing:.4f} m spacing")
        return beams
