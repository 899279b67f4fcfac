# File: src/deck_designer/framing_elements/railings.py
"""
Railing placement: one straight segment per polygon edge, closing the loop.
"""

import math
from typing import List

from deck_designer.config.framing import MemberType, PROFILES, RAILING_DEPTH, RAILING_HEIGHT
from deck_designer.config.units import canvas_to_meters
from deck_designer.utils.geometry_helpers import Polygon, edge_length_meters
from deck_designer.utils.logging_config import get_logger
from .structural_member import StructuralMember

logger = get_logger(__name__)


class RailingGenerator:
    """
    Generates railing segments along the deck perimeter.

    Each segment is as long as its edge, centered on the edge midpoint,
    raised so it stands on the ground plane, and turned about the vertical
    axis by ``atan2(dz, dx)`` to follow the edge.
    """

    def __init__(self, polygon: Polygon):
        self.polygon = polygon
        self.profile = PROFILES[MemberType.RAILING]

    def generate_railings(self) -> List[StructuralMember]:
        if len(self.polygon) < 3:
            return []

        railings = []
        count = len(self.polygon)
        for i, start in enumerate(self.polygon):
            end = self.polygon[(i + 1) % count]
            mid_x = canvas_to_meters(start.x + end.x) / 2
            mid_z = canvas_to_meters(start.y + end.y) / 2
            railings.append(StructuralMember(
                id=f"railing_{i}",
                member_type=MemberType.RAILING,
                profile=self.profile.name,
                position=(mid_x, RAILING_HEIGHT / 2, mid_z),
                width=edge_length_meters(self.polygon, i),
                height=RAILING_HEIGHT,
                depth=RAILING_DEPTH,
                rotation_y=math.atan2(end.y - start.y, end.x - start.x),
            ))

        logger.debug(f"Generated {len(railings)} railing segments")
        return railings
