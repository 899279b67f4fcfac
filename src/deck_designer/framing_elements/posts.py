# File: src/deck_designer/framing_elements/posts.py
"""
Post placement.

Posts sit on a full grid covering the bounding box, corners included,
stepping ``post_spacing`` on X and Z independently. Each post hangs below
the ground plane as a footing: its top is at y = 0.
"""

from typing import List, Tuple

from deck_designer.config.framing import MemberType, POST_HEIGHT, POST_WIDTH, PROFILES
from deck_designer.utils.geometry_helpers import Bounds
from deck_designer.utils.logging_config import get_logger
from .layout_primitives import grid_point_count, grid_points
from .structural_member import StructuralMember

logger = get_logger(__name__)


def calculate_post_locations(bounds: Bounds, post_spacing: float) -> List[Tuple[float, float]]:
    """(x, z) positions of every post, row by row from ``min_z``."""
    return grid_points(bounds.min_x, bounds.max_x, bounds.min_z, bounds.max_z, post_spacing)


def post_count(bounds: Bounds, post_spacing: float) -> int:
    """
    Number of posts on the grid.

    ``(floor(x_extent / spacing) + 1) * (floor(z_extent / spacing) + 1)``
    """
    return grid_point_count(bounds.x_extent, bounds.z_extent, post_spacing)


class PostGenerator:
    """Generates the post grid for a deck."""

    def __init__(self, bounds: Bounds, post_spacing: float):
        self.bounds = bounds
        self.post_spacing = post_spacing
        self.profile = PROFILES[MemberType.POST]

    def generate_posts(self) -> List[StructuralMember]:
        posts = []
        for i, (x, z) in enumerate(calculate_post_locations(self.bounds, self.post_spacing)):
            logger.trace(f"post_{i} at ({x:.4f}, {z:.4f})")
            posts.append(StructuralMember(
                id=f"post_{i}",
                member_type=MemberType.POST,
                profile=self.profile.name,
                position=(x, -POST_HEIGHT / 2, z),
                width=POST_WIDTH,
                height=POST_HEIGHT,
                depth=POST_WIDTH,
            ))

        logger.debug(f"Generated {len(posts)} posts at {self.post_spacing:.4f} m spacing")
        return posts
