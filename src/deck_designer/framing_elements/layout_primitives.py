# File: src/deck_designer/framing_elements/layout_primitives.py
"""
Shared placement rule for deck framing.

Joists, beams and posts are all tiled the same way: starting at the low edge
of the bounds, one member every ``spacing`` meters, for as long as the
position stays within the bounds. Both the 3D layout and the bill of
materials derive their numbers from the functions below so the rendered
member count and the reported count cannot drift apart.

Terminology:
    grid positions     ``start + k * spacing`` for k = 0 .. floor(extent / spacing)
    interior positions grid positions strictly between start and stop
                       (the ones the layout draws for joists and beams)

A small tolerance absorbs floating-point error, so an extent that is an
exact multiple of the spacing (12 ft at 1 ft) lands on the boundary
instead of just short of it.
"""

import math
from typing import List

from deck_designer.core.errors import InvalidSpacingError

# Relative slack, in units of "spacings", when comparing positions to bounds
PLACEMENT_TOLERANCE = 1e-9


def _steps(extent: float, spacing: float) -> float:
    """Extent measured in spacings, guarding the divisor."""
    if not spacing > 0 or not math.isfinite(spacing):
        raise InvalidSpacingError("spacing", spacing)
    return max(extent, 0.0) / spacing


def grid_count(extent: float, spacing: float) -> int:
    """
    Number of grid positions from one edge to the other, both ends inclusive.

    This is ``floor(extent / spacing) + 1``.

    Args:
        extent: Length of the span in meters
        spacing: Distance between members in meters

    Raises:
        InvalidSpacingError: If spacing is not a positive finite number
    """
    return math.floor(_steps(extent, spacing) + PLACEMENT_TOLERANCE) + 1


def grid_positions(start: float, stop: float, spacing: float) -> List[float]:
    """Every grid position from ``start`` up to and including ``stop``."""
    count = grid_count(stop - start, spacing)
    return [start + k * spacing for k in range(count)]


def interior_positions(start: float, stop: float, spacing: float) -> List[float]:
    """
    Grid positions strictly inside ``(start, stop)``.

    The first position (on ``start``) is always excluded; the last grid
    position is excluded only when it falls on ``stop``.
    """
    steps = _steps(stop - start, spacing)
    count = grid_count(stop - start, spacing)
    return [
        start + k * spacing
        for k in range(1, count)
        if steps - k > PLACEMENT_TOLERANCE
    ]


def grid_points(
    min_x: float, max_x: float, min_z: float, max_z: float, spacing: float
) -> List[tuple]:
    """Full 2D grid of (x, z) positions, X varying fastest."""
    xs = grid_positions(min_x, max_x, spacing)
    zs = grid_positions(min_z, max_z, spacing)
    return [(x, z) for z in zs for x in xs]


def grid_point_count(x_extent: float, z_extent: float, spacing: float) -> int:
    """Number of points grid_points() produces for the given extents."""
    return grid_count(x_extent, spacing) * grid_count(z_extent, spacing)
