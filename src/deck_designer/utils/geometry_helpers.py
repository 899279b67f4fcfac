# File: src/deck_designer/utils/geometry_helpers.py
"""
Pure geometry functions over a deck footprint polygon.

Polygons are ordered point lists in canvas units (50 units = 1 meter); the
loop closes implicitly from the last point back to the first once there are
three or more points. Every function here accepts degenerate polygons and
answers with zeros instead of raising.

Canvas ``y`` becomes world ``z`` when a point is converted to meters.

Usage:
    from deck_designer.utils.geometry_helpers import polygon_area_m2, bounds_meters

    square = [(0, 0), (600, 0), (600, 600), (0, 600)]
    polygon_area_m2(square)   # 144.0
    bounds_meters(square)     # Bounds(min_x=0.0, max_x=12.0, min_z=0.0, max_z=12.0)
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from deck_designer.config.units import (
    CANVAS_UNITS_PER_METER,
    canvas_to_meters,
    feet_to_meters,
    format_feet,
    meters_to_canvas,
)


@dataclass(frozen=True)
class Point:
    """2D point in canvas units."""
    x: float
    y: float

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}

    def to_meters(self) -> Tuple[float, float]:
        """World (x, z) position in meters."""
        return (canvas_to_meters(self.x), canvas_to_meters(self.y))


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box of a polygon, in meters."""
    min_x: float = 0.0
    max_x: float = 0.0
    min_z: float = 0.0
    max_z: float = 0.0

    @property
    def x_extent(self) -> float:
        return self.max_x - self.min_x

    @property
    def z_extent(self) -> float:
        return self.max_z - self.min_z

    @property
    def center_x(self) -> float:
        return (self.min_x + self.max_x) / 2

    @property
    def center_z(self) -> float:
        return (self.min_z + self.max_z) / 2

    @property
    def is_degenerate(self) -> bool:
        """True when the box has no area (empty, a point or a line)."""
        return self.x_extent <= 0 or self.z_extent <= 0

    def to_dict(self) -> Dict[str, float]:
        return {
            "min_x": self.min_x,
            "max_x": self.max_x,
            "min_z": self.min_z,
            "max_z": self.max_z,
        }


@dataclass(frozen=True)
class EdgeDimension:
    """Dimension annotation for one polygon edge."""
    index: int
    midpoint: Point
    length_m: float
    label: str


Polygon = List[Point]


def to_point(value: Any) -> Point:
    """
    Coerce a Point, ``(x, y)`` pair or ``{"x": .., "y": ..}`` mapping to a Point.

    Raises:
        ValueError: If the value cannot be read as a point
    """
    if isinstance(value, Point):
        return value
    if isinstance(value, (str, bytes)):
        raise ValueError(f"Cannot interpret {value!r} as a point")
    try:
        if isinstance(value, dict):
            return Point(float(value["x"]), float(value["y"]))
        x, y = value
        return Point(float(x), float(y))
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Cannot interpret {value!r} as a point") from e


def to_polygon(points: Optional[Sequence[Any]]) -> Polygon:
    """Coerce a sequence of point-like values to a list of Points."""
    if not points:
        return []
    return [to_point(p) for p in points]


def _shoelace(polygon: Polygon) -> float:
    """Signed shoelace sum over consecutive vertex pairs, wrapping last to first."""
    total = 0.0
    count = len(polygon)
    for i, p in enumerate(polygon):
        nxt = polygon[(i + 1) % count]
        total += p.x * nxt.y - nxt.x * p.y
    return total


def polygon_area_m2(points: Sequence[Any]) -> float:
    """
    Area of the deck footprint in square meters.

    Args:
        points: Polygon vertices in canvas units

    Returns:
        Absolute area in m², 0 for fewer than three points
    """
    polygon = to_polygon(points)
    if len(polygon) < 3:
        return 0.0
    return abs(_shoelace(polygon) / 2) / (CANVAS_UNITS_PER_METER * CANVAS_UNITS_PER_METER)


def bounds_meters(points: Sequence[Any]) -> Bounds:
    """
    Bounding box of the polygon after conversion to meters.

    An empty polygon gives an all-zero Bounds.
    """
    polygon = to_polygon(points)
    if not polygon:
        return Bounds()
    xs = [canvas_to_meters(p.x) for p in polygon]
    zs = [canvas_to_meters(p.y) for p in polygon]
    return Bounds(min_x=min(xs), max_x=max(xs), min_z=min(zs), max_z=max(zs))


def edge_length_meters(points: Sequence[Any], index: int) -> float:
    """
    Length in meters of the edge from point ``index`` to the next point.

    The last edge wraps back to the first point.

    Raises:
        IndexError: If the polygon is empty or the index is out of range
    """
    polygon = to_polygon(points)
    if not polygon:
        raise IndexError("edge index out of range for an empty polygon")
    start = polygon[index]
    end = polygon[(index % len(polygon) + 1) % len(polygon)]
    return canvas_to_meters(math.hypot(end.x - start.x, end.y - start.y))


def perimeter_meters(points: Sequence[Any]) -> float:
    """Sum of all edge lengths (wrapping last to first) in meters."""
    polygon = to_polygon(points)
    if len(polygon) < 2:
        return 0.0
    return sum(edge_length_meters(polygon, i) for i in range(len(polygon)))


def polygon_centroid_meters(points: Sequence[Any]) -> Tuple[float, float]:
    """
    Area centroid of the polygon as world (x, z) in meters.

    Falls back to the vertex average when the polygon has no area, and to
    the origin for an empty polygon.
    """
    polygon = to_polygon(points)
    if not polygon:
        return (0.0, 0.0)

    signed = _shoelace(polygon)
    if len(polygon) < 3 or abs(signed) < 1e-12:
        cx = sum(p.x for p in polygon) / len(polygon)
        cy = sum(p.y for p in polygon) / len(polygon)
        return (canvas_to_meters(cx), canvas_to_meters(cy))

    cx = cy = 0.0
    count = len(polygon)
    for i, p in enumerate(polygon):
        nxt = polygon[(i + 1) % count]
        cross = p.x * nxt.y - nxt.x * p.y
        cx += (p.x + nxt.x) * cross
        cy += (p.y + nxt.y) * cross
    factor = 1.0 / (3.0 * signed)
    return (canvas_to_meters(cx * factor), canvas_to_meters(cy * factor))


def edge_dimensions(points: Sequence[Any], precision: int = 2) -> List[EdgeDimension]:
    """
    Midpoint and feet label for every edge, for dimensioned blueprints.

    Returns an empty list for fewer than three points.
    """
    polygon = to_polygon(points)
    if len(polygon) < 3:
        return []
    dimensions = []
    for i, p in enumerate(polygon):
        nxt = polygon[(i + 1) % len(polygon)]
        length = edge_length_meters(polygon, i)
        dimensions.append(EdgeDimension(
            index=i,
            midpoint=Point((p.x + nxt.x) / 2, (p.y + nxt.y) / 2),
            length_m=length,
            label=format_feet(length, precision),
        ))
    return dimensions


def create_default_deck(width_ft: float = 12, length_ft: float = 12) -> Polygon:
    """
    Rectangular starter footprint anchored at the canvas origin.

    Args:
        width_ft: Deck width along X in feet
        length_ft: Deck length along Z in feet

    Returns:
        Four corner points in canvas units
    """
    width = meters_to_canvas(feet_to_meters(width_ft))
    length = meters_to_canvas(feet_to_meters(length_ft))
    return [Point(0, 0), Point(width, 0), Point(width, length), Point(0, length)]


# =============================================================================
# Sketch editing
# =============================================================================

def snap_to_grid(x: float, y: float, grid: float = CANVAS_UNITS_PER_METER) -> Point:
    """Round a canvas position to the nearest grid intersection."""
    return Point(round(x / grid) * grid, round(y / grid) * grid)


def append_point(points: Sequence[Any], point: Any) -> Polygon:
    """Return a new polygon with ``point`` added at the end."""
    return to_polygon(points) + [to_point(point)]


def replace_point(points: Sequence[Any], index: int, point: Any) -> Polygon:
    """
    Return a new polygon with the vertex at ``index`` replaced.

    Raises:
        IndexError: If the index is out of range
    """
    polygon = to_polygon(points)
    polygon[index] = to_point(point)
    return polygon


def find_vertex_near(points: Sequence[Any], x: float, y: float, tolerance: float = 10.0) -> Optional[int]:
    """Index of the first vertex within ``tolerance`` on both axes, or None."""
    for i, p in enumerate(to_polygon(points)):
        if abs(p.x - x) < tolerance and abs(p.y - y) < tolerance:
            return i
    return None
