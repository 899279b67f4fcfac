# File: src/deck_designer/framing_elements/structural_member.py
"""
Data classes for the generated deck structure.

World coordinates are meters with Y up: canvas ``x`` maps to world X and
canvas ``y`` maps to world Z. Box dimensions follow the same axes
(width along X, height along Y, depth along Z) before ``rotation_y`` is
applied.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from deck_designer.config.framing import MemberType
from deck_designer.config.spacing import DeckColor
from deck_designer.utils.geometry_helpers import Bounds


@dataclass
class StructuralMember:
    """
    A single joist, beam, post or railing segment.

    Attributes:
        id: Unique member identifier (e.g. "joist_3")
        member_type: Kind of member
        profile: Lumber designation (e.g. "2x8")
        position: Center of the member (x, y, z) in meters
        width: Size along X in meters
        height: Size along Y in meters
        depth: Size along Z in meters
        rotation_y: Rotation about the vertical axis in radians
    """
    id: str
    member_type: MemberType
    profile: str
    position: Tuple[float, float, float]
    width: float
    height: float
    depth: float
    rotation_y: float = 0.0

    @property
    def length(self) -> float:
        """Run length of the member: vertical for posts, longest horizontal side otherwise."""
        if self.member_type == MemberType.POST:
            return self.height
        return max(self.width, self.depth)

    @property
    def top(self) -> float:
        return self.position[1] + self.height / 2

    @property
    def bottom(self) -> float:
        return self.position[1] - self.height / 2

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "member_type": self.member_type.value,
            "profile": self.profile,
            "position": {
                "x": self.position[0],
                "y": self.position[1],
                "z": self.position[2],
            },
            "width": self.width,
            "height": self.height,
            "depth": self.depth,
            "rotation_y": self.rotation_y,
            "length": self.length,
        }


@dataclass
class DeckSurface:
    """
    The deck footprint lifted to its walking-surface elevation.

    Attributes:
        vertices: Polygon corners as (x, y, z) in meters
        elevation: Height of the surface above the ground plane
        color: Deck board color
        rgb: Display color for the color, components in 0..1
        area_m2: Footprint area
    """
    vertices: List[Tuple[float, float, float]]
    elevation: float
    color: DeckColor
    rgb: Tuple[float, float, float]
    area_m2: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "vertices": [{"x": x, "y": y, "z": z} for x, y, z in self.vertices],
            "elevation": self.elevation,
            "color": self.color.value,
            "rgb": list(self.rgb),
            "area_m2": self.area_m2,
        }


@dataclass
class DeckLayout:
    """
    Complete structural layout for one deck.

    Recomputed from scratch on every call; nothing here is updated in place.

    Attributes:
        deck_surface: Lifted deck surface, None for fewer than three points
        joists: Joists tiled along X
        beams: Beams tiled along Z
        posts: Post grid
        railings: One railing segment per edge when railings are enabled
        bounds: Bounding box the members were tiled over
        errors: Recoverable errors raised while computing the layout
    """
    deck_surface: Optional[DeckSurface] = None
    joists: List[StructuralMember] = field(default_factory=list)
    beams: List[StructuralMember] = field(default_factory=list)
    posts: List[StructuralMember] = field(default_factory=list)
    railings: List[StructuralMember] = field(default_factory=list)
    bounds: Bounds = field(default_factory=Bounds)
    errors: List[str] = field(default_factory=list)

    @property
    def members(self) -> List[StructuralMember]:
        """All members in draw order (joists, beams, posts, railings)."""
        return self.joists + self.beams + self.posts + self.railings

    @property
    def member_count(self) -> int:
        return len(self.joists) + len(self.beams) + len(self.posts) + len(self.railings)

    @property
    def is_empty(self) -> bool:
        return self.deck_surface is None and self.member_count == 0

    def counts(self) -> Dict[str, int]:
        """Number of members per type."""
        return {
            MemberType.JOIST.value: len(self.joists),
            MemberType.BEAM.value: len(self.beams),
            MemberType.POST.value: len(self.posts),
            MemberType.RAILING.value: len(self.railings),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "deck_surface": self.deck_surface.to_dict() if self.deck_surface else None,
            "joists": [m.to_dict() for m in self.joists],
            "beams": [m.to_dict() for m in self.beams],
            "posts": [m.to_dict() for m in self.posts],
            "railings": [m.to_dict() for m in self.railings],
            "bounds": self.bounds.to_dict(),
            "counts": self.counts(),
            "errors": list(self.errors),
        }
