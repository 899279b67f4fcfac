# File: src/deck_designer/config/framing.py

"""
Framing-specific configuration for the Deck Designer.

This module holds the fixed member cross-sections, elevations and the
default spacings used by the layout and BOM engines. All dimensions are
stored in METERS.

Lumber dimensions (actual, after drying/planing):
    2x8 joist  → 1.5" x 7.25" = 0.0381 m x 0.18415 m
    4x8 beam   → 3.5" x 7.25" = 0.0889 m x 0.18415 m
    4x4 post   → 3.5" x 3.5" x 8'  = 0.0889 m x 0.0889 m x 2.4384 m
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any


class MemberType(Enum):
    """Structural member categories produced by the layout engine."""

    JOIST = "joist"
    BEAM = "beam"
    POST = "post"
    RAILING = "railing"


@dataclass
class ProfileDimensions:
    """
    Stores dimensions for a framing profile.

    Attributes:
        name: The profile's standard designation (e.g., "2x8")
        width: Narrow face in meters (e.g., 0.0381 for a 2x8)
        height: Deep face in meters (e.g., 0.18415 for a 2x8)
        length: Fixed stock length in meters, or None when cut to fit
        description: Human-readable description of the profile
        properties: Additional profile metadata
    """

    name: str
    width: float
    height: float
    length: float = None
    description: str = ""
    properties: Dict[str, Any] = field(default_factory=dict)

    def get_dimensions(self) -> Dict[str, float]:
        """Width, height and (when fixed) length in meters."""
        dims = {"width": self.width, "height": self.height}
        if self.length is not None:
            dims["length"] = self.length
        return dims


PROFILES: Dict[MemberType, ProfileDimensions] = {
    MemberType.JOIST: ProfileDimensions(
        name="2x8",
        width=0.0381,      # 1.5"
        height=0.18415,    # 7.25"
        description="2x8 joist",
        properties={"nominal": "2x8", "actual_inches": (1.5, 7.25)},
    ),
    MemberType.BEAM: ProfileDimensions(
        name="4x8",
        width=0.0889,      # 3.5"
        height=0.18415,    # 7.25"
        description="4x8 beam",
        properties={"nominal": "4x8", "actual_inches": (3.5, 7.25)},
    ),
    MemberType.POST: ProfileDimensions(
        name="4x4",
        width=0.0889,      # 3.5"
        height=0.0889,     # 3.5"
        length=2.4384,     # 8'
        description="4x4 post",
        properties={"nominal": "4x4", "actual_inches": (3.5, 3.5)},
    ),
    MemberType.RAILING: ProfileDimensions(
        name="railing",
        width=0.05,        # depth of the railing panel
        height=0.9144,     # 36"
        description="Standard Railing",
    ),
}

# Deck surface sits 1" above the ground plane
DECK_ELEVATION = 0.0254

JOIST_WIDTH = PROFILES[MemberType.JOIST].width
JOIST_HEIGHT = PROFILES[MemberType.JOIST].height
BEAM_WIDTH = PROFILES[MemberType.BEAM].width
BEAM_HEIGHT = PROFILES[MemberType.BEAM].height
POST_WIDTH = PROFILES[MemberType.POST].width
POST_HEIGHT = PROFILES[MemberType.POST].length
RAILING_HEIGHT = PROFILES[MemberType.RAILING].height
RAILING_DEPTH = PROFILES[MemberType.RAILING].width

# Default spacings (meters), matching the recommended values in the UI
FRAMING_PARAMS: Dict[str, float] = {
    "joist_spacing": 0.3048,   # 1'
    "beam_spacing": 2.4384,    # 8'
    "post_spacing": 2.4384,    # 8'
}

# Minimum spacings the controls offer (feet); below these the adapter warns
RECOMMENDED_MINIMUM_SPACING_FEET: Dict[str, float] = {
    "joist_spacing": 0.5,
    "beam_spacing": 4.0,
    "post_spacing": 4.0,
}


def get_profile(member_type: MemberType) -> ProfileDimensions:
    """
    Look up the fixed profile for a member type.

    Raises:
        KeyError: If the member type has no profile
    """
    return PROFILES[member_type]
