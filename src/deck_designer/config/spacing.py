# File: src/deck_designer/config/spacing.py
"""
Spacing configuration for deck framing.

A SpacingConfig is validated when it is built, so a zero, negative or
non-numeric spacing never reaches the placement loops.

Example:
    >>> config = SpacingConfig.from_feet(joist_spacing=1, beam_spacing=8, post_spacing=8)
    >>> round(config.joist_spacing, 4)
    0.3048
"""

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Tuple, Union

from deck_designer.config.framing import FRAMING_PARAMS, RECOMMENDED_MINIMUM_SPACING_FEET
from deck_designer.config.units import feet_to_meters, meters_to_feet
from deck_designer.core.errors import InvalidSpacingError
from deck_designer.utils.logging_config import get_logger

logger = get_logger(__name__)

SPACING_FIELDS = ("joist_spacing", "beam_spacing", "post_spacing")


class DeckColor(Enum):
    """Deck board colors offered for the PVC decking line."""

    DRIFTWOOD = "Driftwood"
    KHAKI = "Khaki"
    HAZELNUT = "Hazelnut"

    @classmethod
    def parse(cls, value: Union["DeckColor", str]) -> "DeckColor":
        """
        Resolve a color from an enum member or its display name (case-insensitive).

        Raises:
            ValueError: If the color is not offered
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for color in cls:
                if color.value.lower() == value.strip().lower():
                    return color
        raise ValueError(
            f"Unsupported deck color {value!r}; expected one of "
            f"{', '.join(c.value for c in cls)}"
        )

    @property
    def rgb(self) -> Tuple[float, float, float]:
        """Display color used for the deck surface, components in 0..1."""
        return _DISPLAY_RGB[self]


_DISPLAY_RGB: Dict[DeckColor, Tuple[float, float, float]] = {
    DeckColor.DRIFTWOOD: (0.6, 0.6, 0.6),
    DeckColor.KHAKI: (0.76, 0.70, 0.50),
    DeckColor.HAZELNUT: (0.54, 0.33, 0.20),
}


def _validate_spacing(name: str, value: Any, unit: str = "meters") -> float:
    """Coerce a spacing to float, rejecting anything that is not a positive finite number."""
    if isinstance(value, bool):
        raise InvalidSpacingError(name, value, unit)
    try:
        spacing = float(value)
    except (TypeError, ValueError):
        raise InvalidSpacingError(name, value, unit)
    if not math.isfinite(spacing) or spacing <= 0:
        raise InvalidSpacingError(name, value, unit)
    return spacing


@dataclass(frozen=True)
class SpacingConfig:
    """
    Structural spacing parameters for a deck.

    Attributes:
        joist_spacing: Distance between joists along X (meters)
        beam_spacing: Distance between beams along Z (meters)
        post_spacing: Post grid spacing on both axes (meters)
        has_railings: Whether to add a railing on every edge
        deck_color: Deck board color
    """

    joist_spacing: float = FRAMING_PARAMS["joist_spacing"]
    beam_spacing: float = FRAMING_PARAMS["beam_spacing"]
    post_spacing: float = FRAMING_PARAMS["post_spacing"]
    has_railings: bool = False
    deck_color: DeckColor = DeckColor.DRIFTWOOD

    def __post_init__(self):
        """Validate and normalize every field."""
        for name in SPACING_FIELDS:
            object.__setattr__(self, name, _validate_spacing(name, getattr(self, name)))
        object.__setattr__(self, "has_railings", bool(self.has_railings))
        object.__setattr__(self, "deck_color", DeckColor.parse(self.deck_color))

        for name in SPACING_FIELDS:
            minimum = RECOMMENDED_MINIMUM_SPACING_FEET[name]
            if meters_to_feet(getattr(self, name)) < minimum:
                logger.debug(
                    f"{name}={getattr(self, name):.4f} m is below the recommended "
                    f"{minimum} ft minimum"
                )

    @classmethod
    def from_feet(
        cls,
        joist_spacing: float = 1.0,
        beam_spacing: float = 8.0,
        post_spacing: float = 8.0,
        has_railings: bool = False,
        deck_color: Union[DeckColor, str] = DeckColor.DRIFTWOOD,
    ) -> "SpacingConfig":
        """
        Build a config from spacings given in feet, as the UI controls enter them.

        Raises:
            InvalidSpacingError: If a spacing is not a positive number
        """
        spacings = {
            "joist_spacing": _validate_spacing("joist_spacing", joist_spacing, "feet"),
            "beam_spacing": _validate_spacing("beam_spacing", beam_spacing, "feet"),
            "post_spacing": _validate_spacing("post_spacing", post_spacing, "feet"),
        }
        return cls(
            **{name: feet_to_meters(value) for name, value in spacings.items()},
            has_railings=has_railings,
            deck_color=deck_color,
        )

    def with_changes(self, **changes) -> "SpacingConfig":
        """Return a validated copy with some fields replaced."""
        return replace(self, **changes)

    def to_feet(self) -> Dict[str, float]:
        """Spacings converted to feet, keyed by field name."""
        return {name: meters_to_feet(getattr(self, name)) for name in SPACING_FIELDS}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "joist_spacing": self.joist_spacing,
            "beam_spacing": self.beam_spacing,
            "post_spacing": self.post_spacing,
            "has_railings": self.has_railings,
            "deck_color": self.deck_color.value,
        }
