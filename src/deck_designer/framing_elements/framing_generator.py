# File: src/deck_designer/framing_elements/framing_generator.py
"""
Deck structure generation.

FramingGenerator turns a footprint polygon and a SpacingConfig into a
DeckLayout: the lifted deck surface plus joists, beams, posts and (when
enabled) railings. The generator keeps no state between calls; build a new
one, or call layout(), whenever the polygon or the configuration changes.

Usage:
    from deck_designer.framing_elements import layout
    from deck_designer.config.spacing import SpacingConfig

    result = layout([(0, 0), (600, 0), (600, 600), (0, 600)], SpacingConfig())
    print(result.counts())
"""

import traceback
from typing import Any, Mapping, Sequence, Union

from deck_designer.config.framing import DECK_ELEVATION
from deck_designer.config.spacing import SpacingConfig
from deck_designer.config.units import canvas_to_meters
from deck_designer.core.errors import ComputationError
from deck_designer.utils.geometry_helpers import (
    Bounds,
    Polygon,
    bounds_meters,
    polygon_area_m2,
    to_polygon,
)
from deck_designer.utils.logging_config import get_logger
from .beams import BeamGenerator
from .joists import JoistGenerator
from .posts import PostGenerator
from .railings import RailingGenerator
from .structural_member import DeckLayout, DeckSurface

logger = get_logger(__name__)


def coerce_config(config: Union[SpacingConfig, Mapping[str, Any], None]) -> SpacingConfig:
    """
    Accept a SpacingConfig, a mapping of its fields, or None for the defaults.

    Raises:
        InvalidSpacingError: If a spacing in the mapping is invalid
    """
    if config is None:
        return SpacingConfig()
    if isinstance(config, SpacingConfig):
        return config
    return SpacingConfig(**dict(config))


def create_deck_surface(polygon: Polygon, config: SpacingConfig) -> DeckSurface:
    """Lift the footprint to deck elevation and tag it with the board color."""
    return DeckSurface(
        vertices=[
            (canvas_to_meters(p.x), DECK_ELEVATION, canvas_to_meters(p.y))
            for p in polygon
        ],
        elevation=DECK_ELEVATION,
        color=config.deck_color,
        rgb=config.deck_color.rgb,
        area_m2=polygon_area_m2(polygon),
    )


class FramingGenerator:
    """
    Coordinates the generation of every deck member.

    Attributes:
        polygon: Footprint in canvas units
        config: Validated spacing configuration
        bounds: Bounding box of the footprint in meters
    """

    def __init__(self, polygon: Sequence[Any], config: Union[SpacingConfig, Mapping[str, Any], None] = None):
        """
        Initialize the generator.

        Args:
            polygon: Footprint points (Point, (x, y) or {"x", "y"}) in canvas units
            config: Spacing configuration; invalid spacings are rejected here

        Raises:
            InvalidSpacingError: If a spacing is not a positive number
            ValueError: If a point cannot be read
        """
        self.polygon = to_polygon(polygon)
        self.config = coerce_config(config)
        self.bounds = bounds_meters(self.polygon) if len(self.polygon) >= 3 else Bounds()

    def generate_framing(self) -> DeckLayout:
        """
        Build the complete layout.

        Fewer than three points gives an empty layout. A footprint whose
        bounding box has no area (all points on one line) gets a deck
        surface but no framing.

        Returns:
            DeckLayout with members grouped by type
        """
        if len(self.polygon) < 3:
            logger.debug(f"Polygon has {len(self.polygon)} points; nothing to frame")
            return DeckLayout()

        result = DeckLayout(
            deck_surface=create_deck_surface(self.polygon, self.config),
            bounds=self.bounds,
        )

        if self.bounds.is_degenerate:
            logger.warning("Deck footprint has no area; skipping framing")
            return result

        result.joists = JoistGenerator(self.bounds, self.config.joist_spacing).generate_joists()
        result.beams = BeamGenerator(self.bounds, self.config.beam_spacing).generate_beams()
        result.posts = PostGenerator(self.bounds, self.config.post_spacing).generate_posts()
        if self.config.has_railings:
            result.railings = RailingGenerator(self.polygon).generate_railings()

        logger.info(
            f"Framed deck: {len(result.joists)} joists, {len(result.beams)} beams, "
            f"{len(result.posts)} posts, {len(result.railings)} railings"
        )
        return result


def layout(polygon: Sequence[Any], config: Union[SpacingConfig, Mapping[str, Any], None] = None) -> DeckLayout:
    """
    Derive the deck structure for a footprint.

    Invalid input (bad spacings, unreadable points) raises. Any other failure
    is logged and reported on ``DeckLayout.errors`` with an empty layout, so
    a caller redrawing on every edit keeps running.

    Args:
        polygon: Footprint points in canvas units
        config: SpacingConfig, mapping of its fields, or None for defaults

    Returns:
        DeckLayout for the footprint

    Raises:
        InvalidSpacingError: If a spacing is not a positive number
        ValueError: If a point cannot be read
    """
    generator = FramingGenerator(polygon, config)
    try:
        return generator.generate_framing()
    except Exception as e:
        error = ComputationError("layout", e)
        logger.error(f"{error.detail}\n{traceback.format_exc()}")
        return DeckLayout(errors=[error.detail])
