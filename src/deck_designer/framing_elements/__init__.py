# src/deck_designer/framing_elements/__init__.py

from .layout_primitives import grid_count, grid_positions, interior_positions, grid_points
from .structural_member import StructuralMember, DeckSurface, DeckLayout
from .joists import JoistGenerator, calculate_joist_locations, joist_count
from .beams import BeamGenerator, calculate_beam_locations, beam_count
from .posts import PostGenerator, calculate_post_locations, post_count
from .railings import RailingGenerator
from .framing_generator import FramingGenerator, layout, create_deck_surface

__all__ = [
    "grid_count",
    "grid_positions",
    "interior_positions",
    "grid_points",
    "StructuralMember",
    "DeckSurface",
    "DeckLayout",
    "JoistGenerator",
    "calculate_joist_locations",
    "joist_count",
    "BeamGenerator",
    "calculate_beam_locations",
    "beam_count",
    "PostGenerator",
    "calculate_post_locations",
    "post_count",
    "RailingGenerator",
    "FramingGenerator",
    "layout",
    "create_deck_surface",
]
