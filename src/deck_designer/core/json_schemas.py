# File: src/deck_designer/core/json_schemas.py
"""
Project file schema.

A project file is a flat JSON document holding everything needed to
recompute a design:

    {
      "points": [{"x": 0, "y": 0}, ...],
      "deckColor": "Driftwood",
      "joistSpacing": 0.3048,
      "beamSpacing": 2.4384,
      "postSpacing": 2.4384,
      "hasRailings": false,
      "widthFt": 12,          (optional)
      "lengthFt": 12,         (optional)
      "version": "1.0"
    }

Spacings are stored in meters and points in canvas units, exactly as the
engine consumes them, so loading a file and recomputing gives the same
layout and BOM as before it was saved.

Usage:
    from deck_designer.core.json_schemas import (
        DeckProject, serialize_project, deserialize_project
    )

    json_str = serialize_project(DeckProject(points=points, config=config))
    project = deserialize_project(json_str)
    layout, bom = evaluate_project(project)
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from deck_designer.config.spacing import DeckColor, SpacingConfig
from deck_designer.core.errors import InvalidSpacingError, ProjectFileError
from deck_designer.utils.geometry_helpers import Point, to_point, to_polygon
from deck_designer.utils.logging_config import get_logger

logger = get_logger(__name__)

PROJECT_FILE_VERSION = "1.0"
SUPPORTED_VERSIONS = ("1.0",)

# JSON key -> SpacingConfig field
_SPACING_KEYS = {
    "joistSpacing": "joist_spacing",
    "beamSpacing": "beam_spacing",
    "postSpacing": "post_spacing",
}


@dataclass
class DeckProject:
    """
    A saved deck design.

    Attributes:
        points: Footprint polygon in canvas units
        config: Spacing, railing and color settings
        width_ft: Starter width the design was created with, if any
        length_ft: Starter length the design was created with, if any
        version: Project file format version
    """
    points: List[Point] = field(default_factory=list)
    config: SpacingConfig = field(default_factory=SpacingConfig)
    width_ft: Optional[float] = None
    length_ft: Optional[float] = None
    version: str = PROJECT_FILE_VERSION

    def __post_init__(self):
        self.points = to_polygon(self.points)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the project file's JSON structure."""
        data = {
            "points": [p.to_dict() for p in self.points],
            "deckColor": self.config.deck_color.value,
            "joistSpacing": self.config.joist_spacing,
            "beamSpacing": self.config.beam_spacing,
            "postSpacing": self.config.post_spacing,
            "hasRailings": self.config.has_railings,
        }
        if self.width_ft is not None:
            data["widthFt"] = self.width_ft
        if self.length_ft is not None:
            data["lengthFt"] = self.length_ft
        data["version"] = self.version
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeckProject":
        """
        Build a project from its JSON structure.

        Raises:
            ProjectFileError: If the structure is invalid
        """
        is_valid, errors = validate_project_data(data)
        if not is_valid:
            raise ProjectFileError("Invalid project file", errors)

        config = SpacingConfig(
            **{attr: data[key] for key, attr in _SPACING_KEYS.items()},
            has_railings=data["hasRailings"],
            deck_color=data["deckColor"],
        )
        return cls(
            points=[to_point(p) for p in data["points"]],
            config=config,
            width_ft=data.get("widthFt"),
            length_ft=data.get("lengthFt"),
            version=data["version"],
        )


# =============================================================================
# Serialization Functions
# =============================================================================

def serialize_project(project: DeckProject, indent: int = 2) -> str:
    """Serialize a project to a JSON string."""
    return json.dumps(project.to_dict(), indent=indent)


def deserialize_project(data: Union[str, bytes, Dict[str, Any]]) -> DeckProject:
    """
    Deserialize a project from a JSON string or an already-parsed dict.

    Raises:
        ProjectFileError: If the JSON is malformed or fails validation
    """
    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as e:
            raise ProjectFileError(f"Invalid JSON: {e}", [f"Invalid JSON: {e}"]) from e

    project = DeckProject.from_dict(data)
    logger.debug(f"Loaded project with {len(project.points)} points (version {project.version})")
    return project


def evaluate_project(project: DeckProject):
    """
    Recompute the layout and bill of materials for a project.

    Returns:
        Tuple of (DeckLayout, BillOfMaterials)
    """
    from deck_designer.framing_elements.framing_generator import layout
    from deck_designer.materials.bill_of_materials import compute_bom

    return layout(project.points, project.config), compute_bom(project.points, project.config)


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_project_data(data: Any) -> Tuple[bool, List[str]]:
    """
    Validate a parsed project file.

    Args:
        data: Parsed JSON value

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    errors = []

    if not isinstance(data, dict):
        return False, [f"Project file must be a JSON object, got {type(data).__name__}"]

    required = ["points", "deckColor", "joistSpacing", "beamSpacing",
                "postSpacing", "hasRailings", "version"]
    for key in required:
        if key not in data:
            errors.append(f"Missing required field: {key}")

    if "version" in data and data["version"] not in SUPPORTED_VERSIONS:
        errors.append(f"Unsupported project version: {data['version']!r}")

    points = data.get("points", [])
    if not isinstance(points, list):
        errors.append("points must be a list")
    else:
        for i, point in enumerate(points):
            try:
                to_point(point)
            except ValueError:
                errors.append(f"Point {i} is not a valid {{x, y}} pair")

    for key, attr in _SPACING_KEYS.items():
        if key in data:
            try:
                SpacingConfig(**{attr: data[key]})
            except InvalidSpacingError as e:
                errors.append(f"{key}: {e.detail}")

    if "hasRailings" in data and not isinstance(data["hasRailings"], bool):
        errors.append("hasRailings must be true or false")

    if "deckColor" in data:
        try:
            DeckColor.parse(data["deckColor"])
        except ValueError as e:
            errors.append(str(e))

    for key in ("widthFt", "lengthFt"):
        value = data.get(key)
        if value is not None and (isinstance(value, bool) or not isinstance(value, (int, float))):
            errors.append(f"{key} must be a number")

    return len(errors) == 0, errors
