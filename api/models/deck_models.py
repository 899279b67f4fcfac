import math

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import List, Dict, Any, Optional, Literal, Tuple

from deck_designer.config.spacing import SpacingConfig
from deck_designer.config.framing import FRAMING_PARAMS
from deck_designer.core.json_schemas import PROJECT_FILE_VERSION, DeckProject
from deck_designer.utils.geometry_helpers import Point

DeckColorName = Literal["Driftwood", "Khaki", "Hazelnut"]


class PointModel(BaseModel):
    """2D sketch point in canvas units (50 units = 1 meter)."""
    x: float = Field(description="X coordinate")
    y: float = Field(description="Y coordinate (world Z)")

    @field_validator('x', 'y')
    @classmethod
    def validate_coordinate(cls, v: float) -> float:
        """Validate that coordinate values are reasonable."""
        if not math.isfinite(v):
            raise ValueError("Coordinate must be a finite number")
        if abs(v) > 1_000_000:
            raise ValueError("Coordinate value exceeds reasonable range")
        return v


class DeckDesignInput(BaseModel):
    """Deck footprint plus the framing parameters to apply to it."""
    points: List[PointModel] = Field(
        default=[],
        description="Footprint polygon; fewer than 3 points yields an empty result"
    )
    joist_spacing: float = Field(
        default=FRAMING_PARAMS["joist_spacing"],
        description="Joist spacing in meters",
        gt=0
    )
    beam_spacing: float = Field(
        default=FRAMING_PARAMS["beam_spacing"],
        description="Beam spacing in meters",
        gt=0
    )
    post_spacing: float = Field(
        default=FRAMING_PARAMS["post_spacing"],
        description="Post grid spacing in meters",
        gt=0
    )
    has_railings: bool = Field(default=False, description="Add a railing on every edge")
    deck_color: DeckColorName = Field(default="Driftwood", description="Deck board color")

    def to_engine(self) -> Tuple[List[Point], SpacingConfig]:
        """Convert to the engine's polygon and SpacingConfig."""
        config = SpacingConfig(
            joist_spacing=self.joist_spacing,
            beam_spacing=self.beam_spacing,
            post_spacing=self.post_spacing,
            has_railings=self.has_railings,
            deck_color=self.deck_color,
        )
        return [Point(p.x, p.y) for p in self.points], config


class ProjectFileModel(BaseModel):
    """Project file as exported for download (camelCase keys)."""
    model_config = ConfigDict(populate_by_name=True)

    points: List[PointModel] = Field(default=[])
    deck_color: DeckColorName = Field(alias="deckColor")
    joist_spacing: float = Field(alias="joistSpacing", gt=0)
    beam_spacing: float = Field(alias="beamSpacing", gt=0)
    post_spacing: float = Field(alias="postSpacing", gt=0)
    has_railings: bool = Field(alias="hasRailings")
    width_ft: Optional[float] = Field(default=None, alias="widthFt", gt=0)
    length_ft: Optional[float] = Field(default=None, alias="lengthFt", gt=0)
    version: Literal["1.0"] = Field(default=PROJECT_FILE_VERSION)

    def to_project(self) -> DeckProject:
        return DeckProject.from_dict(self.model_dump(by_alias=True, exclude_none=True))


class ProjectExportInput(DeckDesignInput):
    """Design plus the optional starter dimensions recorded in the project file."""
    width_ft: Optional[float] = Field(default=None, gt=0)
    length_ft: Optional[float] = Field(default=None, gt=0)


class FeetParseInput(BaseModel):
    """Measurement text typed in feet, e.g. '12 1/2'."""
    text: str = Field(default="", max_length=64)
    strict: bool = Field(
        default=False,
        description="Reject malformed input instead of reading it as 0"
    )


class FeetParseResult(BaseModel):
    text: str
    feet: float
    meters: float


class DefaultDeckQuery(BaseModel):
    """Dimensions of the rectangular starter deck."""
    width_ft: float = Field(default=12, gt=0, le=200)
    length_ft: float = Field(default=12, gt=0, le=200)

    @model_validator(mode='after')
    def validate_area(self) -> 'DefaultDeckQuery':
        """Keep starter decks to a single residential footprint."""
        if self.width_ft * self.length_ft > 10_000:
            raise ValueError("Starter deck area exceeds 10,000 sq ft")
        return self


class EvaluationResult(BaseModel):
    """Layout and bill of materials computed for one design."""
    layout: Dict[str, Any]
    bom: Dict[str, Any]
