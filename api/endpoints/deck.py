# File: api/endpoints/deck.py
from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError as PydanticValidationError
from typing import Any, Dict, List
import logging

from api.models.deck_models import (
    DeckDesignInput,
    DefaultDeckQuery,
    EvaluationResult,
    FeetParseInput,
    FeetParseResult,
    ProjectExportInput,
    ProjectFileModel,
)
from api.utils.config import Config
from api.utils.errors import DesignTooLargeError, ValidationError, handle_exception

from deck_designer.config.spacing import SpacingConfig
from deck_designer.config.units import (
    feet_to_meters,
    parse_fractional_feet,
    parse_fractional_feet_strict,
)
from deck_designer.core.json_schemas import DeckProject, evaluate_project
from deck_designer.framing_elements import layout
from deck_designer.framing_elements.layout_primitives import grid_count, grid_point_count
from deck_designer.materials import bom_to_csv, compute_bom
from deck_designer.utils.geometry_helpers import (
    Point,
    bounds_meters,
    create_default_deck,
    edge_dimensions,
)

logger = logging.getLogger("deck_designer.api")

# Authentication is applied where the router is included (see api/main.py)
router = APIRouter()


def check_member_limit(points: List[Point], config: SpacingConfig) -> int:
    """
    Estimate how many members a design generates and reject oversized ones.

    Uses the same grid counts as the layout so the estimate is an upper bound.

    Raises:
        DesignTooLargeError: If the estimate exceeds Config.MAX_MEMBERS
    """
    if len(points) < 3:
        return 0
    bounds = bounds_meters(points)
    if bounds.is_degenerate:
        return 0

    estimate = (
        grid_count(bounds.x_extent, config.joist_spacing)
        + grid_count(bounds.z_extent, config.beam_spacing)
        + grid_point_count(bounds.x_extent, bounds.z_extent, config.post_spacing)
        + (len(points) if config.has_railings else 0)
    )
    if estimate > Config.MAX_MEMBERS:
        raise DesignTooLargeError(estimate, Config.MAX_MEMBERS)
    return estimate


@router.post("/layout")
async def generate_layout(design: DeckDesignInput) -> Dict[str, Any]:
    """
    Compute the 3D structural layout for a deck footprint.

    Returns the deck surface and every joist, beam, post and railing with
    its position and dimensions in meters.
    """
    try:
        points, config = design.to_engine()
        check_member_limit(points, config)
        logger.info(f"Layout requested for {len(points)} points")

        result = layout(points, config).to_dict()
        result["edges"] = [
            {
                "index": e.index,
                "midpoint": e.midpoint.to_dict(),
                "length_m": e.length_m,
                "label": e.label,
            }
            for e in edge_dimensions(points)
        ]
        return result
    except Exception as e:
        raise handle_exception(e, "layout")


@router.post("/bom")
async def generate_bom(design: DeckDesignInput) -> Dict[str, Any]:
    """Compute the bill of materials for a deck footprint."""
    try:
        points, config = design.to_engine()
        check_member_limit(points, config)
        logger.info(f"BOM requested for {len(points)} points")
        return compute_bom(points, config).to_dict()
    except Exception as e:
        raise handle_exception(e, "bom")


@router.post("/bom.csv", response_class=PlainTextResponse)
async def export_bom_csv(design: DeckDesignInput):
    """Download the bill of materials as ``deck_bom.csv``."""
    try:
        points, config = design.to_engine()
        check_member_limit(points, config)
        csv_text = bom_to_csv(compute_bom(points, config))
        return PlainTextResponse(
            content=csv_text,
            media_type="text/csv",
            headers={"Content-Disposition": "attachment; filename=deck_bom.csv"},
        )
    except Exception as e:
        raise handle_exception(e, "bom")


@router.post("/project")
async def export_project(design: ProjectExportInput):
    """Download the design as a ``deck_project.json`` project file."""
    try:
        points, config = design.to_engine()
        project = DeckProject(
            points=points,
            config=config,
            width_ft=design.width_ft,
            length_ft=design.length_ft,
        )
        return JSONResponse(
            content=project.to_dict(),
            headers={"Content-Disposition": "attachment; filename=deck_project.json"},
        )
    except Exception as e:
        raise handle_exception(e, "project")


@router.post("/project/evaluate", response_model=EvaluationResult)
async def evaluate_project_file(project_file: ProjectFileModel):
    """Load a project file and recompute its layout and bill of materials."""
    try:
        project = project_file.to_project()
        check_member_limit(project.points, project.config)
        deck_layout, bom = evaluate_project(project)
        return EvaluationResult(layout=deck_layout.to_dict(), bom=bom.to_dict())
    except Exception as e:
        raise handle_exception(e, "project")


@router.get("/default")
async def default_deck(
    width_ft: float = Query(default=12, description="Deck width in feet"),
    length_ft: float = Query(default=12, description="Deck length in feet"),
) -> Dict[str, Any]:
    """
    Rectangular starter deck anchored at the canvas origin.

    Width and length are true feet: the default 12 x 12 deck is 3.6576 m
    (182.88 canvas units) on each side.
    """
    try:
        try:
            query = DefaultDeckQuery(width_ft=width_ft, length_ft=length_ft)
        except PydanticValidationError as e:
            raise ValidationError(str(e.errors()[0]["msg"]), field="width_ft/length_ft")

        points = create_default_deck(query.width_ft, query.length_ft)
        return {
            "points": [p.to_dict() for p in points],
            "width_ft": query.width_ft,
            "length_ft": query.length_ft,
        }
    except Exception as e:
        raise handle_exception(e, "default deck")


@router.post("/parse-feet", response_model=FeetParseResult)
async def parse_feet(measurement: FeetParseInput):
    """Parse a measurement typed as whole feet plus an optional fraction."""
    try:
        if measurement.strict:
            feet = parse_fractional_feet_strict(measurement.text)
        else:
            feet = parse_fractional_feet(measurement.text)
        return FeetParseResult(text=measurement.text, feet=feet, meters=feet_to_meters(feet))
    except Exception as e:
        raise handle_exception(e, "measurement")
