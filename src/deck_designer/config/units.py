# File: src/deck_designer/config/units.py

"""
Unit management and conversion functionality for the Deck Designer.

All structural calculations run in meters. The sketch canvas works in its own
planar units (50 canvas units = 1 meter) and the user-facing controls speak
feet, so this module is the single place those scales meet.
"""

import math
import re
from typing import Optional, Tuple

from deck_designer.core.errors import InvalidMeasurementError
from deck_designer.utils.logging_config import get_logger

logger = get_logger(__name__)

FEET_PER_METER = 3.28084
CANVAS_UNITS_PER_METER = 50.0

# Leading whole-feet digits, e.g. "12" in "12'" or "12.5"
_WHOLE_FEET_PREFIX = re.compile(r"[+-]?\d+")


def meters_to_feet(meters: float) -> float:
    """Convert meters to feet."""
    return meters * FEET_PER_METER


def feet_to_meters(feet: float) -> float:
    """Convert feet to meters."""
    return feet / FEET_PER_METER


def canvas_to_meters(value: float) -> float:
    """Convert a canvas-unit length to meters."""
    return value / CANVAS_UNITS_PER_METER


def meters_to_canvas(meters: float) -> float:
    """Convert meters to canvas units."""
    return meters * CANVAS_UNITS_PER_METER


def format_feet(meters: float, precision: int = 2) -> str:
    """Format a length in meters as a feet label, e.g. ``"12.00 ft"``."""
    return f"{meters_to_feet(meters):.{precision}f} ft"


def _split_fraction(text: str) -> Optional[Tuple[float, float]]:
    """Return (numerator, denominator) for ``"<num>/<denom>"``, or None if malformed."""
    pieces = text.split("/")
    if len(pieces) != 2:
        return None
    try:
        numerator, denominator = float(pieces[0]), float(pieces[1])
    except ValueError:
        return None
    if not (math.isfinite(numerator) and math.isfinite(denominator)):
        return None
    return numerator, denominator


def _leading_whole_feet(token: str) -> float:
    """Whole feet at the start of ``token``; 0 when there are none or it is a bare fraction."""
    if "/" in token:
        return 0.0
    match = _WHOLE_FEET_PREFIX.match(token)
    return float(int(match.group())) if match else 0.0


def parse_fractional_feet(text: str) -> float:
    """
    Parse a feet value typed as ``"<int> <num>/<denom>"`` (e.g. ``"12 1/2"``).

    The whole part is the leading integer of the first token, so ``"12'"``
    and ``"12.5"`` both read as 12. A bare fraction such as ``"3/4"`` has no
    whole part and reads as 0 feet. Empty or unparseable input yields 0 and
    never raises; callers that need to tell bad input apart from zero use
    parse_fractional_feet_strict().

    Args:
        text: Raw text from a measurement field

    Returns:
        Length in feet
    """
    if not text:
        return 0.0

    parts = str(text).strip().split(" ")
    feet = _leading_whole_feet(parts[0])

    if len(parts) > 1:
        fraction = _split_fraction(parts[1])
        if fraction is None:
            logger.debug(f"Ignoring malformed fraction in {text!r}")
        elif fraction[0] and fraction[1]:
            feet += fraction[0] / fraction[1]

    return feet


def parse_fractional_feet_strict(text: str) -> float:
    """
    Parse a fractional-feet string, rejecting anything malformed.

    Args:
        text: Raw text such as ``"12"`` or ``"12 1/2"``

    Returns:
        Length in feet

    Raises:
        InvalidMeasurementError: If the text is empty or not a valid measurement
    """
    if text is None or not str(text).strip():
        raise InvalidMeasurementError(text, "empty measurement")

    parts = str(text).split()
    if len(parts) > 2:
        raise InvalidMeasurementError(text, "expected '<feet>' or '<feet> <num>/<denom>'")

    try:
        feet = float(int(parts[0]))
    except ValueError:
        raise InvalidMeasurementError(text, f"whole feet {parts[0]!r} is not an integer")

    if len(parts) == 2:
        fraction = _split_fraction(parts[1])
        if fraction is None:
            raise InvalidMeasurementError(text, "fraction must look like <num>/<denom>")
        if fraction[1] == 0:
            raise InvalidMeasurementError(text, "fraction denominator is zero")
        feet += fraction[0] / fraction[1]

    return feet
