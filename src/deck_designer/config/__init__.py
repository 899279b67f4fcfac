# File: src/deck_designer/config/__init__.py

"""
Configuration package for the Deck Designer.
Provides a unified interface to:
- Unit management and conversion
- Member profiles and fixed dimensions
- Spacing configuration and validation
"""

from deck_designer.config.units import (
    meters_to_feet,
    feet_to_meters,
    parse_fractional_feet,
    parse_fractional_feet_strict,
    CANVAS_UNITS_PER_METER,
    FEET_PER_METER,
)

from deck_designer.config.framing import (
    MemberType,
    ProfileDimensions,
    PROFILES,
    FRAMING_PARAMS,
    DECK_ELEVATION,
    get_profile,
)

from deck_designer.config.spacing import DeckColor, SpacingConfig


def get_system_info() -> dict:
    """
    Returns an overview of the default configuration.
    Useful for debugging and validation.
    """
    defaults = SpacingConfig()
    return {
        "canvas_units_per_meter": CANVAS_UNITS_PER_METER,
        "deck_elevation": DECK_ELEVATION,
        "default_spacing": defaults.to_dict(),
        "default_spacing_feet": defaults.to_feet(),
        "profiles": {
            member_type.value: profile.get_dimensions()
            for member_type, profile in PROFILES.items()
        },
    }


# When any module in the config package is run directly
if __name__ == "__main__":
    import json

    print("Current System Configuration:")
    print(json.dumps(get_system_info(), indent=2))
