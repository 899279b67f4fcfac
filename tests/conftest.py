# tests/conftest.py
import sys
import os

# Add src directory and project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from deck_designer.config.spacing import SpacingConfig


@pytest.fixture
def square_12m():
    """12 m x 12 m square (144 m2) in canvas units."""
    return [(0, 0), (600, 0), (600, 600), (0, 600)]


@pytest.fixture
def square_12ft():
    """12 ft x 12 ft square (3.6576 m per side) in canvas units."""
    side = 182.88
    return [(0, 0), (side, 0), (side, side), (0, side)]


@pytest.fixture
def l_shape():
    """L-shaped footprint: 10 m x 6 m with a 4 m x 3 m notch, 48 m2."""
    return [(0, 0), (500, 0), (500, 150), (300, 150), (300, 300), (0, 300)]


@pytest.fixture
def default_config():
    """Default spacings: 1 ft joists, 8 ft beams and posts."""
    return SpacingConfig()
