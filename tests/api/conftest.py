# tests/api/conftest.py
import pytest
import sys
import os
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).parents[2]
sys.path.insert(0, str(project_root))

# Set test environment variables
os.environ["DEBUG"] = "true"
os.environ["API_KEY"] = "dev_key"

TEST_API_KEY = "dev_key"


@pytest.fixture
def api_headers():
    """Fixture for API headers with authentication."""
    return {"X-API-Key": TEST_API_KEY}


@pytest.fixture
def square_design():
    """12 m square deck with default spacings."""
    return {
        "points": [
            {"x": 0, "y": 0},
            {"x": 600, "y": 0},
            {"x": 600, "y": 600},
            {"x": 0, "y": 600},
        ],
        "has_railings": True,
        "deck_color": "Khaki",
    }
