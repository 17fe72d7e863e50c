# tests/api/conftest.py
import os
import sys
from pathlib import Path

import pytest

# Add project root to sys.path
project_root = Path(__file__).parents[2]
sys.path.insert(0, str(project_root))

# Set test environment variables
os.environ["DEBUG"] = "true"
os.environ["API_KEY"] = "dev_key"


@pytest.fixture
def api_headers():
    """Fixture for API headers with authentication."""
    return {"X-API-Key": "dev_key"}


@pytest.fixture
def horizontal_payload():
    """Calculator form payload for a single 3000mm width."""
    return {
        "widths": [3000],
        "tileCoverWidth": 300,
        "minSpacing": 10,
        "maxSpacing": 40,
        "useDryVerge": "NO",
        "abutmentSide": "NONE",
        "useLHTile": "NO",
        "lhTileWidth": 0,
        "crossBonded": "NO",
    }


@pytest.fixture
def vertical_payload():
    """Calculator form payload for a single 2500mm plain tile rafter."""
    return {
        "rafterHeights": [2500],
        "gutterOverhang": 50,
        "materialType": "Plain Tile",
        "slateTileHeight": 265,
        "minGauge": 280,
        "maxGauge": 345,
        "useDryRidge": "NO",
    }
