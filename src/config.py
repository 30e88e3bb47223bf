"""
Configuration constants for the city path finder.

Paths can be redirected with the CITYPATH_DATA_DIR environment variable.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of src/
PROJECT_ROOT = Path(__file__).parent.parent

DATA_DIR = Path(os.environ.get("CITYPATH_DATA_DIR", PROJECT_ROOT / "data"))

CITIES_FILE = DATA_DIR / "cities.csv"
ROADS_FILE = DATA_DIR / "roads.csv"

# =============================================================================
# Query Configuration
# =============================================================================

DEFAULT_ALGORITHM = "dijkstra"

# Minimum rapidfuzz score (0-100) for "did you mean" suggestions
FUZZY_THRESHOLD = 75
MAX_SUGGESTIONS = 3
