"""
Configuration constants for the Route Planner project.

All paths, settings, and tunable parameters are defined here.
Values can be overridden through environment variables or a .env file
at the project root - never hardcode secrets.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root is parent of route_planner/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Path Configuration
# =============================================================================

# Data directory (contains the seed graph)
DATA_DIR = PROJECT_ROOT / "data"

# Seed dataset loaded at start-up (.json or .msgpack)
SEED_GRAPH_PATH = Path(os.environ.get("ROUTE_PLANNER_SEED", DATA_DIR / "seed_graph.json"))

# =============================================================================
# Routing Configuration
# =============================================================================

# Algorithm used when none is given ("weighted" or "hopcount")
DEFAULT_ALGORITHM = os.environ.get("ROUTE_PLANNER_ALGORITHM", "weighted")

# Decimal places kept for route costs (kilometers)
COST_PRECISION = 3

# Latitude/longitude bounds (degrees)
LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)

# Title given to nodes added without one: "<ID> - Node"
DEFAULT_NODE_TITLE_SUFFIX = "Node"

# =============================================================================
# Display Configuration
# =============================================================================

# Decimal places shown for coordinates in route step listings
COORDINATE_DISPLAY_PRECISION = 6


def parse_color_seed(raw: str | None) -> int | None:
    """Parse ROUTE_PLANNER_COLOR_SEED; blank means no seed."""
    if not raw or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"ROUTE_PLANNER_COLOR_SEED must be an integer, got {raw!r}") from e


# Seed for route color selection (unset = nondeterministic colors)
ROUTE_COLOR_SEED = parse_color_seed(os.environ.get("ROUTE_PLANNER_COLOR_SEED"))

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_data_files() -> dict[str, bool]:
    """Check which data files exist."""
    return {
        "seed_graph": SEED_GRAPH_PATH.exists(),
    }


def get_missing_data_files() -> list[str]:
    """Return list of missing data file names."""
    status = validate_data_files()
    return [name for name, exists in status.items() if not exists]
