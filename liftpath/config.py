"""
Configuration constants for the liftpath project.

All paths, lift timings and layout settings are defined here.
Paths can be overridden from environment variables.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of liftpath/
PROJECT_ROOT = Path(__file__).parent.parent

# Data directory (contains grid files)
DATA_DIR = PROJECT_ROOT / "data"

# Grid of room traversal times used by the CLI, top floor first
DEFAULT_GRID_PATH = Path(
    os.environ.get("LIFTPATH_GRID_PATH", str(DATA_DIR / "times.json"))
)

# =============================================================================
# Grid Configuration
# =============================================================================

# Cell value marking a room the lift cannot pass through
IMPASSABLE = 0

# File suffixes understood by the grid loader
GRID_FORMATS = (".json", ".msgpack", ".npy")

# =============================================================================
# Lift Timing Configuration
# =============================================================================

# Time to open or close the lift door (milliseconds)
TOGGLE_LIFT_DOOR_TIME_MS = 500

# Pause after the door closes before the lift starts moving (milliseconds)
DELAY_BEFORE_LIFT_MOVES_MS = 1000

# =============================================================================
# Layout Configuration
# =============================================================================

# Room size in pixels
ROOM_WIDTH = 30
ROOM_HEIGHT = 40

# Padding added around the house in pixels
HOUSE_GUTTER = 40

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_data_files() -> dict[str, bool]:
    """Check which data files exist."""
    return {
        "grid": DEFAULT_GRID_PATH.exists(),
    }


def get_missing_data_files() -> list[str]:
    """Return list of missing data file names."""
    status = validate_data_files()
    return [name for name, exists in status.items() if not exists]
