#!/usr/bin/env python3
"""
Validate a grid file and report what the lift can reach.

Usage:
    python scripts/validate_grid.py
    python scripts/validate_grid.py data/times.npy
"""

import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from liftpath.config import DEFAULT_GRID_PATH  # noqa: E402 - must be after sys.path modification
from liftpath.errors import LiftpathError  # noqa: E402
from liftpath.lift import LiftController  # noqa: E402

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def check_grid_file(path: Path) -> bool:
    """Check that the grid file exists."""
    print("\n=== Checking Grid File ===\n")

    if not path.exists():
        print(f"✗ {path}: NOT FOUND")
        return False

    size_kb = path.stat().st_size / 1024
    print(f"✓ {path}: {size_kb:,.1f} KB")
    return True


def report_reachability(lift: LiftController) -> bool:
    """Route from the ground floor's first room to every other room."""
    print("\n=== Reachability from (0, 0) ===\n")

    router = lift.router
    graph = router.graph

    if not graph.contains((0, 0)):
        print("  ✗ Room (0, 0) is impassable")
        return False

    unreachable = [node.cell for node in graph if not router.route((0, 0), node.cell)]
    reachable = len(graph) - len(unreachable)
    print(f"  ✓ Reachable rooms: {reachable:,}")

    if unreachable:
        print(f"  ⚠ Unreachable rooms: {len(unreachable):,}")
        for cell in unreachable:
            print(f"    floor {cell.row}, room {cell.col}")

    return True


def main() -> int:
    """Main validation routine."""
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_GRID_PATH

    print("=" * 60)
    print("Lift Grid Validation")
    print("=" * 60)

    if not check_grid_file(path):
        print("\n✗ Grid file is missing. Cannot continue.")
        return 1

    from liftpath.data import load_grid

    try:
        lift = LiftController(load_grid(path))
    except LiftpathError as e:
        print(f"\n✗ Invalid grid: {e}")
        return 1

    print("\n=== Grid Statistics ===\n")
    rows = len(lift.floors)
    cols = len(lift.floors[0]) if rows else 0
    traversable = sum(1 for floor in lift.floors for cost in floor if cost)
    width, height = lift.house_size()
    print(f"  floors: {rows}")
    print(f"  rooms_per_floor: {cols}")
    print(f"  traversable_rooms: {traversable:,}")
    print(f"  impassable_rooms: {rows * cols - traversable:,}")
    print(f"  house_size_px: {width}x{height}")

    if not report_reachability(lift):
        print("\n✗ Reachability check failed.")
        return 1

    print("\n" + "=" * 60)
    print("✓ Grid is valid")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
