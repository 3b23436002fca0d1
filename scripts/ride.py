#!/usr/bin/env python3
"""
Lift CLI - Ride the lift between two rooms along the cheapest route.

Usage:
    python scripts/ride.py --from 0 0 --to 5 3
    python scripts/ride.py --grid data/times.msgpack --from 2 1 --to 0 4 --verbose

Floors are counted from the ground floor (0). The grid file lists the
top floor first, in the same layout as the house.

Environment:
    LIFTPATH_GRID_PATH  Grid file used when --grid is not given
    LOG_LEVEL           Log level when --verbose is not given
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

load_dotenv(project_root / ".env")

from liftpath.config import DEFAULT_GRID_PATH, LOG_LEVEL  # noqa: E402
from liftpath.data import load_grid  # noqa: E402
from liftpath.errors import LiftpathError  # noqa: E402
from liftpath.lift import LiftController  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Ride the lift along the cheapest route",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--grid",
        type=Path,
        default=DEFAULT_GRID_PATH,
        help=f"Grid file (.json, .msgpack or .npy) (default: {DEFAULT_GRID_PATH})",
    )
    parser.add_argument(
        "--from",
        dest="origin",
        type=int,
        nargs=2,
        metavar=("FLOOR", "ROOM"),
        default=(0, 0),
        help="Room the lift starts in (default: 0 0)",
    )
    parser.add_argument(
        "--to",
        dest="destination",
        type=int,
        nargs=2,
        metavar=("FLOOR", "ROOM"),
        required=True,
        help="Room to ride to",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        times = load_grid(args.grid)
        lift = LiftController(times, *args.origin)
        ride = lift.go(*args.destination)
    except (FileNotFoundError, LiftpathError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if ride is None:
        print(
            f"No route from {tuple(args.origin)} to {tuple(args.destination)}",
            file=sys.stderr,
        )
        return 1

    print("\n" + "=" * 60)
    print("Lift Ride")
    print("=" * 60)
    print(f"  From:  floor {ride.origin.row}, room {ride.origin.col}")
    print(f"  To:    floor {ride.destination.row}, room {ride.destination.col}")
    print(f"  Moves: {len(ride.steps)}")
    print(f"  Cost:  {ride.total_cost}")
    print(f"  Time:  {ride.total_time_ms} ms")
    print("=" * 60)

    for i, step in enumerate(ride.steps, 1):
        print(
            f"  {i:>3}. floor {step.cell.row}, room {step.cell.col} "
            f"({step.duration_ms} ms, left={step.left_px}px, bottom={step.bottom_px}px)"
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
