"""
Lift module.

Provides lift state management and ride planning:
- LiftState: Tracks where the lift is
- LiftStep: One timed move into the next room
- LiftRide: Complete ride record
- LiftController: Plans and takes rides
"""

from liftpath.lift.controller import LiftController
from liftpath.lift.state import LiftRide, LiftState, LiftStep

__all__ = [
    "LiftController",
    "LiftState",
    "LiftStep",
    "LiftRide",
]
