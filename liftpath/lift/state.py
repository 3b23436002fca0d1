"""
Lift state dataclasses for tracking rides between rooms.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from liftpath.config import DELAY_BEFORE_LIFT_MOVES_MS, TOGGLE_LIFT_DOOR_TIME_MS
from liftpath.graph import Cell


@dataclass(frozen=True)
class LiftStep:
    """
    Records a single move of the lift into the next room.

    Attributes:
        cell: (floor, room) entered
        duration_ms: Time the move takes, equal to the room's cost
        left_px: Horizontal position of the lift after the move
        bottom_px: Vertical position of the lift after the move
    """

    cell: Cell
    duration_ms: int
    left_px: int
    bottom_px: int


@dataclass
class LiftRide:
    """
    Complete plan of one ride.

    Attributes:
        origin: Room the ride starts in
        destination: Room the ride ends in
        path: Rooms visited, including origin and destination
        steps: One step per room entered after the origin
        total_cost: Sum of the costs of the rooms entered
    """

    origin: Cell
    destination: Cell
    path: list[Cell]
    steps: list[LiftStep] = field(default_factory=list)
    total_cost: int = 0

    @property
    def travel_time_ms(self) -> int:
        """Time spent moving between rooms."""
        return sum(step.duration_ms for step in self.steps)

    @property
    def total_time_ms(self) -> int:
        """
        Time from the first door opening to the last door closing.

        The door opens and closes at the origin, the lift waits before
        moving, travels, then the door opens and closes again on arrival.
        A ride with no steps ends after the wait, with the door closed.
        """
        door_cycle = 2 * TOGGLE_LIFT_DOOR_TIME_MS
        departure = door_cycle + DELAY_BEFORE_LIFT_MOVES_MS
        if not self.steps:
            return departure
        return departure + self.travel_time_ms + door_cycle


@dataclass
class LiftState:
    """
    Mutable position of the lift.

    Attributes:
        floor: Current floor, 0 being the ground floor
        room: Current room on the floor
        rides: Rides completed so far
    """

    floor: int = 0
    room: int = 0
    rides: list[LiftRide] = field(default_factory=list)

    @property
    def cell(self) -> Cell:
        return Cell(self.floor, self.room)

    def record_ride(self, ride: LiftRide) -> None:
        """Record a ride and move the lift to its destination."""
        self.rides.append(ride)
        self.floor, self.room = ride.destination
