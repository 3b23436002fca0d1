"""
Lift controller that moves the lift through the house along the cheapest route.

The house is given as a grid of room traversal times with the top floor
first, the way it is usually written down. The controller flips it so
floor 0 is the ground floor and routes over the flipped grid.

Usage:
    from liftpath.lift import LiftController

    lift = LiftController(times)
    ride = lift.go(floor=3, room=2)
    if ride:
        for step in ride.steps:
            animate(step.left_px, step.bottom_px, step.duration_ms)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from liftpath.config import HOUSE_GUTTER, ROOM_HEIGHT, ROOM_WIDTH
from liftpath.errors import InvalidRoomError
from liftpath.graph import Cell, validate_grid
from liftpath.lift.state import LiftRide, LiftState, LiftStep
from liftpath.pathfinding import GridRouter

logger = logging.getLogger(__name__)


class LiftController:
    """
    Tracks where the lift is and plans its rides.

    The controller handles:
    - Validating requested rooms against the house
    - Routing from the current room with a GridRouter
    - Turning the route into timed, positioned steps
    - Recording completed rides
    """

    def __init__(
        self,
        times: Sequence[Sequence[int]],
        start_floor: int = 0,
        start_room: int = 0,
    ) -> None:
        """
        Initialize the controller.

        Args:
            times: Room traversal times in milliseconds, top floor first.
                0 marks a room the lift cannot pass through.
            start_floor: Floor the lift starts on, 0 being the ground floor
            start_room: Room the lift starts in

        Raises:
            InvalidGridError: If times is malformed
            InvalidRoomError: If the start room is outside the house
        """
        validate_grid(times)
        self._floors = [[int(cost) for cost in floor] for floor in reversed(times)]
        self._router = GridRouter(self._floors)
        self._check_room(start_floor, start_room)
        self._state = LiftState(floor=start_floor, room=start_room)

    @property
    def floors(self) -> list[list[int]]:
        """Room times with floor 0 first."""
        return self._floors

    @property
    def router(self) -> GridRouter:
        return self._router

    @property
    def state(self) -> LiftState:
        return self._state

    @property
    def position(self) -> Cell:
        """Current (floor, room) of the lift."""
        return self._state.cell

    def _shape(self) -> tuple[int, int]:
        rows = len(self._floors)
        return rows, len(self._floors[0]) if rows else 0

    def _check_room(self, floor: int, room: int) -> None:
        rows, cols = self._shape()
        if not (0 <= floor < rows and 0 <= room < cols):
            raise InvalidRoomError(
                f"Room ({floor}, {room}) is outside the house ({rows} floors x {cols} rooms)"
            )

    def plan(self, floor: int, room: int) -> LiftRide | None:
        """
        Plan a ride to a room without moving the lift.

        Returns:
            The ride, or None if no route reaches the room

        Raises:
            InvalidRoomError: If the room is outside the house
        """
        self._check_room(floor, room)

        origin = self.position
        destination = Cell(floor, room)
        path = self._router.route(origin, destination)
        if not path:
            return None

        steps = [
            LiftStep(
                cell=cell,
                duration_ms=self._floors[cell.row][cell.col],
                left_px=ROOM_WIDTH * cell.col,
                bottom_px=ROOM_HEIGHT * cell.row,
            )
            for cell in path[1:]
        ]

        return LiftRide(
            origin=origin,
            destination=destination,
            path=path,
            steps=steps,
            total_cost=self._router.cost(path),
        )

    def go(self, floor: int, room: int) -> LiftRide | None:
        """
        Move the lift to a room along the cheapest route.

        The lift stays where it is if no route reaches the room.

        Args:
            floor: Destination floor, 0 being the ground floor
            room: Destination room on that floor

        Returns:
            The ride taken, or None if the room is unreachable

        Raises:
            InvalidRoomError: If the room is outside the house
        """
        logger.info(f"Lift called: {tuple(self.position)} -> ({floor}, {room})")

        ride = self.plan(floor, room)
        if ride is None:
            logger.warning(f"No route from {tuple(self.position)} to ({floor}, {room})")
            return None

        self._state.record_ride(ride)
        logger.info(
            f"Ride ({len(ride.steps)} moves, cost {ride.total_cost}, "
            f"{ride.total_time_ms} ms): {' -> '.join(str(tuple(c)) for c in ride.path)}"
        )
        return ride

    def house_size(self) -> tuple[int, int]:
        """Width and height of the house in pixels."""
        rows, cols = self._shape()
        return (
            cols * ROOM_WIDTH + HOUSE_GUTTER,
            rows * ROOM_HEIGHT + HOUSE_GUTTER,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(position={tuple(self.position)})"
