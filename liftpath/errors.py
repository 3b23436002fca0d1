"""
Exceptions raised for malformed input.

An unreachable destination is not an error: the solver returns an empty
path and the lift controller returns None.
"""


class LiftpathError(Exception):
    """Base class for all liftpath errors."""


class InvalidGridError(LiftpathError, ValueError):
    """Grid is not a rectangular matrix of non-negative integers."""


class InvalidRoomError(LiftpathError, IndexError):
    """Requested room lies outside the house."""


class InvalidPathError(LiftpathError, ValueError):
    """Path steps through a cell that is not traversable."""
