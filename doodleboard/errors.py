# error kinds shared by the vote and canvas modules


class DoodleboardError(Exception):
    """Base class for caller contract violations."""


class InvalidArgument(DoodleboardError, ValueError):
    """
    A value outside the accepted domain (unknown vote type, bad color,
    non-positive canvas size). Raised before any state changes.
    """


class OutOfRange(DoodleboardError, IndexError):
    """
    A pixel coordinate outside [0, width) x [0, height).
    Raised before any mutation.
    """


class CapacityExceeded(DoodleboardError):
    """The in-memory store is full; nothing was added."""
