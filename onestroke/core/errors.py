"""Exceptions raised by the one-stroke solver."""


class OneStrokeError(Exception):
    """Base exception for solver failures."""


class InvalidGraph(OneStrokeError, ValueError):
    """Raised when there is nothing to traverse or an edge is malformed."""


class InvalidStart(OneStrokeError, IndexError):
    """Raised when the starting edge index is outside the edge list."""


class MalformedInput(OneStrokeError, ValueError):
    """Raised when a wire string cannot be decoded."""


class DrawingError(OneStrokeError, ValueError):
    """Raised when a drawing file is inconsistent."""
