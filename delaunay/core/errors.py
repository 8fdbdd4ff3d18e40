"""Exception types raised by the triangulation code."""
from __future__ import annotations


class DelaunayError(Exception):
    """Base class for every error raised by the package."""

    default_message = "Delaunay triangulation error"

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return self.args[0]

    def __eq__(self, other):
        return type(self) is type(other) and self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))


class DuplicatePointsError(DelaunayError):
    """Two or more input points are exactly coordinate-equal."""

    default_message = "Input contains duplicate points"


class CollinearPointsError(DelaunayError):
    """The input point set lies on a single line."""

    default_message = "All input points are collinear (lie on a straight line)"


class InvalidTriangleError(DelaunayError, ValueError):
    """Three points do not form a non-degenerate triangle."""

    default_message = "Invalid triangle: duplicate vertices or collinear points"


class NumericalError(DelaunayError, ArithmeticError):
    """A geometric computation could not be resolved stably."""

    default_message = "Numerical calculation error"

    def __init__(self, message: str = None):
        if message:
            message = f"{self.default_message}: {message}"
        super().__init__(message)


__all__ = [
    'DelaunayError',
    'DuplicatePointsError',
    'CollinearPointsError',
    'InvalidTriangleError',
    'NumericalError',
]
