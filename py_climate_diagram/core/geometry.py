"""
Coordinate mapping and small line solvers for the climate diagram.

Precipitation above 100 mm is drawn compressed 5:1 and every precipitation
value is halved relative to temperature, so that both curves share one
vertical axis (10 °C = 20 mm).
"""

from typing import NamedTuple

from .scale import STEP_SIZE, ScaleContext

MONTHS = 12
COMPRESSION_THRESHOLD = 100.0
COMPRESSION_FACTOR = 0.2
PRECIPITATION_SCALE = 0.5


class Vertex2D(NamedTuple):
    """A point (or direction) in drawing space."""

    x: float
    y: float

    def __add__(self, other: "Vertex2D") -> "Vertex2D":
        return Vertex2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vertex2D") -> "Vertex2D":
        return Vertex2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vertex2D":
        return Vertex2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__


class CoordinateMapper:
    """Maps (month, value) pairs to drawing-space vertices for one scale."""

    def __init__(self, width: float, height: float, scale: ScaleContext):
        self.width = width
        self.height = height
        self.scale = scale

        self.month_width = width / MONTHS
        self.unit_space = height / (scale.num_steps * STEP_SIZE)

    def to_x(self, month_position: float) -> float:
        return self.month_width * (month_position + 0.5)

    def to_vertex(self, month_position: float, value: float, is_temperature: bool) -> Vertex2D:
        """
        Convert a data point to a drawing-space vertex.

        Args:
            month_position: Month index, may be fractional for breakpoints
            value: Temperature in °C or precipitation in mm
            is_temperature: False applies compression and halving

        Returns:
            Vertex2D in drawing space
        """
        capped = min(value, COMPRESSION_THRESHOLD)
        excess = max(0.0, value - COMPRESSION_THRESHOLD)

        base = self.unit_space * capped
        compressed = self.unit_space * excess * COMPRESSION_FACTOR

        if is_temperature:
            y = base
        else:
            y = (base + compressed) * PRECIPITATION_SCALE

        return Vertex2D(self.to_x(month_position), y)


def straddles_threshold(value1: float, value2: float) -> bool:
    """True if one value is strictly below 100 and the other strictly above."""
    return (value1 < COMPRESSION_THRESHOLD and value2 > COMPRESSION_THRESHOLD) or (
        value1 > COMPRESSION_THRESHOLD and value2 < COMPRESSION_THRESHOLD
    )


def compression_breakpoint(value1: float, value2: float) -> float:
    """
    Fraction of a month interval at which the straight line from value1 to
    value2 crosses the compression threshold.

    Only defined when the two values straddle the threshold.
    """
    if value1 < value2:
        return (COMPRESSION_THRESHOLD - value1) / (value2 - value1)
    return 1.0 - (COMPRESSION_THRESHOLD - value2) / (value1 - value2)


def intersect(p1: Vertex2D, v1: Vertex2D, p2: Vertex2D, v2: Vertex2D) -> Vertex2D:
    """
    Intersection of the lines p1 + t*v1 and p2 + s*v2.

    Both lines are parameterized over the month axis, so only the y
    components are solved. Parallel lines (v1.y == v2.y) are not guarded.
    """
    t = (p2.y - p1.y) / (v1.y - v2.y)
    return p1 + v1 * t
