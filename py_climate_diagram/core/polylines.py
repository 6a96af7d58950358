"""Temperature and precipitation curves plus the vertical month axes."""

import numpy as np
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .geometry import COMPRESSION_THRESHOLD, CoordinateMapper, Vertex2D, compression_breakpoint, straddles_threshold
from .series import SeriesKind


@dataclass
class Polyline:
    """Ordered curve vertices.

    month_indices[m] is the position of month m's own vertex, which differs
    from m once breakpoint vertices have been inserted.
    """

    kind: SeriesKind
    vertices: np.ndarray
    month_indices: List[int]

    def __len__(self) -> int:
        return len(self.vertices)

    @property
    def month_vertices(self) -> np.ndarray:
        """Vertices of the twelve data points only (marker positions)."""
        return self.vertices[self.month_indices]


def temperature_polyline(temperatures: Sequence[float], mapper: CoordinateMapper) -> Polyline:
    vertices = [mapper.to_vertex(i, float(t), True) for i, t in enumerate(temperatures)]
    return Polyline(
        kind=SeriesKind.TEMPERATURE,
        vertices=np.asarray(vertices, dtype=np.float64),
        month_indices=list(range(len(vertices))),
    )


def precipitation_polyline(precipitation: Sequence[float], mapper: CoordinateMapper) -> Polyline:
    """
    Precipitation curve with an extra vertex wherever it crosses 100 mm.

    The inserted vertex pins the curve to the threshold so the change of
    slope caused by the compression is drawn as a corner.
    """
    precs = [float(p) for p in precipitation]
    vertices: List[Vertex2D] = []
    month_indices: List[int] = []

    for i, prec in enumerate(precs):
        month_indices.append(len(vertices))
        vertices.append(mapper.to_vertex(i, prec, False))

        if i < len(precs) - 1 and straddles_threshold(prec, precs[i + 1]):
            x = compression_breakpoint(prec, precs[i + 1])
            vertices.append(mapper.to_vertex(i + x, COMPRESSION_THRESHOLD, False))

    return Polyline(
        kind=SeriesKind.PRECIPITATION,
        vertices=np.asarray(vertices, dtype=np.float64),
        month_indices=month_indices,
    )


def month_axes(
    temperatures: Sequence[float], precipitation: Sequence[float], mapper: CoordinateMapper
) -> List[Tuple[Vertex2D, Vertex2D]]:
    """
    One vertical line per month, from the lower to the upper curve.

    Temperatures are doubled and mapped on the precipitation scale, since
    halving precipitation would skip the compression above 100 mm.
    """
    axes = []
    for month, (temp, prec) in enumerate(zip(temperatures, precipitation)):
        temp, prec = float(temp), float(prec)
        start = mapper.to_vertex(month, min(0.0, temp * 2.0), False)
        end = mapper.to_vertex(month, max(temp * 2.0, prec), False)
        axes.append((start, end))
    return axes
