"""
Humid, dry and very humid areas between the two climate curves.

Every month interval [i, i+1] is classified by comparing the halved
precipitation with the temperature at both ends:

- full humid: precipitation above temperature at both ends
- full dry: temperature above precipitation at both ends
- humid to dry / dry to humid: the curves cross inside the interval

Each builder returns fresh vertex lists which the caller merges into the
mesh of the matching area. Triangles never share vertices.
"""

import numpy as np
import structlog
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from .geometry import (
    COMPRESSION_THRESHOLD,
    PRECIPITATION_SCALE,
    CoordinateMapper,
    Vertex2D,
    compression_breakpoint,
    intersect,
)

logger = structlog.get_logger()


class AreaKind(str, Enum):
    """The three meshes of a climate diagram."""

    HUMID = "humid"
    DRY = "dry"
    VERY_HUMID = "very_humid"


class IntervalCase(str, Enum):
    """Relationship of the two curves over one month interval."""

    FULL_HUMID = "full_humid"
    FULL_DRY = "full_dry"
    HUMID_TO_DRY = "humid_to_dry"
    DRY_TO_HUMID = "dry_to_humid"


@dataclass
class AreaMesh:
    """Flat triangle list; indices are simply 0..N-1 over the vertices."""

    kind: AreaKind
    vertices: np.ndarray = field(default_factory=lambda: np.zeros((0, 2), dtype=np.float64))

    @property
    def indices(self) -> np.ndarray:
        return np.arange(len(self.vertices), dtype=np.int32)

    @property
    def triangles(self) -> np.ndarray:
        return self.indices.reshape(-1, 3)

    @property
    def triangle_count(self) -> int:
        return len(self.vertices) // 3

    @property
    def is_empty(self) -> bool:
        return len(self.vertices) == 0

    @classmethod
    def from_vertices(cls, kind: AreaKind, vertices: Sequence[Vertex2D]) -> "AreaMesh":
        if not vertices:
            return cls(kind)
        return cls(kind, np.asarray(vertices, dtype=np.float64).reshape(-1, 2))


def classify_interval(
    cur_temp: float, cur_prec: float, next_temp: float, next_prec: float
) -> Optional[IntervalCase]:
    """
    Classify one month interval.

    Returns None when a curve touches the other exactly at an endpoint.
    """
    cur_humid = cur_prec * PRECIPITATION_SCALE > cur_temp
    cur_dry = cur_prec * PRECIPITATION_SCALE < cur_temp
    next_humid = next_prec * PRECIPITATION_SCALE > next_temp
    next_dry = next_prec * PRECIPITATION_SCALE < next_temp

    if cur_humid and next_humid:
        return IntervalCase.FULL_HUMID
    if cur_dry and next_dry:
        return IntervalCase.FULL_DRY
    if cur_humid and next_dry:
        return IntervalCase.HUMID_TO_DRY
    if cur_dry and next_humid:
        return IntervalCase.DRY_TO_HUMID
    return None


def build_full_area(
    mapper: CoordinateMapper,
    month: int,
    cur_prec: float,
    next_prec: float,
    cur_temp: float,
    next_temp: float,
) -> Tuple[List[Vertex2D], List[Vertex2D]]:
    """
    Triangulate an interval where the curves do not cross.

    Returns:
        (base area vertices, very humid vertices)
    """
    v = mapper.to_vertex
    limit = COMPRESSION_THRESHOLD
    base: List[Vertex2D] = []
    very_humid: List[Vertex2D] = []

    if (cur_prec < limit and next_prec < limit) or (cur_prec > limit and next_prec > limit):
        base += [
            v(month, min(limit, cur_prec), False),
            v(month, cur_temp, True),
            v(month + 1, min(limit, next_prec), False),

            v(month, cur_temp, True),
            v(month + 1, next_temp, True),
            v(month + 1, min(limit, next_prec), False),
        ]

    if cur_prec > limit and next_prec > limit:
        very_humid += [
            v(month, cur_prec, False),
            v(month, limit, False),
            v(month + 1, next_prec, False),

            v(month, limit, False),
            v(month + 1, limit, False),
            v(month + 1, next_prec, False),
        ]
    elif cur_prec < limit and next_prec > limit:
        # Corner where the curve enters the compressed range
        corner_x = month + compression_breakpoint(cur_prec, next_prec)

        base += [
            v(month, cur_temp, True),
            v(month + 1, limit, False),
            v(month + 1, next_temp, True),

            v(month + 1, limit, False),
            v(month, cur_prec, False),
            v(month, cur_temp, True),

            v(corner_x, limit, False),
            v(month + 1, limit, False),
            v(month, cur_prec, False),
        ]
        very_humid += [
            v(corner_x, limit, False),
            v(month + 1, limit, False),
            v(month + 1, next_prec, False),
        ]
    elif cur_prec > limit and next_prec < limit:
        corner_x = month + compression_breakpoint(cur_prec, next_prec)

        base += [
            v(month, cur_temp, True),
            v(month + 1, next_prec, False),
            v(month + 1, next_temp, True),

            v(month, limit, False),
            v(month + 1, next_prec, False),
            v(month, cur_temp, True),

            v(corner_x, limit, False),
            v(month, limit, False),
            v(month + 1, next_prec, False),
        ]
        very_humid += [
            v(corner_x, limit, False),
            v(month, limit, False),
            v(month, cur_prec, False),
        ]

    return base, very_humid


def build_separated_area(
    mapper: CoordinateMapper,
    month: int,
    cur_prec: float,
    next_prec: float,
    cur_temp: float,
    next_temp: float,
) -> Tuple[List[Vertex2D], List[Vertex2D]]:
    """
    Triangulate an interval where the curves cross.

    The crossing is solved in data space between the halved precipitation
    line and the temperature line.

    Returns:
        (triangle at the start of the interval, triangle at its end)
    """
    prec_start = Vertex2D(month, cur_prec * PRECIPITATION_SCALE)
    prec_end = Vertex2D(month + 1, next_prec * PRECIPITATION_SCALE)
    temp_start = Vertex2D(month, cur_temp)
    temp_end = Vertex2D(month + 1, next_temp)

    crossing = intersect(prec_start, prec_end - prec_start, temp_start, temp_end - temp_start)
    mid_point = mapper.to_vertex(crossing.x, crossing.y, True)

    first = [
        mapper.to_vertex(month, cur_prec, False),
        mapper.to_vertex(month, cur_temp, True),
        mid_point,
    ]
    second = [
        mapper.to_vertex(month + 1, next_prec, False),
        mapper.to_vertex(month + 1, next_temp, True),
        mid_point,
    ]
    return first, second


def build_area_meshes(
    temperatures: Sequence[float],
    precipitation: Sequence[float],
    mapper: CoordinateMapper,
    draw_full: bool = True,
    draw_partial: bool = True,
) -> Dict[AreaKind, AreaMesh]:
    """
    Build the humid, dry and very humid meshes for all eleven intervals.

    Temperatures and precipitation are clamped to >= 0 here only, as no
    area extends below the zero line.
    """
    collected: Dict[AreaKind, List[Vertex2D]] = {kind: [] for kind in AreaKind}

    for i in range(len(temperatures) - 1):
        cur_temp = max(0.0, float(temperatures[i]))
        cur_prec = max(float(precipitation[i]), 0.0)
        next_temp = max(0.0, float(temperatures[i + 1]))
        next_prec = max(float(precipitation[i + 1]), 0.0)

        case = classify_interval(cur_temp, cur_prec, next_temp, next_prec)
        logger.debug(
            "Classified interval",
            month=i,
            case=case.value if case else None,
            cur_temp=cur_temp,
            cur_prec=cur_prec,
            next_temp=next_temp,
            next_prec=next_prec,
        )

        if case in (IntervalCase.FULL_HUMID, IntervalCase.FULL_DRY) and draw_full:
            target = AreaKind.HUMID if case == IntervalCase.FULL_HUMID else AreaKind.DRY
            base, very_humid = build_full_area(mapper, i, cur_prec, next_prec, cur_temp, next_temp)
            collected[target] += base
            collected[AreaKind.VERY_HUMID] += very_humid
        elif case in (IntervalCase.HUMID_TO_DRY, IntervalCase.DRY_TO_HUMID) and draw_partial:
            if case == IntervalCase.HUMID_TO_DRY:
                first_kind, second_kind = AreaKind.HUMID, AreaKind.DRY
            else:
                first_kind, second_kind = AreaKind.DRY, AreaKind.HUMID
            first, second = build_separated_area(mapper, i, cur_prec, next_prec, cur_temp, next_temp)
            collected[first_kind] += first
            collected[second_kind] += second

    return {kind: AreaMesh.from_vertices(kind, vertices) for kind, vertices in collected.items()}
