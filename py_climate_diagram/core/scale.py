"""
Value-axis planning for the climate diagram.

The temperature axis runs in steps of 10 °C, the precipitation axis in steps
of 20 mm, so both curves share one vertical scale once precipitation is
halved.
"""

import math
import numpy as np
import structlog
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..config.diagram_settings import DiagramSettings

logger = structlog.get_logger()

STEP_SIZE = 10
# Above this many steps everything is in the compressed range (>100 mm)
MAX_UPPER_STEPS = 6


@dataclass(frozen=True)
class ScaleContext:
    """Number of value-axis divisions and the lowest tick (in units of 10)."""

    num_steps: int
    lowest_step: int

    @property
    def highest_step(self) -> int:
        return self.lowest_step + self.num_steps - 1


@dataclass(frozen=True)
class AxisTick:
    """A value-axis tick with both labels and its horizontal grid line."""

    step: int
    temperature_label: int
    precipitation_label: int
    y: float
    start_x: float
    end_x: float
    line_width: float


def compute_scale(temperatures: Sequence[float], precipitation: Sequence[float]) -> ScaleContext:
    """
    Compute the value-axis scale from both series.

    Extremes are seeded at 0 so the axis always includes the zero line.
    Note that the lowest value is the max of both series' minimums.

    Args:
        temperatures: Monthly temperatures in °C
        precipitation: Monthly precipitation in mm

    Returns:
        ScaleContext with num_steps >= 1
    """
    temps = np.asarray(temperatures, dtype=np.float64)
    precs = np.asarray(precipitation, dtype=np.float64) * 0.5

    highest_temp = max(0.0, float(np.max(temps)))
    lowest_temp = min(0.0, float(np.min(temps)))
    highest_prec = max(0.0, float(np.max(precs)))
    lowest_prec = min(0.0, float(np.min(precs)))

    logger.debug(
        "Series extremes",
        highest_temp=highest_temp,
        lowest_temp=lowest_temp,
        highest_prec=highest_prec,
        lowest_prec=lowest_prec,
    )

    highest_value = max(highest_temp, highest_prec)
    lowest_value = max(lowest_temp, lowest_prec)

    lowest_step = math.floor(lowest_value / STEP_SIZE)
    num_steps = min(MAX_UPPER_STEPS, math.ceil(highest_value / STEP_SIZE)) + lowest_step + 1

    # Only reachable with negative precipitation; keeps the mapper finite
    num_steps = max(1, num_steps)

    return ScaleContext(num_steps=num_steps, lowest_step=lowest_step)


def axis_ticks(scale: ScaleContext, settings: Optional[DiagramSettings] = None) -> List[AxisTick]:
    """Lay out one tick per value-axis step, lowest first."""
    settings = settings or DiagramSettings()
    step_height = settings.height / scale.num_steps

    ticks = []
    for i in range(scale.lowest_step, scale.lowest_step + scale.num_steps):
        ticks.append(
            AxisTick(
                step=i,
                temperature_label=i * STEP_SIZE,
                precipitation_label=i * STEP_SIZE * 2,
                y=step_height * i,
                start_x=settings.axis_line_offset,
                end_x=settings.width - settings.axis_line_offset,
                line_width=settings.zero_axis_width if i == 0 else settings.axis_width,
            )
        )
    return ticks
