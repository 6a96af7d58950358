"""
Full rebuild of a climate diagram.

rebuild() is a pure function: it takes a snapshot of the chart data and
returns every piece of geometry the renderer needs. Nothing is cached
between calls, so diagrams built for different requests never share state.
"""

import numpy as np
import structlog
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from ..config.diagram_settings import DiagramSettings
from .areas import AreaKind, AreaMesh, build_area_meshes
from .geometry import CoordinateMapper, Vertex2D
from .polylines import Polyline, month_axes, precipitation_polyline, temperature_polyline
from .scale import AxisTick, ScaleContext, axis_ticks, compute_scale
from .series import ChartDataStore, ChartState, validate_series, SeriesKind

logger = structlog.get_logger()


@dataclass(frozen=True)
class DiagramLabels:
    """Informational labels shown above the chart."""

    temperature_average: float
    precipitation_total: float
    location: str

    @property
    def temperature_text(self) -> str:
        return f"{self.temperature_average:g}°C"

    @property
    def precipitation_text(self) -> str:
        return f"{self.precipitation_total:g} mm"


@dataclass
class ClimateDiagram:
    """Everything produced by one rebuild."""

    settings: DiagramSettings
    scale: ScaleContext
    ticks: List[AxisTick]
    temperature_line: Polyline
    precipitation_line: Polyline
    month_axes: List[Tuple[Vertex2D, Vertex2D]]
    meshes: Dict[AreaKind, AreaMesh]
    labels: DiagramLabels

    @property
    def humid(self) -> AreaMesh:
        return self.meshes[AreaKind.HUMID]

    @property
    def dry(self) -> AreaMesh:
        return self.meshes[AreaKind.DRY]

    @property
    def very_humid(self) -> AreaMesh:
        return self.meshes[AreaKind.VERY_HUMID]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain lists and numbers for JSON output."""
        return {
            "size": {"width": self.settings.width, "height": self.settings.height},
            "scale": {"num_steps": self.scale.num_steps, "lowest_step": self.scale.lowest_step},
            "ticks": [
                {
                    "step": tick.step,
                    "temperature_label": tick.temperature_label,
                    "precipitation_label": tick.precipitation_label,
                    "y": tick.y,
                    "start_x": tick.start_x,
                    "end_x": tick.end_x,
                    "line_width": tick.line_width,
                }
                for tick in self.ticks
            ],
            "polylines": {
                "temperature": self.temperature_line.vertices.tolist(),
                "precipitation": self.precipitation_line.vertices.tolist(),
            },
            "data_points": {
                "temperature": self.temperature_line.month_vertices.tolist(),
                "precipitation": self.precipitation_line.month_vertices.tolist(),
            },
            "month_axes": [[list(start), list(end)] for start, end in self.month_axes],
            "meshes": {
                kind.value: {
                    "vertices": mesh.vertices.tolist(),
                    "indices": mesh.indices.tolist(),
                }
                for kind, mesh in self.meshes.items()
            },
            "labels": {
                "temperature_average": self.labels.temperature_average,
                "precipitation_total": self.labels.precipitation_total,
                "temperature_text": self.labels.temperature_text,
                "precipitation_text": self.labels.precipitation_text,
                "location": self.labels.location,
            },
        }


def rebuild(
    state: Union[ChartState, ChartDataStore],
    settings: Optional[DiagramSettings] = None,
) -> ClimateDiagram:
    """
    Compute scale, curves, areas and labels for the given chart data.

    Args:
        state: Snapshot of the chart data (a store is snapshotted first)
        settings: Draw-space size and area toggles

    Returns:
        ClimateDiagram with freshly built geometry
    """
    if isinstance(state, ChartDataStore):
        state = state.snapshot()
    settings = settings or DiagramSettings()

    temperatures = validate_series(state.temperatures, SeriesKind.TEMPERATURE)
    precipitation = validate_series(state.precipitation, SeriesKind.PRECIPITATION)

    scale = compute_scale(temperatures, precipitation)
    logger.info(
        "Rebuilding climate diagram",
        num_steps=scale.num_steps,
        lowest_step=scale.lowest_step,
        width=settings.width,
        height=settings.height,
    )

    mapper = CoordinateMapper(settings.width, settings.height, scale)
    meshes = build_area_meshes(
        temperatures,
        precipitation,
        mapper,
        draw_full=settings.draw_full,
        draw_partial=settings.draw_partial,
    )

    labels = DiagramLabels(
        temperature_average=float(np.sum(temperatures) / len(temperatures)),
        precipitation_total=float(np.sum(precipitation)),
        location=state.location_label,
    )

    diagram = ClimateDiagram(
        settings=settings,
        scale=scale,
        ticks=axis_ticks(scale, settings),
        temperature_line=temperature_polyline(temperatures, mapper),
        precipitation_line=precipitation_polyline(precipitation, mapper),
        month_axes=month_axes(temperatures, precipitation, mapper),
        meshes=meshes,
        labels=labels,
    )

    logger.info(
        "Climate diagram rebuilt",
        humid_triangles=diagram.humid.triangle_count,
        dry_triangles=diagram.dry.triangle_count,
        very_humid_triangles=diagram.very_humid.triangle_count,
        precipitation_vertices=len(diagram.precipitation_line),
    )
    return diagram
