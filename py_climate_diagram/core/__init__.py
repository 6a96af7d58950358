"""
Core climate diagram geometry.
"""

from .series import (ChartDataStore, ChartState, Month, MonthlyEntry, SeriesKind,
                     ClimateDiagramError, SeriesLengthError, SeriesValueError)
from .scale import ScaleContext, AxisTick, compute_scale, axis_ticks
from .geometry import Vertex2D, CoordinateMapper, compression_breakpoint, intersect
from .areas import AreaKind, AreaMesh, IntervalCase, build_area_meshes
from .polylines import Polyline
from .diagram import ClimateDiagram, DiagramLabels, rebuild

__all__ = ['ChartDataStore', 'ChartState', 'Month', 'MonthlyEntry', 'SeriesKind',
           'ClimateDiagramError', 'SeriesLengthError', 'SeriesValueError',
           'ScaleContext', 'AxisTick', 'compute_scale', 'axis_ticks',
           'Vertex2D', 'CoordinateMapper', 'compression_breakpoint', 'intersect',
           'AreaKind', 'AreaMesh', 'IntervalCase', 'build_area_meshes',
           'Polyline', 'ClimateDiagram', 'DiagramLabels', 'rebuild']
