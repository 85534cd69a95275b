"""Flatten vector path commands into classified points for pen plotters.

Modules:
- types: Point, path commands and the classified output
- sampling: parametric sampler
- curves: Bezier / elliptical arc formulas and the chord test
- segments: per-command evaluation into point producers
- driver: folds segments over a command sequence
- strokes: groups classified points into pen-down polylines
- path_data: SVG path data and svgpathtools adapters
"""

from plotter_path.driver import PathState, advance, flatten, produce
from plotter_path.path_data import (
    PathDataError,
    commands_from_svgpathtools,
    iter_svg_path_data,
    parse_path_commands,
)
from plotter_path.segments import Segment, evaluate_segment
from plotter_path.strokes import StrokeSummary, split_strokes, summarize
from plotter_path.types import (
    ClassifiedPoint,
    ClosePath,
    CommandKind,
    CurveTo,
    EllipticalArc,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
    PointRole,
    Quadratic,
    SmoothCurveTo,
    SmoothQuadratic,
    SupportPoint,
    VerticalLineTo,
    path_command_adapter,
)

__all__ = [
    # Driver
    "PathState",
    "advance",
    "flatten",
    "produce",
    # Segments
    "Segment",
    "evaluate_segment",
    # Strokes
    "StrokeSummary",
    "split_strokes",
    "summarize",
    # Input
    "PathDataError",
    "commands_from_svgpathtools",
    "iter_svg_path_data",
    "parse_path_commands",
    # Types
    "ClassifiedPoint",
    "ClosePath",
    "CommandKind",
    "CurveTo",
    "EllipticalArc",
    "HorizontalLineTo",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "Point",
    "PointRole",
    "Quadratic",
    "SmoothCurveTo",
    "SmoothQuadratic",
    "SupportPoint",
    "VerticalLineTo",
    "path_command_adapter",
]
