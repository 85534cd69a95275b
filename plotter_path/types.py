"""Type definitions for path flattening.

- Point: immutable 2D vector with the arithmetic every curve formula needs
- PointRole / ClassifiedPoint: the output stream handed to a renderer
- Path commands: the typed input, one model per SVG path command
- SupportPoint: the control point remembered for smooth-curve mirroring
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Point(BaseModel):
    """A 2D point (or vector). Compared by value."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    @classmethod
    def zero(cls) -> Point:
        return cls(x=0.0, y=0.0)

    def __add__(self, other: Point) -> Point:
        return Point(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(x=self.x - other.x, y=self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(x=self.x * factor, y=self.y * factor)

    def __rmul__(self, factor: float) -> Point:
        return self.__mul__(factor)

    def __truediv__(self, divisor: float) -> Point:
        return Point(x=self.x / divisor, y=self.y / divisor)


class PointRole(str, Enum):
    """What a renderer should do when it reaches a point."""

    FLY = "fly"  # Pen up, relocate
    DRAW = "draw"  # Pen down, segment from previous point
    ERASE = "erase"  # Reserved, never emitted


class ClassifiedPoint(BaseModel):
    """A flattened point tagged with its role."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    role: PointRole

    @property
    def point(self) -> Point:
        return Point(x=self.x, y=self.y)


class CommandKind(str, Enum):
    """Path command kinds (one per SVG command letter, case-insensitive)."""

    MOVE_TO = "move_to"
    LINE_TO = "line_to"
    HORIZONTAL_LINE_TO = "horizontal_line_to"
    VERTICAL_LINE_TO = "vertical_line_to"
    CURVE_TO = "curve_to"
    SMOOTH_CURVE_TO = "smooth_curve_to"
    QUADRATIC = "quadratic"
    SMOOTH_QUADRATIC = "smooth_quadratic"
    ELLIPTICAL_ARC = "elliptical_arc"
    CLOSE_PATH = "close_path"


# Path commands
#
# `absolute=False` means every coordinate is an offset from the current
# position (lowercase SVG letters).


class _Command(BaseModel):
    model_config = ConfigDict(frozen=True)

    absolute: bool = True


class MoveTo(_Command):
    kind: Literal["move_to"] = "move_to"
    x: float
    y: float


class LineTo(_Command):
    kind: Literal["line_to"] = "line_to"
    x: float
    y: float


class HorizontalLineTo(_Command):
    kind: Literal["horizontal_line_to"] = "horizontal_line_to"
    x: float


class VerticalLineTo(_Command):
    kind: Literal["vertical_line_to"] = "vertical_line_to"
    y: float


class CurveTo(_Command):
    """Cubic Bezier with two explicit control points."""

    kind: Literal["curve_to"] = "curve_to"
    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float


class SmoothCurveTo(_Command):
    """Cubic Bezier whose first control point mirrors the previous curve's."""

    kind: Literal["smooth_curve_to"] = "smooth_curve_to"
    x2: float
    y2: float
    x: float
    y: float


class Quadratic(_Command):
    kind: Literal["quadratic"] = "quadratic"
    x1: float
    y1: float
    x: float
    y: float


class SmoothQuadratic(_Command):
    kind: Literal["smooth_quadratic"] = "smooth_quadratic"
    x: float
    y: float


class EllipticalArc(_Command):
    """Elliptical arc in SVG endpoint form. Rotation is in degrees."""

    kind: Literal["elliptical_arc"] = "elliptical_arc"
    rx: float
    ry: float
    x_axis_rotation: float = 0.0
    large_arc: bool = False
    sweep: bool = False
    x: float
    y: float


class ClosePath(_Command):
    kind: Literal["close_path"] = "close_path"


PathCommand = Annotated[
    MoveTo
    | LineTo
    | HorizontalLineTo
    | VerticalLineTo
    | CurveTo
    | SmoothCurveTo
    | Quadratic
    | SmoothQuadratic
    | EllipticalArc
    | ClosePath,
    Field(discriminator="kind"),
]

# Validates dicts / JSON into the right command model
path_command_adapter: TypeAdapter[PathCommand] = TypeAdapter(PathCommand)


class SupportPoint(BaseModel):
    """Last control point of a curve, in absolute coordinates."""

    model_config = ConfigDict(frozen=True)

    point: Point
    kind: CommandKind
