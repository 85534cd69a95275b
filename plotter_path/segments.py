"""Segment evaluation: one path command in, one point producer out.

Given the pen position, the next command, the support point left by the
previous command and the current subpath origin, `evaluate_segment` picks
the curve formula, resolves relative coordinates and smooth-curve mirroring,
and reports where the pen ends up and what the next command may mirror.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from plotter_path.curves import (
    ArcParameters,
    arc_center_parameters,
    cubic_bezier,
    ellipse_point,
    is_point_on_chord,
    quadratic_bezier,
)
from plotter_path.sampling import sample_times
from plotter_path.types import (
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
)

logger = logging.getLogger(__name__)

CUBIC_FAMILY = frozenset({CommandKind.CURVE_TO, CommandKind.SMOOTH_CURVE_TO})
QUADRATIC_FAMILY = frozenset({CommandKind.QUADRATIC, CommandKind.SMOOTH_QUADRATIC})


# Curves that get sampled over t


@dataclass(frozen=True)
class QuadraticCurve:
    start: Point
    p1: Point
    end: Point


@dataclass(frozen=True)
class CubicCurve:
    start: Point
    p1: Point
    p2: Point
    end: Point


@dataclass(frozen=True)
class EllipseCurve:
    arc: ArcParameters


Curve = QuadraticCurve | CubicCurve | EllipseCurve


def point_at(curve: Curve, t: float) -> Point:
    """Evaluate any sampled curve at t."""
    match curve:
        case QuadraticCurve(start=start, p1=p1, end=end):
            return quadratic_bezier(start, p1, end, t)
        case CubicCurve(start=start, p1=p1, p2=p2, end=end):
            return cubic_bezier(start, p1, p2, end, t)
        case EllipseCurve(arc=arc):
            return ellipse_point(arc, t)
    raise TypeError(f"Unsupported curve: {curve!r}")


# Point producers


@dataclass(frozen=True)
class EmptyProducer:
    """Yields nothing; the pen still ends at `end`."""

    end: Point


@dataclass(frozen=True)
class LineProducer:
    """Yields only the end point."""

    end: Point


@dataclass(frozen=True)
class SampledProducer:
    """Yields the curve sampled at every tick of the parametric sampler.

    The last point is always the curve's value at t = 1.
    """

    curve: Curve
    step: float | None = None


PointProducer = EmptyProducer | LineProducer | SampledProducer


def iter_points(producer: PointProducer) -> Iterator[Point]:
    """Lazily yield the points described by a producer."""
    match producer:
        case EmptyProducer():
            return
        case LineProducer(end=end):
            yield end
        case SampledProducer(curve=curve, step=step):
            last_t = 0.0
            for t in sample_times(step):
                last_t = t
                yield point_at(curve, t)
            # A step that does not divide 1 stops short; finish on the endpoint
            if last_t < 1.0:
                yield point_at(curve, 1.0)
        case _:
            raise TypeError(f"Unsupported point producer: {producer!r}")


@dataclass(frozen=True)
class Segment:
    """Result of evaluating one command."""

    producer: PointProducer
    end: Point
    support: SupportPoint | None
    role: PointRole

    def points(self) -> Iterator[Point]:
        return iter_points(self.producer)


def absolute_point(current: Point, absolute: bool, x: float, y: float) -> Point:
    """Resolve a command coordinate against the current position."""
    point = Point(x=x, y=y)
    return point if absolute else point + current


def mirrored_point(current: Point, support: SupportPoint | None, family: frozenset) -> Point:
    """Implicit first control point of a smooth curve, in absolute coordinates.

    Reflects the previous control point through the current position when
    the previous command belongs to `family`; otherwise the control point
    collapses onto the current position.
    """
    if support is not None and support.kind in family:
        return current + (current - support.point)
    return current


def _line(end: Point, role: PointRole) -> Segment:
    return Segment(producer=LineProducer(end=end), end=end, support=None, role=role)


def _cubic(
    current: Point,
    p1: Point,
    p2: Point,
    end: Point,
    kind: CommandKind,
    step: float | None,
    epsilon: float | None,
) -> Segment:
    support = SupportPoint(point=p2, kind=kind)
    if is_point_on_chord(current, end, p1, epsilon) and is_point_on_chord(
        current, end, p2, epsilon
    ):
        producer: PointProducer = LineProducer(end=end)
    else:
        producer = SampledProducer(
            curve=CubicCurve(start=current, p1=p1, p2=p2, end=end), step=step
        )
    return Segment(producer=producer, end=end, support=support, role=PointRole.DRAW)


def _quadratic(
    current: Point,
    p1: Point,
    end: Point,
    kind: CommandKind,
    step: float | None,
    epsilon: float | None,
) -> Segment:
    support = SupportPoint(point=p1, kind=kind)
    if is_point_on_chord(current, end, p1, epsilon):
        producer: PointProducer = LineProducer(end=end)
    else:
        producer = SampledProducer(curve=QuadraticCurve(start=current, p1=p1, end=end), step=step)
    return Segment(producer=producer, end=end, support=support, role=PointRole.DRAW)


def _arc(current: Point, command: EllipticalArc, step: float | None) -> Segment:
    end = absolute_point(current, command.absolute, command.x, command.y)

    # Identical endpoints: the arc is omitted entirely
    if current == end:
        return Segment(producer=EmptyProducer(end=end), end=end, support=None, role=PointRole.DRAW)

    # A zero radius makes the arc a straight line
    if command.rx == 0 or command.ry == 0:
        return _line(end, PointRole.DRAW)

    arc = arc_center_parameters(
        current,
        end,
        command.rx,
        command.ry,
        command.x_axis_rotation,
        command.large_arc,
        command.sweep,
    )
    if arc is None:
        logger.debug(f"Arc radii ({command.rx}, {command.ry}) too small to scale, drawing a line")
        return _line(end, PointRole.DRAW)

    return Segment(
        producer=SampledProducer(curve=EllipseCurve(arc=arc), step=step),
        end=end,
        support=None,
        role=PointRole.DRAW,
    )


def evaluate_segment(
    current: Point,
    command: PathCommand,
    support: SupportPoint | None = None,
    subpath_origin: Point | None = None,
    *,
    step: float | None = None,
    epsilon: float | None = None,
) -> Segment:
    """Evaluate one path command starting from `current`.

    Args:
        current: Pen position before the command (absolute)
        command: The path command to evaluate
        support: Support point left by the previous command, if any
        subpath_origin: Start of the open subpath; None closes to (0, 0)
        step: Sampler step for curves (default: settings.tick_step)
        epsilon: Collinearity tolerance (default: settings.chord_epsilon)

    Returns:
        The segment's point producer, end position, support point and role
    """
    match command:
        case MoveTo(absolute=absolute, x=x, y=y):
            return _line(absolute_point(current, absolute, x, y), PointRole.FLY)

        case LineTo(absolute=absolute, x=x, y=y):
            return _line(absolute_point(current, absolute, x, y), PointRole.DRAW)

        case HorizontalLineTo(absolute=absolute, x=x):
            missing_y = current.y if absolute else 0.0
            return _line(absolute_point(current, absolute, x, missing_y), PointRole.DRAW)

        case VerticalLineTo(absolute=absolute, y=y):
            missing_x = current.x if absolute else 0.0
            return _line(absolute_point(current, absolute, missing_x, y), PointRole.DRAW)

        case CurveTo():
            p1 = absolute_point(current, command.absolute, command.x1, command.y1)
            p2 = absolute_point(current, command.absolute, command.x2, command.y2)
            end = absolute_point(current, command.absolute, command.x, command.y)
            return _cubic(current, p1, p2, end, CommandKind.CURVE_TO, step, epsilon)

        case SmoothCurveTo():
            p1 = mirrored_point(current, support, CUBIC_FAMILY)
            p2 = absolute_point(current, command.absolute, command.x2, command.y2)
            end = absolute_point(current, command.absolute, command.x, command.y)
            return _cubic(current, p1, p2, end, CommandKind.SMOOTH_CURVE_TO, step, epsilon)

        case Quadratic():
            p1 = absolute_point(current, command.absolute, command.x1, command.y1)
            end = absolute_point(current, command.absolute, command.x, command.y)
            return _quadratic(current, p1, end, CommandKind.QUADRATIC, step, epsilon)

        case SmoothQuadratic():
            p1 = mirrored_point(current, support, QUADRATIC_FAMILY)
            end = absolute_point(current, command.absolute, command.x, command.y)
            return _quadratic(current, p1, end, CommandKind.SMOOTH_QUADRATIC, step, epsilon)

        case EllipticalArc():
            return _arc(current, command, step)

        case ClosePath():
            target = subpath_origin if subpath_origin is not None else Point.zero()
            return _line(target, PointRole.DRAW)

    raise TypeError(f"Unsupported path command: {command!r}")
