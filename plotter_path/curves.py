"""Pure functions for curve evaluation.

Stateless formulas that map a parameter t in [0, 1] to a point on a line,
Bezier curve or elliptical arc, plus the SVG endpoint-to-center arc
conversion and the chord collinearity test. No side effects or I/O.
"""

import logging
import math
from dataclasses import dataclass

from plotter_path.config import settings
from plotter_path.types import Point

logger = logging.getLogger(__name__)


def lerp_point(start: Point, end: Point, t: float) -> Point:
    """Linearly interpolate between two points."""
    return start * (1 - t) + end * t


def quadratic_bezier(start: Point, p1: Point, end: Point, t: float) -> Point:
    """Evaluate quadratic bezier at t."""
    one_minus_t = 1 - t
    return start * one_minus_t**2 + p1 * (2 * t * one_minus_t) + end * t**2


def cubic_bezier(start: Point, p1: Point, p2: Point, end: Point, t: float) -> Point:
    """Evaluate cubic bezier at t."""
    one_minus_t = 1 - t
    return (
        start * one_minus_t**3
        + p1 * (3 * t * one_minus_t**2)
        + p2 * (3 * t**2 * one_minus_t)
        + end * t**3
    )


def angle_between(ux: float, uy: float, vx: float, vy: float) -> float:
    """Signed angle from vector u to vector v, in radians.

    The sign follows the cross product (negative when u x v < 0). A zero
    length vector has no direction and gives 0.
    """
    dot = ux * vx + uy * vy
    norm = math.hypot(ux, uy) * math.hypot(vx, vy)
    if norm == 0:
        return 0.0
    cosine = max(-1.0, min(1.0, dot / norm))
    sign = -1.0 if ux * vy - uy * vx < 0 else 1.0
    return sign * math.acos(cosine)


@dataclass(frozen=True)
class ArcParameters:
    """Center parameterization of an elliptical arc."""

    center: Point
    rx: float
    ry: float
    rotation: float  # radians
    start_angle: float  # radians
    sweep_angle: float  # radians, signed


def arc_center_parameters(
    start: Point,
    end: Point,
    rx: float,
    ry: float,
    x_axis_rotation: float,
    large_arc: bool,
    sweep: bool,
) -> ArcParameters | None:
    """Convert an SVG endpoint arc to center form.

    Follows the SVG implementation notes (F.6.5 / F.6.6). The caller must
    rule out the degenerate cases first: identical endpoints and zero radii.
    Returns None when the radii are so small relative to the chord that no
    finite scaling makes them fit.

    Args:
        start: Current pen position (absolute)
        end: Arc end point (absolute)
        rx, ry: Ellipse radii (sign is ignored)
        x_axis_rotation: Rotation of the ellipse x-axis, in degrees
        large_arc: Take the arc spanning more than 180 degrees
        sweep: Draw in the positive-angle direction

    Returns:
        Center, corrected radii, rotation and angles of the arc, or None
    """
    rx = abs(rx)
    ry = abs(ry)
    rotation = math.radians(math.fmod(x_axis_rotation, 360.0))
    cos_phi = math.cos(rotation)
    sin_phi = math.sin(rotation)

    # Half chord, rotated into the ellipse frame
    dx = (start.x - end.x) / 2
    dy = (start.y - end.y) / 2
    dx_rot = cos_phi * dx + sin_phi * dy
    dy_rot = -sin_phi * dx + cos_phi * dy

    # Radii too small to span the chord are scaled up uniformly
    ratio_x = dx_rot / rx
    ratio_y = dy_rot / ry
    radii_check = ratio_x * ratio_x + ratio_y * ratio_y
    if not math.isfinite(radii_check):
        return None
    if radii_check > 1.0:
        scale = math.sqrt(radii_check)
        logger.debug(f"Arc radii ({rx}, {ry}) too small for chord, scaling by {scale:.4f}")
        rx *= scale
        ry *= scale

    # Center in the ellipse frame
    rx_sq = rx * rx
    ry_sq = ry * ry
    numerator = rx_sq * ry_sq - rx_sq * dy_rot**2 - ry_sq * dx_rot**2
    denominator = rx_sq * dy_rot**2 + ry_sq * dx_rot**2
    radicand = max(0.0, numerator / denominator) if denominator else 0.0
    coef = math.sqrt(radicand) if large_arc != sweep else -math.sqrt(radicand)
    cx_rot = coef * (rx * dy_rot / ry)
    cy_rot = coef * (-ry * dx_rot / rx)

    # Back to absolute coordinates
    center = Point(
        x=cos_phi * cx_rot - sin_phi * cy_rot + (start.x + end.x) / 2,
        y=sin_phi * cx_rot + cos_phi * cy_rot + (start.y + end.y) / 2,
    )

    start_x = (dx_rot - cx_rot) / rx
    start_y = (dy_rot - cy_rot) / ry
    end_x = (-dx_rot - cx_rot) / rx
    end_y = (-dy_rot - cy_rot) / ry

    start_angle = angle_between(1.0, 0.0, start_x, start_y)
    sweep_angle = angle_between(start_x, start_y, end_x, end_y)
    if not sweep and sweep_angle > 0:
        sweep_angle -= 2 * math.pi
    elif sweep and sweep_angle < 0:
        sweep_angle += 2 * math.pi
    # fmod keeps the sign, so the sweep direction survives
    sweep_angle = math.fmod(sweep_angle, 2 * math.pi)

    return ArcParameters(
        center=center,
        rx=rx,
        ry=ry,
        rotation=rotation,
        start_angle=start_angle,
        sweep_angle=sweep_angle,
    )


def ellipse_point(arc: ArcParameters, t: float) -> Point:
    """Evaluate an elliptical arc at t."""
    angle = arc.start_angle + arc.sweep_angle * t
    ex = arc.rx * math.cos(angle)
    ey = arc.ry * math.sin(angle)
    cos_phi = math.cos(arc.rotation)
    sin_phi = math.sin(arc.rotation)
    return Point(
        x=cos_phi * ex - sin_phi * ey + arc.center.x,
        y=sin_phi * ex + cos_phi * ey + arc.center.y,
    )


def is_point_on_chord(
    chord_start: Point, chord_end: Point, p: Point, epsilon: float | None = None
) -> bool:
    """Check whether p lies on the line through chord_start and chord_end.

    Compares the parametric position of p along each axis; an axis with no
    extent contributes 0 instead of dividing by zero.
    """
    if epsilon is None:
        epsilon = settings.chord_epsilon

    vector_x = chord_end.x - chord_start.x
    vector_y = chord_end.y - chord_start.y
    ratio_x = 0.0 if vector_x == 0 else (p.x - chord_start.x) / vector_x
    ratio_y = 0.0 if vector_y == 0 else (p.y - chord_start.y) / vector_y
    return abs(ratio_x - ratio_y) < epsilon
