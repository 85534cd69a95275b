"""Path driver: fold segment evaluation over a command sequence.

Threads the pen position, support point and subpath origin from one command
to the next and flattens every segment into a single lazy stream of
classified points. Commands are processed strictly in order; each one
depends on where the previous one left the pen.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from plotter_path.segments import Segment, evaluate_segment
from plotter_path.types import ClassifiedPoint, ClosePath, PathCommand, Point, SupportPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathState:
    """Fold state carried between commands."""

    position: Point = field(default_factory=Point.zero)
    support: SupportPoint | None = None
    subpath_origin: Point | None = None  # None until a subpath opens


def advance(
    state: PathState,
    command: PathCommand,
    *,
    step: float | None = None,
    epsilon: float | None = None,
) -> tuple[Segment, PathState]:
    """Evaluate one command and return its segment with the next state."""
    segment = evaluate_segment(
        state.position,
        command,
        state.support,
        state.subpath_origin,
        step=step,
        epsilon=epsilon,
    )

    if isinstance(command, ClosePath):
        subpath_origin = None
    elif state.subpath_origin is None:
        subpath_origin = segment.end
    else:
        subpath_origin = state.subpath_origin

    next_state = PathState(
        position=segment.end,
        support=segment.support,
        subpath_origin=subpath_origin,
    )
    return segment, next_state


def produce(
    commands: Iterable[PathCommand],
    *,
    step: float | None = None,
    epsilon: float | None = None,
) -> Iterator[ClassifiedPoint]:
    """Flatten path commands into classified points, lazily.

    Nothing is evaluated until the consumer pulls; dropping the iterator
    stops the work.

    Args:
        commands: Path commands in drawing order
        step: Sampler step for curves (default: settings.tick_step)
        epsilon: Collinearity tolerance (default: settings.chord_epsilon)

    Yields:
        Points tagged fly (pen up) or draw (pen down)
    """
    state = PathState()
    for index, command in enumerate(commands):
        segment, state = advance(state, command, step=step, epsilon=epsilon)
        logger.debug(
            f"Command {index} {command.kind}: {type(segment.producer).__name__} "
            f"-> ({segment.end.x:.3f}, {segment.end.y:.3f})"
        )
        role = segment.role
        for point in segment.points():
            yield ClassifiedPoint(x=point.x, y=point.y, role=role)


def flatten(
    commands: Iterable[PathCommand],
    *,
    step: float | None = None,
    epsilon: float | None = None,
) -> list[ClassifiedPoint]:
    """Eagerly flatten path commands into a list of classified points."""
    return list(produce(commands, step=step, epsilon=epsilon))
