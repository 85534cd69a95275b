"""Group classified points into pen-down strokes."""

from collections.abc import Iterable, Iterator

from pydantic import BaseModel

from plotter_path.types import ClassifiedPoint, Point, PointRole


def split_strokes(points: Iterable[ClassifiedPoint]) -> Iterator[list[Point]]:
    """Fold a classified point stream into polylines.

    A fly point lifts the pen and moves it; a draw point extends the current
    stroke from wherever the pen is. Erase points are ignored. Strokes with
    fewer than two points are never yielded.
    """
    pen = Point.zero()
    stroke: list[Point] = []

    for classified in points:
        match classified.role:
            case PointRole.FLY:
                if len(stroke) > 1:
                    yield stroke
                stroke = []
                pen = classified.point
            case PointRole.DRAW:
                if not stroke:
                    stroke = [pen]
                pen = classified.point
                stroke.append(pen)
            case PointRole.ERASE:
                continue

    if len(stroke) > 1:
        yield stroke


class StrokeSummary(BaseModel):
    """Counts over a classified point stream."""

    fly_points: int = 0
    draw_points: int = 0
    erase_points: int = 0
    strokes: int = 0
    end: Point | None = None


def summarize(points: Iterable[ClassifiedPoint]) -> StrokeSummary:
    """Count points per role and pen-down strokes in one pass."""
    summary = StrokeSummary()

    def tally(stream: Iterable[ClassifiedPoint]) -> Iterator[ClassifiedPoint]:
        for classified in stream:
            match classified.role:
                case PointRole.FLY:
                    summary.fly_points += 1
                case PointRole.DRAW:
                    summary.draw_points += 1
                case PointRole.ERASE:
                    summary.erase_points += 1
            summary.end = classified.point
            yield classified

    summary.strokes = sum(1 for _ in split_strokes(tally(points)))
    return summary
