"""Tests for stroke grouping and summaries."""

from plotter_path.driver import produce
from plotter_path.path_data import parse_path_commands
from plotter_path.strokes import StrokeSummary, split_strokes, summarize
from plotter_path.types import ClassifiedPoint, Point, PointRole


def _points(d: str) -> list[ClassifiedPoint]:
    return list(produce(parse_path_commands(d)))


class TestSplitStrokes:
    def test_two_strokes(self) -> None:
        strokes = list(split_strokes(_points("M 0 0 L 10 0 L 10 10 M 20 20 L 30 30")))
        assert strokes == [
            [Point(x=0, y=0), Point(x=10, y=0), Point(x=10, y=10)],
            [Point(x=20, y=20), Point(x=30, y=30)],
        ]

    def test_draw_without_move_starts_at_origin(self) -> None:
        strokes = list(split_strokes(_points("L 5 5")))
        assert strokes == [[Point(x=0, y=0), Point(x=5, y=5)]]

    def test_closed_subpath(self) -> None:
        strokes = list(split_strokes(_points("M 1 1 L 5 1 L 5 5 Z")))
        assert strokes == [
            [Point(x=1, y=1), Point(x=5, y=1), Point(x=5, y=5), Point(x=1, y=1)],
        ]

    def test_erase_points_are_ignored(self) -> None:
        points = [
            ClassifiedPoint(x=0, y=0, role=PointRole.FLY),
            ClassifiedPoint(x=3, y=3, role=PointRole.ERASE),
            ClassifiedPoint(x=5, y=0, role=PointRole.DRAW),
        ]
        assert list(split_strokes(points)) == [[Point(x=0, y=0), Point(x=5, y=0)]]

    def test_fly_only_has_no_strokes(self) -> None:
        assert list(split_strokes(_points("M 0 0 M 10 10 M 5 5"))) == []

    def test_sampled_curve_is_one_stroke(self) -> None:
        strokes = list(split_strokes(_points("M 0 0 Q 50 100 100 0")))
        assert len(strokes) == 1
        assert len(strokes[0]) == 1 + 1001

    def test_empty_stream(self) -> None:
        assert list(split_strokes([])) == []


class TestSummarize:
    def test_counts(self) -> None:
        summary = summarize(_points("M 0 0 L 10 0 L 10 10 M 20 20 L 30 30"))
        assert summary == StrokeSummary(
            fly_points=2,
            draw_points=3,
            erase_points=0,
            strokes=2,
            end=Point(x=30, y=30),
        )

    def test_counts_erase_points(self) -> None:
        points = [
            ClassifiedPoint(x=0, y=0, role=PointRole.ERASE),
            ClassifiedPoint(x=1, y=1, role=PointRole.ERASE),
        ]
        summary = summarize(points)
        assert summary.erase_points == 2
        assert summary.strokes == 0
        assert summary.end == Point(x=1, y=1)

    def test_empty_stream(self) -> None:
        summary = summarize(iter([]))
        assert summary == StrokeSummary()
        assert summary.end is None
