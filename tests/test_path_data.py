"""Tests for path data parsing and svgpathtools conversion."""

import pytest
from svgpathtools import parse_path

from plotter_path.driver import flatten
from plotter_path.path_data import (
    PathDataError,
    commands_from_svgpathtools,
    iter_svg_path_data,
    parse_path_commands,
)
from plotter_path.types import (
    ClosePath,
    CommandKind,
    CurveTo,
    EllipticalArc,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    Quadratic,
    SmoothCurveTo,
    SmoothQuadratic,
    VerticalLineTo,
)


class TestParsePathCommands:
    def test_basic_path(self) -> None:
        commands = parse_path_commands("M 10 20 L 30 40 Z")
        assert commands == [MoveTo(x=10, y=20), LineTo(x=30, y=40), ClosePath()]

    def test_relative_commands(self) -> None:
        commands = parse_path_commands("m 1 2 l 3 4 h 5 v 6 z")
        assert commands == [
            MoveTo(absolute=False, x=1, y=2),
            LineTo(absolute=False, x=3, y=4),
            HorizontalLineTo(absolute=False, x=5),
            VerticalLineTo(absolute=False, y=6),
            ClosePath(absolute=False),
        ]

    def test_all_curve_commands(self) -> None:
        commands = parse_path_commands(
            "M10 80 C 40 10, 65 10, 95 80 S 150 150, 180 80 Q 52.5 210, 95 280 T 180 280"
        )
        assert commands == [
            MoveTo(x=10, y=80),
            CurveTo(x1=40, y1=10, x2=65, y2=10, x=95, y=80),
            SmoothCurveTo(x2=150, y2=150, x=180, y=80),
            Quadratic(x1=52.5, y1=210, x=95, y=280),
            SmoothQuadratic(x=180, y=280),
        ]

    def test_implicit_lineto_after_move(self) -> None:
        commands = parse_path_commands("M 0 0 10 10 20 0")
        assert commands == [MoveTo(x=0, y=0), LineTo(x=10, y=10), LineTo(x=20, y=0)]

    def test_implicit_relative_lineto_after_relative_move(self) -> None:
        commands = parse_path_commands("m 0 0 10 10")
        assert commands == [MoveTo(absolute=False, x=0, y=0), LineTo(absolute=False, x=10, y=10)]

    def test_repeated_command(self) -> None:
        commands = parse_path_commands("M 0 0 Q 5 5 10 0 15 -5 20 0")
        assert [command.kind for command in commands] == [
            CommandKind.MOVE_TO,
            CommandKind.QUADRATIC,
            CommandKind.QUADRATIC,
        ]

    def test_compact_numbers(self) -> None:
        commands = parse_path_commands("M10-20L.5.5")
        assert commands == [MoveTo(x=10, y=-20), LineTo(x=0.5, y=0.5)]

    def test_exponents(self) -> None:
        commands = parse_path_commands("M 1e2 2.5E-1")
        assert commands == [MoveTo(x=100, y=0.25)]

    def test_arc(self) -> None:
        commands = parse_path_commands("M 10 315 A 30 50 -45 1 0 162.55 162.45")
        assert commands[1] == EllipticalArc(
            rx=30, ry=50, x_axis_rotation=-45, large_arc=True, sweep=False, x=162.55, y=162.45
        )

    def test_compact_arc_flags(self) -> None:
        commands = parse_path_commands("M0 0A25 25 -30 0150 -25")
        assert commands[1] == EllipticalArc(
            rx=25, ry=25, x_axis_rotation=-30, large_arc=False, sweep=True, x=50, y=-25
        )

    def test_close_path_letters(self) -> None:
        commands = parse_path_commands("M 0 0 L 1 1 Z M 2 2 L 3 3 z")
        assert commands[2] == ClosePath()
        assert commands[5] == ClosePath(absolute=False)

    def test_empty_input(self) -> None:
        assert parse_path_commands("") == []
        assert parse_path_commands("   \n") == []

    @pytest.mark.parametrize(
        ("d", "message"),
        [
            ("10 10", "must start with a command"),
            ("M 0", "Expected a number"),
            ("M 0 0 X 5", "Unknown path command"),
            ("M 0 0 Z 5", "after close path"),
            ("M 0 0 A 1 1 0 2 0 5 5", "Expected an arc flag"),
        ],
    )
    def test_malformed_data(self, d: str, message: str) -> None:
        with pytest.raises(PathDataError, match=message):
            parse_path_commands(d)

    def test_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_path_commands("M")


class TestIterSvgPathData:
    def test_namespaced_document(self) -> None:
        svg = """<?xml version="1.0"?>
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <g>
    <path d="M 0 0 L 10 10"/>
    <path d="M 20 20 Q 30 40 50 20"/>
  </g>
  <rect width="5" height="5"/>
</svg>"""
        assert iter_svg_path_data(svg) == ["M 0 0 L 10 10", "M 20 20 Q 30 40 50 20"]

    def test_skips_empty_paths(self) -> None:
        svg = '<svg><path d=""/><path/><path d="M 1 1 L 2 2"/></svg>'
        assert iter_svg_path_data(svg) == ["M 1 1 L 2 2"]

    def test_empty_document(self) -> None:
        assert iter_svg_path_data("") == []

    def test_invalid_xml(self) -> None:
        with pytest.raises(PathDataError, match="Invalid SVG document"):
            iter_svg_path_data("<svg><path d='M 0 0'></svg>")


class TestCommandsFromSvgpathtools:
    def test_segment_kinds(self) -> None:
        svg_path = parse_path(
            "M 0 0 L 10 0 Q 15 5 20 0 C 25 5 30 5 35 0 A 5 5 0 0 1 45 0 Z M 100 100 L 110 110"
        )
        commands = commands_from_svgpathtools(svg_path)
        assert [command.kind for command in commands] == [
            CommandKind.MOVE_TO,
            CommandKind.LINE_TO,
            CommandKind.QUADRATIC,
            CommandKind.CURVE_TO,
            CommandKind.ELLIPTICAL_ARC,
            CommandKind.LINE_TO,
            CommandKind.MOVE_TO,
            CommandKind.LINE_TO,
        ]

    def test_arc_fields(self) -> None:
        commands = commands_from_svgpathtools(parse_path("M 0 0 A 5 5 30 1 0 10 0"))
        arc = commands[1]
        assert isinstance(arc, EllipticalArc)
        assert arc.rx == pytest.approx(5)
        assert arc.ry == pytest.approx(5)
        assert arc.x_axis_rotation == pytest.approx(30)
        assert arc.large_arc is True
        assert arc.sweep is False

    def test_agrees_with_own_parser(self) -> None:
        d = "M 0 0 l 10 0 h 5 v 5 q 5 5 10 0 c 0 5 5 5 5 0"
        ours = flatten(parse_path_commands(d))
        theirs = flatten(commands_from_svgpathtools(parse_path(d)))
        assert ours[-1].x == pytest.approx(theirs[-1].x)
        assert ours[-1].y == pytest.approx(theirs[-1].y)
        assert len(ours) == len(theirs)

    def test_empty_path(self) -> None:
        assert commands_from_svgpathtools(parse_path("")) == []
