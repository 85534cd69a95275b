"""Turn SVG path data into typed path commands.

Three entry points feed the driver:
- parse_path_commands: tokenizes a path 'd' string, keeping relative and
  smooth commands exactly as written
- iter_svg_path_data: pulls the 'd' attribute of every <path> in a document
- commands_from_svgpathtools: converts an already-parsed svgpathtools Path
  (absolute segments only) into commands
"""

import logging
import re
from xml.etree import ElementTree as ET

from svgpathtools import Arc, CubicBezier, Line, QuadraticBezier
from svgpathtools import Path as SVGPath

from plotter_path.types import (
    ClosePath,
    CurveTo,
    EllipticalArc,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    PathCommand,
    Quadratic,
    SmoothCurveTo,
    SmoothQuadratic,
    VerticalLineTo,
)

logger = logging.getLogger(__name__)

COMMAND_LETTERS = frozenset("MmLlHhVvCcSsQqTtAaZz")
NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
SEPARATOR_RE = re.compile(r"[\s,]*")


class PathDataError(ValueError):
    """Path data or SVG markup that cannot be turned into commands."""


class _Scanner:
    """Cursor over a path data string."""

    def __init__(self, d: str) -> None:
        self.d = d
        self.pos = 0

    def skip_separators(self) -> None:
        match = SEPARATOR_RE.match(self.d, self.pos)
        if match:
            self.pos = match.end()

    def at_end(self) -> bool:
        self.skip_separators()
        return self.pos >= len(self.d)

    def peek(self) -> str:
        return self.d[self.pos]

    def read_letter(self) -> str:
        letter = self.d[self.pos]
        if letter not in COMMAND_LETTERS:
            raise PathDataError(f"Unknown path command {letter!r} at position {self.pos}")
        self.pos += 1
        return letter

    def read_number(self) -> float:
        self.skip_separators()
        match = NUMBER_RE.match(self.d, self.pos)
        if not match:
            found = self.d[self.pos] if self.pos < len(self.d) else "end of data"
            raise PathDataError(f"Expected a number at position {self.pos}, found {found!r}")
        self.pos = match.end()
        return float(match.group())

    def read_numbers(self, count: int) -> list[float]:
        return [self.read_number() for _ in range(count)]

    def read_flag(self) -> bool:
        # Flags are single characters, so "011" is three values
        self.skip_separators()
        if self.pos < len(self.d) and self.d[self.pos] in "01":
            flag = self.d[self.pos] == "1"
            self.pos += 1
            return flag
        found = self.d[self.pos] if self.pos < len(self.d) else "end of data"
        raise PathDataError(f"Expected an arc flag at position {self.pos}, found {found!r}")


def _read_command(scanner: _Scanner, letter: str) -> PathCommand:
    absolute = letter.isupper()

    match letter.upper():
        case "M":
            x, y = scanner.read_numbers(2)
            return MoveTo(absolute=absolute, x=x, y=y)
        case "L":
            x, y = scanner.read_numbers(2)
            return LineTo(absolute=absolute, x=x, y=y)
        case "H":
            return HorizontalLineTo(absolute=absolute, x=scanner.read_number())
        case "V":
            return VerticalLineTo(absolute=absolute, y=scanner.read_number())
        case "C":
            x1, y1, x2, y2, x, y = scanner.read_numbers(6)
            return CurveTo(absolute=absolute, x1=x1, y1=y1, x2=x2, y2=y2, x=x, y=y)
        case "S":
            x2, y2, x, y = scanner.read_numbers(4)
            return SmoothCurveTo(absolute=absolute, x2=x2, y2=y2, x=x, y=y)
        case "Q":
            x1, y1, x, y = scanner.read_numbers(4)
            return Quadratic(absolute=absolute, x1=x1, y1=y1, x=x, y=y)
        case "T":
            x, y = scanner.read_numbers(2)
            return SmoothQuadratic(absolute=absolute, x=x, y=y)
        case "A":
            rx, ry, rotation = scanner.read_numbers(3)
            large_arc = scanner.read_flag()
            sweep = scanner.read_flag()
            x, y = scanner.read_numbers(2)
            return EllipticalArc(
                absolute=absolute,
                rx=rx,
                ry=ry,
                x_axis_rotation=rotation,
                large_arc=large_arc,
                sweep=sweep,
                x=x,
                y=y,
            )
        case _:
            return ClosePath(absolute=absolute)


def parse_path_commands(d: str) -> list[PathCommand]:
    """Parse an SVG path 'd' string into path commands.

    Args:
        d: SVG path data (e.g., "M 10 80 C 40 10, 65 10, 95 80 S 150 150, 180 80")

    Returns:
        Commands in drawing order; empty for empty or blank input

    Raises:
        PathDataError: If the data is malformed
    """
    if not d or not d.strip():
        return []

    scanner = _Scanner(d)
    commands: list[PathCommand] = []
    letter: str | None = None

    while not scanner.at_end():
        if scanner.peek().isalpha():
            letter = scanner.read_letter()
        elif letter is None:
            raise PathDataError(f"Path data must start with a command, found {scanner.peek()!r}")
        elif letter in "Zz":
            raise PathDataError(f"Unexpected number after close path at position {scanner.pos}")

        command = _read_command(scanner, letter)
        commands.append(command)

        # Extra coordinate pairs after a move are implicit line-tos
        if letter == "M":
            letter = "L"
        elif letter == "m":
            letter = "l"

    logger.debug(f"Parsed {len(commands)} commands from {len(d)} characters of path data")
    return commands


def iter_svg_path_data(svg_text: str) -> list[str]:
    """Extract the 'd' attribute of every <path> element in an SVG document.

    Raises:
        PathDataError: If the document is not well-formed XML
    """
    if not svg_text or not svg_text.strip():
        return []

    # Handle potential namespace issues
    svg_text = re.sub(r'\sxmlns="[^"]*"', "", svg_text)

    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise PathDataError(f"Invalid SVG document: {e}") from e

    path_data: list[str] = []
    for element in root.iter():
        if element.tag.endswith("path"):
            d = element.get("d", "")
            if d.strip():
                path_data.append(d)
    return path_data


def commands_from_svgpathtools(svg_path: SVGPath) -> list[PathCommand]:
    """Convert an svgpathtools Path into absolute path commands.

    A move is inserted before the first segment and wherever a segment does
    not start at the previous segment's end.
    """
    commands: list[PathCommand] = []
    previous_end: complex | None = None

    for segment in svg_path:
        if previous_end is None or segment.start != previous_end:
            commands.append(MoveTo(x=segment.start.real, y=segment.start.imag))

        if isinstance(segment, Line):
            commands.append(LineTo(x=segment.end.real, y=segment.end.imag))
        elif isinstance(segment, QuadraticBezier):
            commands.append(
                Quadratic(
                    x1=segment.control.real,
                    y1=segment.control.imag,
                    x=segment.end.real,
                    y=segment.end.imag,
                )
            )
        elif isinstance(segment, CubicBezier):
            commands.append(
                CurveTo(
                    x1=segment.control1.real,
                    y1=segment.control1.imag,
                    x2=segment.control2.real,
                    y2=segment.control2.imag,
                    x=segment.end.real,
                    y=segment.end.imag,
                )
            )
        elif isinstance(segment, Arc):
            commands.append(
                EllipticalArc(
                    rx=segment.radius.real,
                    ry=segment.radius.imag,
                    x_axis_rotation=segment.rotation,
                    large_arc=bool(segment.large_arc),
                    sweep=bool(segment.sweep),
                    x=segment.end.real,
                    y=segment.end.imag,
                )
            )
        else:
            raise PathDataError(f"Unsupported svgpathtools segment: {type(segment).__name__}")

        previous_end = segment.end

    return commands
