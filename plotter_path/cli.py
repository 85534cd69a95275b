"""CLI for plotter-path - flatten SVG path data into plotter points.

Usage:
    python -m plotter_path points "M 0 0 L 10 0 C 10 0 20 10 20 20 Z"
    python -m plotter_path points --json "M10 80 Q 52.5 10, 95 80 T 180 80"
    python -m plotter_path strokes "M 0 0 L 10 0 M 20 20 l 5 5"
    python -m plotter_path summary "M 10 30 A 20 20 0 0 1 50 30"
    python -m plotter_path svg drawing.svg
"""

import json
import logging
from pathlib import Path as FilePath

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from plotter_path.driver import produce
from plotter_path.logging_config import setup_cli_logging
from plotter_path.path_data import PathDataError, iter_svg_path_data, parse_path_commands
from plotter_path.strokes import split_strokes, summarize
from plotter_path.types import PathCommand, PointRole

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="plotter-path",
    help="Flatten SVG path data into fly/draw points for pen plotters",
    add_completion=False,
)
console = Console()

ROLE_STYLES = {
    PointRole.FLY: "yellow",
    PointRole.DRAW: "green",
    PointRole.ERASE: "red",
}


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Flatten SVG path data into fly/draw points."""
    setup_cli_logging(verbose)


def _parse_or_exit(d: str) -> list[PathCommand]:
    try:
        return parse_path_commands(d)
    except PathDataError as e:
        console.print(f"[red]Invalid path data: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e


def _check_options(step: float | None, epsilon: float | None) -> None:
    if step is not None and not 0 < step <= 1:
        console.print("[red]Step must be in (0, 1][/red]")
        raise typer.Exit(1)
    if epsilon is not None and epsilon < 0:
        console.print("[red]Epsilon must not be negative[/red]")
        raise typer.Exit(1)


@app.command("points")
def points_command(
    d: str = typer.Argument(..., help="SVG path data"),
    step: float | None = typer.Option(None, "--step", "-s", help="Curve sampling step"),
    epsilon: float | None = typer.Option(None, "--epsilon", "-e", help="Collinearity tolerance"),
    as_json: bool = typer.Option(False, "--json", help="Print one JSON object per point"),
) -> None:
    """Print every flattened point with its role.

    Examples:
        plotter-path points "M 0 0 L 10 0"
        plotter-path points --json -s 0.1 "M 0 0 Q 5 10 10 0"
    """
    _check_options(step, epsilon)
    commands = _parse_or_exit(d)

    if as_json:
        for point in produce(commands, step=step, epsilon=epsilon):
            typer.echo(json.dumps(point.model_dump(mode="json")))
        return

    table = Table(title="Points", box=box.ROUNDED)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Role")
    table.add_column("X", justify="right")
    table.add_column("Y", justify="right")

    for index, point in enumerate(produce(commands, step=step, epsilon=epsilon)):
        style = ROLE_STYLES[point.role]
        table.add_row(
            str(index),
            f"[{style}]{point.role.value}[/{style}]",
            f"{point.x:.3f}",
            f"{point.y:.3f}",
        )

    console.print(table)


@app.command("strokes")
def strokes_command(
    d: str = typer.Argument(..., help="SVG path data"),
    step: float | None = typer.Option(None, "--step", "-s", help="Curve sampling step"),
    epsilon: float | None = typer.Option(None, "--epsilon", "-e", help="Collinearity tolerance"),
) -> None:
    """Print pen-down strokes as a JSON array of polylines."""
    _check_options(step, epsilon)
    commands = _parse_or_exit(d)

    polylines = [
        {"type": "polyline", "points": [point.model_dump() for point in stroke]}
        for stroke in split_strokes(produce(commands, step=step, epsilon=epsilon))
    ]
    typer.echo(json.dumps(polylines))


@app.command("summary")
def summary_command(
    d: str = typer.Argument(..., help="SVG path data"),
    step: float | None = typer.Option(None, "--step", "-s", help="Curve sampling step"),
    epsilon: float | None = typer.Option(None, "--epsilon", "-e", help="Collinearity tolerance"),
) -> None:
    """Show point counts per role, stroke count and the final pen position."""
    _check_options(step, epsilon)
    commands = _parse_or_exit(d)
    summary = summarize(produce(commands, step=step, epsilon=epsilon))

    table = Table(title="Path Summary", box=box.ROUNDED)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Commands", str(len(commands)))
    table.add_row("Fly points", str(summary.fly_points))
    table.add_row("Draw points", str(summary.draw_points))
    table.add_row("Strokes", str(summary.strokes))
    end = f"({summary.end.x:.3f}, {summary.end.y:.3f})" if summary.end else "-"
    table.add_row("End", end)

    console.print(table)


@app.command("svg")
def svg_command(
    file: FilePath = typer.Argument(..., help="SVG file to flatten"),
    step: float | None = typer.Option(None, "--step", "-s", help="Curve sampling step"),
    epsilon: float | None = typer.Option(None, "--epsilon", "-e", help="Collinearity tolerance"),
) -> None:
    """Flatten every <path> element of an SVG file and summarize each one."""
    _check_options(step, epsilon)
    try:
        svg_text = file.read_text(encoding="utf-8")
        path_data = iter_svg_path_data(svg_text)
    except (OSError, PathDataError) as e:
        logger.error(f"Failed to read SVG file {file}: {e}")
        console.print(f"[red]Failed to read {escape(str(file))}: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    if not path_data:
        console.print("[yellow]No path elements found[/yellow]")
        return

    table = Table(title=f"Paths in {escape(file.name)}", box=box.ROUNDED)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Commands", justify="right")
    table.add_column("Fly", style="yellow", justify="right")
    table.add_column("Draw", style="green", justify="right")
    table.add_column("Strokes", style="magenta", justify="right")

    for index, d in enumerate(path_data):
        commands = _parse_or_exit(d)
        summary = summarize(produce(commands, step=step, epsilon=epsilon))
        logger.info(f"Path {index}: {len(commands)} commands, {summary.strokes} strokes")
        table.add_row(
            str(index),
            str(len(commands)),
            str(summary.fly_points),
            str(summary.draw_points),
            str(summary.strokes),
        )

    console.print(table)


# Entry point
if __name__ == "__main__":
    app()
