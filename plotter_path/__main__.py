"""Allow `python -m plotter_path`."""

from plotter_path.cli import app

app()
