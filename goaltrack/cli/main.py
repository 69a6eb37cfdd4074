"""GoalTrack CLI entry point."""

import logging

import typer
from rich.logging import RichHandler

from goaltrack import __version__
from goaltrack.cli.analyze import analyze_command
from goaltrack.cli.export_cmd import export_command
from goaltrack.cli.summary import summary_command

app = typer.Typer(
    name="goaltrack",
    help="Retroactive performance analysis for savings goals",
    no_args_is_help=True,
)

app.command(name="analyze")(analyze_command)
app.command(name="summary")(summary_command)
app.command(name="export")(export_command)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"goaltrack {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Retroactive performance analysis for savings goals."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )
