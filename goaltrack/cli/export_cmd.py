"""Implementation of 'goaltrack export' command.

Writes the analysis or summary CSV for a goal.
"""

from datetime import date, datetime
from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from goaltrack.cli.utils import load_goal_file
from goaltrack.core.exceptions import GoalTrackError
from goaltrack.core.models import AnalysisConfig
from goaltrack.engine.analyzer import analyze_goal_performance
from goaltrack.export import export_goal_summary, export_retroactive_analysis, generate_filename

console = Console()


class ExportKind(str, Enum):
    ANALYSIS = "analysis"
    SUMMARY = "summary"


def export_command(
    goal_file: Path = typer.Argument(
        ...,
        help="JSON file with the goal and its contributions",
    ),
    kind: ExportKind = typer.Option(
        ExportKind.ANALYSIS,
        "--kind",
        "-k",
        help="Monthly analysis rows or metric summary",
    ),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path (default: <goal>_<kind>_<date>.csv)",
    ),
    end_date: datetime = typer.Option(
        None,
        "--end-date",
        "-e",
        formats=["%Y-%m-%d"],
        help="End of the analysis window (default: today)",
    ),
    today: datetime = typer.Option(
        None,
        "--today",
        formats=["%Y-%m-%d"],
        help="Reference date used as 'now'",
    ),
) -> None:
    """Export a goal's retroactive analysis to CSV."""
    reference = today.date() if today else date.today()
    try:
        data = load_goal_file(goal_file)
        config = AnalysisConfig(end_date=end_date.date() if end_date else None)
        result = analyze_goal_performance(data.goal, data.contributions, config, today=reference)
    except GoalTrackError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if kind == ExportKind.SUMMARY:
        csv_text = export_goal_summary(data.goal, result, config.status_tolerance)
    else:
        csv_text = export_retroactive_analysis(data.goal, result, config.status_tolerance)

    output_path = output or Path(generate_filename(data.goal.name, kind.value, reference))
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(csv_text + "\n", encoding="utf-8")

    console.print(f"[green]Exported:[/green] {output_path}")
