"""Implementation of 'goaltrack summary' command.

Prints the quick performance summary used for previews.
"""

from datetime import datetime
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from goaltrack.cli.utils import format_currency, format_percentage, load_goal_file
from goaltrack.core.exceptions import GoalFileError
from goaltrack.engine.analyzer import get_quick_performance_summary

console = Console()


def summary_command(
    goal_file: Path = typer.Argument(
        ...,
        help="JSON file with the goal and its contributions",
    ),
    today: datetime = typer.Option(
        None,
        "--today",
        formats=["%Y-%m-%d"],
        help="Reference date used as 'now'",
    ),
    currency: str = typer.Option(
        "$",
        "--currency",
        "-c",
        help="Currency symbol for display",
    ),
) -> None:
    """Show a quick performance summary for a goal."""
    try:
        data = load_goal_file(goal_file)
    except GoalFileError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    summary = get_quick_performance_summary(
        data.goal,
        data.contributions,
        today=today.date() if today else None,
    )

    if not summary.has_retroactive_data:
        if summary.is_unavailable:
            console.print(f"[yellow]Performance data unavailable:[/yellow] {escape(summary.unavailable_reason)}")
        else:
            console.print("[yellow]No retroactive data for this goal yet[/yellow]")
        return

    console.print(f"[bold]{escape(data.goal.name)}[/bold] ({summary.period_description})")
    console.print(f"  Performance: {format_percentage(summary.performance_percentage)}")
    console.print(f"  Variance:    {format_currency(summary.total_variance, currency)}")
