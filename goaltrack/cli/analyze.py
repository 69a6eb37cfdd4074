"""Implementation of 'goaltrack analyze' command.

Shows retroactive performance of a goal: summary metrics, progress
towards the target and a month-by-month comparison table.
"""

from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from goaltrack.cli.utils import format_currency, format_percentage, load_goal_file
from goaltrack.core.exceptions import GoalTrackError
from goaltrack.core.models import AnalysisConfig, GoalType, PerformanceStatus
from goaltrack.engine.analyzer import analyze_goal_performance, get_period_description
from goaltrack.engine.calculator import (
    calculate_monthly_projections,
    calculate_progress_percentage,
    calculate_target_date,
)
from goaltrack.engine.comparator import generate_performance_indicators
from goaltrack.engine.periods import format_period

console = Console()

PROJECTION_MONTHS = 12

STATUS_STYLES = {
    PerformanceStatus.AHEAD: "[green]ahead[/green]",
    PerformanceStatus.ON_TRACK: "[cyan]on track[/cyan]",
    PerformanceStatus.BEHIND: "[yellow]behind[/yellow]",
    PerformanceStatus.NO_CONTRIBUTION: "[red]none[/red]",
}


def analyze_command(
    goal_file: Path = typer.Argument(
        ...,
        help="JSON file with the goal and its contributions",
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
    tolerance: float = typer.Option(
        0.10,
        "--tolerance",
        "-t",
        min=0.0,
        max=0.99,
        help="Band around 100% counted as on track",
    ),
    currency: str = typer.Option(
        "$",
        "--currency",
        "-c",
        help="Currency symbol for display",
    ),
    monthly: bool = typer.Option(
        True,
        "--monthly/--no-monthly",
        help="Show the month-by-month table",
    ),
) -> None:
    """Analyze a goal's performance since its start date."""
    try:
        data = load_goal_file(goal_file)
        config = AnalysisConfig(
            end_date=end_date.date() if end_date else None,
            status_tolerance=Decimal(str(tolerance)),
        )
        result = analyze_goal_performance(
            data.goal,
            data.contributions,
            config,
            today=today.date() if today else None,
        )
    except GoalTrackError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    goal = data.goal
    metrics = result.metrics

    console.print()
    period = get_period_description(result.start_date, result.end_date)
    console.print(
        Panel(
            f"[bold]{escape(goal.name)}[/bold]\n"
            f"{result.start_date} to {result.end_date} ({period})",
            style="cyan",
        )
    )
    console.print()

    console.print("[bold]Performance[/bold]")
    console.print(f"  Expected:     {format_currency(metrics.total_theoretical, currency):>14}")
    console.print(
        f"  Saved:        {format_currency(metrics.total_actual, currency):>14}  "
        f"({format_percentage(metrics.performance_percentage)})"
    )
    if metrics.total_variance >= 0:
        console.print(
            f"  [green]Variance:     +{format_currency(metrics.total_variance, currency):>13}[/green]  (ahead)"
        )
    else:
        console.print(
            f"  [red]Variance:     {format_currency(metrics.total_variance, currency):>14}[/red]  (behind)"
        )
    console.print(f"  Months on track: {metrics.months_on_track}/{metrics.months_analyzed}")
    console.print(f"  Consistency:     {format_percentage(metrics.consistency_score)}")
    console.print()

    context = config.money.to_context()
    reference_day = today.date() if today else date.today()
    projected = calculate_monthly_projections(
        goal.current_balance, goal.expected_monthly_amount, PROJECTION_MONTHS, context
    )

    console.print("[bold]Goal[/bold]")
    console.print(f"  Balance:         {format_currency(goal.current_balance, currency):>14}")
    if goal.goal_type == GoalType.CONTINUOUS:
        console.print("  [dim]Continuous goal, no target[/dim]")
    else:
        progress = calculate_progress_percentage(goal, context)
        target_date = calculate_target_date(goal, reference_day, context)
        console.print(
            f"  Target:          {format_currency(goal.target_amount, currency):>14}  "
            f"({format_percentage(progress)})"
        )
        if target_date == reference_day:
            console.print("  [green]✓ Target reached[/green]")
        elif target_date is not None:
            console.print(f"  Target date:     {target_date}")
    console.print(
        f"  In {PROJECTION_MONTHS} months:    {format_currency(projected[-1], currency):>14}"
    )
    console.print()

    if not monthly or not result.monthly_comparisons:
        return

    indicators = generate_performance_indicators(
        result.monthly_comparisons, config.status_tolerance
    )

    table = Table(title="Monthly Breakdown")
    table.add_column("Month")
    table.add_column("Expected", justify="right")
    table.add_column("Actual", justify="right")
    table.add_column("Variance", justify="right")
    table.add_column("%", justify="right")
    table.add_column("Status")

    for comparison, indicator in zip(result.monthly_comparisons, indicators):
        variance_style = "green" if comparison.is_on_track else "red"
        table.add_row(
            format_period(comparison.year, comparison.month),
            format_currency(comparison.theoretical, currency),
            format_currency(comparison.actual, currency),
            f"[{variance_style}]{format_currency(comparison.variance, currency)}[/{variance_style}]",
            f"{indicator.percentage}%",
            STATUS_STYLES[indicator.status],
        )

    console.print(table)
