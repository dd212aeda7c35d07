"""
Developer CLI over the scheduling engine.

Commands:
    recall-engine schedule <score>   - Next review date and how it was derived
    recall-engine retention <score>  - Simple and decay-model retention
    recall-engine mastery <score>    - Mastery level and its sub-scores
    recall-engine schedule-for-test <score> --test-date DATE
                                     - Review dates leading up to a test
"""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from recall_engine.config import get_settings
from recall_engine.core.models import ReviewHistoryEntry
from recall_engine.logging_setup import configure_logging
from recall_engine.study.interval_calculator import interval_breakdown
from recall_engine.study.mastery_evaluator import (
    consistency_points,
    historical_progress_points,
    improvement_points,
    mastery_level,
    score_band_points,
)
from recall_engine.study.retention_calculator import enhanced_retention, simple_retention
from recall_engine.study.review_scheduler import (
    ProgressiveStrategy,
    first_time_days,
    next_review_date,
    resolve_strategy,
)
from recall_engine.study.test_date_scheduler import (
    estimate_required_reviews,
    optimal_review_schedule,
)

console = Console()

app = typer.Typer(
    name="recall-engine",
    help="Spaced-repetition scheduling engine - inspect schedules, retention and mastery",
    no_args_is_help=True,
)


def _parse_history(raw: str | None, anchor: datetime) -> list[ReviewHistoryEntry]:
    """Parse "90,75,60" (most recent first) into history entries a day apart."""
    if not raw:
        return []

    entries = []
    for offset, part in enumerate(p.strip() for p in raw.split(",")):
        if not part:
            continue
        try:
            score = int(part)
        except ValueError:
            raise typer.BadParameter(f"Not a score: {part!r}", param_hint="--history") from None
        entries.append(
            ReviewHistoryEntry(recall_score=score, date=anchor - timedelta(days=offset + 1))
        )
    return entries


@app.callback()
def main_callback() -> None:
    """Configure logging from settings before any command runs."""
    configure_logging(get_settings().log_level)


@app.command("schedule")
def schedule(
    score: int = typer.Argument(..., min=0, max=100, help="Current recall score (0-100)"),
    last: Optional[datetime] = typer.Option(
        None, "--last", "-l", help="Last review date (defaults to now)"
    ),
    perfect: int = typer.Option(0, "--perfect", "-p", min=0, help="Perfect recall count"),
    history: Optional[str] = typer.Option(
        None, "--history", help="Past scores, most recent first (e.g. 90,75,60)"
    ),
) -> None:
    """Show the next review date for an item."""
    clock = get_settings().build_clock()
    anchor = last or clock.now()
    entries = _parse_history(history, anchor)

    strategy = resolve_strategy(perfect, entries)
    due = next_review_date(score, anchor, perfect, entries, clock=clock)

    table = Table(title="Review Schedule", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="bold")

    if isinstance(strategy, ProgressiveStrategy):
        level = mastery_level(score, entries)
        breakdown = interval_breakdown(level, score, entries)
        table.add_row("Strategy", "progressive")
        table.add_row("Mastery level", str(breakdown.mastery_level))
        table.add_row("Base interval", f"{breakdown.base_interval:g} days")
        table.add_row("Score adjustment", f"x{breakdown.score_adjustment:g}")
        table.add_row("Pattern adjustment", f"x{breakdown.pattern_adjustment:g}")
        table.add_row("Days", str(breakdown.days))
    else:
        table.add_row("Strategy", "first-time")
        table.add_row("Days", str(first_time_days(score)))

    table.add_row("Next review", due.strftime("%Y-%m-%d"))
    console.print(table)


@app.command("retention")
def retention(
    score: int = typer.Argument(..., min=0, max=100, help="Current recall score (0-100)"),
    days: int = typer.Option(0, "--days", "-d", min=0, help="Days since last review"),
    reviews: int = typer.Option(0, "--reviews", "-r", min=0, help="Review count"),
    high: int = typer.Option(0, "--high", min=0, help="High-score review count"),
    perfect: int = typer.Option(0, "--perfect", "-p", min=0, help="Perfect recall count"),
) -> None:
    """Show simple and decay-model retention."""
    table = Table(title="Retention")
    table.add_column("Model", style="cyan")
    table.add_column("Retention", justify="right", style="bold")

    table.add_row("simple", f"{simple_retention(score, perfect)}%")
    table.add_row("enhanced", f"{enhanced_retention(score, days, reviews, high)}%")
    console.print(table)


@app.command("mastery")
def mastery(
    score: int = typer.Argument(..., min=0, max=100, help="Current recall score (0-100)"),
    history: Optional[str] = typer.Option(
        None, "--history", help="Past scores, most recent first (e.g. 90,75,60)"
    ),
) -> None:
    """Show the mastery level and the points behind it."""
    entries = _parse_history(history, get_settings().build_clock().now())

    table = Table(title="Mastery")
    table.add_column("Component", style="cyan")
    table.add_column("Points", justify="right")

    table.add_row("Score band", str(score_band_points(score)))
    if entries:
        table.add_row("Historical progress", str(historical_progress_points(entries)))
        table.add_row("Consistency", str(consistency_points(entries)))
        table.add_row("Improvement", str(improvement_points(score, entries)))
    table.add_row("[bold]Level[/bold]", f"[bold]{mastery_level(score, entries)}[/bold]")
    console.print(table)


@app.command("schedule-for-test")
def schedule_for_test(
    score: int = typer.Argument(..., min=0, max=100, help="Current recall score (0-100)"),
    test_date: datetime = typer.Option(..., "--test-date", "-t", help="Day of the test"),
    perfect: int = typer.Option(0, "--perfect", "-p", min=0, help="Perfect recall count"),
) -> None:
    """Show review dates leading up to a test."""
    clock = get_settings().build_clock()
    now = clock.now()
    days_left = clock.day_difference(now, test_date)

    if days_left <= 0:
        console.print("[yellow]Test date is today or past - review now.[/yellow]")
        console.print(f"Review: {now.strftime('%Y-%m-%d')}")
        return

    dates = optimal_review_schedule(test_date, score, perfect, clock=clock)

    table = Table(
        title=f"Reviews before {test_date.strftime('%Y-%m-%d')} "
        f"({days_left} days, {estimate_required_reviews(score, days_left, perfect)} reviews)"
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Date", style="bold")
    table.add_column("Days from now", justify="right")

    for index, due in enumerate(dates, start=1):
        table.add_row(str(index), due.strftime("%Y-%m-%d"), str(clock.day_difference(now, due)))
    console.print(table)


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
