"""CLI interface for Neovate Wrapped.

This module provides the command-line interface for the year-in-review
summary. It uses Click for argument parsing and Rich for terminal
formatting.

Commands:
    wrapped: Summarize a year of Neovate activity
    info: Show the data location and how much history it holds
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from sparklines import sparklines

from .collector import collect_corpus
from .constants import UNKNOWN_ID, WEEKDAY_BAR_WIDTH, WEEKDAY_NAMES_SHORT
from .models import AnnualSummary, RankedEntry
from .names import DisplayNameResolver, ModelsDevResolver, OfflineResolver
from .projects import DataDirectoryError, check_data_exists, get_neovate_dir, get_projects_dir
from .stats import calculate_annual_summary
from .utils import format_duration, format_number, format_timestamp

__all__ = ["main"]

console = Console()


def configure_logging(verbose: bool) -> None:
    """Route library logging through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def safe_sparkline(values: List[int]) -> Optional[str]:
    """Generate a sparkline string, returning None on failure.

    Args:
        values: List of integers to visualize

    Returns:
        Sparkline string or None if generation fails
    """
    if not values or len(values) < 2:
        return None
    try:
        result = sparklines(values)
        return result[0] if result else None
    except (ValueError, TypeError):
        return None


# Example text for each command
EXAMPLES = {
    "wrapped": """
Examples:
  neovate-wrapped wrapped                        # Summarize the current year
  neovate-wrapped wrapped --year 2025            # Summarize 2025
  neovate-wrapped wrapped -f json                # JSON output for scripting
  neovate-wrapped wrapped --offline              # Skip the models.dev lookup
  neovate-wrapped wrapped -d /backup/projects    # Read another data directory
""",
    "info": """
Examples:
  neovate-wrapped info                           # Show storage location and stats
""",
}


def show_examples(command: str) -> None:
    """Display example usage for a command."""
    if command in EXAMPLES:
        console.print(EXAMPLES[command])
    else:
        console.print(f"[yellow]No examples available for '{command}'[/yellow]")


@click.group()
@click.version_option(package_name="neovate-wrapped")
@click.option("--verbose", "-v", is_flag=True, help="Log skipped files and lines")
def main(verbose: bool):
    """Your Neovate year in review.

    Neovate stores session logs in ~/.neovate/projects/ as JSONL files.
    This tool turns them into an annual usage summary.
    """
    configure_logging(verbose)


def _validate_year(ctx: click.Context, param: click.Parameter, value: Optional[int]) -> int:
    """Default to the current year and reject years that have not started."""
    current_year = datetime.now().year
    if value is None:
        return current_year
    if value > current_year:
        raise click.BadParameter(f"Year {value} is in the future")
    return value


@main.command()
@click.option(
    "--year",
    "-y",
    type=int,
    default=None,
    callback=_validate_year,
    help="Year to summarize (default: current year)",
)
@click.option(
    "--data-dir",
    "-d",
    "data_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Projects directory (default: ~/.neovate/projects)",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option("--offline", is_flag=True, help="Don't look up display names on models.dev")
@click.option("--workers", "-w", type=int, default=None, help="Scan projects in parallel")
@click.option("--example", is_flag=True, help="Show usage examples")
def wrapped(
    year: int,
    data_dir: Optional[Path],
    output_format: str,
    offline: bool,
    workers: Optional[int],
    example: bool,
):
    """Generate your year-in-review usage summary."""
    if example:
        show_examples("wrapped")
        return

    root = data_dir or get_projects_dir()
    resolver: DisplayNameResolver = OfflineResolver() if offline else ModelsDevResolver()
    try:
        summary = calculate_annual_summary(year, root, resolver=resolver, max_workers=workers)
    except DataDirectoryError as e:
        raise click.ClickException(
            f"Neovate data not found at {root}. Make sure Neovate has been used on this machine."
        ) from e

    if output_format == "json":
        console.print_json(data=summary.to_dict())
        return

    if not summary.has_activity:
        console.print(f"[yellow]No Neovate activity found for {year}.[/yellow]")
        return

    _display_summary(summary)


@main.command()
@click.option("--example", is_flag=True, help="Show usage examples")
def info(example: bool):
    """Show Neovate storage location and usage statistics."""
    if example:
        show_examples("info")
        return

    neovate_dir = get_neovate_dir()
    projects_dir = get_projects_dir()
    exists = check_data_exists(projects_dir)

    console.print(
        Panel(
            f"[bold]Neovate directory:[/bold] {neovate_dir}\n"
            f"[bold]Projects directory:[/bold] {projects_dir}\n"
            f"[bold]Directory exists:[/bold] {exists}",
            title="Neovate Storage Info",
        )
    )

    if not exists:
        return

    try:
        corpus = collect_corpus(projects_dir)
    except DataDirectoryError as e:
        raise click.ClickException(str(e))

    latest = max((s.last_message_time for s in corpus.all_sessions), default=None)
    longest = max((s.duration_minutes for s in corpus.all_sessions), default=0)

    console.print("\n[bold]Statistics:[/bold]")
    console.print(f"  Projects: {len(corpus.projects)}")
    console.print(f"  Sessions: {len(corpus.all_sessions)}")
    console.print(f"  Messages: {format_number(len(corpus.all_messages))}")
    console.print(f"  Longest session: {format_duration(longest)}")
    console.print(f"  Last activity: {format_timestamp(latest)}")


def _ranking_table(title: str, entries: List[RankedEntry], show_provider: bool = False) -> Table:
    table = Table(title=title, title_justify="left", show_edge=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="cyan")
    if show_provider:
        table.add_column("Provider", style="magenta")
    table.add_column("Count", justify="right")
    table.add_column("Share", justify="right", style="green")
    for i, entry in enumerate(entries, 1):
        row = [str(i), entry.name]
        if show_provider:
            row.append(entry.provider_id or UNKNOWN_ID)
        row.extend([format_number(entry.count), f"{entry.percentage:.1f}%"])
        table.add_row(*row)
    return table


def _weekday_bars(summary: AnnualSummary) -> List[str]:
    weekdays = summary.weekday_activity
    peak = max(weekdays.max_count, 1)
    lines = []
    for i, count in enumerate(weekdays.counts):
        bar = "█" * round(count / peak * WEEKDAY_BAR_WIDTH)
        style = "bold green" if i == weekdays.most_active_day and count else "green"
        lines.append(f"  {WEEKDAY_NAMES_SHORT[i]} [{style}]{bar}[/{style}] {format_number(count)}")
    return lines


def _display_summary(summary: AnnualSummary) -> None:
    """Display the annual summary with rich formatting."""
    console.print()
    console.print(f"[bold green]🎁 Your {summary.year} in Neovate[/bold green]")
    console.print()
    console.print("━" * 50)
    console.print()
    console.print(f"  Sessions:      {format_number(summary.total_sessions)}")
    console.print(f"  Messages:      {format_number(summary.total_messages)}")
    console.print(f"  Total Tokens:  {format_number(summary.total_tokens)}")
    console.print(
        f"  [dim]  input {format_number(summary.total_input_tokens)}"
        f" / output {format_number(summary.total_output_tokens)}[/dim]"
    )
    console.print(f"  Projects:      {format_number(summary.total_projects)}")
    console.print(f"  Tool Calls:    {format_number(summary.total_tool_calls)}")
    console.print(f"  Streak:        {summary.max_streak} days (current: {summary.current_streak})")
    if summary.most_active_day:
        day = summary.most_active_day
        console.print(f"  Most Active:   {day.formatted_date} ({format_number(day.count)} messages)")
    console.print(
        f"  [dim]First session {summary.first_session_date.strftime('%Y-%m-%d')},"
        f" {summary.days_since_first_session} days ago[/dim]"
    )
    console.print()

    for title, entries, show_provider in (
        ("Top Models", summary.top_models, True),
        ("Top Providers", summary.top_providers, False),
        ("Top Tools", summary.top_tools, False),
    ):
        if entries:
            console.print(_ranking_table(title, entries, show_provider))
            console.print()

    weekdays = summary.weekday_activity
    if weekdays.max_count:
        console.print(f"[bold]📅 Busiest weekday:[/bold] {weekdays.most_active_day_name}")
        for line in _weekday_bars(summary):
            console.print(line)
        console.print()

    monthly = summary.monthly_activity()
    if any(monthly):
        sparkline = safe_sparkline(monthly)
        if sparkline:
            console.print(f"[bold]📈[/bold] {sparkline}")
            console.print("   J F M A M J J A S O N D")
            console.print()

    console.print("━" * 50)


if __name__ == "__main__":
    main()
