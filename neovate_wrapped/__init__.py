"""Neovate Wrapped - Your Neovate year in review.

This package turns the session logs Neovate stores in ~/.neovate/projects/
into an annual usage summary: totals, model/provider/tool rankings, a daily
activity calendar, weekday distribution, and activity streaks.

Modules:
    models: Data classes for records, tallies, and the annual summary
    utils: Timestamp parsing and formatting helpers
    projects: Data root and project discovery
    parser: Tolerant JSONL session parsing
    collector: One-pass scan of the data root
    filters: Year filtering for messages and sessions
    aggregate: Token, model, provider, tool, and activity tallies
    streaks: Streaks, most active day, and weekday distribution
    ranking: Top-N ranking with percentages
    names: Pluggable display-name resolution
    stats: Annual summary assembly
    cli: Command-line interface

Example:
    >>> from neovate_wrapped import calculate_annual_summary
    >>> summary = calculate_annual_summary(2025)
    >>> print(f"{summary.total_messages} messages, {summary.max_streak}-day streak")
"""

__version__ = "0.1.0"

# Re-export commonly used symbols for convenience
from .aggregate import build_activity, split_model_id, tally_messages
from .collector import (
    collect_corpus,
    collect_messages,
    collect_projects,
    collect_sessions,
)
from .filters import filter_messages_by_year, filter_sessions_by_year
from .models import (
    AnnualSummary,
    Corpus,
    Message,
    MessageTally,
    MostActiveDay,
    Project,
    RankedEntry,
    SessionRecord,
    StreakStats,
    TokenUsage,
    WeekdayActivity,
)
from .names import (
    DisplayNameResolver,
    ModelsDevResolver,
    OfflineResolver,
    model_display_name,
    provider_display_name,
)
from .parser import parse_jsonl, read_session
from .projects import (
    DataDirectoryError,
    check_data_exists,
    get_neovate_dir,
    get_projects_dir,
    list_projects,
)
from .ranking import rank_top_n
from .stats import build_annual_summary, calculate_annual_summary
from .streaks import (
    build_weekday_activity,
    calculate_current_streak,
    calculate_longest_streak,
    calculate_streaks,
    find_most_active_day,
)

__all__ = [
    # Version
    "__version__",
    # Data models
    "AnnualSummary",
    "Corpus",
    "Message",
    "MessageTally",
    "MostActiveDay",
    "Project",
    "RankedEntry",
    "SessionRecord",
    "StreakStats",
    "TokenUsage",
    "WeekdayActivity",
    # Path functions
    "get_neovate_dir",
    "get_projects_dir",
    "check_data_exists",
    "DataDirectoryError",
    # Collection
    "list_projects",
    "parse_jsonl",
    "read_session",
    "collect_corpus",
    "collect_messages",
    "collect_projects",
    "collect_sessions",
    "filter_messages_by_year",
    "filter_sessions_by_year",
    # Aggregation
    "split_model_id",
    "tally_messages",
    "build_activity",
    "rank_top_n",
    # Streaks
    "calculate_longest_streak",
    "calculate_current_streak",
    "calculate_streaks",
    "find_most_active_day",
    "build_weekday_activity",
    # Display names
    "DisplayNameResolver",
    "ModelsDevResolver",
    "OfflineResolver",
    "model_display_name",
    "provider_display_name",
    # Summary
    "build_annual_summary",
    "calculate_annual_summary",
]
