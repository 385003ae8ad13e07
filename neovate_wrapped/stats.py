"""Annual summary calculation for Neovate Wrapped.

This module ties the pipeline together:
- build_annual_summary(): Summarize an already-collected corpus
- calculate_annual_summary(): Scan the data root and summarize a year
"""

from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .aggregate import build_activity, tally_messages
from .collector import collect_corpus
from .constants import TOP_MODELS_LIMIT, TOP_PROVIDERS_LIMIT, TOP_TOOLS_LIMIT
from .models import AnnualSummary, Corpus, MessageTally, RankedEntry
from .names import (
    DisplayNameResolver,
    OfflineResolver,
    model_display_name,
    model_provider,
    provider_display_name,
)
from .ranking import rank_top_n
from .streaks import build_weekday_activity, calculate_streaks, find_most_active_day


def _rank_models(tally: MessageTally, resolver: DisplayNameResolver) -> List[RankedEntry]:
    return [
        RankedEntry(
            id=model_id,
            name=model_display_name(model_id, resolver),
            count=count,
            percentage=pct,
            provider_id=tally.model_providers.get(model_id) or model_provider(model_id, resolver),
        )
        for model_id, count, pct in rank_top_n(tally.models, TOP_MODELS_LIMIT)
    ]


def _rank_providers(tally: MessageTally, resolver: DisplayNameResolver) -> List[RankedEntry]:
    return [
        RankedEntry(
            id=provider_id,
            name=provider_display_name(provider_id, resolver),
            count=count,
            percentage=pct,
        )
        for provider_id, count, pct in rank_top_n(tally.providers, TOP_PROVIDERS_LIMIT)
    ]


def _rank_tools(tally: MessageTally) -> List[RankedEntry]:
    return [
        RankedEntry(id=name, name=name, count=count, percentage=pct)
        for name, count, pct in rank_top_n(tally.tools, TOP_TOOLS_LIMIT, tally.total_tool_calls)
    ]


def build_annual_summary(
    corpus: Corpus,
    year: int,
    resolver: Optional[DisplayNameResolver] = None,
    now: Optional[datetime] = None,
) -> AnnualSummary:
    """Summarize a collected corpus for one year.

    Totals, rankings, and the longest streak cover the year only. The daily
    activity table, weekday distribution, current streak, and first-session
    date look at the whole corpus.

    Args:
        corpus: Collector output filtered to ``year``
        year: Year being summarized
        resolver: Display-name resolver (default: offline formatting)
        now: Reference time for "current streak" and "days since"

    Returns:
        AnnualSummary for the year (all counters zero when it was idle)
    """
    resolver = resolver or OfflineResolver()
    now = (now or datetime.now()).astimezone()

    if corpus.all_sessions:
        first_session_date = min(s.first_message_time for s in corpus.all_sessions)
        days_since_first_session = max((now - first_session_date).days, 0)
    else:
        first_session_date = now
        days_since_first_session = 0

    tally = tally_messages(corpus.messages)
    daily_activity, weekday_counts = build_activity(corpus.all_messages)
    streaks = calculate_streaks(daily_activity, year, now.date())

    return AnnualSummary(
        year=year,
        first_session_date=first_session_date,
        days_since_first_session=days_since_first_session,
        total_sessions=len(corpus.sessions),
        total_messages=tally.total_messages,
        total_projects=len(corpus.projects),
        total_tool_calls=tally.total_tool_calls,
        total_input_tokens=tally.total_input_tokens,
        total_output_tokens=tally.total_output_tokens,
        total_tokens=tally.total_tokens,
        top_models=_rank_models(tally, resolver),
        top_providers=_rank_providers(tally, resolver),
        top_tools=_rank_tools(tally),
        max_streak=streaks.max_streak,
        max_streak_days=streaks.max_streak_days,
        current_streak=streaks.current_streak,
        daily_activity=daily_activity,
        most_active_day=find_most_active_day(daily_activity, year),
        weekday_activity=build_weekday_activity(weekday_counts),
    )


def calculate_annual_summary(
    year: int,
    root: Optional[Path] = None,
    resolver: Optional[DisplayNameResolver] = None,
    now: Optional[datetime] = None,
    max_workers: Optional[int] = None,
) -> AnnualSummary:
    """Scan the data root and summarize one year of activity.

    Args:
        year: Year to summarize
        root: Data root (default: ~/.neovate/projects)
        resolver: Display-name resolver (default: offline formatting)
        now: Reference time (default: the current local time)
        max_workers: Thread pool size for scanning projects

    Returns:
        AnnualSummary for the year

    Raises:
        DataDirectoryError: If the data root cannot be listed

    Example:
        >>> summary = calculate_annual_summary(2025)
        >>> print(f"{summary.total_sessions} sessions, {summary.max_streak}-day streak")
    """
    corpus = collect_corpus(root, year, max_workers=max_workers)
    return build_annual_summary(corpus, year, resolver=resolver, now=now)
