"""Streak and calendar analysis for Neovate Wrapped.

This module derives calendar insights from the daily activity table:
- calculate_longest_streak(): Longest run of consecutive active days in a year
- calculate_current_streak(): Run ending today (or yesterday)
- calculate_streaks(): Both of the above
- find_most_active_day(): Busiest single day
- build_weekday_activity(): Weekday distribution with its modal day
"""

from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Set, Tuple

from .constants import DATE_KEY_FORMAT, MONTH_NAMES_SHORT, WEEKDAY_NAMES_FULL
from .models import MostActiveDay, StreakStats, WeekdayActivity
from .utils import format_date_key


def _parse_date_key(key: str) -> date:
    return datetime.strptime(key, DATE_KEY_FORMAT).date()


def _active_keys(daily_activity: Dict[str, int], year: Optional[int] = None) -> List[str]:
    prefix = f"{year}-" if year is not None else ""
    return sorted(
        key for key, count in daily_activity.items() if count > 0 and key.startswith(prefix)
    )


def calculate_longest_streak(
    daily_activity: Dict[str, int], year: int
) -> Tuple[int, Set[str]]:
    """Find the longest run of consecutive active days within a year.

    When several runs share the maximal length, the earliest one wins.

    Args:
        daily_activity: Message count per YYYY-MM-DD key
        year: Only days of this year are considered

    Returns:
        Tuple of (streak length, date keys making up the streak)

    Example:
        >>> activity = {"2025-01-01": 1, "2025-01-02": 4, "2025-01-05": 2}
        >>> calculate_longest_streak(activity, 2025)
        (2, {'2025-01-01', '2025-01-02'})
    """
    keys = _active_keys(daily_activity, year)
    if not keys:
        return 0, set()

    dates = [_parse_date_key(k) for k in keys]
    max_streak = 1
    max_start = max_end = 0
    run_length = 1
    run_start = 0

    for i in range(1, len(dates)):
        if (dates[i] - dates[i - 1]).days == 1:
            run_length += 1
            if run_length > max_streak:
                max_streak = run_length
                max_start = run_start
                max_end = i
        else:
            run_length = 1
            run_start = i

    return max_streak, set(keys[max_start : max_end + 1])


def calculate_current_streak(daily_activity: Dict[str, int], today: date) -> int:
    """Count consecutive active days ending today, or yesterday if today is idle.

    Year boundaries are ignored, so a streak running from December into
    January is measured in full.

    Args:
        daily_activity: Message count per YYYY-MM-DD key (all years)
        today: Reference date

    Returns:
        Streak length in days, 0 if neither today nor yesterday was active
    """

    def is_active(day: date) -> bool:
        return daily_activity.get(format_date_key(day), 0) > 0

    anchor = today
    if not is_active(anchor):
        anchor = today - timedelta(days=1)
        if not is_active(anchor):
            return 0

    streak = 1
    day = anchor - timedelta(days=1)
    while is_active(day):
        streak += 1
        day -= timedelta(days=1)
    return streak


def calculate_streaks(
    daily_activity: Dict[str, int], year: int, today: Optional[date] = None
) -> StreakStats:
    """Compute the longest streak of a year and the current streak."""
    max_streak, max_streak_days = calculate_longest_streak(daily_activity, year)
    current_streak = calculate_current_streak(daily_activity, today or date.today())
    return StreakStats(
        max_streak=max_streak,
        current_streak=current_streak,
        max_streak_days=max_streak_days,
    )


def format_day_label(key: str) -> str:
    """Format a YYYY-MM-DD key as a short label like 'Mar 5'."""
    day = _parse_date_key(key)
    return f"{MONTH_NAMES_SHORT[day.month - 1]} {day.day}"


def find_most_active_day(
    daily_activity: Dict[str, int], year: Optional[int] = None
) -> Optional[MostActiveDay]:
    """Find the day with the most messages (earliest day wins ties).

    Args:
        daily_activity: Message count per YYYY-MM-DD key
        year: Restrict the search to this year (None searches everything)

    Returns:
        MostActiveDay, or None if there was no activity
    """
    best_key = None
    best_count = 0
    for key in _active_keys(daily_activity, year):
        if daily_activity[key] > best_count:
            best_key = key
            best_count = daily_activity[key]

    if best_key is None:
        return None
    return MostActiveDay(
        date=best_key, count=best_count, formatted_date=format_day_label(best_key)
    )


def build_weekday_activity(counts: List[int]) -> WeekdayActivity:
    """Summarize weekday counts (index 0 is Sunday) with the busiest weekday.

    The earliest weekday wins ties; with no activity the result points at
    Sunday with a count of 0.
    """
    most_active = 0
    max_count = 0
    for i, count in enumerate(counts[:7]):
        if count > max_count:
            max_count = count
            most_active = i
    return WeekdayActivity(
        counts=list(counts),
        most_active_day=most_active,
        most_active_day_name=WEEKDAY_NAMES_FULL[most_active],
        max_count=max_count,
    )
