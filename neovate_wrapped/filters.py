"""Year filtering for messages and sessions.

Years are calendar years in local time. A session belongs to the year of its
first message, regardless of when it ended.
"""

from datetime import datetime
from typing import List, Optional

from .models import Message, SessionRecord


def in_year(timestamp: datetime, year: Optional[int]) -> bool:
    """Whether a timestamp falls in the given year (always true for None)."""
    return year is None or timestamp.year == year


def filter_messages_by_year(messages: List[Message], year: Optional[int]) -> List[Message]:
    """Keep messages whose own timestamp falls in the year."""
    return [m for m in messages if in_year(m.timestamp, year)]


def filter_sessions_by_year(
    sessions: List[SessionRecord], year: Optional[int]
) -> List[SessionRecord]:
    """Keep sessions whose first message falls in the year.

    Example:
        >>> # A session from Dec 31 to Jan 1 belongs to the December year
        >>> filter_sessions_by_year(sessions, 2025)
    """
    return [s for s in sessions if in_year(s.first_message_time, year)]
