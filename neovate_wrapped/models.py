"""Data models for Neovate Wrapped.

This module contains all dataclasses used throughout the package:
- TokenUsage, Message: Individual message records parsed from JSONL
- SessionRecord, Project: Derived session and project records
- Corpus: The collector's read-only views over one scan
- MessageTally, StreakStats: Intermediate aggregation results
- RankedEntry, MostActiveDay, WeekdayActivity: Summary building blocks
- AnnualSummary: The year-in-review result consumed by renderers
"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Tuple

from .constants import MESSAGE_RECORD_TYPE, TOOL_USE_BLOCK_TYPE
from .utils import parse_timestamp


def _token_count(value: Any) -> int:
    """Coerce a raw token count to a non-negative int (0 when malformed).

    Integral floats such as 100.0 count as their integer value.
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int):
        return 0
    return max(value, 0)


@dataclass(frozen=True)
class TokenUsage:
    """Token usage statistics for a message.

    Attributes:
        input_tokens: Tokens in the input/prompt
        output_tokens: Tokens in the response
    """

    input_tokens: int = 0
    output_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        """Total tokens (input + output)."""
        return self.input_tokens + self.output_tokens

    @classmethod
    def from_json(cls, usage: Any) -> Optional["TokenUsage"]:
        """Extract token usage from a record's ``usage`` field."""
        if not isinstance(usage, dict):
            return None
        return cls(
            input_tokens=_token_count(usage.get("input_tokens")),
            output_tokens=_token_count(usage.get("output_tokens")),
        )


@dataclass(frozen=True)
class Message:
    """A single interaction turn from a session log.

    Attributes:
        role: Either 'user' or 'assistant'
        content: Plain text, or a tuple of typed content blocks
        timestamp: When the message was recorded (local, timezone-aware)
        session_id: Identifier of the owning session
        model: Optional model string of the form 'provider/model-id'
        usage: Token usage, when the record carries it
        tool_calls: Explicit tool-call entries attached to the message

    Example:
        >>> msg = Message.from_json({
        ...     "type": "message", "role": "user", "content": "Hi",
        ...     "timestamp": "2025-01-15T10:00:00",
        ... })
        >>> msg.role
        'user'
    """

    role: str
    content: Any
    timestamp: datetime
    session_id: str = ""
    model: Optional[str] = None
    usage: Optional[TokenUsage] = None
    tool_calls: Tuple[Dict[str, Any], ...] = ()

    @classmethod
    def from_json(cls, data: Any, session_id: str = "") -> Optional["Message"]:
        """Parse a message from a decoded JSONL record.

        Args:
            data: Decoded JSON value from one line
            session_id: Session to attribute the message to when the record
                does not name one

        Returns:
            Message object, or None if the record is not a message or its
            timestamp is not a valid point in time
        """
        if not isinstance(data, dict) or data.get("type") != MESSAGE_RECORD_TYPE:
            return None

        timestamp = parse_timestamp(data.get("timestamp"))
        if timestamp is None:
            return None

        role = data.get("role")
        content = data.get("content")
        if isinstance(content, list):
            content = tuple(content)
        elif not isinstance(content, str):
            content = ""

        model = data.get("model")
        raw_calls = data.get("tool_calls")
        tool_calls: Tuple[Dict[str, Any], ...] = ()
        if isinstance(raw_calls, list):
            tool_calls = tuple(c for c in raw_calls if isinstance(c, dict))

        record_session = data.get("sessionId")

        return cls(
            role=role if isinstance(role, str) else "",
            content=content,
            timestamp=timestamp,
            session_id=record_session if isinstance(record_session, str) else session_id,
            model=model if isinstance(model, str) and model else None,
            usage=TokenUsage.from_json(data.get("usage")),
            tool_calls=tool_calls,
        )

    @property
    def tool_call_names(self) -> List[str]:
        """Names from the explicit tool-call list."""
        return [
            c["name"] for c in self.tool_calls if isinstance(c.get("name"), str) and c["name"]
        ]

    @property
    def tool_use_names(self) -> List[str]:
        """Names from tool_use blocks embedded in the content."""
        if not isinstance(self.content, tuple):
            return []
        names = []
        for block in self.content:
            if not isinstance(block, dict) or block.get("type") != TOOL_USE_BLOCK_TYPE:
                continue
            name = block.get("name")
            if isinstance(name, str) and name:
                names.append(name)
        return names


@dataclass(frozen=True)
class SessionRecord:
    """Summary of one session file, derived from its valid messages.

    Attributes:
        session_id: Filename without the .jsonl extension
        project_id: Name of the owning project directory
        first_message_time: Earliest message timestamp
        last_message_time: Latest message timestamp
        message_count: Number of valid messages in the file
    """

    session_id: str
    project_id: str
    first_message_time: datetime
    last_message_time: datetime
    message_count: int

    @classmethod
    def from_messages(
        cls, session_id: str, project_id: str, messages: List[Message]
    ) -> Optional["SessionRecord"]:
        """Build a session record, or None when there are no messages."""
        if not messages:
            return None
        timestamps = [m.timestamp for m in messages]
        return cls(
            session_id=session_id,
            project_id=project_id,
            first_message_time=min(timestamps),
            last_message_time=max(timestamps),
            message_count=len(messages),
        )

    @property
    def duration_minutes(self) -> int:
        """Wall-clock span between the first and last message, in minutes."""
        delta = self.last_message_time - self.first_message_time
        return int(delta.total_seconds() // 60)


@dataclass(frozen=True)
class Project:
    """A project directory under the data root.

    Attributes:
        project_id: Directory name (e.g., "-Users-foo-myproject")
        path: Filesystem path to the directory
    """

    project_id: str
    path: Path


@dataclass
class Corpus:
    """Read-only views produced by one scan of the data root.

    Attributes:
        projects: Every readable project directory
        all_sessions: Sessions regardless of year
        sessions: Sessions whose first message falls in the requested year
        all_messages: Messages regardless of year
        messages: Messages timestamped within the requested year
    """

    projects: List[Project] = field(default_factory=list)
    all_sessions: List[SessionRecord] = field(default_factory=list)
    sessions: List[SessionRecord] = field(default_factory=list)
    all_messages: List[Message] = field(default_factory=list)
    messages: List[Message] = field(default_factory=list)


@dataclass
class MessageTally:
    """Running accumulators of the aggregation pass."""

    total_messages: int = 0
    total_input_tokens: int = 0
    total_output_tokens: int = 0
    total_tool_calls: int = 0
    models: Counter = field(default_factory=Counter)
    providers: Counter = field(default_factory=Counter)
    tools: Counter = field(default_factory=Counter)
    model_providers: Dict[str, str] = field(default_factory=dict)

    @property
    def total_tokens(self) -> int:
        return self.total_input_tokens + self.total_output_tokens


@dataclass
class StreakStats:
    """Longest and current activity streaks."""

    max_streak: int = 0
    current_streak: int = 0
    max_streak_days: Set[str] = field(default_factory=set)


@dataclass
class RankedEntry:
    """One entry of a top-N ranking.

    Attributes:
        id: Model id, provider id, or tool name
        name: Human-readable name
        count: Occurrences
        percentage: Share of the category total (0-100)
        provider_id: Owning provider (model rankings only)
    """

    id: str
    name: str
    count: int
    percentage: float = 0.0
    provider_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "count": self.count,
            "percentage": self.percentage,
        }
        if self.provider_id is not None:
            result["provider_id"] = self.provider_id
        return result


@dataclass
class MostActiveDay:
    """The single busiest calendar day."""

    date: str
    count: int
    formatted_date: str

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date, "count": self.count, "formatted_date": self.formatted_date}


@dataclass
class WeekdayActivity:
    """Message counts per weekday (index 0 is Sunday)."""

    counts: List[int]
    most_active_day: int
    most_active_day_name: str
    max_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "counts": list(self.counts),
            "most_active_day": self.most_active_day,
            "most_active_day_name": self.most_active_day_name,
            "max_count": self.max_count,
        }


@dataclass
class AnnualSummary:
    """Year-in-review usage summary.

    Attributes:
        year: The summarized year
        first_session_date: Start of the earliest session ever recorded
        days_since_first_session: Whole days from first session to now
        total_sessions: Sessions that started in the year
        total_messages: Messages recorded in the year
        total_projects: Readable project directories
        total_tool_calls: Tool invocations in the year
        total_input_tokens: Input tokens in the year
        total_output_tokens: Output tokens in the year
        total_tokens: Input plus output tokens
        top_models: Most used models (assistant messages only)
        top_providers: Most used providers (assistant messages only)
        top_tools: Most invoked tools
        max_streak: Longest run of consecutive active days in the year
        max_streak_days: Date keys of that run
        current_streak: Active days ending today or yesterday
        daily_activity: Message count per local date key (all years)
        most_active_day: Busiest day of the year, if any
        weekday_activity: Weekday distribution of messages
    """

    year: int
    first_session_date: datetime
    days_since_first_session: int
    total_sessions: int
    total_messages: int
    total_projects: int
    total_tool_calls: int
    total_input_tokens: int
    total_output_tokens: int
    total_tokens: int
    top_models: List[RankedEntry]
    top_providers: List[RankedEntry]
    top_tools: List[RankedEntry]
    max_streak: int
    max_streak_days: Set[str]
    current_streak: int
    daily_activity: Dict[str, int]
    most_active_day: Optional[MostActiveDay]
    weekday_activity: WeekdayActivity

    @property
    def has_activity(self) -> bool:
        """Whether anything happened in the year."""
        return self.total_sessions > 0 or self.total_messages > 0

    def year_activity(self) -> Dict[str, int]:
        """Daily activity restricted to the summarized year."""
        prefix = f"{self.year}-"
        return {k: v for k, v in self.daily_activity.items() if k.startswith(prefix)}

    def monthly_activity(self) -> List[int]:
        """Message counts per month of the summarized year."""
        months = [0] * 12
        for key, count in self.year_activity().items():
            months[int(key[5:7]) - 1] += count
        return months

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serialisable dict."""
        return {
            "year": self.year,
            "first_session_date": self.first_session_date.isoformat(),
            "days_since_first_session": self.days_since_first_session,
            "total_sessions": self.total_sessions,
            "total_messages": self.total_messages,
            "total_projects": self.total_projects,
            "total_tool_calls": self.total_tool_calls,
            "total_input_tokens": self.total_input_tokens,
            "total_output_tokens": self.total_output_tokens,
            "total_tokens": self.total_tokens,
            "top_models": [e.to_dict() for e in self.top_models],
            "top_providers": [e.to_dict() for e in self.top_providers],
            "top_tools": [e.to_dict() for e in self.top_tools],
            "max_streak": self.max_streak,
            "max_streak_days": sorted(self.max_streak_days),
            "current_streak": self.current_streak,
            "daily_activity": dict(sorted(self.daily_activity.items())),
            "most_active_day": self.most_active_day.to_dict() if self.most_active_day else None,
            "weekday_activity": self.weekday_activity.to_dict(),
        }
