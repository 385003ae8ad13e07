"""Aggregation engine for Neovate Wrapped.

This module reduces message records into tallies in a single pass:
- split_model_id(): Split 'provider/model-id' strings
- tally_messages(): Token totals and model/provider/tool frequency tables
- build_activity(): Per-day and per-weekday message counts

None of the tallies depend on message order.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from .constants import UNKNOWN_ID
from .models import Message, MessageTally
from .utils import format_date_key


def split_model_id(model: Optional[str]) -> Tuple[str, str]:
    """Split a model string into (provider_id, model_id).

    The string is split on the first '/'. Without a '/', the whole string is
    the model id and the provider is unresolved. Missing parts are
    reported as 'unknown'.

    Example:
        >>> split_model_id("openrouter/anthropic/claude-3")
        ('openrouter', 'anthropic/claude-3')
        >>> split_model_id("gpt-4o")
        ('unknown', 'gpt-4o')
    """
    if not model:
        return UNKNOWN_ID, UNKNOWN_ID
    if "/" in model:
        provider_id, model_id = model.split("/", 1)
    else:
        provider_id, model_id = "", model
    return provider_id or UNKNOWN_ID, model_id or UNKNOWN_ID


def weekday_index(message: Message) -> int:
    """Weekday of a message, 0 for Sunday through 6 for Saturday."""
    return (message.timestamp.weekday() + 1) % 7


def tally_messages(messages: Iterable[Message]) -> MessageTally:
    """Tally tokens, models, providers, and tools over messages.

    Only assistant messages count towards models and providers. Tool calls
    are counted from both the explicit tool-call list and tool_use content
    blocks, for any role; a call present in both is counted twice.

    Args:
        messages: Message records (typically one year's worth)

    Returns:
        MessageTally with totals and frequency tables
    """
    tally = MessageTally()

    for message in messages:
        tally.total_messages += 1

        if message.usage:
            tally.total_input_tokens += message.usage.input_tokens
            tally.total_output_tokens += message.usage.output_tokens

        for name in message.tool_call_names + message.tool_use_names:
            tally.tools[name] += 1
            tally.total_tool_calls += 1

        if message.role == "assistant" and message.model:
            provider_id, model_id = split_model_id(message.model)
            if model_id != UNKNOWN_ID:
                tally.models[model_id] += 1
                if provider_id != UNKNOWN_ID:
                    tally.model_providers.setdefault(model_id, provider_id)
            if provider_id != UNKNOWN_ID:
                tally.providers[provider_id] += 1

    return tally


def build_activity(messages: Iterable[Message]) -> Tuple[Dict[str, int], List[int]]:
    """Count messages per local calendar day and per weekday.

    Args:
        messages: Message records (the full corpus, for streak continuity)

    Returns:
        Tuple of (daily activity keyed by YYYY-MM-DD, 7 weekday counts
        starting at Sunday)
    """
    daily: Dict[str, int] = {}
    weekdays = [0] * 7
    for message in messages:
        key = format_date_key(message.timestamp)
        daily[key] = daily.get(key, 0) + 1
        weekdays[weekday_index(message)] += 1
    return daily, weekdays
