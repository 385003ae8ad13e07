"""Top-N ranking of frequency tables."""

from typing import List, Mapping, Optional, Tuple


def percentage(count: int, total: int) -> float:
    """Share of ``total`` as a percentage rounded to one decimal (0 for no total)."""
    if total <= 0:
        return 0.0
    return round(count / total * 100, 1)


def rank_top_n(
    table: Mapping[str, int], limit: int, total: Optional[int] = None
) -> List[Tuple[str, int, float]]:
    """Return the ``limit`` most frequent entries of a frequency table.

    Entries are ordered by descending count. Equal counts keep the table's
    iteration order, i.e. the order in which keys were first seen.

    Args:
        table: Mapping of key to occurrence count
        limit: Maximum number of entries to return
        total: Denominator for percentages (default: sum of the table)

    Returns:
        List of (key, count, percentage) tuples

    Example:
        >>> rank_top_n({"Read": 5, "Edit": 9, "Bash": 5}, 2)
        [('Edit', 9, 47.4), ('Read', 5, 26.3)]
    """
    if total is None:
        total = sum(table.values())
    ranked = sorted(table.items(), key=lambda item: item[1], reverse=True)
    return [(key, count, percentage(count, total)) for key, count in ranked[: max(limit, 0)]]
