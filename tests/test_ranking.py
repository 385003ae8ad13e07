"""Tests for top-N ranking."""

from collections import Counter

from neovate_wrapped.ranking import percentage, rank_top_n


class TestRankTopN:
    """Test ranking order, limits, and percentages."""

    def test_descending_with_limit(self):
        table = Counter({"read": 5, "edit": 9, "bash": 7, "grep": 1})
        ranked = rank_top_n(table, 3)
        assert [(k, c) for k, c, _ in ranked] == [("edit", 9), ("bash", 7), ("read", 5)]

    def test_ties_keep_first_occurrence_order(self):
        table = Counter()
        for name in ["glob", "bash", "read", "bash", "glob", "read"]:
            table[name] += 1
        assert [k for k, _, _ in rank_top_n(table, 5)] == ["glob", "bash", "read"]

    def test_idempotent_and_deterministic(self):
        table = {"a": 10, "b": 7, "c": 7, "d": 2}
        first = rank_top_n(table, 4)
        again = rank_top_n({k: c for k, c, _ in first}, 4)
        assert first == again
        assert rank_top_n(table, 4) == first

    def test_percentages_use_category_total(self):
        ranked = rank_top_n({"claude-3": 3, "gpt-4o": 1}, 1)
        assert ranked == [("claude-3", 3, 75.0)]

        ranked = rank_top_n({"bash": 2, "read": 2}, 2, total=8)
        assert [p for _, _, p in ranked] == [25.0, 25.0]

    def test_empty_and_zero_limit(self):
        assert rank_top_n({}, 3) == []
        assert rank_top_n({"a": 1}, 0) == []

    def test_percentage(self):
        assert percentage(1, 3) == 33.3
        assert percentage(5, 0) == 0.0
