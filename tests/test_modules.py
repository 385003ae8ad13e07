"""Unit tests for module layout and shared helpers.

These tests verify that each module can be imported on its own and that the
package re-exports the public API.
"""

from datetime import datetime


class TestModuleImports:
    """Test that all modules can be imported correctly."""

    def test_import_models(self):
        from neovate_wrapped.models import (
            AnnualSummary,
            Message,
            Project,
            SessionRecord,
            TokenUsage,
        )

        assert Message is not None
        assert SessionRecord is not None
        assert AnnualSummary is not None

    def test_import_pipeline(self):
        from neovate_wrapped.aggregate import tally_messages
        from neovate_wrapped.collector import collect_corpus
        from neovate_wrapped.ranking import rank_top_n
        from neovate_wrapped.stats import calculate_annual_summary
        from neovate_wrapped.streaks import calculate_streaks

        assert collect_corpus is not None
        assert tally_messages is not None
        assert calculate_streaks is not None
        assert rank_top_n is not None
        assert calculate_annual_summary is not None

    def test_package_exports(self):
        import neovate_wrapped

        assert neovate_wrapped.__version__ == "0.1.0"
        for name in neovate_wrapped.__all__:
            assert hasattr(neovate_wrapped, name), name


class TestUtils:
    """Test formatting helpers."""

    def test_format_number(self):
        from neovate_wrapped.utils import format_number

        assert format_number(0) == "0"
        assert format_number(1234567) == "1,234,567"

    def test_format_duration(self):
        from neovate_wrapped.utils import format_duration

        assert format_duration(45) == "45m"
        assert format_duration(90) == "1h 30m"

    def test_format_timestamp(self):
        from neovate_wrapped.utils import format_timestamp

        assert format_timestamp(None) == "unknown"
        assert format_timestamp(datetime(2024, 1, 15, 14, 30)) == "2024-01-15 14:30"

    def test_format_date_key(self):
        from neovate_wrapped.utils import format_date_key

        assert format_date_key(datetime(2025, 3, 7, 23, 59)) == "2025-03-07"
