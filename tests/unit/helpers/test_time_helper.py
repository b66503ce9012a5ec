"""
Unit tests for mediabrowse.helpers.time_helper module.

Tests the duration and date formatting used by the node factory.
"""

import pytest

from mediabrowse.helpers.time_helper import NodeFormatter, format_duration, format_year_date


class TestFormatDuration:
    """Tests for format_duration function."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [(0, "0:00:00.0"), (59, "0:00:59.0"), (231, "0:03:51.0"), (3600, "1:00:00.0"), (36000 + 61, "10:01:01.0")],
    )
    def test_formats_as_upnp_duration(self, seconds: int, expected: str) -> None:
        """Durations render as H:MM:SS.F."""
        assert format_duration(seconds) == expected

    @pytest.mark.unit
    def test_unknown_duration_is_none(self) -> None:
        """A missing or negative duration has no rendering."""
        assert format_duration(None) is None
        assert format_duration(-1) is None


class TestFormatYearDate:
    """Tests for format_year_date function."""

    @pytest.mark.unit
    def test_year_becomes_first_of_january(self) -> None:
        """A release year renders as YYYY-01-01."""
        assert format_year_date(1976) == "1976-01-01"
        assert format_year_date(800) == "0800-01-01"

    @pytest.mark.unit
    def test_missing_year_is_none(self) -> None:
        """Year 0 and None mean unknown."""
        assert format_year_date(None) is None
        assert format_year_date(0) is None


class TestNodeFormatter:
    """Tests for the immutable NodeFormatter."""

    @pytest.mark.unit
    def test_unknown_duration_placeholder(self) -> None:
        """duration_unknown is used when the duration cannot be formatted."""
        formatter = NodeFormatter(duration_unknown="0:00:00.0")
        assert formatter.duration(None) == "0:00:00.0"
        assert formatter.duration(61) == "0:01:01.0"

    @pytest.mark.unit
    def test_is_frozen(self) -> None:
        """The shared formatter cannot be mutated."""
        formatter = NodeFormatter()
        with pytest.raises(AttributeError):
            formatter.duration_unknown = "x"  # type: ignore[misc]
