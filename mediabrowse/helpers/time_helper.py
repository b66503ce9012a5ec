"""Time formatting helpers used when rendering nodes."""

from __future__ import annotations

from dataclasses import dataclass


def format_duration(seconds: int | None) -> str | None:
    """
    Format a duration as UPnP res@duration ("H:MM:SS.F").

    Returns:
        Formatted duration, or None when the duration is unknown
    """
    if seconds is None or seconds < 0:
        return None
    hours, rest = divmod(int(seconds), 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours}:{minutes:02d}:{secs:02d}.0"


def format_year_date(year: int | None) -> str | None:
    """Format a release year as a dc:date value ("YYYY-01-01")."""
    if year is None or year <= 0:
        return None
    return f"{year:04d}-01-01"


@dataclass(frozen=True)
class NodeFormatter:
    """
    Immutable formatter shared by every render call.

    Holds no per-call state, so one instance serves all requests.
    """

    duration_unknown: str | None = None

    def duration(self, seconds: int | None) -> str | None:
        return format_duration(seconds) or self.duration_unknown

    def date(self, year: int | None) -> str | None:
        return format_year_date(year)
