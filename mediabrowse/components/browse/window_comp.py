"""Bounded window clipping for random and recent listings."""

from __future__ import annotations


def effective_count(offset: int, count: int, server_max: int) -> int:
    """
    Number of records a bounded listing returns for (offset, count).

    The listing only ever exposes its first server_max records, so a request
    starting at or past server_max gets nothing and a request straddling it
    is cut at server_max.

    Examples:
        >>> effective_count(40, 20, 50)
        10
        >>> effective_count(60, 20, 50)
        0
        >>> effective_count(0, 20, 50)
        20
    """
    if offset < 0 or count < 0 or server_max < 0:
        msg = f"Window values must be non-negative: offset={offset}, count={count}, server_max={server_max}"
        raise ValueError(msg)
    if server_max <= offset:
        return 0
    if server_max < offset + count:
        return server_max - offset
    return count


def bounded_total(available: int, server_max: int) -> int:
    """Total a bounded listing reports: what exists, capped at server_max."""
    return min(max(available, 0), server_max)
