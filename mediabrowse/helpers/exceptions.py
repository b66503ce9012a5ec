"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class BrowseError(Exception):
    """Base class for errors raised while resolving a browse or search request."""


class UnknownNodeTypeError(BrowseError):
    """Raised when an address names a node type token that no handler owns."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unknown node type: {token!r}")


class MalformedIdentifierError(BrowseError, ValueError):
    """Raised when an object id or compound item id cannot be decoded."""


class NotFoundError(BrowseError):
    """Raised when a well-formed id refers to an entity that does not exist."""

    def __init__(self, kind: str, key: object) -> None:
        self.kind = kind
        self.key = key
        super().__init__(f"No such {kind}: {key!r}")


class SearchCriteriaError(BrowseError, ValueError):
    """Raised when a search query uses a class or operator that is not supported."""


class InvalidRequestError(BrowseError, ValueError):
    """Raised when a browse flag or result window is not acceptable."""
