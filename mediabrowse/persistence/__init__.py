"""
Persistence layer.

contracts.py declares the read contracts the browse core depends on.
memory/ is an in-memory implementation over an immutable library snapshot.
"""

from mediabrowse.persistence.contracts import LibraryCollaborators
from mediabrowse.persistence.library import MemoryLibrary

__all__ = ["LibraryCollaborators", "MemoryLibrary"]
