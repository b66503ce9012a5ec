"""
In-memory library operations.

Each *_ops module implements one read contract over a LibraryStore.
"""
