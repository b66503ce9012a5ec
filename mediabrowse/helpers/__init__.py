"""
Helpers package.

Pure utilities shared by every layer: exceptions, identifier codec,
formatting and DTOs. Nothing here performs I/O.
"""
