"""
mediabrowse - hierarchical content browsing for UPnP/DLNA control points.
"""

from mediabrowse.__version__ import __version__, __version_info__

__all__ = ["__version__", "__version_info__"]
