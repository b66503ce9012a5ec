"""
API layer package for MediaBrowse.
Exports the FastAPI app.
"""

from mediabrowse.interfaces.api.api_app import api_app

__all__ = ["api_app"]
