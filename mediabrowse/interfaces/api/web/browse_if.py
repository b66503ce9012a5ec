"""Browse and search endpoints for web UI and control-point bridges."""

from __future__ import annotations

import logging
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Query

from mediabrowse.app import Application
from mediabrowse.helpers.dto.browse_dto import BrowseFlag
from mediabrowse.helpers.exceptions import (
    InvalidRequestError,
    MalformedIdentifierError,
    NotFoundError,
    SearchCriteriaError,
    UnknownNodeTypeError,
)
from mediabrowse.helpers.logging_helper import sanitize_exception_message
from mediabrowse.interfaces.api.types.browse_types import BrowseResultResponse, ReloadResponse
from mediabrowse.interfaces.api.web.dependencies import get_application, get_content_directory
from mediabrowse.services.content_directory_svc import ContentDirectoryService

router = APIRouter(tags=["Browse"])

# Errors caused by the request itself; anything else is a server fault
_CLIENT_ERRORS = (UnknownNodeTypeError, MalformedIdentifierError, SearchCriteriaError, InvalidRequestError)


def _raise_http(e: Exception, action: str) -> NoReturn:
    """Map browse errors to HTTP status codes."""
    if isinstance(e, NotFoundError):
        raise HTTPException(status_code=404, detail=f"No such object: {e}") from e
    if isinstance(e, _CLIENT_ERRORS):
        raise HTTPException(status_code=400, detail=str(e)) from e
    raise HTTPException(status_code=500, detail=sanitize_exception_message(e, f"Error during {action}")) from e


# ──────────────────────────────────────────────────────────────────────
# Endpoints
# ──────────────────────────────────────────────────────────────────────


@router.get("/browse")
def web_browse(
    object_id: str = Query("0", description="Object id: <token> or <token>/<item id>"),
    browse_flag: BrowseFlag = Query(BrowseFlag.DIRECT_CHILDREN),
    offset: int = Query(0, ge=0),
    count: int = Query(0, ge=0, description="0 returns every remaining child"),
    content_directory: ContentDirectoryService = Depends(get_content_directory),
) -> BrowseResultResponse:
    """Browse one object: its own metadata or a window of its children."""
    try:
        result = content_directory.browse(object_id, browse_flag, offset, count)
        return BrowseResultResponse.from_dto(result)
    except Exception as e:
        _raise_http(e, "browse")


@router.get("/search")
def web_search(
    query: str = Query(..., description="UPnP search criteria"),
    container_id: str = Query("0"),
    filter: str | None = Query(None),
    offset: int = Query(0, ge=0),
    count: int = Query(0, ge=0),
    content_directory: ContentDirectoryService = Depends(get_content_directory),
) -> BrowseResultResponse:
    """Search below a container."""
    try:
        result = content_directory.search(container_id, query, filter, offset, count)
        return BrowseResultResponse.from_dto(result)
    except Exception as e:
        _raise_http(e, "search")


@router.get("/menu")
def web_menu(
    content_directory: ContentDirectoryService = Depends(get_content_directory),
) -> BrowseResultResponse:
    """The enabled root menu entries."""
    try:
        return BrowseResultResponse.from_dto(content_directory.menu())
    except Exception as e:
        _raise_http(e, "menu")


@router.post("/reload")
def web_reload(
    app: Application = Depends(get_application),
) -> ReloadResponse:
    """Reload configuration and the library snapshot."""
    try:
        folders = app.reload()
    except (OSError, ValueError) as e:
        logging.exception("[Web API] Reload failed")
        raise HTTPException(status_code=400, detail=sanitize_exception_message(e, "Reload failed")) from e
    except RuntimeError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e
    return ReloadResponse(status="ok", folders=folders)
