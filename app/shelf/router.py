"""
Route definition for the shelf API.

Endpoint:
- GET /goodreads-shelf : books on a reader's public Goodreads shelf

Query values are taken as raw strings so that bad paging input is
clamped instead of rejected by FastAPI's own validation.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ..config import Settings, get_settings
from .errors import ParseFailure, ShelfError
from .goodreads_service import fetch_shelf_feed
from .responses import error_response, json_response
from .rss import parse_goodreads_rss
from .schemas import ShelfResponse
from .validation import validate_shelf_params


logger = logging.getLogger(__name__)

router = APIRouter(tags=["shelf"])


@router.get("/goodreads-shelf", response_model=ShelfResponse)
def goodreads_shelf(
    user_id: Optional[str] = Query(default=None, description="Numeric Goodreads user id"),
    shelf: Optional[str] = Query(default=None, description="Shelf name, to-read by default"),
    per_page: Optional[str] = Query(default=None, description="Books per page (1-200)"),
    page: Optional[str] = Query(default=None, description="Feed page (1-5)"),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """
    Returns the books of one shelf page, in feed order.

    Every failure becomes a JSON ``{"error": ...}`` body; upstream
    statuses are mirrored, everything unexpected is a 500.
    """
    try:
        req = validate_shelf_params(user_id, shelf, per_page, page, settings)
        document, length = fetch_shelf_feed(req, settings)
        logger.info("Fetched shelf %r page %s (%s chars)", req.shelf, req.page, length)
        books = parse_goodreads_rss(document, settings)
    except ShelfError as exc:
        return error_response(exc)
    except Exception:
        logger.exception("Unexpected failure while building shelf response")
        return error_response(ParseFailure())

    return json_response(ShelfResponse(books=books).model_dump())
