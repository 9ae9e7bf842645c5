"""JSON responses for the shelf endpoint, open to cross-origin GETs."""

from typing import Any, Dict

from fastapi.responses import JSONResponse

from .errors import ShelfError


CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET",
}


def json_response(payload: Dict[str, Any], status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=payload, status_code=status_code, headers=CORS_HEADERS)


def error_response(error: ShelfError) -> JSONResponse:
    return json_response(error.payload(), error.status_code)
