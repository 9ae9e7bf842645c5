"""
Failure kinds of the shelf pipeline.

Each exception knows the HTTP status and the JSON body it maps to, so the
router only has to catch ``ShelfError``. Bodies never carry exception text.
"""

from typing import Any, Dict


class ShelfError(Exception):
    status_code = 500
    message = "Failed to fetch or parse RSS"

    def payload(self) -> Dict[str, Any]:
        return {"error": self.message}


class InvalidIdentifier(ShelfError):
    """The ``user_id`` parameter is not a 1-20 digit number."""

    status_code = 400
    message = "Invalid user_id"


class UpstreamError(ShelfError):
    """Goodreads answered with a non-success status; the status is mirrored."""

    message = "Upstream error"

    def __init__(self, status: int):
        super().__init__(f"Upstream responded with status {status}")
        self.status_code = status

    def payload(self) -> Dict[str, Any]:
        return {"error": self.message, "status": self.status_code}


class ResponseTooLarge(ShelfError):
    status_code = 502
    message = "Response too large"


class NetworkFailure(ShelfError):
    """DNS, TLS, timeout or connection failure while fetching the feed."""


class ParseFailure(ShelfError):
    """The feed could not be turned into a book list."""
