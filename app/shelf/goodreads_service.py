"""
Goodreads integration for the shelf endpoint. This module knows how to
reach the public shelf RSS feed of a reader:

* ``build_feed_url()`` — compose the ``/review/list_rss/<user_id>`` URL
  for a validated request.

* ``fetch_shelf_feed()`` — download the feed once and return its text.

Only the Python standard library is used for HTTP requests. There is no
retry and no cache: the picker UI simply lets the reader press the button
again. Failures are raised as the exceptions in ``errors.py`` so the
router can map them onto status codes.
"""

from __future__ import annotations

import http.client
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Tuple

from ..config import Settings
from .errors import NetworkFailure, ResponseTooLarge, UpstreamError
from .schemas import ShelfRequest


logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

# Characters encodeURIComponent leaves alone, so URLs match what browsers build
URI_COMPONENT_SAFE = "!~*'()"


def quote_component(value: str) -> str:
    return urllib.parse.quote(value, safe=URI_COMPONENT_SAFE)


def build_feed_url(req: ShelfRequest, settings: Settings) -> str:
    return (
        f"https://{settings.goodreads_host}/review/list_rss/{quote_component(req.user_id)}"
        f"?shelf={quote_component(req.shelf)}&per_page={req.per_page}&page={req.page}"
    )


def _declared_length(response) -> int:
    raw = response.headers.get("Content-Length")
    try:
        return int(raw) if raw is not None else -1
    except ValueError:
        return -1


def fetch_shelf_feed(req: ShelfRequest, settings: Settings) -> Tuple[str, int]:
    """Fetch the RSS feed for ``req`` and return ``(text, length)``.

    The body is read with a cap of ``max_response_bytes + 1`` so an
    oversized feed is detected without buffering all of it. A declared
    ``Content-Length`` above the ceiling is rejected before reading.

    Raises ``UpstreamError`` for non-success statuses, ``ResponseTooLarge``
    above the ceiling and ``NetworkFailure`` for transport errors.
    """
    url = build_feed_url(req, settings)
    limit = settings.max_response_bytes
    request = urllib.request.Request(url, headers={"User-Agent": settings.user_agent})
    try:
        with urllib.request.urlopen(request, timeout=settings.upstream_timeout) as response:
            status = getattr(response, "status", 200)
            if not 200 <= status < 300:
                logger.warning("Goodreads request to %s returned status %s", url, status)
                raise UpstreamError(status)
            if _declared_length(response) > limit:
                logger.warning("Goodreads feed at %s declares more than %s bytes", url, limit)
                raise ResponseTooLarge()
            body = response.read(limit + 1)
            charset = response.headers.get_content_charset() or "utf-8"
    except urllib.error.HTTPError as exc:
        logger.warning("Goodreads request to %s returned status %s", url, exc.code)
        exc.close()
        raise UpstreamError(exc.code) from exc
    except (urllib.error.URLError, http.client.HTTPException, OSError) as exc:
        logger.error("Error fetching %s: %s", url, exc)
        raise NetworkFailure() from exc

    if len(body) > limit:
        logger.warning("Goodreads feed at %s exceeded %s bytes", url, limit)
        raise ResponseTooLarge()

    try:
        text = body.decode(charset, errors="replace")
    except LookupError:
        text = body.decode("utf-8", errors="replace")
    return text, len(text)
