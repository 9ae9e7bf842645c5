"""
Query parameter validation for the shelf endpoint.

Only ``user_id`` can fail: it is interpolated into the upstream path, so
it must be a plain 1-20 digit number. Paging values never fail; bad input
falls back to a default and good input is clamped into range.
"""

from __future__ import annotations

import re
from typing import Optional

from ..config import Settings
from .errors import InvalidIdentifier
from .schemas import ShelfRequest


_USER_ID_RE = re.compile(r"[0-9]{1,20}")
# Leading integer, the way browsers' parseInt reads "12abc" or " 7"
_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")


def clamp_int(value: Optional[str], low: int, high: int, fallback: int) -> int:
    if value is None:
        return fallback
    m = _LEADING_INT_RE.match(value)
    if not m:
        return fallback
    return max(low, min(high, int(m.group(1))))


def validate_shelf_params(
    user_id: Optional[str],
    shelf: Optional[str],
    per_page: Optional[str],
    page: Optional[str],
    settings: Settings,
) -> ShelfRequest:
    """Turn raw query values into a ``ShelfRequest``.

    Raises ``InvalidIdentifier`` when ``user_id`` is missing or not numeric.
    """
    uid = (user_id or "").strip()
    if not _USER_ID_RE.fullmatch(uid):
        raise InvalidIdentifier()

    return ShelfRequest(
        user_id=uid,
        shelf=(shelf or settings.default_shelf).strip(),
        per_page=clamp_int(
            per_page,
            settings.min_per_page,
            settings.max_per_page,
            settings.default_per_page,
        ),
        page=clamp_int(page, settings.min_page, settings.max_page, settings.default_page),
    )
