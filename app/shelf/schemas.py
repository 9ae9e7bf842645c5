"""
Pydantic schema definitions for the shelf module.

``ShelfRequest`` is the validated form of the query string. ``Book``
keeps only the three fields the picker UI needs, and ``ShelfResponse``
wraps the list returned by ``GET /goodreads-shelf``.
"""

from typing import List

from pydantic import BaseModel, Field


class ShelfRequest(BaseModel):
    """Validated query parameters for one shelf lookup.

    ``user_id`` is interpolated into the upstream path, so it is limited
    to 1-20 ASCII digits. ``per_page`` and ``page`` hold the widest
    bounds Goodreads serves; settings may clamp them further.
    """

    user_id: str = Field(pattern=r"^[0-9]{1,20}$")
    shelf: str = "to-read"
    per_page: int = Field(default=200, ge=1, le=200)
    page: int = Field(default=1, ge=1, le=5)


class Book(BaseModel):
    """A single book entry from a shelf feed.

    ``title`` is never empty; records without a usable title are dropped
    during parsing. ``author`` is an empty string when the feed omits it.
    ``link`` is always an ``https`` URL on Goodreads: either the book page
    from the feed or a Goodreads search for the title and author.
    """

    title: str = Field(min_length=1)
    author: str = ""
    link: str = Field(pattern=r"^https://")


class ShelfResponse(BaseModel):
    """Books in feed order."""

    books: List[Book] = Field(default_factory=list)
