"""
Shelf package for the random book picker.

This package exposes a single read-only endpoint that loads a reader's
public Goodreads shelf and returns its books as JSON. The work is split
into small steps: ``validation`` checks the query string,
``goodreads_service`` downloads the RSS feed, ``rss`` extracts and
normalizes the books, and ``responses`` shapes the JSON sent back. The
front-end picks a random book from the list on its own.
"""

from .router import router as shelf_router  # noqa: F401
