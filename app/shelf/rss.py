"""
Tolerant parser for Goodreads shelf RSS feeds.

The feed is scanned with regular expressions rather than an XML parser:
Goodreads does not promise a stable format, and a missing or malformed
field should cost that field, not the whole shelf. Each ``<item>`` yields
at most one ``Book``; items without a usable title are skipped.
"""

from __future__ import annotations

import re
import urllib.parse
from typing import Iterator, List

from ..config import Settings
from .goodreads_service import quote_component
from .schemas import Book


_ITEM_RE = re.compile(r"<item>(.*?)</item>", re.S)
_TO_READ_PREFIX_RE = re.compile(r"^\s*to-read:\s*", re.I)
_HTTP_SCHEME_RE = re.compile(r"^http://", re.I)
# Browsers read a backslash as "/" and drop whitespace, so urlsplit's host is not theirs
_UNSAFE_LINK_RE = re.compile(r"[\\\s\x00-\x1f\x7f]")
_HOSTNAME_RE = re.compile(r"[a-z0-9.-]+")

# Applied in this order, so "&amp;lt;" decodes to "<"
_ENTITIES = (
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)


def iter_items(document: str) -> Iterator[str]:
    """Yield the body of every ``<item>`` element in document order."""
    for m in _ITEM_RE.finditer(document):
        yield m.group(1)


def get_tag(fragment: str, tag: str) -> str:
    """Return the raw content of the first ``<tag>`` in ``fragment`` or ``""``."""
    name = re.escape(tag)
    m = re.search(rf"<{name}>(.*?)</{name}>", fragment, re.I | re.S)
    return m.group(1) if m else ""


def decode(text: str) -> str:
    """Remove CDATA wrappers, unescape the basic XML entities and trim."""
    text = text.replace("<![CDATA[", "").replace("]]>", "")
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return text.strip()


def strip_to_read_prefix(title: str) -> str:
    # Goodreads prefixes titles on the to-read feed with the shelf name
    return _TO_READ_PREFIX_RE.sub("", title, count=1).strip()


def search_url(title: str, author: str, settings: Settings) -> str:
    query = quote_component(" ".join([title or "", author or ""]).strip())
    return f"https://{settings.goodreads_host}/search?q={query}"


def normalize_goodreads_link(link: str, title: str, author: str, settings: Settings) -> str:
    """Return a safe https Goodreads URL for a book.

    The feed link is used when it points at a Goodreads host (after
    upgrading ``http://``). Anything else, including an empty or
    unparseable link, becomes a Goodreads search for title and author.
    """
    fallback = search_url(title, author, settings)
    if not link:
        return fallback

    url = _HTTP_SCHEME_RE.sub("https://", link.strip(), count=1)
    if _UNSAFE_LINK_RE.search(url):
        return fallback
    try:
        parts = urllib.parse.urlsplit(url)
        host = parts.hostname or ""
        parts.port  # raises ValueError for a bad port
    except ValueError:
        return fallback

    if parts.scheme.lower() != "https":
        return fallback
    if not _HOSTNAME_RE.fullmatch(host):
        return fallback
    if not host.endswith(settings.trusted_domain_suffix.lower()):
        return fallback
    return url


def parse_goodreads_rss(document: str, settings: Settings) -> List[Book]:
    books: List[Book] = []
    for item in iter_items(document):
        title = strip_to_read_prefix(decode(get_tag(item, "title")))
        if not title:
            continue
        author = decode(get_tag(item, "author_name"))
        link = normalize_goodreads_link(decode(get_tag(item, "link")), title, author, settings)
        books.append(Book(title=title, author=author, link=link))
    return books
