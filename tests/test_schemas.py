"""Tests for the shelf schemas."""
import pytest
from pydantic import ValidationError

from app.shelf.schemas import Book, ShelfRequest


def test_shelf_request_defaults():
    req = ShelfRequest(user_id="137464693")
    assert req.shelf == "to-read"
    assert req.per_page == 200
    assert req.page == 1


@pytest.mark.parametrize(
    "fields",
    [
        {"user_id": "abc"},
        {"user_id": "1" * 21},
        {"user_id": ""},
        {"user_id": "1", "per_page": 0},
        {"user_id": "1", "per_page": 201},
        {"user_id": "1", "page": 6},
    ],
)
def test_shelf_request_rejects_out_of_range_values(fields):
    with pytest.raises(ValidationError):
        ShelfRequest(**fields)


def test_book_requires_title_and_https_link():
    with pytest.raises(ValidationError):
        Book(title="", link="https://www.goodreads.com/book/show/1")
    with pytest.raises(ValidationError):
        Book(title="Dune", link="http://www.goodreads.com/book/show/1")

    book = Book(title="Dune", link="https://www.goodreads.com/book/show/1")
    assert book.author == ""
