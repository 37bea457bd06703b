"""Extract normalized reading records from a Goodreads shelf page."""

from shelfreader.errors import InvalidDocument
from shelfreader.extraction.pipeline import ShelfParser, parse_books
from shelfreader.models import BookRecord

__all__ = ["BookRecord", "InvalidDocument", "ShelfParser", "parse_books"]
