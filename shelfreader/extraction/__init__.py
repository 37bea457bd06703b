"""Shelf page extraction: markup query, rows, fields and normalizers."""

from shelfreader.extraction.pipeline import ShelfParser, parse_books
from shelfreader.extraction.query import Selection, SoupSelection, load_document
from shelfreader.extraction.rows import select_rows
from shelfreader.extraction.source import read_document

__all__ = [
    "Selection",
    "ShelfParser",
    "SoupSelection",
    "load_document",
    "parse_books",
    "read_document",
    "select_rows",
]
