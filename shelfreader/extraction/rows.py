"""Locate the per-book rows of a shelf page."""

import logging

from shelfreader.errors import InvalidDocument
from shelfreader.extraction.query import Selection

logger = logging.getLogger(__name__)

ROW_SELECTOR = ".bookalike"


def select_rows(doc: Selection, selector: str = ROW_SELECTOR) -> list[Selection]:
    """Return one selection per shelf row, in document order.

    Args:
        doc: Root selection of the shelf document.
        selector: CSS selector marking a book row.

    Returns:
        Row selections; empty when the page lists no books.

    Raises:
        InvalidDocument: If ``doc`` is not a selection or the query backend
            fails to select rows from it.
    """
    if not isinstance(doc, Selection):
        raise InvalidDocument(f"Expected a Selection, got {type(doc).__name__}")

    try:
        rows = doc.find(selector).get()
    except Exception as e:
        # Any backend may be injected, so its failures are not known here
        raise InvalidDocument(f"Cannot select rows with {selector!r}: {e}") from e

    logger.debug("Selected %d rows with %r", len(rows), selector)
    return rows
