"""Per-row field extraction.

Each extractor takes a row ``Selection`` and returns a normalized value.
Sub-fields live in cells named by class (``<td class="field title">``)
whose text sits in a ``.value`` child; a key containing a space is used
as a CSS selector verbatim instead.
"""

import logging

from shelfreader.extraction import normalize
from shelfreader.extraction.dates import event_timestamp, publication_year
from shelfreader.extraction.query import Selection

logger = logging.getLogger(__name__)

SERIES_SELECTOR = ".title .value .darkGreyText"
LINK_SELECTOR = ".title a"
RATING_SELECTOR = ".rating .stars"
COVER_SELECTOR = ".cover img"
READ_DATES_SELECTOR = ".date_read span"
STARTED_DATES_SELECTOR = ".date_started span"
REVIEW_SELECTOR = "td.review .value span:last-of-type"


def field_text(row: Selection, key: str) -> str:
    """Whitespace-normalized text of a row cell.

    Args:
        row: The row selection.
        key: Cell class name, or a full CSS selector if it contains a space.

    Returns:
        The cell text, or an empty string when the cell is missing.
    """
    selector = key if " " in key else f".{key} .value"
    return normalize.collapse_whitespace(row.find(selector).text())


def extract_title(row: Selection) -> str:
    return field_text(row, "title")


def extract_series(row: Selection, title: str) -> tuple[str, str | None, str | None]:
    """Return ``(series_entry, series, series_number)`` for the row."""
    return normalize.split_series(title, field_text(row, SERIES_SELECTOR))


def extract_author(row: Selection) -> str:
    return normalize.reorder_author(field_text(row, "author"))


def extract_pages(row: Selection) -> int | None:
    return normalize.parse_int(field_text(row, "num_pages"))


def extract_rating(row: Selection) -> int | None:
    return normalize.parse_int(row.find(RATING_SELECTOR).attr("data-rating"))


def extract_event_dates(row: Selection, selector: str) -> tuple[str, ...]:
    """Timestamps for every date element under ``selector``, in order."""
    return tuple(event_timestamp(span.text()) for span in row.find(selector))


def extract_read(row: Selection) -> tuple[str, ...]:
    return extract_event_dates(row, READ_DATES_SELECTOR)


def extract_start(row: Selection) -> tuple[str, ...]:
    return extract_event_dates(row, STARTED_DATES_SELECTOR)


def extract_published(row: Selection) -> int | str:
    return publication_year(field_text(row, "date_pub"))


def extract_link(row: Selection, base_url: str) -> tuple[str, int | None]:
    """Absolute book URL and numeric Goodreads id from the title link."""
    href = row.find(LINK_SELECTOR).attr("href") or ""
    if not href:
        logger.debug("Row has no title link")
    return f"{base_url}{href}", normalize.goodreads_id_from_href(href)


def extract_cover(row: Selection, small: str, large: str) -> str:
    src = row.find(COVER_SELECTOR).attr("src") or ""
    return normalize.enlarge_cover(src, small, large)


def extract_review(row: Selection, marker: str) -> tuple[str | None, bool]:
    """Plain review text and spoiler flag from the last review span."""
    markup = row.find(REVIEW_SELECTOR).last().html()
    return normalize.clean_review(markup, marker)
