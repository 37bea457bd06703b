"""Shelf page to book records."""

import logging

from shelfreader.config import ExtractionConfig
from shelfreader.errors import InvalidDocument
from shelfreader.extraction import fields
from shelfreader.extraction.normalize import slugify
from shelfreader.extraction.query import Selection, load_document
from shelfreader.extraction.rows import select_rows
from shelfreader.models.record import BookRecord

logger = logging.getLogger(__name__)


class ShelfParser:
    """Turns a Goodreads shelf page into ``BookRecord`` objects.

    The page is accepted either as markup or as a ``Selection`` the caller
    already built, so the same parser serves a saved file, a fetched body
    or any other query backend implementing ``Selection``.

    Args:
        config: ExtractionConfig with the base URL, row selector, cover
                size tokens, spoiler marker and markup parser.
    """

    def __init__(self, config: ExtractionConfig | None = None) -> None:
        self._config = config or ExtractionConfig()

    def parse(self, document: str | bytes | Selection) -> list[BookRecord]:
        """Extract one record per shelf row.

        Args:
            document: Page markup or a root ``Selection``.

        Returns:
            Records in document order; empty if the page has no rows.

        Raises:
            InvalidDocument: If the document is missing or not queryable.
        """
        doc = self._load(document)
        rows = select_rows(doc, self._config.row_selector)
        records = [self.parse_row(row) for row in rows]
        logger.info("Extracted %d records", len(records))
        return records

    def parse_row(self, row: Selection) -> BookRecord:
        """Build the record for a single row selection."""
        cfg = self._config
        title = fields.extract_title(row)
        series_entry, series, series_number = fields.extract_series(row, title)
        goodreads, goodreads_id = fields.extract_link(row, cfg.base_url)
        review, spoiler = fields.extract_review(row, cfg.spoiler_marker)

        return BookRecord(
            title=title,
            series_entry=series_entry,
            series=series,
            series_number=series_number,
            author=fields.extract_author(row),
            pages=fields.extract_pages(row),
            rating=fields.extract_rating(row),
            read=fields.extract_read(row),
            start=fields.extract_start(row),
            published=fields.extract_published(row),
            goodreads=goodreads,
            goodreads_id=goodreads_id,
            cover=fields.extract_cover(row, cfg.cover_thumbnail_token, cfg.cover_large_token),
            review=review,
            spoiler=spoiler,
            slug=slugify(title),
        )

    def _load(self, document: str | bytes | Selection) -> Selection:
        if isinstance(document, Selection):
            return document
        if isinstance(document, (str, bytes)):
            return load_document(document, self._config.parser)
        raise InvalidDocument(
            f"Expected markup or a Selection, got {type(document).__name__}"
        )


def parse_books(
    document: str | bytes | Selection, config: ExtractionConfig | None = None
) -> list[BookRecord]:
    """Convenience wrapper around ``ShelfParser(config).parse(document)``."""
    return ShelfParser(config).parse(document)
