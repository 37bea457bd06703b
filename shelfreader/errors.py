"""Exceptions raised by the shelf extraction pipeline."""


class InvalidDocument(ValueError):
    """The shelf document is missing or cannot be queried for rows."""
