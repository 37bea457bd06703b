"""Book record data model."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Stand-in for a date or year that could not be parsed
PLACEHOLDER = "?"


class BookRecord(BaseModel):
    """One book row from a shelf page, normalized.

    Field names are snake_case in Python; ``model_dump(by_alias=True)``
    produces the camelCase keys used by the JSON output (``seriesEntry``,
    ``seriesNumber``). ``None`` in ``pages``, ``rating`` and ``goodreads_id``
    marks a value that could not be parsed as a number.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    series_entry: str = Field(alias="seriesEntry")
    series: str | None = None
    series_number: str | None = Field(default=None, alias="seriesNumber")
    author: str = ""
    pages: int | None = None
    rating: int | None = None
    read: tuple[str, ...] = ()  # one entry per finished read, "?" if unknown
    start: tuple[str, ...] = ()
    published: int | Literal["?"] = PLACEHOLDER
    goodreads: str = ""
    goodreads_id: int | None = None
    cover: str = ""
    review: str | None = None
    spoiler: bool = False
    slug: str = ""

    def to_json_dict(self) -> dict:
        """Return a JSON-ready dict keyed by the serialized field names."""
        return self.model_dump(mode="json", by_alias=True)

    @model_validator(mode="after")
    def _series_number_needs_series(self) -> "BookRecord":
        if self.series_number is not None and self.series is None:
            raise ValueError("series_number requires a series")
        return self
