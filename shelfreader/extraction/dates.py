"""Date parsing for shelf read/started/published fields.

Goodreads prints dates as "Mar 12, 2021", "Mar 2021" or just "2021",
and "not set" when the reader left it blank. Every event date is parsed
in two attempts, first with a ``", Z"`` suffix and then with ``", +0"``.
The second attempt also accepts numeric and day-first spellings. The
order never changes, so a text that both attempts understand always
takes the first reading.
"""

import logging
import re
from datetime import datetime, timezone

from shelfreader.models.record import PLACEHOLDER

logger = logging.getLogger(__name__)

# strptime %Y needs four digits; older works print "800" or "45"
_BARE_YEAR_RE = re.compile(r"^\d{1,4}$")

_NAMED_FORMATS: tuple[str, ...] = (
    "%b %d, %Y",
    "%B %d, %Y",
    "%b %Y",
    "%B %Y",
    "%Y",
)

_NUMERIC_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%d %b %Y",
    "%d %B %Y",
)

# (suffix, formats) in the order they are tried
_ATTEMPTS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (", Z", _NAMED_FORMATS),
    (", +0", _NAMED_FORMATS + _NUMERIC_FORMATS),
)


def _parse_with_suffix(candidate: str, suffix: str, formats: tuple[str, ...]) -> datetime | None:
    for fmt in formats:
        try:
            parsed = datetime.strptime(candidate, fmt + suffix)
        except ValueError:
            continue
        return parsed.replace(tzinfo=timezone.utc)
    return None


def parse_event_date(text: str) -> datetime | None:
    """Parse a shelf date into a UTC datetime.

    Args:
        text: Raw date text from the page.

    Returns:
        The parsed datetime, or None if neither attempt understands it.
    """
    stripped = text.strip()
    for suffix, formats in _ATTEMPTS:
        parsed = _parse_with_suffix(stripped + suffix, suffix, formats)
        if parsed is not None:
            return parsed

    logger.debug("Unparsable date text: %r", text)
    return None


def format_timestamp(value: datetime | None) -> str:
    """Serialize as ``YYYY-MM-DDTHH:MM:SS.mmmZ``, or the placeholder."""
    if value is None:
        return PLACEHOLDER
    utc = value.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def event_timestamp(text: str) -> str:
    """Parse and serialize one read/started event date."""
    return format_timestamp(parse_event_date(text))


def publication_year(text: str) -> int | str:
    """Year of a publication date, or the placeholder."""
    text = text.strip()
    if _BARE_YEAR_RE.match(text):
        return int(text) or PLACEHOLDER
    parsed = parse_event_date(text) if text else None
    if parsed is None or not parsed.year:
        return PLACEHOLDER
    return parsed.year
