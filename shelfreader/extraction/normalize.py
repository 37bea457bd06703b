"""Pure string normalizers for shelf row fields.

None of these functions know about markup. Each one returns a defined
fallback (``None``, ``""`` or the input unchanged) instead of raising.
"""

import html
import re

SPOILER_MARKER = "**spoiler alert**"
COVER_THUMBNAIL_TOKEN = "Y75"
COVER_LARGE_TOKEN = "X315"

_WHITESPACE_RE = re.compile(r"\s+")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_SLUG_RE = re.compile(r"[^a-z0-9]+")
_PARENTHESIZED_RE = re.compile(r"\((.*)\)")
_SERIES_NUMBER_RE = re.compile(r"#(\d+)")
_SERIES_SUFFIX_RE = re.compile(r", #\d+")
_AUTHOR_MARKER_RE = re.compile(r" \*$")
_BR_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_TAG_RE = re.compile(r"<.*?>", re.DOTALL)


def collapse_whitespace(text: str) -> str:
    """Trim and squeeze every whitespace run to a single space."""
    return _WHITESPACE_RE.sub(" ", text.strip())


def parse_int(text: str | None) -> int | None:
    """Parse the leading base-10 integer of ``text``.

    Trailing garbage is ignored (``"352 pp"`` gives 352), like a lenient
    ``parseInt``. Text without leading digits gives ``None``.
    """
    if not text:
        return None
    match = _LEADING_INT_RE.match(text)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Digit runs past the interpreter's int conversion limit
        return None


def slugify(title: str) -> str:
    """Lowercase, hyphenate non-alphanumeric runs, drop one trailing hyphen."""
    slug = _SLUG_RE.sub("-", title.lower())
    return slug[:-1] if slug.endswith("-") else slug


def unwrap_parentheses(text: str) -> str:
    """Replace the outermost ``(...)`` span with its contents."""
    return _PARENTHESIZED_RE.sub(r"\1", text, count=1)


def split_series(title: str, annotation: str) -> tuple[str, str | None, str | None]:
    """Separate a title from its series annotation.

    Args:
        title: Full title text, possibly containing ``(Series, #N)``.
        annotation: Series annotation text, with or without parentheses.
            Empty when the row has none.

    Returns:
        ``(series_entry, series, series_number)``. ``series_entry`` is the
        title with the parenthesized annotation removed. When several
        ``#N`` markers are present the last one is the volume number and
        only the first ``", #N"`` is cut from the series name.
    """
    series = unwrap_parentheses(annotation)
    if not series:
        return title.strip(), None, None

    series_entry = title.replace(f"({series})", "").strip()
    numbers = _SERIES_NUMBER_RE.findall(series)
    series_number = numbers[-1] if numbers else None
    series = _SERIES_SUFFIX_RE.sub("", series, count=1).strip()
    return series_entry, series, series_number


def reorder_author(name: str) -> str:
    """Turn ``"Last, First"`` into ``"First Last"``.

    A trailing ``" *"`` marker is dropped first. Segments split on ``", "``
    are simply reversed, so three-part names are not treated specially.
    """
    name = _AUTHOR_MARKER_RE.sub("", name)
    return " ".join(reversed(name.split(", ")))


def goodreads_id_from_href(href: str) -> int | None:
    """Book id from a path like ``/book/show/12345-some-title``."""
    segment = href.split("/")[-1]
    return parse_int(segment.split("-")[0])


def enlarge_cover(url: str, small: str = COVER_THUMBNAIL_TOKEN, large: str = COVER_LARGE_TOKEN) -> str:
    """Swap the first thumbnail size token for the larger one."""
    return url.replace(small, large, 1).strip()


def clean_review(markup: str, marker: str = SPOILER_MARKER) -> tuple[str | None, bool]:
    """Reduce review markup to plain text and detect a spoiler marker.

    ``<br>`` tags become newlines, every other tag is removed and entities
    are unescaped.

    Returns:
        ``(review, spoiler)``; ``review`` is ``None`` when nothing is left.
    """
    text = _BR_RE.sub("\n", markup)
    text = _TAG_RE.sub("", text)
    text = html.unescape(text).strip()

    spoiler = text.startswith(marker)
    if spoiler:
        text = text.replace(marker, "", 1).strip()

    return (text or None), spoiler
