"""Markup query adapter over BeautifulSoup.

Everything downstream of this module works on strings, numbers and
``Selection`` objects; only this module knows about tags and parsers.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

DEFAULT_PARSER = "lxml"


class QueryError(Exception):
    """A selector could not be applied to the document."""


class Selection(ABC):
    """An ordered set of matched elements.

    ``text()`` joins the text of every element. ``html()`` and ``attr()``
    read only the first element, returning ``""`` and ``None`` respectively
    when nothing is matched.
    """

    @abstractmethod
    def find(self, selector: str) -> "Selection":
        """Select descendants of every element matching a CSS selector.

        Raises:
            QueryError: If the selector cannot be applied.
        """

    @abstractmethod
    def text(self) -> str:
        """Concatenated text content of all matched elements."""

    @abstractmethod
    def html(self) -> str:
        """Inner markup of the first matched element."""

    @abstractmethod
    def attr(self, name: str) -> str | None:
        """Attribute value of the first matched element."""

    @abstractmethod
    def get(self) -> list["Selection"]:
        """Split into one single-element selection per matched element."""

    @abstractmethod
    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator["Selection"]:
        return iter(self.get())

    def __bool__(self) -> bool:
        return len(self) > 0

    def last(self) -> "Selection":
        """Selection holding only the last matched element (empty if none)."""
        items = self.get()
        return items[-1] if items else self


class SoupSelection(Selection):
    """``Selection`` backed by BeautifulSoup tags and soupsieve selectors."""

    def __init__(self, elements: list[Tag | BeautifulSoup]) -> None:
        self._elements = elements

    def find(self, selector: str) -> "SoupSelection":
        found: list[Tag] = []
        seen: set[int] = set()
        for element in self._elements:
            try:
                matches = element.select(selector)
            except SelectorSyntaxError as e:
                raise QueryError(f"Invalid selector {selector!r}: {e}") from e
            for match in matches:
                # The same tag can be reached from two overlapping parents
                if id(match) not in seen:
                    seen.add(id(match))
                    found.append(match)
        return SoupSelection(found)

    def text(self) -> str:
        return "".join(element.get_text() for element in self._elements)

    def html(self) -> str:
        if not self._elements:
            return ""
        return self._elements[0].decode_contents()

    def attr(self, name: str) -> str | None:
        if not self._elements:
            return None
        value = self._elements[0].get(name)
        if isinstance(value, list):
            # bs4 splits multi-valued attributes such as class
            return " ".join(value)
        return value

    def get(self) -> list["SoupSelection"]:
        return [SoupSelection([element]) for element in self._elements]

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"SoupSelection({len(self._elements)} elements)"


def load_document(markup: str | bytes, parser: str = DEFAULT_PARSER) -> SoupSelection:
    """Parse markup into a root selection.

    Args:
        markup: The HTML document as text or raw bytes.
        parser: BeautifulSoup tree builder name ("lxml", "html.parser", ...).

    Returns:
        A selection holding the document root.
    """
    soup = BeautifulSoup(markup, parser)
    return SoupSelection([soup])
