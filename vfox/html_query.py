"""jQuery-like querying of HTML documents with CSS selectors."""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from bs4 import BeautifulSoup, Tag


class Selection:
    """An ordered set of elements of one document."""

    def __init__(self, nodes: Iterable[Tag], root: Tag) -> None:
        self._nodes = list(nodes)
        self._root = root

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Selection({len(self._nodes)} elements)"

    def text(self) -> str:
        """Return the combined text of all elements and their descendants."""
        return "".join(node.get_text() for node in self._nodes)

    def html(self) -> str:
        """Return the inner HTML of the first element, or "" when empty."""
        if not self._nodes:
            return ""
        return "".join(str(child) for child in self._nodes[0].contents)

    def find(self, selector: str) -> "Selection":
        """Return the descendants matching selector, in document order."""
        matched: dict[int, Tag] = {}
        for node in self._nodes:
            for found in node.select(selector):
                matched.setdefault(id(found), found)
        if len(self._nodes) <= 1:
            return Selection(matched.values(), self._root)
        ordered = [
            node
            for node in self._root.descendants
            if isinstance(node, Tag) and id(node) in matched
        ]
        return Selection(ordered, self._root)

    def first(self) -> "Selection":
        """Return a selection of the first element only."""
        return Selection(self._nodes[:1], self._root)

    def last(self) -> "Selection":
        """Return a selection of the last element only."""
        return Selection(self._nodes[-1:], self._root)

    def each(self, func: Callable[[int, "Selection"], object]) -> None:
        """Call func(index, selection) for each element; index starts at 1."""
        for index, node in enumerate(self._nodes, start=1):
            func(index, Selection([node], self._root))

    def attr(self, name: str) -> Optional[str]:
        """Return the attribute of the first element, or None if it is absent."""
        if not self._nodes:
            return None
        value = self._nodes[0].get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    def eq(self, index: int) -> "Selection":
        """Return the element at index; negative counts from the end.

        Out-of-range indices give an empty selection.
        """
        if index < 0:
            index += len(self._nodes)
        if 0 <= index < len(self._nodes):
            return Selection([self._nodes[index]], self._root)
        return Selection([], self._root)


class Document:
    """A parsed HTML document."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup

    def find(self, selector: str) -> Selection:
        """Return the elements matching selector, in document order."""
        return Selection(self._soup.select(selector), self._soup)

    def __repr__(self) -> str:
        return "Document()"


def parse(text: str) -> Document:
    """Parse HTML text into a Document."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    return Document(BeautifulSoup(text, "html.parser", multi_valued_attributes=None))