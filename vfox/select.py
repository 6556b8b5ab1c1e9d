"""A paged, fuzzy-filterable selection list shown in the terminal."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence, TextIO

_LIGHT_GREEN = "\x1b[92m"
_RESET = "\x1b[0m"
_FOOTER = "Press ↑/↓ to select and press ←/→ to page, and press Enter to confirm\n"
_CTRL_C = "\x03"

SourceFunc = Callable[[int, int, List["KV"]], List["KV"]]


def _light_green(text: str) -> str:
    return f"{_LIGHT_GREEN}{text}{_RESET}"


@dataclass(frozen=True)
class KV:
    """One selectable entry: an identifying key and the text shown."""

    key: str
    value: str


@dataclass(frozen=True)
class Rank:
    """A fuzzy match of source inside target."""

    source: str
    target: str
    distance: int
    original_index: int


def _levenshtein(a: str, b: str) -> int:
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (char_a != char_b),
                )
            )
        previous = current
    return previous[-1]


def _match_fold(source: str, target: str) -> bool:
    remaining = iter(target.casefold())
    return all(char in remaining for char in source.casefold())


def rank_find_fold(source: str, targets: Sequence[str]) -> list[Rank]:
    """Return the targets that contain source's characters in order, ignoring case.

    Each match carries its edit distance to source and its position in targets.
    """
    return [
        Rank(source, target, _levenshtein(source, target), index)
        for index, target in enumerate(targets)
        if _match_fold(source, target)
    ]


def _sort_key(rank: Rank) -> tuple[int, int]:
    # Exact substring matches come first, then the closest by distance.
    return (0 if rank.source in rank.target else 1, rank.distance)


def _paginate(page: int, size: int, options: list[KV]) -> list[KV]:
    start = page * size
    return options[start:start + size]


class _Area:
    """A block of terminal lines that is redrawn in place."""

    def __init__(self, terminal: Any, stream: TextIO) -> None:
        self._terminal = terminal
        self._stream = stream
        self._lines = 0

    def update(self, content: str) -> None:
        prefix = ""
        if self._lines:
            prefix = "\r" + str(self._terminal.move_up(self._lines))
        self._stream.write(prefix + str(self._terminal.clear_eos) + content)
        self._stream.flush()
        self._lines = content.count("\n")


@dataclass
class PageKVSelect:
    """An interactive list that pages through options and can filter them."""

    options: list[KV] = field(default_factory=list)
    size: int = 10
    filter: bool = False
    source_func: Optional[SourceFunc] = None
    top_text: str = ""
    terminal: Any = None
    output: Optional[TextIO] = None
    fuzzy_search_string: str = ""
    index: int = field(default=0, init=False)
    search_options: list[KV] = field(default_factory=list, init=False)
    page_options: list[KV] = field(default_factory=list, init=False)
    result: Optional[KV] = field(default=None, init=False)
    is_last_page: bool = field(default=False, init=False)
    _page: int = field(default=0, init=False, repr=False)

    def change_index(self, value: int) -> None:
        """Move the cursor by value, wrapping around the current page."""
        self.index += value
        if self.index < 0:
            self.index = len(self.page_options) - 1
        if self.index > len(self.page_options) - 1:
            self.index = 0

    def search(self) -> None:
        """Refill search_options with the options matching the filter text."""
        by_value = {option.value: option for option in self.options}
        ranked = rank_find_fold(self.fuzzy_search_string, [o.value for o in self.options])
        if self.fuzzy_search_string:
            ranked.sort(key=_sort_key)
        self.search_options = [by_value[rank.target] for rank in ranked]

    def load_page_data(self, page: int) -> None:
        """Load one page of search results; errors of the source are re-raised."""
        source = self.source_func or _paginate
        error: Optional[Exception] = None
        try:
            options = source(page, self.size, self.search_options) or []
        except Exception as err:  # state is still updated before re-raising
            options = []
            error = err
        self.index = 0
        if options:
            self.page_options = list(options)
        if not self.search_options:
            self.page_options = []
        self.is_last_page = (page + 1) * self.size >= len(self.search_options)
        if error is not None:
            raise error

    def render(self) -> str:
        """Return the text of the list as it should appear now."""
        if self.filter:
            content = (
                f"{self.top_text} {_light_green('[type to search]')}: "
                f"{self.fuzzy_search_string}\n"
            )
        else:
            content = f"{self.top_text}:\n"
        if not self.page_options and self.search_options:
            return "No data\n"
        if self.page_options:
            self.result = self.page_options[self.index]
        for i, option in enumerate(self.page_options):
            if i == self.index:
                content += f"{_light_green('-> ')} {option.value}\n"
            else:
                content += f"   {option.value}\n"
        return content + _FOOTER

    def _reload(self, area: _Area, page: int) -> None:
        self._page = page
        self.load_page_data(page)
        area.update(self.render())

    def _on_key(self, key: Any, area: _Area) -> bool:
        """Handle one key; return True when the selection is finished."""
        name = getattr(key, "name", None)
        text = str(key)
        if text == _CTRL_C:
            raise KeyboardInterrupt
        if name in ("KEY_BACKSPACE", "KEY_DELETE") or text in ("\x7f", "\b"):
            self.fuzzy_search_string = self.fuzzy_search_string[:-1]
            self.index = 0
            self.search()
            self._reload(area, 0)
        elif name == "KEY_DOWN":
            self.change_index(1)
            area.update(self.render())
        elif name == "KEY_UP":
            self.change_index(-1)
            area.update(self.render())
        elif name == "KEY_LEFT":
            if self._page > 0:
                self._reload(area, self._page - 1)
        elif name == "KEY_RIGHT":
            if not self.is_last_page:
                self._reload(area, self._page + 1)
        elif name == "KEY_ENTER" or text in ("\r", "\n"):
            if self.page_options:
                self.result = self.page_options[self.index]
                return True
        elif not getattr(key, "is_sequence", False) and text and text.isprintable():
            if self.filter:
                self.fuzzy_search_string += text
                self.index = 0
                self.search()
                self._reload(area, 0)
        return False

    def show(self) -> Optional[KV]:
        """Run the interactive list and return the chosen entry.

        Ctrl-C leaves the program with exit status 0.
        """
        if self.terminal is None:
            from blessed import Terminal

            self.terminal = Terminal()
        terminal = self.terminal
        area = _Area(terminal, self.output or sys.stdout)

        self.search()
        self._page = 0
        self.load_page_data(0)
        area.update(self.render())
        try:
            with terminal.cbreak(), terminal.hidden_cursor():
                while not self._on_key(terminal.inkey(), area):
                    pass
        except KeyboardInterrupt:
            self.result = None
            raise SystemExit(0) from None
        return self.result