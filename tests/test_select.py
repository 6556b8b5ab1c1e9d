import io
from contextlib import contextmanager

import pytest

from vfox.select import KV, PageKVSelect, rank_find_fold

GREEN_ARROW = "\x1b[92m-> \x1b[0m"
FOOTER = "Press ↑/↓ to select and press ←/→ to page, and press Enter to confirm\n"


class FakeKey(str):
    def __new__(cls, text="", name=None, is_sequence=False):
        key = super().__new__(cls, text)
        key.name = name
        key.is_sequence = is_sequence
        return key


def seq(name):
    return FakeKey("", name=name, is_sequence=True)


ENTER = FakeKey("\r", name="KEY_ENTER", is_sequence=True)
DOWN = seq("KEY_DOWN")
UP = seq("KEY_UP")
LEFT = seq("KEY_LEFT")
RIGHT = seq("KEY_RIGHT")
BACKSPACE = FakeKey("\x7f", name="KEY_BACKSPACE", is_sequence=True)


class FakeTerminal:
    clear_eos = ""

    def __init__(self, keys):
        self._keys = list(keys)

    def move_up(self, n):
        return ""

    @contextmanager
    def cbreak(self):
        yield

    @contextmanager
    def hidden_cursor(self):
        yield

    def inkey(self):
        return self._keys.pop(0)


def source_items():
    return [KV(str(i), str(i)) for i in range(1, 6)]


def paging_source(source):
    def func(page, size, options):
        start = page * size
        if start > len(source):
            raise IndexError("page is out of range")
        return source[start:start + size]

    return func


def make_select(keys, **kwargs):
    kwargs.setdefault("options", source_items())
    kwargs.setdefault("size", 3)
    return PageKVSelect(terminal=FakeTerminal(keys), output=io.StringIO(), **kwargs)


def test_rank_find_fold_matches_in_order():
    ranks = rank_find_fold("ab", ["abc", "xaxb", "ba"])
    assert [(r.target, r.distance, r.original_index) for r in ranks] == [
        ("abc", 1, 0),
        ("xaxb", 2, 1),
    ]


def test_rank_find_fold_ignores_case():
    ranks = rank_find_fold("AB", ["abc"])
    assert [r.target for r in ranks] == ["abc"]
    assert ranks[0].distance == 3


def test_rank_find_fold_empty_source_matches_all():
    ranks = rank_find_fold("", ["a", "bcd"])
    assert [(r.target, r.distance) for r in ranks] == [("a", 1), ("bcd", 3)]


def test_search_without_filter_keeps_order():
    s = PageKVSelect(options=source_items())
    s.search()
    assert [o.value for o in s.search_options] == ["1", "2", "3", "4", "5"]


def test_search_puts_substring_matches_first():
    s = PageKVSelect(options=[KV("a", "1.20.0"), KV("b", "2.1"), KV("c", "21.0.1")])
    s.fuzzy_search_string = "21"
    s.search()
    assert [o.key for o in s.search_options] == ["c", "b"]


def test_load_page_data_pages():
    s = PageKVSelect(options=source_items(), size=3)
    s.search()
    s.load_page_data(0)
    assert [o.value for o in s.page_options] == ["1", "2", "3"]
    assert s.is_last_page is False
    s.load_page_data(1)
    assert [o.value for o in s.page_options] == ["4", "5"]
    assert s.is_last_page is True


def test_load_page_data_reraises_source_error():
    s = PageKVSelect(options=source_items(), size=3, source_func=paging_source(source_items()))
    s.search()
    s.index = 2
    with pytest.raises(IndexError):
        s.load_page_data(5)
    assert s.index == 0


def test_change_index_wraps():
    s = PageKVSelect(options=source_items(), size=3)
    s.search()
    s.load_page_data(0)
    s.change_index(-1)
    assert s.index == 2
    s.change_index(1)
    assert s.index == 0


def test_render_without_filter():
    s = PageKVSelect(options=source_items()[:2], size=3, top_text="Pick")
    s.search()
    s.load_page_data(0)
    assert s.render() == f"Pick:\n{GREEN_ARROW} 1\n   2\n" + FOOTER
    assert s.result == KV("1", "1")


def test_render_with_filter_header():
    s = PageKVSelect(options=[KV("x", "x")], filter=True, top_text="Pick")
    s.fuzzy_search_string = "x"
    s.search()
    s.load_page_data(0)
    assert s.render().startswith("Pick \x1b[92m[type to search]\x1b[0m: x\n")


def test_render_no_data():
    s = PageKVSelect(options=source_items(), source_func=lambda page, size, options: [])
    s.search()
    s.load_page_data(0)
    assert s.render() == "No data\n"


def test_show_pages_and_selects():
    s = make_select([RIGHT, DOWN, ENTER], source_func=paging_source(source_items()))
    assert s.show() == KV("5", "5")


def test_show_left_returns_to_first_page():
    s = make_select([RIGHT, LEFT, UP, ENTER])
    assert s.show() == KV("3", "3")


def test_show_filter_typing_and_backspace():
    s = make_select([FakeKey("4"), ENTER], filter=True)
    assert s.show() == KV("4", "4")
    s2 = make_select([FakeKey("4"), BACKSPACE, DOWN, ENTER], filter=True)
    assert s2.show() == KV("2", "2")


def test_show_ignores_typing_without_filter():
    s = make_select([FakeKey("4"), ENTER])
    assert s.show() == KV("1", "1")
    assert s.fuzzy_search_string == ""


def test_show_ctrl_c_exits_with_zero():
    s = make_select([FakeKey("\x03")])
    with pytest.raises(SystemExit) as info:
        s.show()
    assert info.value.code == 0
    assert s.result is None


def test_show_writes_rendered_list():
    s = make_select([ENTER], top_text="Pick")
    s.show()
    assert f"Pick:\n{GREEN_ARROW} 1\n   2\n   3\n" in s.output.getvalue()