import pytest

from negi.strlist import LINE_WRAP, StrList, wrap_text


def test_push_is_stack_order():
    sl = StrList()
    sl.push("a")
    sl.push("b")
    assert sl.pop() == "b"
    assert sl.pop() == "a"
    assert sl.pop() is None


def test_push_back_is_queue_order():
    sl = StrList()
    for s in ("x", "y", "z"):
        assert sl.push_back(s) == 1
    assert sl.to_argv() == ["x", "y", "z"]
    assert len(sl) == 0


def test_push_returns_length():
    sl = StrList()
    assert sl.push("hello") == 5
    assert len(sl) == 1


def test_to_argv_empties_list():
    sl = StrList(["p", "q"])
    sl.push("o")
    assert sl.to_argv() == ["o", "p", "q"]
    assert sl.pop() is None


def test_wrap_breaks_at_space():
    assert wrap_text("hello world", 5) == ["hello", "world"]


def test_wrap_short_text_single_line():
    assert wrap_text("hello world", 20) == ["hello world"]


def test_wrap_empty_text():
    assert wrap_text("", 10) == []


def test_wrap_default_width_fits_short_text():
    text = "a" * (LINE_WRAP - 1)
    assert wrap_text(text) == [text]
    assert wrap_text(text, -1) == [text]


def test_wrap_rejects_negative_width():
    with pytest.raises(ValueError):
        wrap_text("abc", -5)


def test_wrap_long_word_keeps_all_characters():
    text = "abcdefghijklmnopqrstuvwxyz"
    lines = wrap_text(text, 3)
    assert "".join(lines) == text
    assert len(lines) > 1


def test_wrap_words_preserved():
    text = "the quick brown fox jumps over the lazy dog again and again"
    lines = wrap_text(text, 12)
    assert " ".join(lines).split() == text.split()
    assert all(not line.endswith(" ") for line in lines)


def test_wrap_breaks_after_clause_punctuation():
    lines = wrap_text("one,two,three,four", 6)
    assert "".join(lines) == "one,two,three,four"
    assert lines[0].endswith(",")


def test_wrap_wide_characters_count_double():
    text = "\u4e00" * 10
    lines = wrap_text(text, 4)
    assert "".join(lines) == text
    assert len(lines) > 2


def test_read_line_appends_lines():
    sl = StrList()
    sl.push_back("first")
    sl.read_line("hello world", 5)
    assert sl.to_argv() == ["first", "hello", "world"]