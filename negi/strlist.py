"""A double-ended list of strings and a terminal-width line wrapper."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

from .unicode import iseoc, iswide

LINE_WRAP = 80
WORD_AVG_LEN = 8

_C_SPACE = " \t\n\v\f\r"


def _isspace(c: str) -> bool:
    if ord(c) < 0x80:
        return c in _C_SPACE
    return c.isspace()


def _advance(text: str, pos: int, limit: int) -> int:
    count = 0
    while pos < len(text) and count < limit:
        count += 2 if iswide(text[pos]) else 1
        pos += 1
    return pos


def _rewind(text: str, pos: int, head: int, limit: int) -> int:
    start = pos
    count = 0
    while pos > head and count < limit:
        c = text[pos]
        if _isspace(c) or iseoc(c):
            return pos
        count += 2 if iswide(c) else 1
        pos -= 1
    return start


def _resolve_wrap(wrap: int | None) -> int:
    if wrap is None or wrap == -1:
        return LINE_WRAP
    if wrap < 0:
        raise ValueError(f"invalid wrap width: {wrap}")
    return wrap


def wrap_text(text: str, wrap: int | None = None) -> list[str]:
    """Split text into lines of about wrap columns, breaking at word ends.

    Wide characters count as two columns. Lines break after whitespace or
    clause-ending punctuation found near the limit; a word too long to
    break is cut.
    """
    wrap = _resolve_wrap(wrap)
    lines = []
    tail = len(text)
    start = 0
    nxt = 0
    while nxt < tail:
        nxt = _advance(text, nxt, wrap + 1)
        prev = nxt
        if prev < tail:
            prev = _rewind(text, prev, start, WORD_AVG_LEN)
            nxt = prev + 1
        while nxt < tail and text[nxt] in _C_SPACE:
            nxt += 1
        end = prev if prev < tail and _isspace(text[prev]) else nxt
        lines.append(text[start:end])
        start = nxt
    return lines


class StrList:
    """Strings held in order; push adds at the front, push_back at the end."""

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._items: deque[str] = deque(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"StrList({list(self._items)!r})"

    def push(self, s: str) -> int:
        """Add s at the front; return its length."""
        self._items.appendleft(s)
        return len(s)

    def push_back(self, s: str) -> int:
        """Add s at the end; return its length."""
        self._items.append(s)
        return len(s)

    def pop(self) -> str | None:
        """Remove and return the front string, or None when empty."""
        if not self._items:
            return None
        return self._items.popleft()

    def read_line(self, text: str, wrap: int | None = None) -> None:
        """Wrap text and append each resulting line."""
        self._items.extend(wrap_text(text, wrap))

    def to_argv(self) -> list[str]:
        """Remove every string and return them front to back."""
        argv = list(self._items)
        self._items.clear()
        return argv