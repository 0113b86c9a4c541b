"""Unicode character predicates used when wrapping text."""

from __future__ import annotations

import unicodedata

_END_OF_CLAUSE = frozenset(
    ",.;:!?"
    "\u3001\u3002"  # ideographic comma and full stop
    "\uff0c\uff0e\uff1b\uff1a\uff01\uff1f"  # fullwidth forms
    "\u2026"  # ellipsis
)


def _as_char(c: int | str) -> str:
    if isinstance(c, int):
        return chr(c)
    if len(c) != 1:
        raise ValueError("expected a single character")
    return c


def iseoc(c: int | str) -> bool:
    """True if c ends a clause: comma, period, question mark and the like."""
    return _as_char(c) in _END_OF_CLAUSE


def iswide(c: int | str) -> bool:
    """True if c takes two columns on a terminal."""
    return unicodedata.east_asian_width(_as_char(c)) in ("W", "F")