"""String helpers working on UTF-8 bytes and UTF-16 code units."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from .chartype import CType, MbType, ctype_of, is_surrogate, mb_type

_S = TypeVar("_S", str, bytes)


def strskip(s1: _S, s2: _S) -> _S | None:
    """Return s1 with the prefix s2 removed, or None if s1 lacks it."""
    if s1.startswith(s2):
        return s1[len(s2):]
    return None


def _seq_len(data: bytes, pos: int) -> int:
    kind = mb_type(data[pos])
    if kind in (MbType.CONTINUATION, MbType.INVALID):
        raise ValueError(f"invalid UTF-8 lead byte at offset {pos}")
    if pos + kind > len(data):
        raise ValueError(f"truncated UTF-8 sequence at offset {pos}")
    return int(kind)


def mbslen(data: bytes) -> int:
    """Count the characters of UTF-8 data by their lead bytes."""
    count = 0
    pos = 0
    while pos < len(data):
        pos += _seq_len(data, pos)
        count += 1
    return count


def mbtowc(seq: bytes) -> int:
    """Decode the UTF-8 sequence at the start of seq to a code point."""
    if not seq:
        return 0
    kind = mb_type(seq[0])
    if kind not in (MbType.TWO, MbType.THREE, MbType.FOUR):
        return seq[0]
    if len(seq) < kind:
        raise ValueError("truncated UTF-8 sequence")

    shift = 6
    mask = 0x1F
    res = 0
    if kind == MbType.FOUR:
        res |= seq[3] & 0x3F
        shift += 6
        mask >>= 1
    if kind >= MbType.THREE:
        res |= (seq[2] & 0x3F) << (shift - 6)
        shift += 6
        mask >>= 1
    res |= ((seq[0] & mask) << shift) | ((seq[1] & 0x3F) << (shift - 6))
    return res


def mbsws(data: bytes) -> int | None:
    """Return the byte offset of the first whitespace character, or None."""
    pos = 0
    while pos < len(data):
        length = _seq_len(data, pos)
        if length == 1:
            if ctype_of(data[pos]) & CType.SPACE:
                return pos
        elif chr(mbtowc(data[pos:pos + length])).isspace():
            return pos
        pos += length
    return None


def wcsws(s: str | Sequence[int]) -> int | None:
    """Return the index of the first whitespace UTF-16 unit, or None.

    Surrogate pairs are stepped over as a whole.
    """
    units = [ord(c) for c in s] if isinstance(s, str) else list(s)
    pos = 0
    while pos < len(units):
        unit = units[pos]
        if is_surrogate(unit):
            pos += 2
        elif chr(unit).isspace():
            return pos
        else:
            pos += 1
    return None