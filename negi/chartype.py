"""Byte classification tables for ASCII/Latin-1, UTF-8 and UTF-16."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class CType(IntFlag):
    """Character class bits for a single byte."""

    NONE = 0
    CNTRL = 1 << 0
    SPACE = 1 << 1
    HARDSPACE = 1 << 2
    PUNCT = 1 << 3
    DIGIT = 1 << 4
    UPPER = 1 << 5
    XDIGIT = 1 << 6
    LOWER = 1 << 7


class MbType(IntEnum):
    """Role of a byte in a UTF-8 sequence; the value is the sequence length."""

    CONTINUATION = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    INVALID = 0xFF


_CTYPE_RANGES = (
    (0, 8, CType.CNTRL),
    (9, 13, CType.CNTRL | CType.SPACE),
    (14, 31, CType.CNTRL),
    (32, 32, CType.SPACE | CType.HARDSPACE),
    (33, 47, CType.PUNCT),
    (48, 57, CType.DIGIT),
    (58, 64, CType.PUNCT),
    (65, 70, CType.UPPER | CType.XDIGIT),
    (71, 90, CType.UPPER),
    (91, 96, CType.PUNCT),
    (97, 102, CType.LOWER | CType.XDIGIT),
    (103, 122, CType.LOWER),
    (123, 126, CType.PUNCT),
    (127, 127, CType.CNTRL),
    (128, 159, CType.NONE),
    (160, 160, CType.SPACE | CType.HARDSPACE),
    (161, 191, CType.PUNCT),
    (192, 214, CType.UPPER),
    (215, 215, CType.PUNCT),
    (216, 222, CType.UPPER),
    (223, 246, CType.LOWER),
    (247, 247, CType.PUNCT),
    (248, 255, CType.LOWER),
)

_MB_RANGES = (
    (0x00, 0x7F, MbType.ONE),
    (0x80, 0xBF, MbType.CONTINUATION),
    (0xC0, 0xDF, MbType.TWO),
    (0xE0, 0xEF, MbType.THREE),
    (0xF0, 0xF7, MbType.FOUR),
    (0xF8, 0xFF, MbType.INVALID),
)


def _build(ranges):
    return tuple(flag for lo, hi, flag in ranges for _ in range(lo, hi + 1))


_CTYPE = _build(_CTYPE_RANGES)
_MBTYPE = _build(_MB_RANGES)

_SURROGATE = 0xD800
_LOW_SURROGATE = 0xDC00


def _check_byte(byte: int) -> int:
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte out of range: {byte}")
    return byte


def ctype_of(byte: int) -> CType:
    """Return the character class bits of a byte value."""
    return _CTYPE[_check_byte(byte)]


def mb_type(byte: int) -> MbType:
    """Return the UTF-8 role of a byte value."""
    return _MBTYPE[_check_byte(byte)]


def is_surrogate(unit: int) -> bool:
    """True if a UTF-16 code unit is a high or low surrogate."""
    return (unit & 0xF800) == _SURROGATE


def is_high_surrogate(unit: int) -> bool:
    """True if a UTF-16 code unit is a high (leading) surrogate."""
    return (unit & 0xFC00) == _SURROGATE


def is_low_surrogate(unit: int) -> bool:
    """True if a UTF-16 code unit is a low (trailing) surrogate."""
    return (unit & 0xFC00) == _LOW_SURROGATE