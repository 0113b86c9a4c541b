"""Hexadecimal encoding and decoding."""

from __future__ import annotations

HEX_ASC = "0123456789abcdef"
HEX_ASC_UPPER = "0123456789ABCDEF"


def hex_to_bin(ch: int | str) -> int:
    """Return the value of a hex digit, or -1 if ch is not one."""
    if isinstance(ch, str):
        if len(ch) != 1:
            return -1
        ch = ord(ch)
    if not 0 <= ch <= 0xFF:
        return -1
    if 0x30 <= ch <= 0x39:
        return ch - 0x30
    folded = ch & 0xDF
    if 0x41 <= folded <= 0x46:
        return folded - 0x41 + 10
    return -1


def hex2bin(src: str | bytes, count: int) -> bytes:
    """Decode count bytes from the hex digits of src.

    Raises ValueError if a digit is missing or not hexadecimal.
    """
    out = bytearray()
    for i in range(count):
        pair = src[2 * i:2 * i + 2]
        if len(pair) != 2:
            raise ValueError("hex input too short")
        hi = hex_to_bin(pair[0])
        lo = hex_to_bin(pair[1])
        if hi < 0 or lo < 0:
            raise ValueError(f"invalid hex digits at offset {2 * i}")
        out.append((hi << 4) | lo)
    return bytes(out)


def bin2hex(data: bytes) -> str:
    """Encode data as lower-case hex digits."""
    return "".join(HEX_ASC[b >> 4] + HEX_ASC[b & 0x0F] for b in data)