"""Growable string buffer with a path 'working space' offset."""

from __future__ import annotations

import os
import warnings

PTH_SEP = os.sep
_SEPS = tuple(sep for sep in (os.sep, os.altsep) if sep)
_SEP_UNI = "/"
_SEP_WIN = "\\"

# Whitespace as the C locale classifies it.
_C_SPACE = " \t\n\v\f\r"


def _last_sep(path: str) -> int:
    return max(path.rfind(sep) for sep in _SEPS)


class StrBuf:
    """A mutable string with a remembered offset for path operations.

    ``ws`` marks the end of a base path; the ``*_at_ws`` methods write
    from that point, replacing whatever followed it.
    """

    def __init__(self, text: str = "", *, sanitize_paths: bool = False) -> None:
        self._buf = text
        self.ws = 0
        self.sanitize_paths = sanitize_paths

    def __str__(self) -> str:
        return self._buf

    def __repr__(self) -> str:
        return f"StrBuf({self._buf!r}, ws={self.ws})"

    def __len__(self) -> int:
        return len(self._buf)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StrBuf):
            return self._buf == other._buf
        if isinstance(other, str):
            return self._buf == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def _check_off(self, off: int) -> None:
        if not 0 <= off <= len(self._buf):
            raise IndexError(f"offset {off} outside buffer of length {len(self._buf)}")

    def puts_at(self, off: int, s: str) -> int:
        """Write s at off, dropping what followed; return len(s)."""
        self._check_off(off)
        self._buf = self._buf[:off] + s
        return len(s)

    def puts(self, s: str) -> int:
        """Append s; return len(s)."""
        return self.puts_at(len(self._buf), s)

    def puts_at_ws(self, s: str) -> int:
        """Write s at the working-space offset; return len(s)."""
        return self.puts_at(self.ws, s)

    def putc_at(self, off: int, c: str) -> int:
        """Write a single character at off, dropping what followed."""
        if len(c) != 1:
            raise ValueError("expected a single character")
        return self.puts_at(off, c)

    def putc(self, c: str) -> int:
        """Append a single character."""
        return self.putc_at(len(self._buf), c)

    def putc_at_ws(self, c: str) -> int:
        """Write a single character at the working-space offset."""
        return self.putc_at(self.ws, c)

    def printf_at(self, off: int, fmt: str, *args: object) -> int:
        """Write a %-formatted string at off; return its length."""
        text = fmt % args if args else fmt
        return self.puts_at(off, text)

    def printf(self, fmt: str, *args: object) -> int:
        """Append a %-formatted string; return its length."""
        return self.printf_at(len(self._buf), fmt, *args)

    def printf_at_ws(self, fmt: str, *args: object) -> int:
        """Write a %-formatted string at the working-space offset."""
        return self.printf_at(self.ws, fmt, *args)

    def trim(self) -> None:
        """Strip leading and trailing whitespace."""
        self._buf = self._buf.strip(_C_SPACE)

    def trunc(self, n: int) -> None:
        """Remove n characters from the end."""
        if not 0 <= n <= len(self._buf):
            raise ValueError(f"cannot truncate {n} characters from {len(self._buf)}")
        self._buf = self._buf[: len(self._buf) - n]

    def trunc_to_ws(self) -> None:
        """Cut the buffer back to the working-space offset."""
        self._buf = self._buf[: self.ws]

    def _sanitize(self) -> None:
        if not self.sanitize_paths:
            return
        path = self._buf
        if _SEP_UNI in path and _SEP_WIN in path:
            warnings.warn(f"path '{path}' is mixing separators", stacklevel=3)
        if len(path) > 1 and path[-1] in (_SEP_UNI, _SEP_WIN):
            warnings.warn(f"path '{path}' has trailing separator", stacklevel=3)

    def init_ws(self, name: str) -> None:
        """Reset the buffer to name and mark its end as working space."""
        self._buf = name
        self.ws = len(name)
        self._sanitize()

    def reinit_ws(self, name: str) -> None:
        """Same as init_ws, reusing this buffer."""
        self.init_ws(name)

    def pth_append(self, name: str) -> int:
        """Append a separator and name; return the characters added."""
        self._buf = f"{self._buf}{PTH_SEP}{name}"
        self._sanitize()
        return len(name) + 1

    def pth_append_at_ws(self, name: str) -> int:
        """Replace what follows the working space with a separator and name."""
        self._buf = f"{self._buf[: self.ws]}{PTH_SEP}{name}"
        return len(name) + 1

    def pth_to_dirname(self) -> None:
        """Cut the buffer at its last path separator."""
        idx = _last_sep(self._buf)
        if idx < 0:
            raise ValueError(f"path '{self._buf}' has no separator")
        self._buf = self._buf[:idx]