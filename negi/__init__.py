"""Byte classification, UTF-8, hex, edit distance, buffer, wrapping, walking and help utilities."""

__version__ = "0.1.0"

__all__ = [
    "chartype",
    "unicode",
    "strutil",
    "hex",
    "levenshtein",
    "strbuf",
    "strlist",
    "exitchain",
    "fiter",
    "help",
]