"""Option descriptions and the help screen built from them."""

from __future__ import annotations

import io
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum, IntFlag, auto
from typing import Any, TextIO

from .strlist import LINE_WRAP, wrap_text

HELP_OPT_INDENT = 2
HELP_OPT_WRAP = 24
EXIT_CONOUT = 0

_USAGE_PREFIX = "usage: "
_ALT_PREFIX = "or: "
_BRACKETS = "()<>[]|"
_C_SPACE = " \t\n\v\f\r"


class OptMode(Enum):
    """Kind of an option entry."""

    BIT = auto()
    SWITCH = auto()
    NUMBER = auto()
    STRING = auto()
    CMDMODE = auto()
    CHOICE = auto()
    GROUP = auto()
    COMMAND = auto()


class OptFlag(IntFlag):
    """Per-option flags."""

    NONE = 0
    NO_ARG = 1 << 0
    OPT_ARG = 1 << 1
    NO_NEG = 1 << 2


@dataclass(frozen=True)
class Opt:
    """One option, group heading or sub-command."""

    mode: OptMode
    long: str | None = None
    short: str | None = None
    value: Any = None
    command: Callable[..., Any] | None = None
    choices: tuple[str, ...] = field(default_factory=tuple)
    argh: str | None = None
    help: str | None = None
    flags: OptFlag = OptFlag.NONE


def _check_short(short: str | None) -> str | None:
    if not short:
        return None
    if len(short) != 1 or not short.isascii():
        raise ValueError(f"short option must be one ASCII character: {short!r}")
    return short


def opt_group(title: str | None = None) -> Opt:
    """A heading that starts a new group of options."""
    return Opt(OptMode.GROUP, help=title)


def opt_switch(short: str | None, long: str, help: str, flags: int = 0) -> Opt:
    """A boolean switch."""
    return Opt(OptMode.SWITCH, long, _check_short(short), help=help,
               flags=OptFlag.NO_ARG | OptFlag(flags))


def opt_bit(short: str | None, long: str, value: int, help: str,
            flags: int = 0) -> Opt:
    """A switch that sets bits of value."""
    return Opt(OptMode.BIT, long, _check_short(short), value=value, help=help,
               flags=OptFlag.NO_ARG | OptFlag(flags))


def opt_number(short: str | None, long: str, help: str, flags: int = 0) -> Opt:
    """An option taking a number."""
    return Opt(OptMode.NUMBER, long, _check_short(short), argh="N", help=help,
               flags=OptFlag(flags))


def opt_string(short: str | None, long: str, help: str,
               argh: str | None = None, flags: int = OptFlag.NO_NEG) -> Opt:
    """An option taking a string."""
    return Opt(OptMode.STRING, long, _check_short(short), argh=argh, help=help,
               flags=OptFlag(flags))


def opt_filename(short: str | None, long: str, help: str,
                 flags: int = OptFlag.NO_NEG) -> Opt:
    """An option taking a path."""
    return opt_string(short, long, help, "path", flags)


def opt_command(long: str, command: Callable[..., Any]) -> Opt:
    """A sub-command."""
    return Opt(OptMode.COMMAND, long, command=command)


def opt_cmdmode(short: str | None, long: str, value: Any, help: str) -> Opt:
    """One of a set of mutually exclusive operation modes."""
    return Opt(OptMode.CMDMODE, long, _check_short(short), value=value,
               help=help, flags=OptFlag.NO_ARG | OptFlag.NO_NEG)


def opt_choice(short: str | None, long: str, choices: Sequence[str],
               help: str) -> Opt:
    """An option whose argument must be one of choices."""
    return Opt(OptMode.CHOICE, long, _check_short(short),
               choices=tuple(choices), help=help, flags=OptFlag.NO_NEG)


def _split_usage(usage: Sequence[str | None]) -> tuple[list[str], list[str]]:
    items = list(usage)
    if None not in items:
        return items, []
    cut = items.index(None)
    cmd, ext = items[:cut], items[cut + 1:]
    if None in ext:
        ext = ext[: ext.index(None)]
    return cmd, ext


def _usage_head_len(line: str) -> int:
    n = 0
    while n < len(line) and (
        (line[n].isascii() and line[n].isalpha()) or line[n] in _C_SPACE
    ):
        n += 1
    return n


def _write_cmd_usage(out: TextIO, lines: list[str]) -> None:
    width = len(_USAGE_PREFIX)
    pref = _USAGE_PREFIX
    for line in lines:
        n = _usage_head_len(line)
        pad = width + n
        wrap = LINE_WRAP - width
        if (LINE_WRAP >> 1) > pad:
            wrap -= n

        out.write(pref.rjust(width) + line[:n])
        rest = line[n:]
        if rest:
            wrapped = wrap_text(rest, wrap) or [""]
            out.write(wrapped[0] + "\n")
            for part in wrapped[1:]:
                out.write(" " * pad + part + "\n")
        else:
            out.write("\n")
        pref = _ALT_PREFIX
    out.write("\n")


def _option_label(opt: Opt) -> str:
    label = " " * HELP_OPT_INDENT
    if opt.short:
        label += f"-{opt.short}, "
    if opt.flags & OptFlag.NO_NEG:
        label += f"--{opt.long}"
    else:
        label += f"--[no-]{opt.long}"
    if opt.argh:
        bare = any(c in _BRACKETS for c in opt.argh)
        arg = opt.argh if bare else f"<{opt.argh}>"
        label += f"[={arg}]" if opt.flags & OptFlag.OPT_ARG else f" {arg}"
    return label


def _write_opt_usage(out: TextIO, opts: Sequence[Opt]) -> None:
    shown = 0
    column = HELP_OPT_WRAP + 2
    for idx, opt in enumerate(opts):
        if opt.mode is OptMode.GROUP:
            if idx:
                out.write("\n")
            if opt.help:
                out.write(opt.help + "\n")
            continue
        if opt.mode is OptMode.COMMAND:
            continue

        label = _option_label(opt)
        if len(label) >= HELP_OPT_WRAP:
            out.write(label + "\n")
            label = ""

        wrapped = wrap_text(opt.help or "", LINE_WRAP - column) or [""]
        out.write(label.ljust(column) + wrapped[0] + "\n")
        for part in wrapped[1:]:
            out.write(" " * column + part + "\n")
        shown += 1

    if shown:
        out.write("\n")


def _write_ext_usage(out: TextIO, lines: list[str]) -> None:
    for idx, line in enumerate(lines):
        if idx:
            out.write("\n")
        out.write(line + "\n")


def format_help(usage: Sequence[str | None], opts: Sequence[Opt]) -> str:
    """Build the help screen.

    usage holds the command synopsis lines, then None, then paragraphs of
    further description (optionally ended by another None).
    """
    cmd, ext = _split_usage(usage)
    out = io.StringIO()
    _write_cmd_usage(out, cmd)
    _write_opt_usage(out, opts)
    _write_ext_usage(out, ext)
    return out.getvalue()


def show_help(usage: Sequence[str | None], opts: Sequence[Opt],
              is_err: bool = False) -> None:
    """Print the help screen to stdout, or stderr if is_err, then exit."""
    stream = sys.stderr if is_err else sys.stdout
    stream.write(format_help(usage, opts))
    stream.flush()
    raise SystemExit(EXIT_CONOUT)