"""Directory traversal yielding files and, optionally, directories."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntFlag


class FiterFlag(IntFlag):
    """Options controlling what fiter() yields."""

    NONE = 0
    USE_STAT = 1 << 0
    USE_FD = 1 << 1
    LIST_DIR = 1 << 2
    RECUR_DIR = 1 << 3
    NO_UNK = 1 << 4
    NO_LNK = 1 << 5
    NO_REG = 1 << 6
    LIST_DIR_ONLY = LIST_DIR | NO_UNK | NO_LNK | NO_REG
    RECUR_DIR_ONLY = RECUR_DIR | NO_UNK | NO_LNK | NO_REG


_DIR_ONLY = FiterFlag.NO_UNK | FiterFlag.NO_LNK | FiterFlag.NO_REG
_DIR_LISTING = FiterFlag.LIST_DIR | FiterFlag.RECUR_DIR


@dataclass(frozen=True)
class File:
    """An entry met during traversal.

    ``subp`` is the path relative to the traversal root ("" for the root).
    ``st`` is set only with USE_STAT, for regular and unsupported files.
    ``fd`` is an open read-only descriptor with USE_FD for regular files,
    valid until the iteration moves on; otherwise -1.
    """

    path: str
    subp: str
    name: str
    mode: int
    st: os.stat_result | None = None
    fd: int = -1

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.mode)

    @property
    def is_reg(self) -> bool:
        return stat.S_ISREG(self.mode)

    @property
    def is_link(self) -> bool:
        return stat.S_ISLNK(self.mode)


def _dir_file(path: str, subp: str) -> File:
    name = os.path.basename(os.path.normpath(path))
    return File(path=path, subp=subp, name=name, mode=stat.S_IFDIR)


def _entries(path: str) -> list[tuple[os.DirEntry, os.stat_result]]:
    with os.scandir(path) as it:
        entries = sorted(it, key=lambda e: e.name)
    return [(entry, entry.stat(follow_symlinks=False)) for entry in entries]


def _walk(path: str, subp: str, flags: FiterFlag) -> Iterator[File]:
    if flags & FiterFlag.LIST_DIR:
        yield _dir_file(path, subp)

    subdirs = []
    for entry, lst in _entries(path):
        child = os.path.join(subp, entry.name) if subp else entry.name
        kind = stat.S_IFMT(lst.st_mode)

        if stat.S_ISDIR(kind):
            subdirs.append((entry.path, child))
            continue

        if stat.S_ISLNK(kind):
            if not flags & FiterFlag.NO_LNK:
                yield File(entry.path, child, entry.name, kind)
            continue

        is_reg = stat.S_ISREG(kind)
        if flags & (FiterFlag.NO_REG if is_reg else FiterFlag.NO_UNK):
            continue

        st = lst if flags & FiterFlag.USE_STAT else None
        if is_reg and flags & FiterFlag.USE_FD:
            fd = os.open(entry.path, os.O_RDONLY)
            try:
                yield File(entry.path, child, entry.name, kind, st, fd)
            finally:
                os.close(fd)
        else:
            yield File(entry.path, child, entry.name, kind, st)

    for sub_path, sub_subp in subdirs:
        yield from _walk(sub_path, sub_subp, flags)

    if flags & FiterFlag.RECUR_DIR:
        yield _dir_file(path, subp)


def fiter(root: str | os.PathLike, flags: int = FiterFlag.NONE) -> Iterator[File]:
    """Walk root depth-first and yield its entries as File objects.

    Files of a directory come before its subdirectories. With LIST_DIR a
    directory is yielded before its contents, with RECUR_DIR after them
    (the root last), which suits recursive deletion.
    """
    flags = FiterFlag(flags)
    if (flags & _DIR_LISTING) == _DIR_LISTING:
        raise ValueError("LIST_DIR and RECUR_DIR are mutually exclusive")
    if (flags & _DIR_ONLY) == _DIR_ONLY and not flags & _DIR_LISTING:
        raise ValueError("directory-only listing needs LIST_DIR or RECUR_DIR")

    root = os.fspath(root)
    if not stat.S_ISDIR(os.stat(root).st_mode):
        raise NotADirectoryError(root)
    return _walk(root, "", flags)