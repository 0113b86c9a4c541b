"""Weighted edit distance with adjacent transpositions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LevWeight:
    """Costs of the edit operations."""

    add: int = 1
    delete: int = 1
    sub: int = 1
    swp: int = 1


_UNIT = LevWeight()


def levenshtein(s1: str, s2: str, weight: LevWeight | None = None) -> int:
    """Return the cost of turning s1 into s2 under the given weights."""
    wt = weight or _UNIT
    width = len(s2) + 1

    before = [0] * width
    prev = [j * wt.add for j in range(width)]

    for i, a in enumerate(s1):
        cur = [(i + 1) * wt.delete] + [0] * len(s2)
        for j, b in enumerate(s2):
            best = min(
                prev[j + 1] + wt.delete,
                cur[j] + wt.add,
                prev[j] + (a != b) * wt.sub,
            )
            if i and j and s1[i - 1] == b and a == s2[j - 1]:
                best = min(best, before[j - 1] + wt.swp)
            cur[j + 1] = best
        before, prev = prev, cur

    return prev[len(s2)]