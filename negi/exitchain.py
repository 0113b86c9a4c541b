"""A last-in first-out chain of callbacks run at interpreter exit."""

from __future__ import annotations

import atexit
from collections.abc import Callable

ExitCallback = Callable[[], object]


class ExitChain:
    """Callbacks run in reverse order of registration."""

    def __init__(self) -> None:
        self._funcs: list[ExitCallback] = []

    def __len__(self) -> int:
        return len(self._funcs)

    def push(self, func: ExitCallback) -> None:
        """Register func to run before those already registered."""
        self._funcs.append(func)

    def pop(self) -> ExitCallback:
        """Remove and return the most recently registered callback."""
        if not self._funcs:
            raise IndexError("pop from empty exit chain")
        return self._funcs.pop()

    def run(self) -> None:
        """Pop and call callbacks until the chain is empty."""
        while self._funcs:
            self.pop()()


default_chain = ExitChain()
atexit.register(default_chain.run)