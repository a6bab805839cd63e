"""Identifier allocation.

One IdAllocator per structure_script() call.  Every Element and Line draws
the next value, so ids compare in production order.  Ids are not unique
across calls; callers that merge documents from separate runs must namespace
them.
"""
from __future__ import annotations

import itertools


class IdAllocator:
    """Monotonic integer counter."""

    def __init__(self, seed: int = 1) -> None:
        self._counter = itertools.count(seed)
        self._last = seed - 1

    def next_id(self) -> int:
        self._last = next(self._counter)
        return self._last

    @property
    def last(self) -> int:
        """The most recently issued id (seed - 1 before the first draw)."""
        return self._last
