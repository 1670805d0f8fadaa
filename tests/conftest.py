from __future__ import annotations
from collections import Counter
from typing import Hashable, List, Tuple

import pytest

from statesearch.domains.choice_tree import ChoiceTree
from statesearch.search.space import StateSpace


class CountingSpace(StateSpace):
    """Wraps a space and counts expand() calls per state key."""
    def __init__(self, inner: StateSpace):
        self.inner = inner
        self.calls: Counter = Counter()

    def expand(self, state):
        self.calls[self.inner.key(state)] += 1
        return self.inner.expand(state)

    def key(self, state) -> Hashable:
        return self.inner.key(state)


class Grid(StateSpace):
    """Open w×h grid, 4-connected; lots of cycles and revisits."""
    def __init__(self, w: int, h: int):
        self.w, self.h = w, h

    def expand(self, s: Tuple[int, int]) -> List[Tuple[str, Tuple[int, int]]]:
        x, y = s
        out = []
        for a, dx, dy in (("E", 1, 0), ("S", 0, 1), ("W", -1, 0), ("N", 0, -1)):
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.w and 0 <= ny < self.h:
                out.append((a, (nx, ny)))
        return out


@pytest.fixture
def tree():
    return ChoiceTree()


@pytest.fixture
def grid():
    return Grid(6, 5)
