from __future__ import annotations
from typing import Dict, List, Tuple
import random

from statesearch.search.space import InvalidStateError, StateSpace

State = Tuple[int, ...]
Move = str  # direction the blank moves: "U", "D", "L", "R"


class SlidingPuzzle(StateSpace):
    """
    Generic R×C sliding-tile puzzle (0 is blank) as a search space.
    Works for 2×2, 3×3 (8-puzzle), 3×4, 4×4 (15-puzzle), etc.
    Actions are the direction the blank moves, tried in U, D, L, R order.
    """
    def __init__(self, rows: int, cols: int):
        assert rows >= 2 and cols >= 2
        self.R = rows
        self.C = cols
        self.size = rows * cols
        self.GOAL: State = tuple(list(range(1, self.size)) + [0])

        # Precompute (move, target index) for the blank
        self._nei: Dict[int, Tuple[Tuple[Move, int], ...]] = {}
        for i in range(self.size):
            r, c = divmod(i, self.C)
            moves = []
            if r > 0:             moves.append(("U", i - self.C))
            if r < self.R - 1:    moves.append(("D", i + self.C))
            if c > 0:             moves.append(("L", i - 1))
            if c < self.C - 1:    moves.append(("R", i + 1))
            self._nei[i] = tuple(moves)

    def _blank(self, s: State) -> int:
        if len(s) != self.size or 0 not in s:
            raise InvalidStateError(s)
        return s.index(0)

    # ---------- transitions ----------
    def expand(self, s: State) -> List[Tuple[Move, State]]:
        z = self._blank(s)
        out: List[Tuple[Move, State]] = []
        for move, j in self._nei[z]:
            lst = list(s)
            lst[z], lst[j] = lst[j], lst[z]
            out.append((move, tuple(lst)))
        return out

    def apply(self, s: State, moves: List[Move]) -> State:
        """Play moves from s; raises InvalidStateError on an illegal move."""
        for m in moves:
            nxt = dict(self.expand(s))
            if m not in nxt:
                raise InvalidStateError((s, m))
            s = nxt[m]
        return s

    # ---------- instance generation ----------
    def scramble(self, depth: int, seed: int) -> State:
        """Random walk of 'depth' blank moves from GOAL, no immediate backtracks."""
        rng = random.Random(seed)
        s = self.GOAL
        last_blank = None
        for _ in range(depth):
            z = s.index(0)
            cand = [j for _, j in self._nei[z]]
            if last_blank in cand and len(cand) > 1:
                cand.remove(last_blank)
            j = rng.choice(cand)
            lst = list(s)
            lst[z], lst[j] = lst[j], lst[z]
            last_blank = z
            s = tuple(lst)
        return s

    def is_solvable(self, s: State) -> bool:
        """
        Standard parity rule:
        - If width (cols) is odd  -> inversions even.
        - If width is even        -> (inversions + blank_row_from_bottom) is ODD.
        """
        arr = [x for x in s if x != 0]
        inv = 0
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                if arr[i] > arr[j]:
                    inv += 1
        if self.C % 2 == 1:
            return (inv % 2) == 0
        blank_row_from_bottom = self.R - s.index(0) // self.C  # 1-based
        return ((inv + blank_row_from_bottom) % 2) == 1


def make_unsolvable_variant(s: State) -> State:
    """Swap the first two non-blank tiles (flips permutation parity)."""
    lst = list(s)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)
