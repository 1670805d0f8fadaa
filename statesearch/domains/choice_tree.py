from __future__ import annotations
from enum import Enum
from typing import Dict, List, Tuple

from statesearch.search.space import StateSpace


class Dir(Enum):
    LEFT = "L"
    RIGHT = "R"


class ChoiceTree(StateSpace):
    """
    Small fixed graph used as a fixture:

        0 -> {LEFT: 1, RIGHT: 2}
        1 -> {LEFT: 3, RIGHT: 4}
        2 -> {LEFT: 2}              (self-loop)

    Every other integer is a leaf.
    """
    EDGES: Dict[int, List[Tuple[Dir, int]]] = {
        0: [(Dir.LEFT, 1), (Dir.RIGHT, 2)],
        1: [(Dir.LEFT, 3), (Dir.RIGHT, 4)],
        2: [(Dir.LEFT, 2)],
    }

    def expand(self, state: int) -> List[Tuple[Dir, int]]:
        return list(self.EDGES.get(state, ()))
