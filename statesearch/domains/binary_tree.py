from __future__ import annotations
from typing import List, Tuple

from statesearch.domains.choice_tree import Dir
from statesearch.search.space import InvalidStateError, StateSpace

MAX_DEPTH = 16


def _next_power_of_two(x: int) -> int:
    return 1 if x <= 1 else 1 << (x - 1).bit_length()


class BinaryTree(StateSpace):
    """
    Complete binary tree of the given depth over plain int states.

    Nodes are numbered 0 .. 2**(depth+1) - 2 level by level, so each level
    occupies a contiguous block; children are computed, nothing is stored.
    """
    def __init__(self, max_depth: int = MAX_DEPTH):
        self.max_depth = max_depth
        self.max_offset = 1 << (max_depth + 1)

    @property
    def num_nodes(self) -> int:
        return self.max_offset - 1

    def expand(self, state: int) -> List[Tuple[Dir, int]]:
        if not 0 <= state < self.num_nodes:
            raise InvalidStateError(state)
        offset = _next_power_of_two(state + 2)
        if offset >= self.max_offset:
            return []
        return [(Dir.LEFT, state + offset // 2), (Dir.RIGHT, state + offset)]


class Node:
    """Handle to a node owned by a BinaryTreeByRef. Equal when the values are."""
    __slots__ = ("value", "children")

    def __init__(self, value: int):
        self.value = value
        self.children: List[Tuple[Dir, "Node"]] = []

    def __repr__(self) -> str:
        return f"Node({self.value})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)


class BinaryTreeByRef(StateSpace):
    """
    Same tree as BinaryTree, but materialised up front: states are Node
    handles into the space's own table and expand() hands out the stored
    children. key() maps a handle to its value, so identity never depends
    on the object address.
    """
    def __init__(self, max_depth: int = MAX_DEPTH):
        tree = BinaryTree(max_depth)
        self.nodes: List[Node] = [Node(v) for v in range(tree.num_nodes)]
        for node in self.nodes:
            node.children = [(a, self.nodes[s]) for a, s in tree.expand(node.value)]

    def node(self, value: int) -> Node:
        if not 0 <= value < len(self.nodes):
            raise InvalidStateError(value)
        return self.nodes[value]

    def expand(self, state: Node) -> List[Tuple[Dir, Node]]:
        return self.node(state.value).children

    def key(self, state: Node) -> int:
        return state.value
