from __future__ import annotations
from typing import Any, Hashable, Iterable, Iterator, List, Optional, Tuple

State = Any
Action = Any
Successor = Tuple[Action, State]


class InvalidStateError(LookupError):
    """Raised by a state space asked to expand a state outside its domain."""
    def __init__(self, state: State):
        self.state = state
        super().__init__(f"state {state!r} is not part of this state space")


class StateSpace:
    """
    Implicit state space searched by the DFS driver.

    Subclasses implement expand(state) -> iterable of (action, state) pairs.
    Each call must return a finite iterable; the space itself may be infinite.
    The yield order is the order in which successors are tried.

    key(state) gives the identity used for cycle avoidance. The default is
    the state itself, so plain hashable values (ints, tuples) work unchanged.
    Spaces whose states are handles into their own tables override key()
    so identity comes from the referenced value.
    """

    def expand(self, state: State) -> Iterable[Successor]:
        raise NotImplementedError

    def key(self, state: State) -> Hashable:
        return state

    # ---------- convenience entry points ----------
    def dfs(self, start: State, goal, **kwargs) -> Optional[List[Action]]:
        from statesearch.search.dfs import dfs
        return dfs(self, start, goal, **kwargs)

    def dfs_iter(self, start: State, path: List[Action], **kwargs) -> Iterator[State]:
        from statesearch.search.dfs import dfs_iter
        return dfs_iter(self, start, path, **kwargs)
