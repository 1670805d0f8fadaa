from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, TYPE_CHECKING
import logging

from statesearch.search.goal import as_goal
from statesearch.search.space import Action, State, Successor
from statesearch.search.visited import Visited

if TYPE_CHECKING:
    from statesearch.search.space import StateSpace

logger = logging.getLogger(__name__)


def _fresh_visited(space: "StateSpace", visited: Optional[Visited]) -> Visited:
    """Tracker for one search: a new one, or the caller's if still empty."""
    if visited is None:
        return Visited(space.key)
    if len(visited):
        raise ValueError(f"visited tracker already holds {len(visited)} states; "
                         "each search needs a fresh one")
    visited.bind_key(space.key)
    return visited


@dataclass
class SearchStats:
    """Counters updated in place by the driver (same names as the CSV columns)."""
    expanded: int = 0      # expand() calls
    generated: int = 0     # (action, state) pairs pulled from frames
    duplicates: int = 0    # pairs dropped because the state was already visited
    peak_depth: int = 0    # deepest state whose successors were iterated


def _traverse(
    space: "StateSpace",
    start: State,
    path: List[Action],
    seen: Visited,
    stats: SearchStats,
) -> Iterator[State]:
    """
    Core stack machine. Assumes start is already marked in seen.

    Yields every newly discovered state (start excluded) right after marking
    it, with path holding the actions from start to that state. The state is
    expanded only when the generator is resumed, so a caller that stops at a
    goal never pays for its expansion.
    """
    stack: List[Iterator[Successor]] = [iter(space.expand(start))]
    stats.expanded += 1

    while stack:
        try:
            action, s2 = next(stack[-1])
        except StopIteration:
            # backtrack; the root frame has no incoming action
            stack.pop()
            if stack:
                path.pop()
            continue

        stats.generated += 1
        if seen.mark_and_check(s2):
            stats.duplicates += 1
            continue

        path.append(action)
        yield s2

        stack.append(iter(space.expand(s2)))
        stats.expanded += 1
        stats.peak_depth = max(stats.peak_depth, len(stack) - 1)


def dfs(
    space: "StateSpace",
    start: State,
    goal,
    *,
    visited: Optional[Visited] = None,
    stats: Optional[SearchStats] = None,
) -> Optional[List[Action]]:
    """
    Depth-first search from start; returns the action path to the first goal
    state found, [] if start is already a goal, None if no reachable state is.

    goal: a Goal, a predicate callable, or a target state compared with ==.
    The goal is tested exactly once per newly discovered state.
    visited: empty tracker to use for this call (e.g. DigestVisited); one
    built without a key function is bound to space.key, a non-empty one is
    rejected with ValueError. Defaults to an exact Visited keyed by space.key.
    """
    seen = _fresh_visited(space, visited)
    goal = as_goal(goal)
    if goal.is_goal(start):
        return []

    stats = stats if stats is not None else SearchStats()
    seen.mark_and_check(start)

    path: List[Action] = []
    for state in _traverse(space, start, path, seen, stats):
        if goal.is_goal(state):
            logger.debug("dfs: goal at depth %d (expanded=%d, generated=%d)",
                         len(path), stats.expanded, stats.generated)
            return list(path)

    logger.debug("dfs: exhausted after %d expansions, %d states visited",
                 stats.expanded, len(seen))
    return None


def dfs_iter(
    space: "StateSpace",
    start: State,
    path: List[Action],
    *,
    visited: Optional[Visited] = None,
    stats: Optional[SearchStats] = None,
) -> Iterator[State]:
    """
    Lazy form of dfs: yields start, then each state as it is first discovered.

    path is owned by the caller. The driver appends an action when it
    descends and pops it when it backtracks, so at every yield path holds the
    actions leading from start to the yielded state. Do not mutate it while
    iterating.
    """
    seen = _fresh_visited(space, visited)
    stats = stats if stats is not None else SearchStats()
    return _walk(space, start, path, seen, stats)


def _walk(space: "StateSpace", start: State, path: List[Action],
          seen: Visited, stats: SearchStats) -> Iterator[State]:
    seen.mark_and_check(start)
    yield start
    yield from _traverse(space, start, path, seen, stats)


def replay(space: "StateSpace", start: State, actions: List[Action]) -> Tuple[bool, State]:
    """
    Follow actions from start, taking at each step the first successor whose
    action equals the next one. Returns (True, final_state), or
    (False, last_reached_state) when some action has no matching successor.
    """
    s = start
    for a in actions:
        for a2, s2 in space.expand(s):
            if a2 == a:
                s = s2
                break
        else:
            return False, s
    return True, s
