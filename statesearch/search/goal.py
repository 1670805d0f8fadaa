from __future__ import annotations
from typing import Any, Callable, Optional

from statesearch.search.space import State


class Goal:
    """Termination test for a search."""
    def is_goal(self, state: State) -> bool:
        raise NotImplementedError


class EqualityGoal(Goal):
    def __init__(self, target: State):
        self.target = target

    def is_goal(self, state: State) -> bool:
        return state == self.target

    def __repr__(self) -> str:
        return f"EqualityGoal({self.target!r})"


class PredicateGoal(Goal):
    """
    Caller-supplied test. With a context, fn is called as fn(state, context);
    the context is owned by the caller and may be mutated by fn (e.g. to
    record every state the search discovers).
    """
    def __init__(self, fn: Callable[..., bool], context: Optional[Any] = None):
        self.fn = fn
        self.context = context

    def is_goal(self, state: State) -> bool:
        if self.context is None:
            return bool(self.fn(state))
        return bool(self.fn(state, self.context))


def as_goal(goal: Any) -> Goal:
    """
    Goal instances pass through, callables become predicates, anything else a
    target. A state type that defines __call__ would be taken for a
    predicate; wrap such targets in EqualityGoal explicitly.
    """
    if isinstance(goal, Goal):
        return goal
    if callable(goal):
        return PredicateGoal(goal)
    return EqualityGoal(goal)
