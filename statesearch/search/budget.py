from __future__ import annotations
from time import perf_counter
from typing import Hashable, Iterable, Optional

from statesearch.search.space import State, StateSpace, Successor


class SearchBudgetExceeded(RuntimeError):
    """Raised from expand() once a BudgetedSpace runs out of expansions or time."""
    def __init__(self, reason: str, expansions: int, elapsed: float):
        self.reason = reason
        self.expansions = expansions
        self.elapsed = elapsed
        super().__init__(f"search budget exceeded ({reason}) after "
                         f"{expansions} expansions, {elapsed:.3f}s")


class BudgetedSpace(StateSpace):
    """
    Wraps a space so that expand() raises SearchBudgetExceeded after
    max_expansions calls or timeout_sec seconds. The driver does not catch
    it, so the search unwinds to the caller.
    """
    def __init__(self, inner: StateSpace,
                 max_expansions: Optional[int] = None,
                 timeout_sec: Optional[float] = None):
        self.inner = inner
        self.max_expansions = max_expansions
        self.timeout_sec = timeout_sec
        self.reset()

    def reset(self) -> None:
        self.expansions = 0
        self.t0 = perf_counter()

    def expand(self, state: State) -> Iterable[Successor]:
        elapsed = perf_counter() - self.t0
        if self.timeout_sec is not None and elapsed > self.timeout_sec:
            raise SearchBudgetExceeded("timeout", self.expansions, elapsed)
        if self.max_expansions is not None and self.expansions >= self.max_expansions:
            raise SearchBudgetExceeded("expansions", self.expansions, elapsed)
        self.expansions += 1
        return self.inner.expand(state)

    def key(self, state: State) -> Hashable:
        return self.inner.key(state)
