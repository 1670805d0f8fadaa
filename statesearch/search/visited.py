from __future__ import annotations
from typing import Callable, Hashable, Optional, Set
import hashlib

from statesearch.search.space import State

KeyFn = Callable[[State], Hashable]


def _blake2b_repr(key: Hashable) -> bytes:
    return hashlib.blake2b(repr(key).encode("utf-8"), digest_size=16).digest()


class Visited:
    """Set of state identities seen during one traversal. Only grows."""
    def __init__(self, key: Optional[KeyFn] = None):
        self._key = key
        self._seen: Set[Hashable] = set()

    def _identity(self, state: State) -> Hashable:
        return self._key(state) if self._key is not None else state

    def bind_key(self, key: KeyFn) -> None:
        """Use key for identity unless one was given at construction."""
        if self._key is None:
            self._key = key

    def mark_and_check(self, state: State) -> bool:
        """Insert state; return True if it was already present."""
        k = self._identity(state)
        if k in self._seen:
            return True
        self._seen.add(k)
        return False

    def __contains__(self, state: State) -> bool:
        return self._identity(state) in self._seen

    def __len__(self) -> int:
        return len(self._seen)


class DigestVisited(Visited):
    """
    Visited set keyed by a fixed-size content digest instead of the full key.

    Uses 16 bytes per state whatever the state size, at the price of a
    (negligible, nonzero) chance that two distinct states collide. The
    default digest hashes repr(key); pass digest= for keys whose repr is not
    canonical (e.g. sets, dicts built in different orders).
    """
    def __init__(self, key: Optional[KeyFn] = None,
                 digest: Optional[Callable[[Hashable], bytes]] = None):
        super().__init__(key)
        self._digest = digest or _blake2b_repr

    def _identity(self, state: State) -> Hashable:
        return self._digest(super()._identity(state))
