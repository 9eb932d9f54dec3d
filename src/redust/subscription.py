"""Subscription tokens and the registry that owns observer callbacks.

Each registry has its own monotonically increasing counter. Tokens are
thin handles holding (registry id, index): they are never reused inside
one registry and never match another registry's entries.
"""

from __future__ import annotations

import functools
import itertools
from typing import Callable, Generic, Iterator, TypeVar

S = TypeVar("S")
A = TypeVar("A")

Reducer = Callable[[S, A], S]
Subscription = Callable[[S], None]

# Registry identity only; itertools.count is atomic under the GIL.
_registry_ids = itertools.count(1)


@functools.total_ordering
class SubscriptionToken:
    """Opaque handle for one registered observer, ordered by allocation."""

    __slots__ = ("_registry_id", "_index")

    def __init__(self, registry_id: int, index: int) -> None:
        self._registry_id = registry_id
        self._index = index

    @property
    def index(self) -> int:
        """Allocation index within the issuing store (0, 1, 2, ...)."""
        return self._index

    def _key(self) -> tuple[int, int]:
        return (self._registry_id, self._index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SubscriptionToken):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SubscriptionToken):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"SubscriptionToken({self._index})"


class SubscriptionRegistry(Generic[S]):
    """token -> observer mapping. Iteration follows subscription order."""

    __slots__ = ("_id", "_counter", "_subscriptions")

    def __init__(self) -> None:
        self._id = next(_registry_ids)
        self._counter = itertools.count()
        self._subscriptions: dict[SubscriptionToken, Subscription[S]] = {}

    def add(self, observer: Subscription[S]) -> SubscriptionToken:
        """Register observer under the next unused token."""
        token = SubscriptionToken(self._id, next(self._counter))
        self._subscriptions[token] = observer
        return token

    def remove(self, token: object) -> Subscription[S] | None:
        """Remove and return the observer for token, or None if absent."""
        if not isinstance(token, SubscriptionToken):
            return None
        return self._subscriptions.pop(token, None)

    def snapshot(self) -> list[Subscription[S]]:
        """Observers registered right now. Later add/remove don't affect it."""
        return list(self._subscriptions.values())

    def clear(self) -> None:
        self._subscriptions.clear()

    def __contains__(self, token: object) -> bool:
        return isinstance(token, SubscriptionToken) and token in self._subscriptions

    def __len__(self) -> int:
        return len(self._subscriptions)

    def __iter__(self) -> Iterator[SubscriptionToken]:
        return iter(list(self._subscriptions))

    def __repr__(self) -> str:
        return f"SubscriptionRegistry({len(self._subscriptions)} subscriptions)"
