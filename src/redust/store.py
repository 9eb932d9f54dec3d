"""Store: a single state value changed only by dispatching actions.

dispatch(action) runs the reducer, commits the result, then calls every
observer registered at that moment with the new state. Everything is
synchronous and single-threaded: there is no internal locking.

A dispatch issued while the same store is dispatching (from the reducer or
from an observer) raises ReentrantDispatchError. subscribe/unsubscribe
during notification are fine; they apply from the next dispatch.
"""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from redust.errors import ReentrantDispatchError, UnsubscribeError
from redust.subscription import Reducer, Subscription, SubscriptionRegistry, SubscriptionToken

logger = logging.getLogger("redust.store")

S = TypeVar("S")
A = TypeVar("A")


def _callable_name(fn: object) -> str:
    return getattr(fn, "__qualname__", None) or type(fn).__name__


class Store(Generic[S, A]):
    """Holds the current state and mediates every transition and notification."""

    def __init__(self, reducer: Reducer[S, A], initial_state: S, *, name: str | None = None) -> None:
        self._reducer = reducer
        self._state = initial_state
        self._subscriptions: SubscriptionRegistry[S] = SubscriptionRegistry()
        self._dispatching = False
        self.name = name
        logger.debug("Created %r", self)

    def state(self) -> S:
        """The current state: the reducer's last result, or the initial state."""
        return self._state

    def dispatch(self, action: A) -> Store[S, A]:
        """Apply action through the reducer and notify observers.

        Returns the store so calls can be chained:
            store.dispatch(Increment()).dispatch(Increment())

        Not transactional: a reducer exception propagates as-is (the previous
        state is left in place and nobody is notified). An observer exception
        also propagates; the new state is already committed and observers
        after it are skipped for this dispatch.
        """
        if self._dispatching:
            raise ReentrantDispatchError(action)

        self._dispatching = True
        try:
            self._state = self._reducer(self._state, action)
            observers = self._subscriptions.snapshot()
            for observer in observers:
                observer(self._state)
        finally:
            self._dispatching = False

        logger.debug("Dispatched %s, notified %d observers", type(action).__name__, len(observers))
        return self

    def subscribe(self, observer: Subscription[S]) -> SubscriptionToken:
        """Call observer(state) after every future dispatch. Not called now.

        Usage:
            log = []
            token = store.subscribe(lambda state: log.append(state))
            store.dispatch(Increment())   # log == [1]
            store.unsubscribe(token)
        """
        token = self._subscriptions.add(observer)
        logger.debug("Subscribed %r (%d active)", token, len(self._subscriptions))
        return token

    def unsubscribe(self, token: SubscriptionToken) -> None:
        """Stop notifying the observer registered under token.

        Raises UnsubscribeError (carrying the token) if nothing is registered
        under it: never issued, already removed, or issued by another store.
        The registry is left unchanged in that case.
        """
        if self._subscriptions.remove(token) is None:
            raise UnsubscribeError(token)
        logger.debug("Unsubscribed %r (%d active)", token, len(self._subscriptions))

    def replace_reducer(self, reducer: Reducer[S, A]) -> None:
        """Swap the transition function. State and subscriptions are kept."""
        if self._dispatching:
            raise ReentrantDispatchError(reducer)
        logger.info(
            "Replaced reducer: %s -> %s",
            _callable_name(self._reducer), _callable_name(reducer),
        )
        self._reducer = reducer

    def subscription_count(self) -> int:
        return len(self._subscriptions)

    def is_dispatching(self) -> bool:
        return self._dispatching

    def dispose(self) -> None:
        """Drop every subscription without notifying. The store stays usable."""
        self._subscriptions.clear()

    def __repr__(self) -> str:
        label = self.name or _callable_name(self._reducer)
        return f"Store({label}, state={self._state!r}, subscriptions={len(self._subscriptions)})"
