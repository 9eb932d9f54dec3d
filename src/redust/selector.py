"""Selector subscriptions: observers that only fire when a slice changes.

A plain subscription fires after every dispatch. subscribe_selector()
runs selector(state) after each dispatch and calls the observer with the
selected value only when it differs from the previous one.
"""

from __future__ import annotations

import logging
import operator
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

if TYPE_CHECKING:
    from redust.store import Store
    from redust.subscription import SubscriptionToken

logger = logging.getLogger("redust.selector")

S = TypeVar("S")
T = TypeVar("T")


class _SelectorObserver(Generic[S, T]):
    """Internal: the observer registered on the store by subscribe_selector."""

    __slots__ = ("_selector", "_observer", "_equals", "_last_value")

    def __init__(
        self,
        selector: Callable[[S], T],
        observer: Callable[[T], None],
        equals: Callable[[T, T], bool],
        initial: T,
    ) -> None:
        self._selector = selector
        self._observer = observer
        self._equals = equals
        self._last_value = initial

    def __call__(self, state: S) -> None:
        new_value = self._selector(state)
        if self._equals(new_value, self._last_value):
            return
        self._last_value = new_value
        self._observer(new_value)

    def __repr__(self) -> str:
        name = getattr(self._selector, "__name__", type(self._selector).__name__)
        return f"_SelectorObserver({name}, last={self._last_value!r})"


def subscribe_selector(
    store: Store[S, Any],
    selector: Callable[[S], T],
    observer: Callable[[T], None],
    *,
    fire_immediately: bool = False,
    equals: Callable[[T, T], bool] = operator.eq,
) -> SubscriptionToken:
    """Call observer(selector(state)) whenever the selected value changes.

    The current selection is taken at subscription time, so the first
    dispatch only fires if it changes that value. Pass fire_immediately=True
    to also receive the current selection right away.

    Returns an ordinary token: store.unsubscribe(token) removes it.

    Usage:
        names = []
        token = subscribe_selector(
            store,
            lambda state: state["user"]["name"],
            lambda name: names.append(name),
        )
        store.dispatch(Rename("Bob"))   # names == ["Bob"]
        store.dispatch(Touch())         # names == ["Bob"]: name unchanged
    """
    initial = selector(store.state())
    wrapped = _SelectorObserver(selector, observer, equals, initial)
    token = store.subscribe(wrapped)
    logger.debug("Selector subscription %r registered with %r", token, initial)
    if fire_immediately:
        observer(initial)
    return token
