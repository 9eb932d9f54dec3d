"""Reducer composition for mapping-shaped state."""

from __future__ import annotations

from typing import Any, Mapping

from redust.subscription import Reducer


def combine_reducers(reducers: Mapping[str, Reducer[Any, Any]]) -> Reducer[Mapping[str, Any], Any]:
    """Build one reducer out of per-key slice reducers.

    Every slice reducer sees the same action. If no slice changed (by
    identity) the original state object is returned, otherwise a new dict.
    Keys without a reducer are carried over; missing keys start as None.

    Usage:
        def counter(state, action):
            return (state or 0) + 1 if action == "inc" else state

        def history(state, action):
            return (state or ()) + (action,)

        reducer = combine_reducers({"counter": counter, "history": history})
        store = Store(reducer, {"counter": 0, "history": ()})
        store.dispatch("inc").state()
        # {"counter": 1, "history": ("inc",)}
    """
    if not reducers:
        raise ValueError("combine_reducers() needs at least one reducer")
    slices = dict(reducers)

    def combined(state: Mapping[str, Any], action: Any) -> Mapping[str, Any]:
        changed = False
        next_state = dict(state)
        for key, reducer in slices.items():
            previous = state.get(key)
            result = reducer(previous, action)
            if result is not previous or key not in state:
                changed = True
            next_state[key] = result
        return next_state if changed else state

    combined.__qualname__ = f"combine_reducers({', '.join(slices)})"
    return combined
