"""Exceptions raised by redust itself.

Reducer and observer exceptions are never wrapped; they reach the
dispatch caller unchanged.
"""

from __future__ import annotations


class RedustError(Exception):
    """Base exception for all redust errors."""


class UnsubscribeError(RedustError):
    """No subscription is registered under the given token."""

    def __init__(self, token: object) -> None:
        self.token = token
        super().__init__(f"Cannot find the subscription by token: {token!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnsubscribeError):
            return NotImplemented
        return self.token == other.token

    def __hash__(self) -> int:
        return hash((UnsubscribeError, self.token))


class ReentrantDispatchError(RedustError):
    """dispatch() (or replace_reducer()) called while the store is dispatching."""

    def __init__(self, action: object) -> None:
        self.action = action
        super().__init__(f"Cannot dispatch {action!r} while another dispatch is in progress")
