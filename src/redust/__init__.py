"""redust: a Redux-style single-state store for Python."""

from importlib.metadata import version as _version

__version__ = _version("redust")

from redust.errors import RedustError, UnsubscribeError, ReentrantDispatchError
from redust.subscription import Reducer, Subscription, SubscriptionToken, SubscriptionRegistry
from redust.store import Store
from redust.reducers import combine_reducers
from redust.selector import subscribe_selector
# textual bridge NOT auto-imported, opt-in only

__all__ = [
    "Store",
    "Reducer",
    "Subscription",
    "SubscriptionToken",
    "SubscriptionRegistry",
    "RedustError",
    "UnsubscribeError",
    "ReentrantDispatchError",
    "combine_reducers",
    "subscribe_selector",
]
