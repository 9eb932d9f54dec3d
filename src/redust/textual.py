"""Textual integration for redust. Opt-in, requires textual.

Guarding, NoMatches suppression and thread marshalling live here so that
observers updating widgets stay plain functions of the state. The core
store knows nothing about Textual.

_paused_apps is owned by this module; an id is present only while inside
a pause() block for that app.
"""

import logging
import threading
from contextlib import contextmanager

from textual.css.query import NoMatches

from redust import selector as _selector

logger = logging.getLogger("redust.textual")

# Keyed by id(app) so several apps can coexist in tests.
_paused_apps: set[int] = set()


@contextmanager
def pause(app):
    """Suspend guarded observers for app during widget replacement."""
    key = id(app)
    _paused_apps.add(key)
    try:
        yield
    finally:
        _paused_apps.discard(key)


def is_safe(app) -> bool:
    """Is the widget tree in a queryable state?"""
    return app.is_running and id(app) not in _paused_apps


def _guard(app, fn):
    main = threading.get_ident()

    def _safe(value):
        try:
            fn(value)
        except NoMatches:
            logger.debug("Observer %r found no matching widget, skipped", fn)

    def _guarded(value):
        if not is_safe(app):
            return
        if threading.get_ident() != main:
            app.call_from_thread(_safe, value)
        else:
            _safe(value)

    return _guarded


def subscribe(app, store, observer):
    """store.subscribe() for observers that touch Textual widgets.

    Skipped while the app is paused or not running, marshalled through
    app.call_from_thread when the dispatch comes from another thread, and
    NoMatches from widget queries is suppressed.
    """
    return store.subscribe(_guard(app, observer))


def subscribe_selector(app, store, selector, observer, *, fire_immediately=False):
    """redust.selector.subscribe_selector() with the same guard as subscribe()."""
    return _selector.subscribe_selector(
        store, selector, _guard(app, observer), fire_immediately=fire_immediately,
    )
