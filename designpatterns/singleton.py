"""Singleton: a lazily created, thread-safe single instance."""

from __future__ import annotations

import threading


class Singleton:
    """The class of which only one instance is handed out."""


_instance: Singleton | None = None
_lock = threading.Lock()


def get_instance() -> Singleton:
    """Return the single shared instance, creating it on first use."""
    global _instance
    if _instance is None:
        with _lock:
            if _instance is None:
                _instance = Singleton()
    return _instance