"""Singleton: one shared mapping, created once, safely across threads."""

from __future__ import annotations

import threading

_lock = threading.Lock()
_instance: dict[str, str] | None = None


def instance() -> dict[str, str]:
    """Return the one shared mapping, creating it on first use."""
    global _instance
    with _lock:
        if _instance is None:
            _instance = {}
        return _instance