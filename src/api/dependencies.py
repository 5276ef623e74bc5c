"""Shared FastAPI dependencies.

Separated to avoid circular imports between route modules.
"""

from __future__ import annotations

from functools import lru_cache

from relay.broadcast import BroadcastRelay


@lru_cache(maxsize=1)
def _relay_factory() -> BroadcastRelay:
    # One channel set per process; every WebSocket on this worker shares it.
    return BroadcastRelay()


def get_relay() -> BroadcastRelay:
    return _relay_factory()
