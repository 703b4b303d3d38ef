"""Seed for the hash function used by object tables."""

from __future__ import annotations

import os
import threading
import time

_MASK = 0xFFFFFFFF

_seed = 0
_lock = threading.Lock()


def _seed_from_urandom() -> int | None:
    try:
        data = os.urandom(4)
    except (OSError, NotImplementedError):
        return None
    if len(data) != 4:
        return None
    return int.from_bytes(data, "big")


def _seed_from_timestamp_and_pid() -> int:
    now = time.time_ns()
    seconds = (now // 1_000_000_000) & _MASK
    microseconds = (now // 1000) % 1_000_000
    return (seconds ^ microseconds ^ os.getpid()) & _MASK


def generate_seed() -> int:
    """Return a random 32-bit seed that is never zero."""
    seed = _seed_from_urandom()
    if seed is None:
        seed = _seed_from_timestamp_and_pid()
    return seed or 1


def object_seed(seed: int = 0) -> None:
    """Set the hash seed once; later calls have no effect.

    A seed of zero (after truncation to 32 bits) asks for a random one.
    """
    global _seed
    if _seed:
        return
    with _lock:
        if _seed:
            return
        new_seed = seed & _MASK
        if new_seed == 0:
            new_seed = generate_seed()
        _seed = new_seed


def current_seed() -> int:
    """Return the hash seed, or zero if none has been set yet."""
    return _seed