"""Ordered string-keyed table used to hold the members of JSON objects."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

V = TypeVar("V")


def _check_key(key: object) -> str:
    if not isinstance(key, str):
        raise TypeError(f"hash table keys must be str, not {type(key).__name__}")
    return key


class HashTable(Generic[V]):
    """A mapping from string keys to values that keeps insertion order.

    Replacing the value of an existing key keeps the key in its original
    place. Iteration works on a snapshot of the keys, so the table may be
    modified while it is being walked; pairs deleted in the meantime are
    skipped.
    """

    def __init__(self) -> None:
        self._pairs: dict[str, V] = {}

    def set(self, key: str, value: V) -> None:
        """Add a pair, or replace the value of an existing key."""
        self._pairs[_check_key(key)] = value

    def get(self, key: str) -> V | None:
        """Return the value stored under ``key``, or None if there is none."""
        return self._pairs.get(_check_key(key))

    def delete(self, key: str) -> None:
        """Remove ``key``; raise KeyError if it is not present."""
        try:
            del self._pairs[_check_key(key)]
        except KeyError:
            raise KeyError(key) from None

    def clear(self) -> None:
        """Remove every pair."""
        self._pairs.clear()

    def _walk(self, keys: list[str]) -> Iterator[tuple[str, V]]:
        for key in keys:
            if key in self._pairs:
                yield key, self._pairs[key]

    def items_from(self, key: str) -> Iterator[tuple[str, V]]:
        """Iterate over the pairs starting at ``key``, in insertion order.

        Yields nothing if ``key`` is not in the table.
        """
        _check_key(key)
        keys = list(self._pairs)
        if key not in self._pairs:
            return iter(())
        return self._walk(keys[keys.index(key):])

    def keys(self) -> list[str]:
        """Return the keys in insertion order."""
        return list(self._pairs)

    def items(self) -> Iterator[tuple[str, V]]:
        """Iterate over the (key, value) pairs in insertion order."""
        return self._walk(list(self._pairs))

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self.items())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._pairs

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._pairs!r})"