"""
Fixed-size, separately chained key/value cache.

The container is domain-agnostic: keys only need ``__hash__`` and ``__eq__``.
Bucket placement is ``hash(key) % bucket_count``; each bucket is a chain of
entries searched linearly. The bucket count never changes after construction,
so callers size it from what they expect to store.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Iterator, Optional, TypeVar

from ..errors import MemoKeyError

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass
class _Entry(Generic[K, V]):
    key: K
    value: V


class MemoCache(Generic[K, V]):
    def __init__(
        self,
        bucket_count: int,
        *,
        key_repr: Callable[[K], str] = str,
        value_repr: Callable[[V], str] = str,
    ) -> None:
        if bucket_count < 1:
            raise ValueError(f"bucket_count must be positive: {bucket_count}")
        self._bucket_count = bucket_count
        self._key_repr = key_repr
        self._value_repr = value_repr
        self._buckets: list[list[_Entry[K, V]]] = [[] for _ in range(bucket_count)]
        self._size = 0

    @property
    def bucket_count(self) -> int:
        return self._bucket_count

    def _chain(self, key: K) -> list[_Entry[K, V]]:
        return self._buckets[hash(key) % self._bucket_count]

    def _find(self, chain: list[_Entry[K, V]], key: K) -> Optional[_Entry[K, V]]:
        for entry in chain:
            if entry.key == key:
                return entry
        return None

    def insert(self, key: K, value: V) -> None:
        """Insert or overwrite."""
        chain = self._chain(key)
        found = self._find(chain, key)
        if found is not None:
            found.value = value
            return
        # New entries go to the front of the chain.
        chain.insert(0, _Entry(key, value))
        self._size += 1

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        found = self._find(self._chain(key), key)
        return default if found is None else found.value

    def remove(self, key: K) -> V:
        """Remove ``key`` and return its value; raises ``MemoKeyError`` if absent."""
        chain = self._chain(key)
        for i, entry in enumerate(chain):
            if entry.key == key:
                del chain[i]
                self._size -= 1
                return entry.value
        raise MemoKeyError(f"Key '{self._key_repr(key)}' not found.")

    def discard(self, key: K) -> None:
        """Remove ``key`` if present."""
        chain = self._chain(key)
        for i, entry in enumerate(chain):
            if entry.key == key:
                del chain[i]
                self._size -= 1
                return

    def clear(self) -> None:
        for chain in self._buckets:
            chain.clear()
        self._size = 0

    def entries(self) -> Iterator[tuple[K, V]]:
        for chain in self._buckets:
            for entry in chain:
                yield entry.key, entry.value

    def dump(self) -> str:
        """One ``(key : value)`` line per entry, bucket order."""
        return "\n".join(
            f"({self._key_repr(k)} : {self._value_repr(v)})" for k, v in self.entries()
        )

    def __contains__(self, key: object) -> bool:
        return self._find(self._chain(key), key) is not None  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"MemoCache(bucket_count={self._bucket_count}, size={self._size})"
