"""A fixed-size hash set resolving collisions by chaining."""

from __future__ import annotations

from typing import Iterable, Iterator

ARRAY_SIZE = 7


def hash_key(key: str) -> int:
    """Sum of the character code points of ``key`` modulo ``ARRAY_SIZE``."""
    return sum(map(ord, key)) % ARRAY_SIZE


class ChainedHashSet:
    """A set of strings in ``ARRAY_SIZE`` buckets; new keys go to a bucket's front."""

    def __init__(self, keys: Iterable[str] = ()) -> None:
        self._buckets: list[list[str]] = [[] for _ in range(ARRAY_SIZE)]
        for key in keys:
            self.insert(key)

    def insert(self, key: str) -> None:
        """Add ``key``; adding a present key does nothing."""
        bucket = self._buckets[hash_key(key)]
        if key not in bucket:
            bucket.insert(0, key)

    def delete(self, key: str) -> None:
        """Remove ``key``; raise KeyError if it is absent."""
        bucket = self._buckets[hash_key(key)]
        try:
            bucket.remove(key)
        except ValueError:
            raise KeyError(key) from None

    def bucket(self, index: int) -> list[str]:
        """Keys in bucket ``index``, most recently inserted first."""
        return list(self._buckets[index])

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._buckets[hash_key(key)]

    def __iter__(self) -> Iterator[str]:
        for bucket in self._buckets:
            yield from bucket

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)