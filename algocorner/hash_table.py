"""A hash table of integer keys resolving collisions by sorted chaining."""

from __future__ import annotations

import bisect


class ChainedHashTable:
    """Integer keys hashed by ``key % buckets``; each bucket is kept sorted."""

    def __init__(self, buckets: int = 10) -> None:
        if buckets <= 0:
            raise ValueError(f"bucket count must be positive, got {buckets}")
        self._chains: list[list[int]] = [[] for _ in range(buckets)]

    def bucket_index(self, key: int) -> int:
        """Return the bucket that ``key`` hashes to."""
        return key % len(self._chains)

    def insert(self, key: int) -> None:
        """Insert ``key`` into its bucket, keeping the bucket in ascending order."""
        bisect.insort(self._chains[self.bucket_index(key)], key)

    def search(self, key: int) -> int | None:
        """Return ``key`` if it is stored, otherwise None."""
        chain = self._chains[self.bucket_index(key)]
        position = bisect.bisect_left(chain, key)
        if position < len(chain) and chain[position] == key:
            return chain[position]
        return None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None

    def bucket(self, index: int) -> tuple[int, ...]:
        """Return the keys stored in bucket ``index``, in ascending order."""
        return tuple(self._chains[index])