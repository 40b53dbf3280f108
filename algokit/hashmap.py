"""A fixed-size hash map with separate chaining."""

from __future__ import annotations


class ChainedHashMap:
    """Integer-to-integer map over a fixed table of chained buckets."""

    SIZE = 19997
    MULTIPLIER = 12582917

    def __init__(self) -> None:
        self._buckets: list[list[tuple[int, int]]] = [[] for _ in range(self.SIZE)]

    def _bucket(self, key: int) -> list[tuple[int, int]]:
        return self._buckets[key * self.MULTIPLIER % self.SIZE]

    def put(self, key: int, value: int) -> None:
        """Store value under key, replacing any earlier value."""
        self.remove(key)
        self._bucket(key).insert(0, (key, value))

    def get(self, key: int) -> int:
        """Return the value stored under key, or -1 if there is none."""
        for stored_key, value in self._bucket(key):
            if stored_key == key:
                return value
        return -1

    def remove(self, key: int) -> None:
        """Drop key from the map if it is present."""
        bucket = self._bucket(key)
        for position, (stored_key, _) in enumerate(bucket):
            if stored_key == key:
                del bucket[position]
                return

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return any(stored_key == key for stored_key, _ in self._bucket(key))

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)