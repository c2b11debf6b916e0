"""Hash tables with separate chaining and with open addressing."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from algolab.hashfuncs import basic_hash, djb_hash, sdbm_hash


@dataclass
class _Entry:
    key: str
    value: Any


@dataclass
class _Slot:
    key: str
    value: Any
    deleted: bool = False


def _check_size(size: int) -> None:
    if size <= 0:
        raise ValueError("table size must be positive")


class ChainHash:
    """Hash table resolving collisions by chaining entries in each bucket."""

    def __init__(self, size: int) -> None:
        _check_size(size)
        self.size = size
        self._buckets: list[list[_Entry]] = [[] for _ in range(size)]
        self.collisions = 0
        self.probes = 0

    def _bucket(self, key: str) -> list[_Entry]:
        return self._buckets[sdbm_hash(key, self.size)]

    def insert(self, key: str, value: Any) -> None:
        """Append an entry; landing in a non-empty bucket counts as a collision."""
        bucket = self._bucket(key)
        if bucket:
            self.collisions += 1
        bucket.append(_Entry(key, value))

    def search(self, key: str) -> Any | None:
        """Return the value for ``key``, or None; a hit adds its chain position to the probes."""
        for position, entry in enumerate(self._bucket(key), start=1):
            if entry.key == key:
                self.probes += position
                return entry.value
        return None

    def delete(self, key: str) -> bool:
        """Remove the first entry for ``key``; return whether one was found."""
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if entry.key == key:
                del bucket[position]
                return True
        return False

    def reset_probes(self) -> None:
        self.probes = 0


class _OpenAddressing(ABC):
    """Open-addressing table; deleted slots are kept as tombstones."""

    def __init__(self, size: int) -> None:
        _check_size(size)
        self.size = size
        self._slots: list[_Slot | None] = [None] * size
        self.collisions = 0
        self.probes = 0

    @abstractmethod
    def _index(self, key: str, attempt: int) -> int:
        """Slot examined on the given attempt for ``key``."""

    def _find(self, key: str) -> tuple[int, int] | None:
        for attempt in range(self.size):
            index = self._index(key, attempt)
            slot = self._slots[index]
            if slot is None:
                return None
            if slot.key == key:
                return None if slot.deleted else (index, attempt)
        return None

    def _store(self, key: str, value: Any) -> None:
        for attempt in range(self.size):
            index = self._index(key, attempt)
            slot = self._slots[index]
            if slot is None or slot.deleted:
                self._slots[index] = _Slot(key, value)
                return
            self.collisions += 1
        raise OverflowError(f"no free slot found for {key!r}")

    def _lookup(self, key: str) -> Any | None:
        found = self._find(key)
        if found is None:
            return None
        index, attempt = found
        self.probes += max(attempt, 1)
        return self._slots[index].value

    def _discard(self, key: str) -> bool:
        found = self._find(key)
        if found is None:
            return False
        self._slots[found[0]].deleted = True
        return True


class DoubleHash(_OpenAddressing):
    """Open addressing with a DJB primary hash and a letter-sum step."""

    def _index(self, key: str, attempt: int) -> int:
        return (djb_hash(key, self.size) + attempt * basic_hash(key)) % self.size

    def insert(self, key: str, value: Any) -> None:
        """Store in the first free or deleted slot; each occupied slot passed is a collision."""
        self._store(key, value)

    def search(self, key: str) -> Any | None:
        """Return the value for ``key``, or None."""
        return self._lookup(key)

    def delete(self, key: str) -> bool:
        """Mark the slot holding ``key`` deleted; return whether it was present."""
        return self._discard(key)

    def reset_probes(self) -> None:
        self.probes = 0


class CustomProbing(_OpenAddressing):
    """Open addressing with an SDBM primary hash, a linear and a quadratic term."""

    def __init__(self, size: int, c1: int, c2: int) -> None:
        super().__init__(size)
        self.c1 = c1
        self.c2 = c2

    def _index(self, key: str, attempt: int) -> int:
        raw = (
            sdbm_hash(key, self.size)
            + attempt * self.c1 * basic_hash(key)
            + self.c2 * attempt * attempt
        )
        return abs(raw) % self.size

    def insert(self, key: str, value: Any) -> None:
        """Store in the first free or deleted slot; each occupied slot passed is a collision."""
        self._store(key, value)

    def search(self, key: str) -> Any | None:
        """Return the value for ``key``, or None."""
        return self._lookup(key)

    def delete(self, key: str) -> bool:
        """Mark the slot holding ``key`` deleted; return whether it was present."""
        return self._discard(key)

    def reset_probes(self) -> None:
        self.probes = 0