"""Fixed-bucket hash map backing JSON object members."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING
from typing import Final

if TYPE_CHECKING:
    from ._arena import Arena
    from ._value import JsonValue

DEFAULT_BUCKET_COUNT: Final = 32

_DJB2_SEED: Final = 5381
_SIZE_MASK: Final = (1 << 64) - 1


def djb2(key: bytes) -> int:
    """
    Daniel J. Bernstein's string hash: hash * 33 + byte, seeded at 5381.

    Wraps at 64 bits like a size_t accumulator.
    """
    h = _DJB2_SEED
    for byte in key:
        h = ((h << 5) + h + byte) & _SIZE_MASK
    return h


@dataclass(eq=False, slots=True)
class MapEntry:
    """Chain link: owns its key, refers to a value owned elsewhere."""

    key: bytes
    value: JsonValue
    next: MapEntry | None = None


class ObjectMap:
    """
    Hash map with a fixed number of buckets, each heading a singly linked
    chain of entries.

    Only insertion and lookup are supported; a key may be inserted once.
    New entries become the chain head, so chain order is reverse
    insertion order. When built with an arena, entries are charged to it
    and share its lifetime.
    """

    __slots__ = ("_arena", "_buckets", "_size", "bucket_count")

    def __init__(
        self,
        bucket_count: int = DEFAULT_BUCKET_COUNT,
        arena: Arena | None = None,
    ) -> None:
        if not isinstance(bucket_count, int) or bucket_count < 1:
            raise ValueError("bucket_count must be a positive integer")

        self.bucket_count = bucket_count
        self._buckets: list[MapEntry | None] = [None] * bucket_count
        self._size = 0
        self._arena = arena

    def _index(self, key: bytes) -> int:
        return djb2(key) % self.bucket_count

    def _find(self, key: bytes) -> MapEntry | None:
        entry = self._buckets[self._index(key)]
        while entry is not None and entry.key != key:
            entry = entry.next
        return entry

    def insert(self, key: bytes, value: JsonValue) -> bool:
        """
        Links `value` under `key`.

        Returns False, leaving the map untouched, if the key is already
        present; the first binding for a key always wins.
        """
        if key is None:
            raise TypeError("key cannot be None")
        if value is None:
            raise TypeError("value cannot be None")

        index = self._index(key)
        entry = self._buckets[index]
        while entry is not None:
            if entry.key == key:
                return False
            entry = entry.next

        new_entry = MapEntry(bytes(key), value, self._buckets[index])
        if self._arena is not None:
            self._arena.adopt(new_entry)
        self._buckets[index] = new_entry
        self._size += 1
        return True

    def lookup(self, key: bytes) -> JsonValue | None:
        """Returns the value bound to `key`, or None if absent."""
        entry = self._find(key)
        return entry.value if entry is not None else None

    def delete(self) -> None:
        """
        Unlinks every entry and releases each value tree it refers to.

        Only needed for maps built without an arena; an arena's bulk
        release supersedes it.
        """
        for index, entry in enumerate(self._buckets):
            while entry is not None:
                entry.value.release()
                following = entry.next
                entry.next = None
                entry = following
            self._buckets[index] = None
        self._size = 0

    def chain(self, index: int) -> Iterator[MapEntry]:
        """Walks one bucket's chain from its head."""
        entry = self._buckets[index]
        while entry is not None:
            yield entry
            entry = entry.next

    def __getitem__(self, key: bytes) -> JsonValue:
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, bytes) and self._find(key) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[tuple[bytes, JsonValue]]:
        for index in range(self.bucket_count):
            for entry in self.chain(index):
                yield entry.key, entry.value

    def keys(self) -> list[bytes]:
        return [key for key, _ in self]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectMap):
            return NotImplemented
        if len(self) != len(other):
            return False
        for key, value in self:
            theirs = other.lookup(key)
            if theirs is None or theirs != value:
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        members = ", ".join(f"{key!r}: {value!r}" for key, value in self)
        return f"ObjectMap({{{members}}})"
