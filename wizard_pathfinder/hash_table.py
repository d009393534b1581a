# region Imports
from typing import Any, Callable, Generic, Iterator, List, Optional, Tuple, TypeVar

from wizard_pathfinder.config import HASH_TABLE_CAPACITY, MAX_LOAD_FACTOR
# endregion

K = TypeVar("K")
V = TypeVar("V")


# region Absent Marker
class _Absent:
    """Returned by ``HashTable.get`` for a missing key; never a stored value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "ABSENT"

    def __bool__(self):
        return False


ABSENT = _Absent()
# endregion


# region Hash Table
class _Entry:
    __slots__ = ("key", "value", "next")

    def __init__(self, key, value, next=None):
        self.key = key
        self.value = value
        self.next = next


class HashTable(Generic[K, V]):
    """
    Separate-chaining hash map. Each bucket holds a singly linked chain of
    entries, newest first. The bucket array doubles once the load factor goes
    over ``MAX_LOAD_FACTOR`` and every entry is rehashed into the new array.
    """

    def __init__(self, capacity: int = HASH_TABLE_CAPACITY):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._buckets: List[Optional[_Entry]] = [None] * capacity
        self._size = 0

    # region Internals
    def _bucket_index(self, key) -> int:
        return hash(key) % len(self._buckets)

    def _find(self, key) -> Optional[_Entry]:
        entry = self._buckets[self._bucket_index(key)]
        while entry is not None:
            if entry.key == key:
                return entry
            entry = entry.next
        return None

    def _resize(self) -> None:
        old = self._buckets
        self._buckets = [None] * (2 * len(old))
        for head in old:
            while head is not None:
                nxt = head.next
                i = self._bucket_index(head.key)
                head.next = self._buckets[i]
                self._buckets[i] = head
                head = nxt
    # endregion

    # region Operations
    def put(self, key: K, value: V) -> bool:
        """Insert or update. Always succeeds."""
        entry = self._find(key)
        if entry is not None:
            entry.value = value
            return True

        i = self._bucket_index(key)
        self._buckets[i] = _Entry(key, value, self._buckets[i])
        self._size += 1
        if self._size / len(self._buckets) > MAX_LOAD_FACTOR:
            self._resize()
        return True

    def get(self, key: K) -> Any:
        entry = self._find(key)
        return ABSENT if entry is None else entry.value

    def get_or_default(self, key: K, default: V) -> V:
        entry = self._find(key)
        return default if entry is None else entry.value

    def get_or_insert(self, key: K, factory: Callable[[], V] = list) -> V:
        entry = self._find(key)
        if entry is not None:
            return entry.value
        value = factory()
        self.put(key, value)
        return value

    def remove(self, key: K) -> bool:
        i = self._bucket_index(key)
        prev = None
        entry = self._buckets[i]
        while entry is not None:
            if entry.key == key:
                if prev is None:
                    self._buckets[i] = entry.next
                else:
                    prev.next = entry.next
                self._size -= 1
                return True
            prev = entry
            entry = entry.next
        return False

    def contains_key(self, key: K) -> bool:
        return self._find(key) is not None
    # endregion

    # region Python Protocol
    @property
    def capacity(self) -> int:
        return len(self._buckets)

    def items(self) -> Iterator[Tuple[K, V]]:
        for head in self._buckets:
            while head is not None:
                yield head.key, head.value
                head = head.next

    def keys(self) -> Iterator[K]:
        for key, _ in self.items():
            yield key

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key) -> bool:
        return self.contains_key(key)

    def __getitem__(self, key: K) -> V:
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def __repr__(self):
        return f"HashTable(size={self._size}, capacity={len(self._buckets)})"
    # endregion
# endregion
