# region Imports
from typing import Generic, List, Optional, TypeVar

from wizard_pathfinder.config import HEAP_CAPACITY
# endregion

T = TypeVar("T")


# region Min Heap
class MinHeap(Generic[T]):
    """
    Array-backed binary min-heap, 1-indexed (slot 0 unused). Items only need
    ``<``. There is no decrease-key: callers push a fresh entry and skip the
    stale one when it surfaces.
    """

    def __init__(self, capacity: int = HEAP_CAPACITY):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._capacity = capacity
        self._size = 0
        self._heap: List[Optional[T]] = [None] * (capacity + 1)

    # region Internals
    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    def _percolate_up(self, i: int) -> None:
        heap = self._heap
        while i > 1 and heap[i] < heap[i // 2]:
            self._swap(i, i // 2)
            i //= 2

    def _percolate_down(self, i: int) -> None:
        heap = self._heap
        while 2 * i <= self._size:
            child = 2 * i
            if child < self._size and heap[child + 1] < heap[child]:
                child += 1
            if not heap[child] < heap[i]:
                break
            self._swap(i, child)
            i = child

    def _grow(self) -> None:
        self._heap.extend([None] * self._capacity)
        self._capacity *= 2
    # endregion

    # region Operations
    def insert(self, item: T) -> None:
        if self._size >= self._capacity:
            self._grow()
        self._size += 1
        self._heap[self._size] = item
        self._percolate_up(self._size)

    def extract_min(self) -> Optional[T]:
        if self._size == 0:
            return None
        top = self._heap[1]
        self._heap[1] = self._heap[self._size]
        self._heap[self._size] = None
        self._size -= 1
        self._percolate_down(1)
        return top

    def peek(self) -> Optional[T]:
        return self._heap[1] if self._size else None

    def is_empty(self) -> bool:
        return self._size == 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._size
    # endregion
# endregion
