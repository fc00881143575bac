from typing import Any, Iterable, List, Optional

from array_ import Array, INITIAL_CAPACITY
from errors import NullElement
from logger import get_logger
from ordering import Compare, resolve_compare
from queue_ import Queue

EMPTY_HEAP = "[]"

log = get_logger(__name__)


class Heap(Queue):
    """Binary min-heap over a growable array.

    Priority comes from ``compare(a, b)`` (negative when ``a`` goes first)
    or, without one, from the elements' own ``<``. Both sift operations
    plan their moves with comparisons before touching the storage, so a
    comparison that raises leaves the heap exactly as it was.
    """

    def __init__(self, capacity: int = INITIAL_CAPACITY, compare: Optional[Compare] = None):
        self.heap = Array(capacity)
        self.compare = resolve_compare(compare)

    @classmethod
    def from_sequence(cls, elements: Iterable[Any], compare: Optional[Compare] = None) -> "Heap":
        """Build a heap by inserting each element in iteration order."""
        if not hasattr(elements, "__len__"):
            elements = list(elements)
        heap = cls(len(elements), compare)
        for data in elements:
            heap.insert(data)
        return heap

    def insert(self, data) -> bool:
        if data is None:
            log.debug("Rejected None element")
            raise NullElement()

        path = self._sift_up_path(self.heap.length(), data)
        self.heap.insert(data)

        i = self.heap.length() - 1
        for parent in path:
            self.heap.swap(i, parent)
            i = parent
        return True

    def extract_min(self, default=None):
        if self.heap.length() == 0:
            return default

        last_index = self.heap.length() - 1
        last = self.heap.get(last_index)
        path = self._sift_down_path(last, last_index)

        min_element = self.heap.get(0)
        self.heap.pop()
        if last_index > 0:
            self.heap.set(0, last)
            i = 0
            for child in path:
                self.heap.swap(i, child)
                i = child
        return min_element

    def peek(self, default=None):
        if self.heap.length() == 0:
            return default
        return self.heap.get(0)

    def size(self) -> int:
        return self.heap.length()

    def is_empty(self) -> bool:
        return self.heap.length() == 0

    def capacity(self) -> int:
        return self.heap.capacity()

    # Walks from the slot at i towards the root and returns the parents the
    # new element would be swapped with. Ties stop the walk.
    def _sift_up_path(self, i, data) -> List[int]:
        path = []
        while i > 0:
            parent = (i - 1) // 2
            if self.compare(data, self.heap.get(parent)) >= 0:
                break
            path.append(parent)
            i = parent
        return path

    # Same for an element placed at the root of a heap holding the first
    # `length` slots. The right child is taken only when strictly lower.
    def _sift_down_path(self, data, length) -> List[int]:
        path = []
        i = 0
        while 2 * i + 1 < length:
            left = 2 * i + 1
            right = left + 1
            smallest = left
            if right < length and self.compare(self.heap.get(right), self.heap.get(left)) < 0:
                smallest = right
            if self.compare(data, self.heap.get(smallest)) <= 0:
                break
            path.append(smallest)
            i = smallest
        return path

    def render(self) -> str:
        """Level-order dump, one heap level per line."""
        if self.heap.length() == 0:
            return EMPTY_HEAP

        lines = []
        level_size = 1
        i = 0
        while i < self.heap.length():
            end = min(i + level_size, self.heap.length())
            lines.append("".join(f"{self.heap.get(j)} " for j in range(i, end)) + "\n")
            i = end
            level_size *= 2
        return "".join(lines)

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"Heap(size={self.heap.length()}, capacity={self.heap.capacity()})"

    def __len__(self):
        return self.heap.length()

    def __bool__(self):
        return self.heap.length() > 0
