import numpy as np

from errors import InvalidCapacity
from logger import get_logger

# Storage configuration
INITIAL_CAPACITY = 8
GROWTH_FACTOR = 2

log = get_logger(__name__)


class Array:
    """Capacity-tracked buffer of object slots.

    Capacity doubles when an insert finds the buffer full (an empty buffer
    grows to INITIAL_CAPACITY) and never shrinks: removing elements only
    resets the vacated slots to None.
    """

    def __init__(self, size=INITIAL_CAPACITY):
        if size < 0:
            raise InvalidCapacity(size)
        self.size = size
        self.index = 0
        self.elements = np.empty(size, dtype=object)

    def _resize(self):
        new_size = self.size * GROWTH_FACTOR if self.size else INITIAL_CAPACITY
        elements = np.empty(new_size, dtype=object)
        elements[:self.index] = self.elements[:self.index]
        log.debug("Growing storage from %d to %d slots", self.size, new_size)
        self.size = new_size
        self.elements = elements

    def insert(self, data):
        if self.index >= self.size:
            self._resize()
        self.elements[self.index] = data
        self.index += 1

    def get(self, i):
        if i < 0 or i >= self.index:
            raise IndexError(f"Index {i} out of range for length {self.index}")
        return self.elements[i]

    def set(self, i, data):
        if i < 0 or i >= self.index:
            raise IndexError(f"Index {i} out of range for length {self.index}")
        self.elements[i] = data

    def swap(self, i, j):
        self.elements[i], self.elements[j] = self.elements[j], self.elements[i]

    def pop(self):
        """Remove and return the last element, clearing its slot."""
        if self.index == 0:
            raise IndexError("pop from empty array")
        self.index -= 1
        data = self.elements[self.index]
        self.elements[self.index] = None
        return data

    def length(self):
        return self.index

    def capacity(self):
        return self.size

    def __iter__(self):
        for i in range(self.index):
            yield self.elements[i]
