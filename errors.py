class HeapError(Exception):
    """Base class for every failure raised by the heap and its storage."""


class InvalidCapacity(HeapError, ValueError):
    def __init__(self, capacity):
        super().__init__(f"Capacity must be non-negative, got {capacity}")
        self.capacity = capacity


class NullElement(HeapError, ValueError):
    def __init__(self):
        super().__init__("Element should not be None")


class IncomparableElements(HeapError, TypeError):
    def __init__(self, a, b):
        super().__init__(
            f"Elements must be comparable or a compare function must be provided: "
            f"{type(a).__name__!r} and {type(b).__name__!r}"
        )
        self.left = a
        self.right = b
