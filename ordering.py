from typing import Any, Callable, Optional

from errors import IncomparableElements

Compare = Callable[[Any, Any], int]


def natural_order(a, b) -> int:
    """Compare two elements by their own ordering: -1, 0 or 1.

    Python exposes no "is orderable" marker, so the capability is checked
    on every call by attempting the comparison.
    """
    try:
        if a < b:
            return -1
        if b < a:
            return 1
    except TypeError as exc:
        raise IncomparableElements(a, b) from exc
    return 0


def reverse_order(a, b) -> int:
    # Turns the min-heap into a max-heap
    return natural_order(b, a)


def resolve_compare(compare: Optional[Compare] = None) -> Compare:
    """Pick the comparison a heap will use for every structural comparison."""
    if compare is None:
        return natural_order
    if not callable(compare):
        raise TypeError(f"compare must be callable, got {type(compare).__name__}")
    return compare
