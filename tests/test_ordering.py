import pytest

from errors import IncomparableElements
from ordering import natural_order, resolve_compare, reverse_order


@pytest.mark.parametrize("a, b, expected", [
    (1, 2, -1),
    (2, 1, 1),
    (3, 3, 0),
    ("apple", "banana", -1),
    ((1, "b"), (1, "a"), 1),
    (1.5, 1, 1),
])
def test_natural_order(a, b, expected):
    assert natural_order(a, b) == expected


@pytest.mark.parametrize("a, b", [
    (object(), object()),
    (7, object()),
    (object(), 7),
    (1, "a"),
])
def test_natural_order_incomparable(a, b):
    with pytest.raises(IncomparableElements) as excinfo:
        natural_order(a, b)
    assert isinstance(excinfo.value.__cause__, TypeError)
    assert excinfo.value.left is a
    assert excinfo.value.right is b


def test_reverse_order():
    assert reverse_order(1, 2) == 1
    assert reverse_order(2, 1) == -1
    assert reverse_order(4, 4) == 0


def test_resolve_compare_default():
    assert resolve_compare() is natural_order
    assert resolve_compare(None) is natural_order


def test_resolve_compare_injected():
    def by_length(a, b):
        return len(a) - len(b)

    assert resolve_compare(by_length) is by_length


def test_resolve_compare_not_callable():
    with pytest.raises(TypeError):
        resolve_compare(42)
