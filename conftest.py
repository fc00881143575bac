import pytest

from heap_ import Heap


@pytest.fixture
def queue():
    return Heap()
