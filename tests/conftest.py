"""Shared test fixtures for seqsafe tests."""
from enum import IntEnum

import numpy as np
import pytest


class Ordinal(IntEnum):
    """Ten positions plus the ``max`` sentinel."""
    zeroth = 0
    first = 1
    second = 2
    third = 3
    fourth = 4
    fifth = 5
    sixth = 6
    seventh = 7
    eighth = 8
    ninth = 9
    max = 10


@pytest.fixture
def one_to_ten():
    """The integers 1..10 as a list."""
    return [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


@pytest.fixture
def one_to_five():
    """The integers 1..5 as a list."""
    return [1, 2, 3, 4, 5]


@pytest.fixture
def one_to_ten_array():
    """The integers 1..10 as a numpy array."""
    return np.arange(1, 11, dtype=np.int64)


@pytest.fixture
def ordinal():
    """Enumerator with a ``max`` sentinel of 10."""
    return Ordinal
