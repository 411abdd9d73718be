"""Shared test fixtures for indexpair tests."""

import numpy as np
import pytest

from indexpair import IndexPair


@pytest.fixture
def origin():
    """The (0, 0) pair used as the left-hand side in equality tests."""
    return IndexPair(section=0, row=0)


@pytest.fixture
def sample_pairs():
    """A few pairs spread over two sections."""
    return [
        IndexPair(section=0, row=0),
        IndexPair(section=0, row=1),
        IndexPair(section=2, row=5),
    ]


@pytest.fixture
def rng():
    """Seeded random generator for property-style tests."""
    return np.random.default_rng(42)
