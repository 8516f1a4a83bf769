"""
Shared fixtures for the test suite.
"""

import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import numpy as np
import pytest

from geoprim import PackedDoubleSequence


@pytest.fixture
def triangle_seq():
    """The three-point sequence [(1, 5), (3, 2), (0, 9)]."""
    return PackedDoubleSequence(np.array([1.0, 5.0, 3.0, 2.0, 0.0, 9.0]))


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')
