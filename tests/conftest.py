import numpy as np
import pytest

from prismath import fmath


@pytest.fixture
def rng():
    """A seeded generator so random helpers are reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture(autouse=True)
def _reset_default_rng():
    yield
    fmath.seed(None)
