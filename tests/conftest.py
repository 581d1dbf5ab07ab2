import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from retinex.synthetic import checkerboard, uneven_illumination


@pytest.fixture
def board():
    return checkerboard(16)


@pytest.fixture
def scene():
    return uneven_illumination(seed=3, shape=(48, 64))


@pytest.fixture
def flat():
    return np.full((16, 16), 128, dtype=np.uint8)
