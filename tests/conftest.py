import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from bloch_state import BlochSession, normalize_state

# a spread of unit vectors, poles and equator included
SAMPLE_STATES = [
    (0.0, 0.0, 1.0),
    (0.0, 0.0, -1.0),
    (1.0, 0.0, 0.0),
    (-1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, -1.0, 0.0),
    normalize_state((1.0, 2.0, 3.0)),
    normalize_state((-0.3, 0.7, -0.2)),
    normalize_state((0.5, -0.5, 0.01)),
]


@pytest.fixture(params=SAMPLE_STATES)
def state(request):
    return request.param


@pytest.fixture
def random_states():
    rng = np.random.default_rng(10)
    return [normalize_state(v) for v in rng.normal(size=(50, 3))]


@pytest.fixture
def session():
    return BlochSession()
