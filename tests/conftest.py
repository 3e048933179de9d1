"""Pytest configuration and shared fixtures."""

import random
import sys
from pathlib import Path

import pytest

# Make the flat src/ packages importable without an install
src_root = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_root))

from core.vector import Vector3  # noqa: E402
from geometry.sphere import Sphere  # noqa: E402
from materials.lambertian import Lambertian  # noqa: E402


class FixedRng:
    """Generator stand-in that always draws the same fraction of its range."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value

    def uniform(self, a, b):
        return a + (b - a) * self.value


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def fixed_rng():
    return FixedRng


@pytest.fixture
def grey():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def unit_sphere(grey):
    """Sphere of radius 1 at the origin."""
    return Sphere(Vector3(0, 0, 0), 1.0, grey)


def assert_vec_close(actual, expected, tol=1e-9):
    for a, e in zip(actual, expected):
        assert a == pytest.approx(e, abs=tol), f"{actual} != {expected}"


@pytest.fixture
def vec_close():
    return assert_vec_close
