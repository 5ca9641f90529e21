"""Pytest configuration and shared fixtures."""

import random
import sys
from pathlib import Path

import pytest

# The packages live under src/ as top-level modules
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from core.vector import Vector3  # noqa: E402
from renderer.config import RenderConfig  # noqa: E402


class FixedRandom(random.Random):
    """A generator whose every draw is the same value in [0, 1)."""

    def __init__(self, value=0.5):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def fixed_rng():
    return FixedRandom


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def tiny_config():
    """A render small enough to finish in well under a second."""
    return RenderConfig(
        image_width=8,
        aspect_ratio=2.0,
        samples_per_pixel=2,
        max_depth=4,
        thread_count=3,
        grid_extent=1,
        seed=7,
    )


def assert_vec_close(actual: Vector3, expected, tol=1e-9):
    assert tuple(actual) == pytest.approx(tuple(expected), abs=tol)
