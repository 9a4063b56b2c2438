import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import math

import pytest

from flocksim.core.agents.bird import Bird
from flocksim.core.config import FlockOptions


class FixedRng:
    """Returns the midpoint of every requested range."""

    def uniform(self, low: float, high: float) -> float:
        return (low + high) / 2


def make_options(**overrides) -> FlockOptions:
    values = dict(
        number=2,
        separation=1.0,
        alignment=0.0,
        cohesion=0.0,
        distance=10.0,
        separation_distance=5.0,
        with_predator=False,
        view_angle=math.pi,
        canvas_height=200.0,
        canvas_width=200.0,
    )
    values.update(overrides)
    return FlockOptions(**values)


@pytest.fixture
def options():
    return make_options()


@pytest.fixture
def bird():
    return Bird((100, 100), (0, 3))
