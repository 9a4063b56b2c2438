"""
Aggregate velocity statistics of a flock.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np

from .vectors import Vector2


@dataclass(frozen=True)
class Statistic:
    """
    Mean and per-axis population standard deviation of the flock velocity.

    Values are stored as plain tuples; ``mean_velocity`` and ``stdev_velocity``
    hand out new vectors on every access.
    """

    mean: Tuple[float, float]
    stdev: Tuple[float, float]

    @property
    def mean_velocity(self) -> Vector2:
        return Vector2(self.mean)

    @property
    def stdev_velocity(self) -> Vector2:
        return Vector2(self.stdev)

    def to_dict(self) -> dict:
        return {
            "mean_vx": self.mean[0],
            "mean_vy": self.mean[1],
            "stdev_vx": self.stdev[0],
            "stdev_vy": self.stdev[1],
        }


def compute_statistic(velocities: Iterable[Vector2]) -> Statistic:
    """
    Compute the Statistic of a set of velocities.

    The standard deviation divides by N, not N - 1.

    Raises:
        ValueError: If no velocities are given
    """
    data = np.array([(v.x, v.y) for v in velocities], dtype=float)
    if data.size == 0:
        raise ValueError("cannot compute statistics of an empty flock")

    mean = data.mean(axis=0)
    stdev = data.std(axis=0, ddof=0)
    return Statistic(
        mean=(float(mean[0]), float(mean[1])),
        stdev=(float(stdev[0]), float(stdev[1])),
    )
