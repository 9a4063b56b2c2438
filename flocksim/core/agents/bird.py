"""
Bird agent and the read-only snapshot handed to renderers.
"""

from dataclasses import dataclass
from typing import Tuple

from ..vectors import Vector2


class Bird:
    """
    A single simulated agent with a position and a velocity.

    Used for flock members and for the predator. The flock mutates these
    vectors in place every tick.
    """

    __slots__ = ("position", "velocity")

    def __init__(self, position, velocity):
        """
        Initialize a bird.

        Args:
            position: Initial position (anything Vector2 accepts)
            velocity: Initial velocity (anything Vector2 accepts)
        """
        self.position = Vector2(position)
        self.velocity = Vector2(velocity)

    def x(self) -> float:
        return self.position.x

    def y(self) -> float:
        return self.position.y

    def vx(self) -> float:
        return self.velocity.x

    def vy(self) -> float:
        return self.velocity.y

    def copy(self) -> "Bird":
        return Bird(self.position, self.velocity)

    def __repr__(self) -> str:
        return (f"Bird(position=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"velocity=({self.velocity.x:.2f}, {self.velocity.y:.2f}))")


@dataclass(frozen=True)
class BirdSnapshot:
    """Position, velocity and heading of a bird at the end of a tick."""

    position: Tuple[float, float]
    velocity: Tuple[float, float]
    heading: float  # degrees, 0 along +x, counter-clockwise in math coordinates

    @classmethod
    def of(cls, bird: Bird) -> "BirdSnapshot":
        _, heading = bird.velocity.as_polar()
        return cls(
            position=(bird.position.x, bird.position.y),
            velocity=(bird.velocity.x, bird.velocity.y),
            heading=heading,
        )
