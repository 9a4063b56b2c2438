"""
Drawing of flock snapshots onto a pygame surface.
"""

from typing import Iterable, List, Optional

import pygame

from ..core.agents.bird import BirdSnapshot
from ..core.statistics import Statistic


BIRD_SIZE = 6
PREDATOR_SIZE = 9


def _triangle(snapshot: BirdSnapshot, size: float) -> List[pygame.Vector2]:
    """Corners of a triangle at the bird's position pointing along its heading."""
    center = pygame.Vector2(snapshot.position)
    nose = pygame.Vector2(size, 0).rotate(snapshot.heading)
    left = pygame.Vector2(-size * 0.6, size * 0.5).rotate(snapshot.heading)
    right = pygame.Vector2(-size * 0.6, -size * 0.5).rotate(snapshot.heading)
    return [center + nose, center + left, center + right]


def draw_flock(surface, birds: Iterable[BirdSnapshot], predator: Optional[BirdSnapshot],
               bird_color, predator_color) -> None:
    """
    Draw birds and the predator.

    Args:
        surface: Pygame surface to draw on
        birds: Snapshots of the flock
        predator: Snapshot of the predator, or None
        bird_color: RGB color of the birds
        predator_color: RGB color of the predator
    """
    for bird in birds:
        pygame.draw.polygon(surface, bird_color, _triangle(bird, BIRD_SIZE))

    if predator is not None:
        pygame.draw.polygon(surface, predator_color, _triangle(predator, PREDATOR_SIZE))


def draw_stats(surface, font, frame: int, size: int, statistic: Statistic,
               color=(60, 60, 60)) -> None:
    """Draw the statistics overlay in the top left corner."""
    y_offset = 10

    stats_text = [
        f"Frame: {frame}",
        f"Birds: {size}",
        f"Mean velocity: ({statistic.mean_velocity.x:.2f}, {statistic.mean_velocity.y:.2f})",
        f"Stdev velocity: ({statistic.stdev_velocity.x:.2f}, {statistic.stdev_velocity.y:.2f})",
    ]

    for text in stats_text:
        rendered = font.render(text, True, color)
        surface.blit(rendered, (10, y_offset))
        y_offset += 25
