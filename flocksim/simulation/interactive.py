"""
Interactive simulation with pygame GUI.
"""

import json
import random
from typing import Optional

import pygame

from ..core.config import SimulationConfig, DEFAULT_CONFIG
from ..core.flock import Flock
from .render import draw_flock, draw_stats


class Simulation:
    """
    Interactive flock simulation with pygame visualization.

    One frame is one flock tick followed by one draw.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        """
        Initialize the simulation.

        Args:
            config: Simulation configuration (uses defaults if None)
        """
        pygame.init()

        self.config = config if config else DEFAULT_CONFIG

        width = self.config.screenWidth
        height = self.config.screenHeight

        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Flock Simulation")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 24)

        self.flock = Flock(self.config.to_flock_options(), random.Random(self.config.seed))

        self.frame_count = 0
        self.running = True
        self.paused = False
        self.statistics_over_time = []

    def update(self) -> None:
        """Advance the flock by one tick and sample statistics."""
        self.flock.evolve()
        self.frame_count += 1

        if self.frame_count % max(1, self.config.statisticsInterval) == 0:
            statistic = self.flock.calculate_statistics()
            self.statistics_over_time.append({"frame": self.frame_count, **statistic.to_dict()})

    def draw(self) -> None:
        """Render the current frame."""
        self.screen.fill(self.config.backgroundColor)

        draw_flock(self.screen, self.flock.snapshot(), self.flock.predator_snapshot(),
                   self.config.birdColor, self.config.predatorColor)
        draw_stats(self.screen, self.font, self.frame_count, self.flock.size(),
                   self.flock.calculate_statistics())

        pygame.display.flip()

    def save_statistics(self) -> None:
        """Save the sampled statistics to a JSON file."""
        data = {
            "frame_count": self.frame_count,
            "bird_count": self.flock.size(),
            "statistics_over_time": self.statistics_over_time,
            "config": self.config.to_dict(),
        }

        try:
            with open(self.config.statisticsOutputFile, 'w') as f:
                json.dump(data, f, indent=4)
            print(f"Statistics saved to {self.config.statisticsOutputFile}")
        except OSError as e:
            print(f"Error saving statistics: {e}")

    def run(self) -> None:
        """Run the simulation main loop."""
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN:
                    self._handle_keydown(event.key)

            if not self.paused:
                self.update()
            self.draw()
            self.clock.tick(self.config.fpsTarget)

        self.save_statistics()
        pygame.quit()

    def _handle_keydown(self, key: int) -> None:
        """Handle keyboard input."""
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_p:
            self.paused = not self.paused
            print(f"Simulation {'paused' if self.paused else 'resumed'}")
        elif key == pygame.K_s:
            self.save_statistics()
