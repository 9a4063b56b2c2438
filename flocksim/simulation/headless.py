"""
Headless simulation for data collection and optional video recording.
"""

import random
import time
from typing import Any, Dict, List, Optional

import cv2
import numpy as np
import pygame

from ..core.config import SimulationConfig
from ..core.flock import Flock
from .render import draw_flock, draw_stats


PROGRESS_INTERVAL = 1000


class HeadlessSimulation:
    """
    Flock simulation without a window.

    Samples flock statistics at a fixed interval. When video is enabled the
    flock is drawn to an off-screen surface and written to an MP4 file.
    """

    def __init__(self, config: SimulationConfig, enable_video: bool = False,
                 video_filename: Optional[str] = None, video_fps: int = 30):
        """
        Initialize headless simulation.

        Args:
            config: Simulation configuration
            enable_video: Whether to record video
            video_filename: Output video filename
            video_fps: Video frame rate
        """
        self.config = config
        self.flock = Flock(config.to_flock_options(), random.Random(config.seed))
        self.interval = max(1, config.statisticsInterval)

        self.frame_count = 0
        self.start_time = time.time()
        self.statistics_over_time: List[Dict[str, float]] = []

        # Video recording
        self.video_writer = None
        self.video_filename = video_filename
        self.frame_skip = max(1, config.fpsTarget // video_fps)
        self.screen = None

        if enable_video and video_filename:
            pygame.init()
            width, height = config.screenWidth, config.screenHeight
            self.screen = pygame.Surface((width, height))
            self.font = pygame.font.Font(None, 24)
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.video_writer = cv2.VideoWriter(video_filename, fourcc, video_fps, (width, height))
            print(f"  Recording video to: {video_filename}")

    def update(self) -> None:
        """Advance the flock by one tick and sample statistics."""
        self.flock.evolve()
        self.frame_count += 1

        if self.frame_count % self.interval == 0:
            self._record_statistics()

    def _record_statistics(self) -> None:
        statistic = self.flock.calculate_statistics()
        mean_speed = sum(bird.velocity.length() for bird in self.flock.birds) / self.flock.size()
        self.statistics_over_time.append({
            "frame": self.frame_count,
            **statistic.to_dict(),
            "mean_speed": mean_speed,
        })

    def run(self, max_frames: int) -> Dict[str, Any]:
        """
        Run the simulation.

        Args:
            max_frames: Number of ticks to simulate

        Returns:
            Results dictionary with the statistics time series
        """
        print(f"Running simulation for {max_frames} frames...")

        try:
            while self.frame_count < max_frames:
                self.update()

                if self.video_writer is not None and self.frame_count % self.frame_skip == 0:
                    self._render_frame()
                    self._capture_frame()

                if self.frame_count % PROGRESS_INTERVAL == 0:
                    elapsed = time.time() - self.start_time
                    progress = (self.frame_count / max_frames) * 100
                    print(f"  Progress: {progress:.1f}% ({self.frame_count}/{max_frames} frames, "
                          f"{elapsed:.1f}s elapsed)")
        finally:
            if self.video_writer is not None:
                self.video_writer.release()
                pygame.quit()
                print("  Video saved successfully!")

        return self.get_results()

    def _render_frame(self) -> None:
        """Render frame for video capture."""
        self.screen.fill(self.config.backgroundColor)
        draw_flock(self.screen, self.flock.snapshot(), self.flock.predator_snapshot(),
                   self.config.birdColor, self.config.predatorColor)
        draw_stats(self.screen, self.font, self.frame_count, self.flock.size(),
                   self.flock.calculate_statistics())

    def _capture_frame(self) -> None:
        """Capture frame to video."""
        frame = pygame.surfarray.array3d(self.screen)
        frame = np.transpose(frame, (1, 0, 2))
        frame = cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)
        self.video_writer.write(frame)

    def get_results(self) -> Dict[str, Any]:
        """
        Get simulation results.

        Returns:
            Dictionary with run metadata, final statistics and the time series
        """
        final = self.flock.calculate_statistics()
        return {
            "frames": self.frame_count,
            "elapsed_time_seconds": time.time() - self.start_time,
            "bird_count": self.flock.size(),
            "with_predator": self.flock.with_predator,
            "final_statistics": final.to_dict(),
            "statistics_over_time": self.statistics_over_time,
        }
