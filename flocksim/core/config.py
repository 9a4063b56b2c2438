"""
Configuration classes and defaults for the flock simulation.
"""

import json
import math
from dataclasses import dataclass, field, fields, asdict
from typing import List, Optional


@dataclass
class FlockOptions:
    """Construction record for a Flock."""

    number: int
    separation: float
    alignment: float
    cohesion: float
    distance: float
    separation_distance: float
    with_predator: bool
    view_angle: float  # radians
    canvas_height: float
    canvas_width: float

    # Read neighbors from a copy of the flock taken at the start of the tick
    # instead of the live, partially updated population
    snapshot_neighbors: bool = False

    def validate(self) -> None:
        """
        Check the preconditions of a flock.

        Raises:
            ValueError: If the population is empty, a weight or distance is
                negative, or the canvas has no area
        """
        if self.number <= 0:
            raise ValueError(f"number must be positive, got {self.number}")

        for name in ("separation", "alignment", "cohesion", "distance", "separation_distance"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError(
                f"canvas must have positive size, got {self.canvas_width}x{self.canvas_height}"
            )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class SimulationConfig:
    """Configuration for the flock simulation application."""

    # Screen settings
    screenWidth: int = 1000
    screenHeight: int = 700

    # Flock
    birdCount: int = 120
    withPredator: bool = True

    # Rule weights
    separation: float = 0.5
    alignment: float = 0.08
    cohesion: float = 0.005

    # Neighbor detection
    distance: float = 75.0
    separationDistance: float = 20.0
    viewAngle: float = 150.0  # degrees
    snapshotNeighbors: bool = False

    # Random source
    seed: Optional[int] = None

    # Visualization
    fpsTarget: int = 60
    backgroundColor: List[int] = field(default_factory=lambda: [235, 235, 235])
    birdColor: List[int] = field(default_factory=lambda: [0, 0, 0])
    predatorColor: List[int] = field(default_factory=lambda: [220, 30, 30])

    # Output
    statisticsInterval: int = 10
    statisticsOutputFile: str = "flock_statistics.json"

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationConfig":
        """Create config from dictionary."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_flock_options(self) -> FlockOptions:
        """Build the core construction record from this config."""
        return FlockOptions(
            number=self.birdCount,
            separation=self.separation,
            alignment=self.alignment,
            cohesion=self.cohesion,
            distance=self.distance,
            separation_distance=self.separationDistance,
            with_predator=self.withPredator,
            view_angle=math.radians(self.viewAngle),
            canvas_height=float(self.screenHeight),
            canvas_width=float(self.screenWidth),
            snapshot_neighbors=self.snapshotNeighbors,
        )


def load_config(path: str) -> SimulationConfig:
    """
    Load a SimulationConfig from a JSON file.

    Unknown keys are ignored; missing keys keep their defaults.
    """
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")
    return SimulationConfig.from_dict(data)


# Default configuration for interactive simulation
DEFAULT_CONFIG = SimulationConfig()


# Speed limits and integration factors
BIRD_MAX_SPEED = 5.0
BIRD_MIN_SPEED = 2.0
BIRD_STEP = 0.9

PREDATOR_MAX_SPEED = 15.0
PREDATOR_MIN_SPEED = 2.0
PREDATOR_STEP = 0.8

# Predator chases the flock center hard and barely matches its heading
PREDATOR_COHESION_FACTOR = 2.0
PREDATOR_ALIGNMENT = 0.001

# Strength of a bird's escape from a visible predator
PREDATOR_REPULSION = 10.0

# Initial velocity range per axis
INITIAL_VELOCITY = 5.0

# Boundary steering
BOUNDARY_MARGIN = 50.0
BOUNDARY_TURN_FACTOR = 0.5
