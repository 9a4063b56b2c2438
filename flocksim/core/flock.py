"""
The flock: population ownership, neighbor queries and the per-tick update.
"""

import random
from typing import List, Optional, Sequence

from .agents.bird import Bird, BirdSnapshot
from .config import (
    FlockOptions, INITIAL_VELOCITY,
    BIRD_MAX_SPEED, BIRD_MIN_SPEED, BIRD_STEP,
    PREDATOR_MAX_SPEED, PREDATOR_MIN_SPEED, PREDATOR_STEP,
    PREDATOR_COHESION_FACTOR, PREDATOR_ALIGNMENT,
)
from .rules import (
    in_view, apply_separation, apply_alignment, apply_cohesion,
    avoid_predator, avoid_speeding, avoid_boundaries,
)
from .statistics import Statistic, compute_statistic


class Flock:
    """
    A fixed population of birds and an optional predator.

    One call to ``evolve()`` is one tick. The configuration is copied at
    construction and never changes; only the birds' (and the predator's)
    positions and velocities do.

    Neighbor queries scan the whole flock, so a tick costs O(N^2). That is
    fine for populations of a few hundred birds.

    By default birds are updated in place in population order, so a bird's
    neighbor query sees the new velocity and position of every bird before it
    and the old state of every bird after it. With
    ``FlockOptions.snapshot_neighbors`` every bird reads a copy of the flock
    taken at the start of the tick instead, which makes the result
    independent of population order.
    """

    def __init__(self, options: FlockOptions, rng: Optional[random.Random] = None):
        """
        Initialize a flock with randomly placed birds.

        Args:
            options: Flock configuration
            rng: Source of uniform draws (anything with ``uniform(low, high)``);
                a fresh random.Random when omitted

        Raises:
            ValueError: If options fail validation
        """
        self._configure(options)

        rng = rng if rng is not None else random.Random()
        self.birds: List[Bird] = [self._random_bird(rng) for _ in range(options.number)]
        self.predator: Optional[Bird] = self._random_bird(rng) if options.with_predator else None

    @classmethod
    def from_birds(cls, options: FlockOptions, birds: Sequence[Bird],
                   predator: Optional[Bird] = None) -> "Flock":
        """
        Build a flock from explicit birds instead of random draws.

        ``options.number`` must match ``len(birds)`` and a predator must be
        given exactly when ``options.with_predator`` is set.
        """
        if len(birds) != options.number:
            raise ValueError(f"expected {options.number} birds, got {len(birds)}")
        if (predator is not None) != options.with_predator:
            raise ValueError("predator must be given exactly when with_predator is set")

        flock = cls.__new__(cls)
        flock._configure(options)
        flock.birds = [bird.copy() for bird in birds]
        flock.predator = predator.copy() if predator is not None else None
        return flock

    def _configure(self, options: FlockOptions) -> None:
        options.validate()

        self.separation = options.separation
        self.alignment = options.alignment
        self.cohesion = options.cohesion
        self.distance = options.distance
        self.separation_distance = options.separation_distance
        self.with_predator = options.with_predator
        self.view_angle = options.view_angle
        self.canvas_height = options.canvas_height
        self.canvas_width = options.canvas_width
        self.snapshot_neighbors = options.snapshot_neighbors

    def _random_bird(self, rng) -> Bird:
        position = (rng.uniform(0, self.canvas_width), rng.uniform(0, self.canvas_height))
        velocity = (rng.uniform(-INITIAL_VELOCITY, INITIAL_VELOCITY),
                    rng.uniform(-INITIAL_VELOCITY, INITIAL_VELOCITY))
        return Bird(position, velocity)

    def get_neighbors(self, bird: Bird, population: Optional[Sequence[Bird]] = None) -> List[Bird]:
        """
        Birds within perception distance and inside the view cone of a bird.

        Args:
            bird: Reference bird (a flock member or the predator)
            population: Birds to search; the flock when omitted

        Returns:
            Neighbors in population order; never contains a bird at zero
            distance, so a bird is never its own neighbor
        """
        if population is None:
            population = self.birds

        neighbors = []
        for other in population:
            dist = other.position.distance_to(bird.position)
            if 0 < dist < self.distance and in_view(bird, other.position, self.view_angle):
                neighbors.append(other)
        return neighbors

    def evolve_predator(self, population: Optional[Sequence[Bird]] = None) -> None:
        """Advance the predator by one tick; does nothing without a predator."""
        if self.predator is None:
            return

        predator = self.predator
        neighbors = self.get_neighbors(predator, population)

        if neighbors:
            predator.velocity += apply_cohesion(neighbors, predator,
                                                self.cohesion * PREDATOR_COHESION_FACTOR)
            predator.velocity += apply_alignment(neighbors, predator, PREDATOR_ALIGNMENT)

        avoid_speeding(predator, PREDATOR_MAX_SPEED, PREDATOR_MIN_SPEED)
        avoid_boundaries(predator, self.canvas_width, self.canvas_height)

        predator.position += predator.velocity * PREDATOR_STEP

    def evolve(self) -> None:
        """Advance the predator, then every bird in population order, by one tick."""
        frozen = [bird.copy() for bird in self.birds] if self.snapshot_neighbors else None

        self.evolve_predator(frozen)

        for index, bird in enumerate(self.birds):
            reference = frozen[index] if frozen is not None else bird
            neighbors = self.get_neighbors(reference, frozen)

            if neighbors:
                bird.velocity += apply_separation(neighbors, reference,
                                                  self.separation_distance, self.separation)
                bird.velocity += apply_alignment(neighbors, reference, self.alignment)
                bird.velocity += apply_cohesion(neighbors, reference, self.cohesion)

            if self.predator is not None:
                bird.velocity += avoid_predator(frozen if frozen is not None else self.birds,
                                                reference, index, self.predator,
                                                self.separation_distance, self.view_angle)

            avoid_speeding(bird, BIRD_MAX_SPEED, BIRD_MIN_SPEED)
            avoid_boundaries(bird, self.canvas_width, self.canvas_height)

            bird.position += bird.velocity * BIRD_STEP

    def size(self) -> int:
        """Number of birds, predator excluded."""
        return len(self.birds)

    def calculate_statistics(self) -> Statistic:
        """Mean and standard deviation of the birds' velocities."""
        return compute_statistic(bird.velocity for bird in self.birds)

    def snapshot(self) -> List[BirdSnapshot]:
        """Read-only copies of every bird, for renderers."""
        return [BirdSnapshot.of(bird) for bird in self.birds]

    def predator_snapshot(self) -> Optional[BirdSnapshot]:
        """Read-only copy of the predator, or None without one."""
        if self.predator is None:
            return None
        return BirdSnapshot.of(self.predator)
