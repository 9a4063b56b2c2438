"""
Steering rules for the flock.

Every rule is a plain function of its inputs. The velocity rules return a
velocity delta for the caller to add; the correction rules (speed and
boundaries) adjust the bird they are given.
"""

from typing import Sequence

from .agents.bird import Bird
from .config import BOUNDARY_MARGIN, BOUNDARY_TURN_FACTOR, PREDATOR_REPULSION
from .vectors import Vector2, get_angle


def in_view(bird: Bird, point: Vector2, view_angle: float) -> bool:
    """Whether a point lies inside the cone of half-angle view_angle around the bird's heading."""
    return get_angle(point - bird.position, bird.velocity) < view_angle


def apply_separation(neighbors: Sequence[Bird], bird: Bird,
                     separation_distance: float, separation: float) -> Vector2:
    """
    Push away from neighbors closer than separation_distance.

    Each close neighbor contributes a vector pointing from it to the bird with
    length 1 / distance, so the closest neighbors dominate.

    Args:
        neighbors: Neighbors of the bird
        bird: The bird being steered
        separation_distance: Inner radius of the rule
        separation: Rule weight

    Returns:
        Velocity delta
    """
    steering = Vector2(0, 0)

    for other in neighbors:
        dist = bird.position.distance_to(other.position)
        if 0 < dist < separation_distance:
            steering += (bird.position - other.position) / (dist * dist)

    return steering * separation


def apply_alignment(neighbors: Sequence[Bird], bird: Bird, alignment: float) -> Vector2:
    """
    Steer toward the mean velocity of the neighbors.

    Returns:
        Velocity delta, zero when there are no neighbors
    """
    if not neighbors:
        return Vector2(0, 0)

    mean_velocity = Vector2(0, 0)
    for other in neighbors:
        mean_velocity += other.velocity
    mean_velocity /= len(neighbors)

    return (mean_velocity - bird.velocity) * alignment


def apply_cohesion(neighbors: Sequence[Bird], bird: Bird, cohesion: float) -> Vector2:
    """
    Steer toward the center of mass of the neighbors.

    Returns:
        Velocity delta, zero when there are no neighbors
    """
    if not neighbors:
        return Vector2(0, 0)

    center = Vector2(0, 0)
    for other in neighbors:
        center += other.position
    center /= len(neighbors)

    return (center - bird.position) * cohesion


def avoid_predator(birds: Sequence[Bird], bird: Bird, index: int, predator: Bird,
                   separation_distance: float, view_angle: float) -> Vector2:
    """
    Flee from a predator the bird can see.

    The predator is seen when it is closer than separation_distance and inside
    the bird's view cone.

    Args:
        birds: The whole flock
        bird: The bird being steered
        index: Position of the bird within birds
        predator: The predator
        separation_distance: Radius within which the predator is noticed
        view_angle: Half-angle of the bird's view cone, in radians

    Returns:
        Velocity delta of length PREDATOR_REPULSION pointing away from the
        predator, or the zero vector
    """
    if not 0 <= index < len(birds):
        raise IndexError(f"bird index {index} outside a flock of {len(birds)}")

    dist = bird.position.distance_to(predator.position)
    if not 0 < dist < separation_distance:
        return Vector2(0, 0)
    if not in_view(bird, predator.position, view_angle):
        return Vector2(0, 0)

    away = bird.position - predator.position
    away.scale_to_length(PREDATOR_REPULSION)
    return away


def avoid_speeding(bird: Bird, max_speed: float, min_speed: float) -> None:
    """
    Rescale the bird's velocity into [min_speed, max_speed], keeping its direction.

    A bird at rest is started along +x at min_speed.
    """
    velocity = Vector2(bird.velocity)
    speed = velocity.length()

    if speed > max_speed:
        velocity.scale_to_length(max_speed)
    elif speed < min_speed:
        if speed == 0:
            velocity = Vector2(min_speed, 0)
        else:
            velocity.scale_to_length(min_speed)

    bird.velocity = velocity


def avoid_boundaries(bird: Bird, canvas_width: float, canvas_height: float) -> None:
    """
    Keep the bird on the canvas.

    Inside a margin along each edge the bird is turned back toward the interior.
    The velocity is then limited so that any step of up to one velocity
    (``position += velocity * k`` with ``0 <= k <= 1``) stays within
    [0, canvas_width] x [0, canvas_height]: a component that would cross an
    edge is reflected, and shortened if the canvas is narrower than the step.
    """
    x, vx = _steer_axis(bird.position.x, bird.velocity.x, canvas_width)
    y, vy = _steer_axis(bird.position.y, bird.velocity.y, canvas_height)
    bird.position = Vector2(x, y)
    bird.velocity = Vector2(vx, vy)


def _steer_axis(position: float, velocity: float, size: float):
    position = max(0.0, min(size, position))
    margin = min(BOUNDARY_MARGIN, size / 4)

    if position < margin:
        velocity += BOUNDARY_TURN_FACTOR
    elif position > size - margin:
        velocity -= BOUNDARY_TURN_FACTOR

    if not 0 <= position + velocity <= size:
        velocity = -velocity

    velocity = max(-position, min(size - position, velocity))
    return position, velocity
