"""
2D vector helpers for the flock simulation.

Positions and velocities are pygame ``Vector2`` values. Rules always build new
vectors with ``+``, ``-``, ``*`` and ``/`` so no two agents share a vector.
"""

import math

import pygame

Vector2 = pygame.Vector2


def get_angle(a: Vector2, b: Vector2) -> float:
    """
    Unsigned angle between two vectors, in radians.

    Args:
        a: First vector
        b: Second vector

    Returns:
        Angle in [0, pi]; 0.0 when either vector has zero length
    """
    lengths = a.length() * b.length()
    if lengths == 0:
        return 0.0

    # Round-off can push the ratio just outside [-1, 1]
    cosine = max(-1.0, min(1.0, a.dot(b) / lengths))
    return math.acos(cosine)
