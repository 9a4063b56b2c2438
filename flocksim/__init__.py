"""
Boids flocking simulation with an optional predator.
"""

__version__ = "0.1.0"
