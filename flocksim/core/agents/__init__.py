"""
Agent classes for the flock simulation.
"""

from .bird import Bird, BirdSnapshot

__all__ = ['Bird', 'BirdSnapshot']
