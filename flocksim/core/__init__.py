"""
Core module containing configuration, geometry, rules and the flock.
"""

from .config import FlockOptions, SimulationConfig, DEFAULT_CONFIG, load_config
from .flock import Flock
from .statistics import Statistic

__all__ = ['FlockOptions', 'SimulationConfig', 'DEFAULT_CONFIG', 'load_config', 'Flock', 'Statistic']
