"""
Simulation module containing interactive and headless simulation classes.
"""

from .interactive import Simulation
from .headless import HeadlessSimulation

__all__ = ['Simulation', 'HeadlessSimulation']
