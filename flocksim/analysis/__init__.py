"""
Analysis module for plotting and exporting simulation results.
"""

from .plotting import plot_statistics
from .export import export_statistics_to_csv, export_run_report

__all__ = [
    'plot_statistics',
    'export_statistics_to_csv',
    'export_run_report',
]
