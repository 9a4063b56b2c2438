"""
Export functions for saving simulation results to CSV and JSON.
"""

import csv
import json
from typing import Any, Dict, List


STATISTICS_FIELDS = ['frame', 'mean_vx', 'mean_vy', 'stdev_vx', 'stdev_vy', 'mean_speed']


def export_statistics_to_csv(statistics_over_time: List[Dict[str, float]],
                             filename: str = "flock_statistics.csv") -> str:
    """
    Export a statistics time series to CSV format.

    Args:
        statistics_over_time: Samples as produced by HeadlessSimulation
        filename: Output filename

    Returns:
        Path to saved CSV file
    """
    with open(filename, 'w', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=STATISTICS_FIELDS, extrasaction='ignore')
        writer.writeheader()

        for sample in statistics_over_time:
            writer.writerow({key: sample.get(key, '') for key in STATISTICS_FIELDS})

    print(f"\nCSV statistics saved to: {filename}")
    return filename


def export_run_report(results: Dict[str, Any], filename: str = "flock_run.json") -> str:
    """
    Export a full run report to JSON.

    Args:
        results: Results dictionary from a simulation run
        filename: Output filename

    Returns:
        Path to saved JSON file
    """
    with open(filename, 'w') as f:
        json.dump(results, f, indent=2)

    print(f"\nRun report saved to: {filename}")
    return filename
