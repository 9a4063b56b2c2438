"""
Plotting functions for visualizing flock statistics.
"""

from typing import Dict, List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt


def plot_statistics(statistics_over_time: List[Dict[str, float]],
                    output_file: str = "flock_statistics.png") -> str:
    """
    Plot mean velocity and velocity spread over time.

    Two panels: mean velocity components on top, per-axis standard deviation
    below. A flock that has settled into a common heading shows a steady mean
    and a stdev close to zero.

    Args:
        statistics_over_time: Samples as produced by HeadlessSimulation
        output_file: Output filename for the plot

    Returns:
        Path to saved plot file
    """
    frames = [s["frame"] for s in statistics_over_time]

    fig, (ax_mean, ax_stdev) = plt.subplots(2, 1, figsize=(12, 8), sharex=True)

    ax_mean.plot(frames, [s["mean_vx"] for s in statistics_over_time],
                 label='mean vx', linewidth=2, color='#FF6B6B')
    ax_mean.plot(frames, [s["mean_vy"] for s in statistics_over_time],
                 label='mean vy', linewidth=2, color='#4ECDC4')
    ax_mean.set_ylabel('Mean velocity', fontsize=12, fontweight='bold')
    ax_mean.legend(fontsize=10, loc='upper right')
    ax_mean.grid(True, alpha=0.3, linestyle='--')

    ax_stdev.plot(frames, [s["stdev_vx"] for s in statistics_over_time],
                  label='stdev vx', linewidth=2, color='#FF6B6B')
    ax_stdev.plot(frames, [s["stdev_vy"] for s in statistics_over_time],
                  label='stdev vy', linewidth=2, color='#4ECDC4')
    ax_stdev.set_xlabel('Frame Number', fontsize=12, fontweight='bold')
    ax_stdev.set_ylabel('Velocity stdev', fontsize=12, fontweight='bold')
    ax_stdev.legend(fontsize=10, loc='upper right')
    ax_stdev.grid(True, alpha=0.3, linestyle='--')

    fig.suptitle('Flock Velocity Statistics Over Time', fontsize=14, fontweight='bold')
    fig.tight_layout()
    fig.savefig(output_file, dpi=150, bbox_inches='tight')
    plt.close(fig)

    print(f"\nPlot saved to: {output_file}")
    return output_file
