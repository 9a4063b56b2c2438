"""
Main entry point for the flock simulation.

Run with:
    python -m flocksim.main                          # Interactive simulation
    python -m flocksim.main --headless --ticks 3000  # Collect statistics without a window
    python -m flocksim.main --config flock.json      # Load settings from JSON
"""

import json
import os
import sys


def set_headless():
    """Enable headless mode for pygame."""
    os.environ["SDL_VIDEODRIVER"] = "dummy"


def run_interactive(config):
    """Run the interactive simulation with GUI."""
    from .simulation.interactive import Simulation

    print("=" * 60)
    print("Flock Simulation")
    print("=" * 60)
    print("\nControls:")
    print("  ESC   - Quit")
    print("  P     - Pause / resume")
    print("  S     - Save statistics to JSON")
    print(f"\nBirds: {config.birdCount}, predator: {'ON' if config.withPredator else 'OFF'}")
    print("\nStarting simulation...")

    sim = Simulation(config)
    sim.run()


def run_headless(config, ticks: int, output_prefix: str = "flock",
                 record_video: bool = False, plot: bool = True):
    """
    Run the simulation without a window and export its statistics.

    Args:
        config: Simulation configuration
        ticks: Number of ticks to simulate
        output_prefix: Prefix of the CSV, JSON, PNG and MP4 output files
        record_video: Whether to record video
        plot: Whether to plot the statistics

    Returns:
        Results dictionary
    """
    set_headless()

    from .simulation.headless import HeadlessSimulation
    from .analysis.export import export_statistics_to_csv, export_run_report

    print("=" * 60)
    print("HEADLESS FLOCK SIMULATION")
    print("=" * 60)
    print(f"Ticks: {ticks}")
    print(f"Birds: {config.birdCount}, predator: {'ON' if config.withPredator else 'OFF'}")
    print()

    video_file = f"{output_prefix}_recording.mp4" if record_video else None
    sim = HeadlessSimulation(config, enable_video=record_video, video_filename=video_file)
    results = sim.run(ticks)
    results["config"] = config.to_dict()
    if video_file:
        results["video_file"] = video_file

    export_statistics_to_csv(results["statistics_over_time"], f"{output_prefix}_statistics.csv")
    export_run_report(results, f"{output_prefix}_run.json")

    final = results["final_statistics"]
    print("\n" + "=" * 60)
    print("FINAL STATISTICS")
    print("=" * 60)
    print(f"   Mean velocity:  ({final['mean_vx']:.3f}, {final['mean_vy']:.3f})")
    print(f"   Stdev velocity: ({final['stdev_vx']:.3f}, {final['stdev_vy']:.3f})")

    if plot and results["statistics_over_time"]:
        from .analysis.plotting import plot_statistics
        print("\nGenerating statistics plot...")
        plot_statistics(results["statistics_over_time"], f"{output_prefix}_statistics.png")

    return results


def build_config(args):
    """Build the SimulationConfig from a config file and command line overrides."""
    from .core.config import SimulationConfig, load_config

    config = load_config(args.config) if args.config else SimulationConfig()

    if args.birds is not None:
        config.birdCount = args.birds
    if args.no_predator:
        config.withPredator = False
    if args.seed is not None:
        config.seed = args.seed
    if args.snapshot_neighbors:
        config.snapshotNeighbors = True

    # Fail before opening a window
    config.to_flock_options().validate()
    return config


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Boids flock simulation with an optional predator")
    parser.add_argument("--config", help="JSON file with simulation settings")
    parser.add_argument("--birds", type=int, help="Number of birds")
    parser.add_argument("--no-predator", action="store_true", help="Run without a predator")
    parser.add_argument("--seed", type=int, help="Seed of the random initial state")
    parser.add_argument("--snapshot-neighbors", action="store_true",
                        help="Read neighbors from the flock as it was at the start of each tick")
    parser.add_argument("--headless", action="store_true", help="Run without a window")
    parser.add_argument("--ticks", type=int, default=3000, help="Ticks to simulate in headless mode")
    parser.add_argument("--output-prefix", default="flock", help="Prefix of headless output files")
    parser.add_argument("--record-video", action="store_true", help="Record video in headless mode")
    parser.add_argument("--no-plot", action="store_true", help="Skip the statistics plot")

    args = parser.parse_args(argv)

    try:
        config = build_config(args)
    except (OSError, json.JSONDecodeError, ValueError, TypeError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(2)

    if args.headless:
        run_headless(config, args.ticks, args.output_prefix,
                     record_video=args.record_video, plot=not args.no_plot)
    else:
        run_interactive(config)


if __name__ == "__main__":
    main()
