#!/usr/bin/env python3
"""
Langton's Ant Simulation

Drives the bounded-grid Langton's Ant engine and exports its trajectory.

Usage:
    python -m langtons_ant.main [--config configs/default.yaml] [options]

Examples:
    python -m langtons_ant.main --config configs/default.yaml
    python -m langtons_ant.main --size 9 --steps 500 --gif --out-dir results/
    python -m langtons_ant.main --size 51 --turn-order toggle_then_decide --quiet
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from langtons_ant.config import SimulationConfig, load_config
from langtons_ant.model.direction import TurnOrder
from langtons_ant.model.engine import AntEngine
from langtons_ant.model.grid import InvalidSize
from langtons_ant.export.csv_writer import CSVWriter
from langtons_ant.export.visualizer import Visualizer
from langtons_ant.export.reporter import Reporter


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Langton's Ant Simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m langtons_ant.main --config configs/default.yaml
    python -m langtons_ant.main --size 9 --steps 500 --gif --out-dir results/
    python -m langtons_ant.main --size 51 --turn-order toggle_then_decide --quiet
        """
    )

    parser.add_argument('--config', type=Path, default=None,
                        help='Path to YAML configuration file (default: built-in defaults)')

    # Optional overrides
    parser.add_argument('--size', type=int, default=None,
                        help='Override grid width and height')
    parser.add_argument('--steps', type=int, default=None,
                        help='Override max simulation steps')
    parser.add_argument('--turn-order', default=None,
                        choices=[t.value for t in TurnOrder],
                        help='Override when the turn is decided relative to the toggle')
    parser.add_argument('--out-dir', type=Path, default=Path('./output'),
                        help='Output directory for exports (default: ./output)')

    # Export toggles
    parser.add_argument('--csv', dest='csv', action='store_true', default=None,
                        help='Enable CSV export (default)')
    parser.add_argument('--no-csv', dest='csv', action='store_false',
                        help='Disable CSV export')

    parser.add_argument('--snapshot', dest='snapshot', action='store_true', default=None,
                        help='Enable final snapshot (default)')
    parser.add_argument('--no-snapshot', dest='snapshot', action='store_false',
                        help='Disable final snapshot')

    parser.add_argument('--gif', action='store_true', default=False,
                        help='Enable GIF animation export')
    parser.add_argument('--gif-interval', type=int, default=None,
                        help='Buffer a GIF frame every N steps')

    parser.add_argument('--quiet', action='store_true', default=False,
                        help='Suppress stdout output')

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> SimulationConfig:
    """Load the config file (if any) and apply CLI overrides."""
    config = load_config(args.config) if args.config else SimulationConfig()

    if args.size is not None:
        config.grid.size = args.size
    if args.steps is not None:
        config.max_steps = args.steps
    if args.turn_order is not None:
        config.turn_order = TurnOrder(args.turn_order)
    if args.csv is not None:
        config.csv_enabled = args.csv
    if args.snapshot is not None:
        config.snapshot_enabled = args.snapshot
    if args.gif:
        config.gif_enabled = True
    if args.gif_interval is not None:
        config.gif_interval = args.gif_interval
    config.quiet = args.quiet
    config.out_dir = args.out_dir

    config.validate()
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Load configuration
    try:
        config = build_config(args)
    except FileNotFoundError:
        print(f"Error: Configuration file not found: {args.config}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    # Initialize engine
    try:
        engine = AntEngine.from_config(config)
    except InvalidSize as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not config.quiet:
        print("Initializing simulation...")
        print(f"  Grid: {engine.size}x{engine.size}")
        print(f"  Start: ({engine.x()}, {engine.y()}) facing up")
        print(f"  Turn order: {config.turn_order.value}")
        print(f"  Max steps: {config.max_steps}")

    # Initialize exporters
    csv_path = config.out_dir / 'trajectory.csv'
    csv_writer = None
    if config.csv_enabled:
        csv_writer = CSVWriter(csv_path)
        csv_writer.open()

    visualizer = Visualizer(engine.size)
    reporter = Reporter(str(args.config) if args.config else None,
                        config.turn_order.value)

    # Main simulation loop
    if not config.quiet:
        print("\nRunning simulation...")

    if config.gif_enabled:
        visualizer.buffer_frame(engine.get_state())

    try:
        while not engine.is_finished(config.max_steps):
            engine.step()
            step = engine.current_step

            # Buffer GIF frame (every N steps to reduce memory)
            gif_frame_due = config.gif_enabled and (
                step % config.gif_interval == 0 or engine.is_finished(config.max_steps))

            # Full snapshots copy the grid, so only build one when exported
            if csv_writer or gif_frame_due:
                state = engine.get_state()
                if csv_writer:
                    csv_writer.append(state)
                if gif_frame_due:
                    visualizer.buffer_frame(state)

            reporter.update(step, engine.grid.count_black(), engine.wall_hits)

            # Progress indicator
            if not config.quiet and step % 1000 == 0:
                print(f"  Step {step}: {engine.grid.count_black()} black, "
                      f"ant at ({engine.x()}, {engine.y()})")

    except KeyboardInterrupt:
        if not config.quiet:
            print("\nSimulation interrupted by user.")

    final_state = engine.get_state()

    # Cleanup and final exports
    if csv_writer:
        csv_writer.close()
        if not config.quiet:
            print(f"\nCSV saved: {csv_path}")

    if config.snapshot_enabled:
        snapshot_path = config.out_dir / 'final_state.png'
        visualizer.save_snapshot(final_state, snapshot_path)
        if not config.quiet:
            print(f"Snapshot saved: {snapshot_path}")

    if config.gif_enabled:
        gif_path = config.out_dir / 'simulation.gif'
        if not config.quiet:
            print(f"Generating GIF ({len(visualizer.frames)} frames)...")
        visualizer.generate_gif(gif_path, fps=10)
        if not config.quiet:
            print(f"Animation saved: {gif_path}")

    # Print summary report
    if not config.quiet:
        report = reporter.generate_summary(
            final_state,
            config.out_dir,
            config.csv_enabled,
            config.snapshot_enabled,
            config.gif_enabled
        )
        print(report)

    return 0


if __name__ == '__main__':
    sys.exit(main())
