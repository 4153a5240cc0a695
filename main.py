"""
Lights Out - Main Entry Point
Toggle the tiles until every light is off
"""

import argparse
import random
import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from lightsout.grid import DEFAULT_SIZE, MAX_SIZE, MIN_SIZE, Difficulty


def parse_args(argv=None):
    """Parse command line options"""
    parser = argparse.ArgumentParser(description='Play Lights Out')
    parser.add_argument('--size', type=int, default=DEFAULT_SIZE,
                        choices=range(MIN_SIZE, MAX_SIZE + 1),
                        help=f'Board size ({MIN_SIZE}-{MAX_SIZE}, default: {DEFAULT_SIZE})')
    parser.add_argument('--difficulty', default='medium',
                        choices=[d.value for d in Difficulty],
                        help='Shuffle difficulty (default: medium)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducible puzzles')
    return parser.parse_args(argv)


def main():
    """Main entry point for the Lights Out game"""
    args = parse_args()
    try:
        from ui.gui import LightsOutGUI

        rng = random.Random(args.seed) if args.seed is not None else None
        game = LightsOutGUI(args.size, args.difficulty, rng)
        game.run()
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        sys.exit(0)
    except Exception as e:
        print(f"Error running Lights Out: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
