"""
Trail CLI - Command-line interface for a single trail turn.

Usage:
    trail                  Read one command from stdin and apply it
    trail --seed 42        Same, with a reproducible travel roll
    trail --verbose        Log reducer transitions to stderr
"""

import argparse
import logging
import random
import sys

from .config import TrailConfig
from .session import Driver


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Trail - take one turn on the trail",
        prog="trail",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the travel roll")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    driver = Driver(TrailConfig(), rng=random.Random(args.seed))
    sys.exit(driver.run())


if __name__ == "__main__":
    main()
