"""Command that starts the simulation window."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .simulation import Simulation
from .window import open_window

DEFAULT_SEED = 4


def build_simulation(seed: int = DEFAULT_SEED) -> Simulation:
    return Simulation(seed)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ereea", description="Robots exploring a generated planet."
    )
    parser.add_argument(
        "--seed", type=int, default=DEFAULT_SEED, help="seed of the generated map"
    )
    args = parser.parse_args(argv)
    open_window(build_simulation(args.seed))
    return 0