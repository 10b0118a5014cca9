#!/usr/bin/env python
"""Monte-Carlo estimate of poker hand category frequencies.

Repeatedly shuffles a deck, deals hands until the deck runs low, and counts
how often each category comes up.

Usage:
    python -m poker_hands.scripts.simulate --hands 100000
    python -m poker_hands.scripts.simulate --hands 20000 --seed 7
    python -m poker_hands.scripts.simulate --help
"""

import argparse
import logging
import random
import sys
import time
from dataclasses import dataclass
from typing import Optional

import numpy as np
from rich.console import Console
from rich.table import Table

from poker_hands.engine import Deck, Hand, evaluate
from poker_hands.rules import DEFAULT_HAND_SIZE, HandCategory, category_of
from poker_hands.utils.seeding import set_seed

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Simulation configuration."""

    hands: int = 10_000
    size: int = DEFAULT_HAND_SIZE
    seed: Optional[int] = None
    verbose: bool = False


def simulate(config: SimulationConfig) -> np.ndarray:
    """Deal `config.hands` hands and count their categories.

    Args:
        config: Simulation configuration. A seed makes the run reproducible;
            without one the deck shuffles from the OS entropy source.

    Returns:
        Array of counts indexed by HandCategory
    """
    logger.info("Simulating %d hands of %d cards (seed=%s)", config.hands, config.size, config.seed)

    rng = random.Random(config.seed) if config.seed is not None else None
    deck = Deck(rng=rng)
    deck.shuffle()
    categories = np.empty(config.hands, dtype=np.int64)
    for i in range(config.hands):
        if deck.remaining < config.size:
            deck.shuffle()
        categories[i] = category_of(evaluate(Hand(deck, config.size)))

    return np.bincount(categories, minlength=len(HandCategory))


def build_table(counts: np.ndarray) -> Table:
    total = int(counts.sum())
    table = Table(title=f"Category frequencies over {total} hands")
    table.add_column("Category")
    table.add_column("Count", justify="right")
    table.add_column("Frequency", justify="right")
    for category in reversed(HandCategory):
        count = int(counts[category])
        frequency = count / total if total else 0.0
        table.add_row(category.label, str(count), f"{frequency:.4%}")
    return table


def main():
    """Main entry point for the simulation script."""
    parser = argparse.ArgumentParser(
        description="Estimate poker hand category frequencies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m poker_hands.scripts.simulate --hands 100000
  python -m poker_hands.scripts.simulate --hands 20000 --seed 7
        """,
    )
    parser.add_argument(
        "--hands", "-n", type=int, default=10_000, help="Number of hands to deal (default: 10000)"
    )
    parser.add_argument(
        "--size",
        type=int,
        default=DEFAULT_HAND_SIZE,
        help=f"Cards per hand (default: {DEFAULT_HAND_SIZE})",
    )
    parser.add_argument(
        "--seed", "-s", type=int, default=None, help="Random seed for reproducibility"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable info logging")
    args = parser.parse_args()

    config = SimulationConfig(hands=args.hands, size=args.size, seed=args.seed, verbose=args.verbose)
    logging.basicConfig(
        level=logging.INFO if config.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    console = Console()
    err_console = Console(stderr=True)
    if config.hands < 1:
        err_console.print("[red]Error:[/red] --hands must be positive")
        sys.exit(1)

    config.seed = set_seed(config.seed)
    start = time.time()
    try:
        counts = simulate(config)
    except KeyboardInterrupt:
        err_console.print("\nSimulation interrupted by user.")
        sys.exit(0)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    console.print(build_table(counts))
    console.print(f"Done in {time.time() - start:.2f}s")


if __name__ == "__main__":
    main()
