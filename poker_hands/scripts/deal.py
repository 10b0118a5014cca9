#!/usr/bin/env python
"""Deal poker hands from a shuffled deck and rank them.

Shuffles a fresh 52-card deck, deals one hand per player, and prints the
hands best first with their category. Tied hands share a place.

Usage:
    python -m poker_hands.scripts.deal
    python -m poker_hands.scripts.deal --players 6
    python -m poker_hands.scripts.deal --players 4 --seed 42 --verbose
    python -m poker_hands.scripts.deal --help
"""

import argparse
import logging
import random
import sys
from dataclasses import dataclass
from typing import List, Optional, Tuple

from rich.console import Console
from rich.table import Table

from poker_hands.engine import Deck, DeckExhaustedError, Hand, compare
from poker_hands.rules import DEFAULT_HAND_SIZE

logger = logging.getLogger(__name__)


@dataclass
class DealConfig:
    """Deal configuration."""

    players: int = 4
    size: int = DEFAULT_HAND_SIZE
    seed: Optional[int] = None
    verbose: bool = False


def deal_hands(config: DealConfig) -> List[Hand]:
    """Shuffle a deck and deal one hand per player.

    Args:
        config: Deal configuration. A seed makes the deal reproducible;
            without one the deck shuffles from the OS entropy source.

    Returns:
        List of hands in deal order

    Raises:
        DeckExhaustedError: If the deck cannot cover every player
    """
    rng = random.Random(config.seed) if config.seed is not None else None
    deck = Deck(rng=rng)
    deck.shuffle()
    logger.debug("Dealing %d hands of %d cards", config.players, config.size)
    return [Hand(deck, config.size) for _ in range(config.players)]


def rank_hands(hands: List[Hand]) -> List[Tuple[int, int, Hand]]:
    """Order hands best first and assign places.

    Args:
        hands: Hands in deal order

    Returns:
        List of (place, player index, hand). Tied hands share a place.
    """
    order = sorted(range(len(hands)), key=lambda i: hands[i], reverse=True)
    ranked = []
    place = 0
    for position, index in enumerate(order):
        if position == 0 or compare(hands[order[position - 1]], hands[index]) != 0:
            place = position + 1
        ranked.append((place, index, hands[index]))
    return ranked


def build_table(ranked: List[Tuple[int, int, Hand]]) -> Table:
    table = Table(title="Showdown")
    table.add_column("Place", justify="right")
    table.add_column("Player", justify="right")
    table.add_column("Cards")
    table.add_column("Hand")
    for place, index, hand in ranked:
        table.add_row(str(place), str(index + 1), str(hand), hand.describe())
    return table


def main():
    """Main entry point for the deal script."""
    parser = argparse.ArgumentParser(
        description="Deal and rank poker hands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m poker_hands.scripts.deal --players 6
  python -m poker_hands.scripts.deal --players 4 --seed 42
        """,
    )
    parser.add_argument(
        "--players", "-p", type=int, default=4, help="Number of hands to deal (default: 4)"
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
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    config = DealConfig(players=args.players, size=args.size, seed=args.seed, verbose=args.verbose)
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    console = Console()
    err_console = Console(stderr=True)
    try:
        hands = deal_hands(config)
    except (DeckExhaustedError, ValueError) as e:
        err_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        err_console.print("\nDeal interrupted by user.")
        sys.exit(0)

    console.print(build_table(rank_hands(hands)))


if __name__ == "__main__":
    main()
