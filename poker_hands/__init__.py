"""Poker Hands - five-card poker hand evaluation.

A small library that models a standard 52-card deck, deals fixed-size
hands from it, and ranks those hands by poker category and kickers.
"""

__version__ = "0.1.0"
__author__ = "Poker Hands Team"

from poker_hands.utils.seeding import set_seed
from poker_hands.rules import Card, Rank, Suit, HandCategory
from poker_hands.engine import Deck, DeckExhaustedError, Hand, evaluate, compare

__all__ = [
    "__version__",
    "set_seed",
    "Card",
    "Rank",
    "Suit",
    "HandCategory",
    "Deck",
    "DeckExhaustedError",
    "Hand",
    "evaluate",
    "compare",
]
