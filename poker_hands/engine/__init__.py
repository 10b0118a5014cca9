"""Deck and hand collaborators for the evaluator.

This module provides:
- Deck: ordered cards with a draw cursor
- DeckExhaustedError: raised when a draw asks for too many cards
- Hand: fixed-size hand drawn from a deck
- evaluate / compare: score and order hands
"""

from .deck import Deck, DeckExhaustedError
from .hand import Hand, evaluate, compare

__all__ = [
    "Deck",
    "DeckExhaustedError",
    "Hand",
    "evaluate",
    "compare",
]
