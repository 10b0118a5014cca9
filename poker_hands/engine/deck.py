"""Deck of cards with a draw cursor.

A Deck holds an ordered sequence of cards and a cursor pointing at the next
card to draw. Drawing advances the cursor; shuffling permutes the whole
sequence and moves the cursor back to the start, returning drawn cards to
play. A Deck is owned by its caller and is not safe to share between threads.
"""

import logging
import random
from typing import Iterable, List, Optional

from poker_hands.rules import Card, create_standard_deck

logger = logging.getLogger(__name__)


class DeckExhaustedError(Exception):
    """Raised when more cards are requested than remain in the deck."""

    def __init__(self, requested: int, remaining: int):
        super().__init__(f"Cannot draw {requested} cards, only {remaining} remaining")
        self.requested = requested
        self.remaining = remaining


class Deck:
    """An ordered sequence of cards and a draw cursor.

    Attributes:
        shuffled: Whether shuffle() has been called
    """

    def __init__(self, rng: Optional[random.Random] = None, cards: Optional[Iterable[Card]] = None):
        """Create a deck.

        Args:
            rng: Random number generator used by shuffle(). Defaults to
                random.SystemRandom, which draws from the OS entropy source.
            cards: Initial card order. Defaults to the standard 52-card deck,
                unshuffled.
        """
        self._cards: List[Card] = list(cards) if cards is not None else create_standard_deck()
        self._position = 0
        self._rng = rng if rng is not None else random.SystemRandom()
        self.shuffled = False

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck(cards={len(self._cards)}, remaining={self.remaining})"

    @property
    def position(self) -> int:
        """Index of the next card to draw."""
        return self._position

    @property
    def remaining(self) -> int:
        """Number of cards left to draw."""
        return len(self._cards) - self._position

    def shuffle(self) -> None:
        """Shuffle every card and reset the draw cursor."""
        self._rng.shuffle(self._cards)
        self._position = 0
        self.shuffled = True
        logger.debug("Shuffled deck of %d cards", len(self._cards))

    def draw(self, n: int = 1) -> List[Card]:
        """Draw the next n cards.

        Args:
            n: Number of cards to draw

        Returns:
            List of drawn cards, in deck order

        Raises:
            ValueError: If n is negative
            DeckExhaustedError: If fewer than n cards remain. The cursor
                does not move.
        """
        if n < 0:
            raise ValueError(f"Cannot draw a negative number of cards: {n}")
        if n > self.remaining:
            logger.warning("Deck exhausted: requested %d, remaining %d", n, self.remaining)
            raise DeckExhaustedError(n, self.remaining)

        drawn = self._cards[self._position : self._position + n]
        self._position += n
        return drawn

    def draw_one(self) -> Card:
        """Draw a single card."""
        return self.draw(1)[0]

    def to_list(self) -> List[Card]:
        """Copy of the full card sequence, drawn cards included."""
        return list(self._cards)
