"""Fixed-size poker hands drawn from a deck.

This module provides:
- Hand: immutable collection of cards drawn once from a Deck
- evaluate: score a hand
- compare: order two hands by score
"""

from typing import Iterable, Tuple

from poker_hands.rules import (
    Card,
    NUM_RANKS,
    DEFAULT_HAND_SIZE,
    HandCategory,
    Score,
    by_ranks,
    by_suits,
    category_of,
    compare_scores,
    describe_score,
    score_cards,
)
from .deck import Deck


class Hand:
    """A hand of `size` cards drawn from a deck at construction.

    The cards and size are fixed for the lifetime of the hand. Hands order by
    strength through <, <=, > and >=; equality stays identity-based, use
    compare() to test for a tie.
    """

    __slots__ = ("_cards", "_size")

    def __init__(self, deck: Deck, size: int = DEFAULT_HAND_SIZE):
        """Draw a hand.

        Args:
            deck: Deck to draw from
            size: Number of cards in the hand

        Raises:
            ValueError: If size is not in 1..NUM_RANKS or the drawn cards
                are not distinct
            DeckExhaustedError: If the deck has fewer than size cards left
        """
        if isinstance(size, bool) or not isinstance(size, int) or not 1 <= size <= NUM_RANKS:
            raise ValueError(f"Hand size must be an integer in 1..{NUM_RANKS}, got {size!r}")

        cards = tuple(deck.draw(size))
        if len(set(cards)) != len(cards):
            raise ValueError(f"Hand contains duplicate cards: {' '.join(str(c) for c in cards)}")

        object.__setattr__(self, "_cards", cards)
        object.__setattr__(self, "_size", size)

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> "Hand":
        """Create a hand from explicit cards (for testing and parsing).

        Args:
            cards: Cards in hand order

        Returns:
            Hand holding exactly those cards
        """
        cards = list(cards)
        return cls(Deck(cards=cards), len(cards))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def cards(self) -> Tuple[Card, ...]:
        return self._cards

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self):
        return iter(self._cards)

    def __str__(self) -> str:
        return " ".join(str(c) for c in self._cards)

    def __repr__(self) -> str:
        return f"Hand({self})"

    def by_ranks(self):
        """Cards bucketed by rank ordinal."""
        return by_ranks(self._cards)

    def by_suits(self):
        """Cards bucketed by suit ordinal."""
        return by_suits(self._cards)

    def score(self) -> Score:
        return evaluate(self)

    @property
    def category(self) -> HandCategory:
        return category_of(evaluate(self))

    def describe(self) -> str:
        """Describe the hand's category and key ranks."""
        return describe_score(evaluate(self), self._size)

    def __lt__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return compare(self, other) >= 0


def evaluate(hand: Hand) -> Score:
    """Score a hand.

    Args:
        hand: Hand to evaluate

    Returns:
        Score tuple (category weight, tie-breakers...)
    """
    return score_cards(hand.cards, hand.size)


def compare(hand1: Hand, hand2: Hand) -> int:
    """Compare two hands.

    Args:
        hand1: First hand
        hand2: Second hand

    Returns:
        Positive if hand1 wins, negative if hand2 wins, zero on a tie
    """
    return compare_scores(evaluate(hand1), evaluate(hand2))
