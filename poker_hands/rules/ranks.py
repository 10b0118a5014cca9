"""Card rank and suit definitions and utilities.

Rank order (low to high ordinal): A 2 3 4 5 6 7 8 9 10 J Q K

The ordinal is what the evaluator compares. Aces sit at ordinal 0 and are
promoted to "high" by the evaluator wherever they act as a kicker.

This module provides:
- Rank and suit constants
- Card representation and parsing
- Standard deck construction
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import List


class Suit(IntEnum):
    """Card suits. Unordered for hand strength; the ordinal only fixes display order."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


class Rank(IntEnum):
    """Card ranks by ordinal, Ace lowest.

    Order: A < 2 < 3 < 4 < 5 < 6 < 7 < 8 < 9 < 10 < J < Q < K
    """

    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12


NUM_RANKS = len(Rank)
NUM_SUITS = len(Suit)

# Numeric card values (informational, e.g. for counting games)
RANK_VALUES = {
    Rank.ACE: 1,
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 10,
    Rank.QUEEN: 10,
    Rank.KING: 10,
}

# One-character rank symbols
RANK_CHARS = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

# Rank symbols for display
RANK_SYMBOLS = {rank: char for rank, char in RANK_CHARS.items()}
RANK_SYMBOLS[Rank.TEN] = "10"

# Suit symbols for display
SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}

# Symbol to rank mapping (for parsing)
SYMBOL_TO_RANK = {v: k for k, v in RANK_CHARS.items()}
SYMBOL_TO_RANK["10"] = Rank.TEN

SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}
SYMBOL_TO_SUIT.update({"C": Suit.CLUBS, "D": Suit.DIAMONDS, "H": Suit.HEARTS, "S": Suit.SPADES})


@dataclass(frozen=True, order=True)
class Card:
    """A playing card with suit and rank.

    Cards are ordered by suit first, then by rank. This order is only used
    to sort cards deterministically; it has no bearing on hand strength.
    Immutable and hashable for use in sets.
    """

    suit: Suit
    rank: Rank

    def __str__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]})"

    @property
    def value(self) -> int:
        """Numeric value of the card (Ace=1, faces=10)."""
        return RANK_VALUES[self.rank]

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a string like 'A♣', '10S' or 'th'.

        Args:
            s: Card string in format "RANK+SUIT"

        Returns:
            Card object

        Raises:
            ValueError: If string cannot be parsed
        """
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s!r}")

        suit_char = s[-1].upper()
        rank_str = s[:-1].upper()

        if suit_char not in SYMBOL_TO_SUIT:
            raise ValueError(f"Invalid suit character: {s[-1]}")
        if rank_str not in SYMBOL_TO_RANK:
            raise ValueError(f"Invalid rank: {s[:-1]}")

        return cls(suit=SYMBOL_TO_SUIT[suit_char], rank=SYMBOL_TO_RANK[rank_str])


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck.

    Returns:
        List of 52 Card objects (4 suits × 13 ranks), in declaration order
    """
    deck = []
    for suit in Suit:
        for rank in Rank:
            deck.append(Card(suit=suit, rank=rank))
    return deck


def sort_cards(cards: List[Card]) -> List[Card]:
    """Sort cards by suit, then by rank.

    Args:
        cards: List of Card objects

    Returns:
        New sorted list of cards
    """
    return sorted(cards)


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "AC 2D 3H 4S 5C".

    Args:
        s: Space-separated card strings

    Returns:
        List of Card objects
    """
    return [Card.from_string(cs) for cs in s.split()]
