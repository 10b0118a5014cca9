"""Poker rules implementations.

This module provides:
- Card, rank and suit definitions (ranks.py)
- Hand classification, scoring and comparison (hands.py)
"""

from .ranks import (
    Rank,
    Suit,
    Card,
    NUM_RANKS,
    NUM_SUITS,
    RANK_VALUES,
    RANK_CHARS,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    create_standard_deck,
    sort_cards,
    make_cards_from_string,
)

from .hands import (
    DEFAULT_HAND_SIZE,
    ACE_HIGH,
    Score,
    HandCategory,
    by_ranks,
    by_suits,
    rank_counts,
    is_flush,
    find_straight,
    sets,
    ace_high,
    score_cards,
    category_of,
    compare_scores,
    describe_score,
)

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "NUM_RANKS",
    "NUM_SUITS",
    "RANK_VALUES",
    "RANK_CHARS",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "create_standard_deck",
    "sort_cards",
    "make_cards_from_string",
    # Hands
    "DEFAULT_HAND_SIZE",
    "ACE_HIGH",
    "Score",
    "HandCategory",
    "by_ranks",
    "by_suits",
    "rank_counts",
    "is_flush",
    "find_straight",
    "sets",
    "ace_high",
    "score_cards",
    "category_of",
    "compare_scores",
    "describe_score",
]
