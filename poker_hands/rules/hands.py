"""Hand classification, category evaluation, and score comparison.

Hand categories (low to high):
- High card: nothing below matches
- Pair: one rank held twice
- Two pair: two ranks held twice each
- Three of a kind: one rank held three times, no pair
- Straight: consecutive ranks, one card each
- Flush: every card in one suit
- Full house: three of one rank + two of another
- Four of a kind: one rank held four times
- Straight flush: straight and flush together

Scoring rules:
- A score is a tuple of ints: category weight first, tie-breakers after
- Aces count as the highest rank (13) in every tie-breaker except the
  start of a straight, where the wheel (A-2-3-4-5) keeps ordinal 0
- Scores compare element by element; suits never break ties
"""

import logging
from enum import IntEnum, auto
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .ranks import Card, Rank, NUM_RANKS, NUM_SUITS

logger = logging.getLogger(__name__)

# Cards per hand unless configured otherwise
DEFAULT_HAND_SIZE = 5

# Ace ordinal as used in tie-breakers
ACE_HIGH = NUM_RANKS

Score = Tuple[int, ...]
BucketTable = Tuple[Tuple[Card, ...], ...]


class HandCategory(IntEnum):
    """Poker hand categories, declared weakest first.

    The weight of each category is its declaration index (HIGH_CARD == 0).
    """

    def _generate_next_value_(name, start, count, last_values):
        return count

    HIGH_CARD = auto()
    PAIR = auto()
    TWO_PAIR = auto()
    THREE_OF_A_KIND = auto()
    STRAIGHT = auto()
    FLUSH = auto()
    FULL_HOUSE = auto()
    FOUR_OF_A_KIND = auto()
    STRAIGHT_FLUSH = auto()

    @property
    def label(self) -> str:
        """Human-readable category name."""
        return self.name.replace("_", " ").title()


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def by_ranks(cards: Sequence[Card]) -> BucketTable:
    """Partition cards into one bucket per rank.

    Args:
        cards: Cards of a hand

    Returns:
        Tuple of NUM_RANKS buckets indexed by rank ordinal. Every bucket is
        present (possibly empty) and sorted by card order.
    """
    table = [[] for _ in range(NUM_RANKS)]
    for card in cards:
        table[card.rank].append(card)
    return tuple(tuple(sorted(bucket)) for bucket in table)


def by_suits(cards: Sequence[Card]) -> BucketTable:
    """Partition cards into one bucket per suit.

    Args:
        cards: Cards of a hand

    Returns:
        Tuple of NUM_SUITS buckets indexed by suit ordinal
    """
    table = [[] for _ in range(NUM_SUITS)]
    for card in cards:
        table[card.suit].append(card)
    return tuple(tuple(sorted(bucket)) for bucket in table)


def rank_counts(rank_table: BucketTable) -> np.ndarray:
    """Number of cards held in each rank bucket, as an int array."""
    return np.array([len(bucket) for bucket in rank_table], dtype=np.int64)


# ---------------------------------------------------------------------------
# Pattern detectors
# ---------------------------------------------------------------------------


def is_flush(suit_table: BucketTable, size: int) -> bool:
    """Check if all `size` cards share a single suit.

    A majority in one suit does not count; every card must be used.
    """
    for suited in suit_table:
        if 0 < len(suited) < size:
            return False
        if len(suited) == size:
            return True
    return False


def find_straight(
    rank_table: BucketTable,
    size: int,
    ace_low: bool = True,
    counts: Optional[np.ndarray] = None,
) -> Optional[int]:
    """Find a run of `size` consecutive ranks holding exactly one card each.

    Ranks are scanned in ordinal order (Ace through King). A bucket with zero
    or several cards breaks the run in progress.

    Args:
        rank_table: Buckets from by_ranks()
        size: Number of cards in the hand
        ace_low: If True the Ace may start a run at ordinal 0 (the wheel,
            A-2-3-4-5). If False the Ace only plays above the King.
        counts: Precomputed rank_counts(rank_table), if already available

    Returns:
        Ordinal of the lowest rank of the run, or None if there is no straight.
        The wheel returns 0; 10-J-Q-K-A returns Rank.TEN.
    """
    if counts is None:
        counts = rank_counts(rank_table)
    run = 0
    start = 0
    for ordinal in range(NUM_RANKS):
        if counts[ordinal] == 1 and (ace_low or ordinal != Rank.ACE):
            if run == 0:
                start = ordinal
            run += 1
            if run == size:
                return start
        else:
            run = 0

    # An Ace above the King completes a run that reached the top
    if size > 1 and run == size - 1 and counts[Rank.ACE] == 1:
        return start

    return None


def sets(
    rank_table: BucketTable, multiplicity: int, counts: Optional[np.ndarray] = None
) -> List[int]:
    """Rank ordinals held exactly `multiplicity` times, ascending.

    Args:
        rank_table: Buckets from by_ranks()
        multiplicity: Cards per rank to look for (4, 3, 2 or 1)
        counts: Precomputed rank_counts(rank_table), if already available

    Returns:
        List of rank ordinals
    """
    if counts is None:
        counts = rank_counts(rank_table)
    return [int(ordinal) for ordinal in np.flatnonzero(counts == multiplicity)]


# ---------------------------------------------------------------------------
# Category evaluation
# ---------------------------------------------------------------------------


def ace_high(ordinal: int) -> int:
    """Promote the Ace (ordinal 0) above the King for tie-breaking."""
    return ACE_HIGH if ordinal == Rank.ACE else int(ordinal)


def _descending(ordinals: Sequence[int]) -> List[int]:
    return sorted((ace_high(o) for o in ordinals), reverse=True)


def score_cards(cards: Sequence[Card], size: Optional[int] = None) -> Score:
    """Evaluate cards into a totally ordered score.

    Categories are tested from strongest to weakest; the first match wins.

    Args:
        cards: Distinct cards of the hand
        size: Configured hand size (defaults to len(cards))

    Returns:
        Score tuple: (category weight, tie-breakers...)
    """
    if size is None:
        size = len(cards)

    rank_table = by_ranks(cards)
    counts = rank_counts(rank_table)
    flush = is_flush(by_suits(cards), size)
    straight = find_straight(rank_table, size, counts=counts)

    quads = sets(rank_table, 4, counts)
    triples = sets(rank_table, 3, counts)
    pairs = sets(rank_table, 2, counts)
    singles = sets(rank_table, 1, counts)
    every_rank = [card.rank for card in cards]

    if flush and straight is not None:
        score = (HandCategory.STRAIGHT_FLUSH, straight)
    elif quads:
        score = (HandCategory.FOUR_OF_A_KIND, *_descending(quads)[:1], *_descending(singles))
    elif triples and pairs:
        score = (HandCategory.FULL_HOUSE, _descending(triples)[0], _descending(pairs)[0])
    elif flush:
        score = (HandCategory.FLUSH, *_descending(every_rank))
    elif straight is not None:
        score = (HandCategory.STRAIGHT, straight)
    elif triples:
        score = (HandCategory.THREE_OF_A_KIND, _descending(triples)[0])
    elif len(pairs) == 2:
        score = (HandCategory.TWO_PAIR, *_descending(pairs), *_descending(singles))
    elif len(pairs) == 1:
        score = (HandCategory.PAIR, ace_high(pairs[0]), *_descending(singles))
    else:
        score = (HandCategory.HIGH_CARD, *_descending(every_rank))

    result = tuple(int(value) for value in score)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Scored %s as %s %s", " ".join(str(c) for c in cards), HandCategory(result[0]).name, result
        )
    return result


def category_of(score: Score) -> HandCategory:
    """Category encoded in the first element of a score."""
    return HandCategory(score[0])


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------


def compare_scores(score1: Score, score2: Score) -> int:
    """Compare two scores.

    Args:
        score1: First score
        score2: Second score

    Returns:
        1 if score1 wins, -1 if score2 wins, 0 on a tie

    Note:
        Only the common prefix is compared. Different categories always
        differ at index 0, so the category dominates every tie-breaker.
    """
    for left, right in zip(score1, score2):
        if left != right:
            return 1 if left > right else -1
    return 0


# ---------------------------------------------------------------------------
# Descriptions
# ---------------------------------------------------------------------------

RANK_NAMES = {
    Rank.ACE: "Ace",
    Rank.TWO: "Two",
    Rank.THREE: "Three",
    Rank.FOUR: "Four",
    Rank.FIVE: "Five",
    Rank.SIX: "Six",
    Rank.SEVEN: "Seven",
    Rank.EIGHT: "Eight",
    Rank.NINE: "Nine",
    Rank.TEN: "Ten",
    Rank.JACK: "Jack",
    Rank.QUEEN: "Queen",
    Rank.KING: "King",
}


def _name(value: int, plural: bool = False) -> str:
    name = RANK_NAMES[Rank(value % NUM_RANKS)]
    if not plural:
        return name
    return name + "es" if name.endswith("x") else name + "s"


def describe_score(score: Score, size: int = DEFAULT_HAND_SIZE) -> str:
    """Describe a score in words, e.g. "Full House, Kings over Fives".

    Args:
        score: Score from score_cards()
        size: Hand size the score was computed for (needed for straights)

    Returns:
        Description string
    """
    category = category_of(score)
    if category in (HandCategory.STRAIGHT, HandCategory.STRAIGHT_FLUSH):
        top = score[1] + size - 1
        if category == HandCategory.STRAIGHT_FLUSH and top == ACE_HIGH:
            return "Royal Flush"
        return f"{category.label}, {_name(top)} high"
    if category == HandCategory.FOUR_OF_A_KIND:
        return f"Four of a Kind, {_name(score[1], plural=True)}"
    if category == HandCategory.FULL_HOUSE:
        return f"Full House, {_name(score[1], plural=True)} over {_name(score[2], plural=True)}"
    if category == HandCategory.THREE_OF_A_KIND:
        return f"Three of a Kind, {_name(score[1], plural=True)}"
    if category == HandCategory.TWO_PAIR:
        return f"Two Pair, {_name(score[1], plural=True)} and {_name(score[2], plural=True)}"
    if category == HandCategory.PAIR:
        return f"Pair of {_name(score[1], plural=True)}"
    if category == HandCategory.FLUSH:
        return f"Flush, {_name(score[1])} high"
    return f"High Card, {_name(score[1])}"
