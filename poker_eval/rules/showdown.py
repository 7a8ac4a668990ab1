"""Multi-hand comparison.

Hands are classified independently, the best category wins outright, and
hands sharing the best category are separated by their tie-break tuples:
- Royal flush: every contender ties
- Straight / straight flush: the top card
- Four of a kind / full house: the main rank, then the kicker or pair
- Everything else: all ranks in order, first difference wins

Every hand equal to the best one shares the win.
"""

import logging
from typing import List, Sequence

from .hands import HandRank, Ranking, hand_to_rank

logger = logging.getLogger(__name__)


def compare_hand_ranks(hand1: HandRank, hand2: HandRank) -> int:
    """Compare two classified hands.

    Args:
        hand1: First hand
        hand2: Second hand

    Returns:
        Positive if hand1 > hand2
        Negative if hand1 < hand2
        Zero if they tie
    """
    if hand1.ranking != hand2.ranking:
        return int(hand1.ranking) - int(hand2.ranking)

    if hand1.ranking == Ranking.ROYAL_FLUSH:
        return 0

    # Tuple order: first difference wins, a shorter prefix loses
    key1, key2 = hand1.tiebreak, hand2.tiebreak
    return (key1 > key2) - (key1 < key2)


def can_beat(hand1: HandRank, hand2: HandRank) -> bool:
    """Check if hand1 strictly beats hand2."""
    return compare_hand_ranks(hand1, hand2) > 0


def rank_hands(raw_hands: Sequence[Sequence[str]]) -> List[HandRank]:
    """Classify each hand of card tokens, tagging it with its input position.

    Args:
        raw_hands: One list of card tokens per hand

    Returns:
        HandRank per hand, in input order
    """
    return [hand_to_rank(tokens).with_index(i) for i, tokens in enumerate(raw_hands)]


def find_winners(hand_ranks: Sequence[HandRank]) -> List[int]:
    """Pick the winning hands among classified hands.

    Args:
        hand_ranks: Classified hands; a hand without an index is identified by
            its position in the sequence

    Returns:
        Indices of every hand tied for best, ascending. Empty for no hands.
    """
    if not hand_ranks:
        return []

    tagged = [hr if hr.index is not None else hr.with_index(i) for i, hr in enumerate(hand_ranks)]

    best_ranking = max(hr.ranking for hr in tagged)
    contenders = [hr for hr in tagged if hr.ranking == best_ranking]

    if len(contenders) == 1:
        winners = [contenders[0].index]
    elif best_ranking == Ranking.ROYAL_FLUSH:
        winners = sorted(hr.index for hr in contenders)
    else:
        best_key = max(hr.tiebreak for hr in contenders)
        winners = sorted(hr.index for hr in contenders if hr.tiebreak == best_key)

    logger.debug(
        "Best category %s: %d contender(s), winners %s",
        best_ranking.name,
        len(contenders),
        winners,
    )
    return winners


def compare_hands(raw_hands: Sequence[Sequence[str]]) -> List[int]:
    """Determine the winning hand(s) among hands of card tokens.

    Invalid tokens are dropped from their hand before classification.

    Args:
        raw_hands: One list of card tokens per hand

    Returns:
        Zero-based indices of the winning hands, ascending (several on a tie)

    Example:
        >>> compare_hands([["AS", "KS", "QS", "JS", "TS"], ["2D", "7C", "9H", "JD", "KC"]])
        [0]
    """
    return find_winners(rank_hands(raw_hands))
