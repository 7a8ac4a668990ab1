"""Hand category detection and classification.

Categories, weakest to strongest:
- High card: nothing better, ranked by the top five cards
- One pair: exactly one pair, three kickers
- Two pair: the two highest pairs plus one kicker
- Three of a kind: one triple and no pair, two kickers
- Straight: five consecutive ranks (A plays low in A-2-3-4-5)
- Flush: five or more cards of one suit
- Full house: a triple plus a pair of a different rank
- Four of a kind: four cards of one rank plus one kicker
- Straight flush: a straight and a flush in the same hand
- Royal flush: a straight flush topped by the ace

Each detector returns None when the category does not match, otherwise a
frozen payload whose key() is the tie-break tuple (most significant first).
Detectors never reorder the caller's cards.
"""

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Callable, Iterable, Optional, Sequence, Tuple

from .ranks import (
    Card,
    Rank,
    get_rank_counts,
    get_suit_counts,
    highest_rank_with_count,
    parse_hand,
)


# Cards that make up a scored poker hand
HIGH_CARD_SIZE = 5
FLUSH_SIZE = 5
STRAIGHT_LENGTH = 5


class Ranking(IntEnum):
    """Poker hand categories (higher value = stronger hand)."""

    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    def __str__(self) -> str:
        return RANKING_NAMES[self]


RANKING_NAMES = {
    Ranking.HIGH_CARD: "High Card",
    Ranking.ONE_PAIR: "One Pair",
    Ranking.TWO_PAIR: "Two Pair",
    Ranking.THREE_OF_A_KIND: "Three of a Kind",
    Ranking.STRAIGHT: "Straight",
    Ranking.FLUSH: "Flush",
    Ranking.FULL_HOUSE: "Full House",
    Ranking.FOUR_OF_A_KIND: "Four of a Kind",
    Ranking.STRAIGHT_FLUSH: "Straight Flush",
    Ranking.ROYAL_FLUSH: "Royal Flush",
}


class HandData:
    """Base for category payloads."""

    def key(self) -> Tuple[int, ...]:
        """Tie-break tuple, most significant rank index first."""
        raise NotImplementedError


@dataclass(frozen=True)
class HighCard(HandData):
    ranks: Tuple[Rank, ...]

    def key(self) -> Tuple[int, ...]:
        return tuple(int(r) for r in self.ranks)


@dataclass(frozen=True)
class OnePair(HandData):
    pair: Rank
    kickers: Tuple[Rank, ...]

    def key(self) -> Tuple[int, ...]:
        return (int(self.pair),) + tuple(int(r) for r in self.kickers)


@dataclass(frozen=True)
class TwoPair(HandData):
    high_pair: Rank
    low_pair: Rank
    kicker: Optional[Rank] = None

    def key(self) -> Tuple[int, ...]:
        pairs = (int(self.high_pair), int(self.low_pair))
        if self.kicker is None:
            return pairs
        return pairs + (int(self.kicker),)


@dataclass(frozen=True)
class ThreeOfAKind(HandData):
    trips: Rank
    kickers: Tuple[Rank, ...]

    def key(self) -> Tuple[int, ...]:
        return (int(self.trips),) + tuple(int(r) for r in self.kickers)


@dataclass(frozen=True)
class Straight(HandData):
    high: Rank

    def key(self) -> Tuple[int, ...]:
        return (int(self.high),)


@dataclass(frozen=True)
class Flush(HandData):
    ranks: Tuple[Rank, ...]

    def key(self) -> Tuple[int, ...]:
        return tuple(int(r) for r in self.ranks)


@dataclass(frozen=True)
class FullHouse(HandData):
    trips: Rank
    pair: Rank

    def key(self) -> Tuple[int, ...]:
        return (int(self.trips), int(self.pair))


@dataclass(frozen=True)
class FourOfAKind(HandData):
    quads: Rank
    kicker: Optional[Rank] = None

    def key(self) -> Tuple[int, ...]:
        if self.kicker is None:
            return (int(self.quads),)
        return (int(self.quads), int(self.kicker))


@dataclass(frozen=True)
class StraightFlush(HandData):
    high: Rank

    def key(self) -> Tuple[int, ...]:
        return (int(self.high),)


@dataclass(frozen=True)
class RoyalFlush(HandData):
    """Royal flushes always tie with each other."""

    def key(self) -> Tuple[int, ...]:
        return ()


@dataclass(frozen=True)
class HandRank:
    """A classified hand.

    Attributes:
        ranking: The hand category
        data: Category payload carrying the tie-break ranks
        index: Position of the hand in a multi-hand comparison, or None
    """

    ranking: Ranking
    data: Optional[HandData] = None
    index: Optional[int] = None

    @property
    def tiebreak(self) -> Tuple[int, ...]:
        """Tie-break tuple of the payload (empty when there is none)."""
        if self.data is None:
            return ()
        return self.data.key()

    def with_index(self, index: int) -> "HandRank":
        """Copy of this rank tagged with its position in a comparison."""
        return replace(self, index=index)

    def __str__(self) -> str:
        return str(self.ranking)


def _ranks_desc(cards: Iterable[Card], limit: Optional[int] = None) -> Tuple[Rank, ...]:
    ranks = sorted((card.rank for card in cards), reverse=True)
    if limit is not None:
        ranks = ranks[:limit]
    return tuple(ranks)


def compare_flush(a: Sequence[int], b: Sequence[int]) -> int:
    """Compare two flushes rank by rank, the first difference wins.

    Returns:
        1 if a is higher, -1 if b is higher, 0 if equal
    """
    for x, y in zip(a, b):
        if x > y:
            return 1
        if x < y:
            return -1
    return 0


def is_high_card(cards: Sequence[Card], num_cards: int = HIGH_CARD_SIZE) -> Optional[HighCard]:
    """Top num_cards ranks, highest first; None for an empty hand."""
    if not cards:
        return None
    return HighCard(ranks=_ranks_desc(cards, num_cards))


def is_one_pair(cards: Sequence[Card]) -> Optional[OnePair]:
    """Detect exactly one pair.

    Hands holding a second pair or a triple besides the pair are rejected, so
    two pair and full house never read as one pair.
    """
    pair_index = highest_rank_with_count(cards, 2)
    if pair_index == -1:
        return None

    rest = [c for c in cards if c.rank != pair_index]
    if highest_rank_with_count(rest, 2) != -1 or highest_rank_with_count(rest, 3) != -1:
        return None

    return OnePair(pair=Rank(pair_index), kickers=_ranks_desc(rest, 3))


def is_two_pair(cards: Sequence[Card]) -> Optional[TwoPair]:
    """Detect two pair, keeping the two highest when three pairs are present.

    A rank seen three times is not a pair here.
    """
    counts = get_rank_counts(cards)
    pairs = sorted((rank for rank, count in counts.items() if count == 2), reverse=True)
    if len(pairs) < 2:
        return None

    high_pair, low_pair = pairs[0], pairs[1]
    remaining = [c for c in cards if c.rank != high_pair and c.rank != low_pair]
    kicker = max(c.rank for c in remaining) if remaining else None

    return TwoPair(high_pair=high_pair, low_pair=low_pair, kicker=kicker)


def is_three_of_a_kind(cards: Sequence[Card]) -> Optional[ThreeOfAKind]:
    """Detect a triple with no accompanying pair (that would be a full house)."""
    trips_index = highest_rank_with_count(cards, 3)
    if trips_index == -1:
        return None
    if highest_rank_with_count(cards, 2) != -1:
        return None

    rest = [c for c in cards if c.rank != trips_index]
    return ThreeOfAKind(trips=Rank(trips_index), kickers=_ranks_desc(rest, 2))


def is_straight(cards: Sequence[Card]) -> Optional[Straight]:
    """Detect five consecutive ranks, returning the highest possible top card.

    Duplicated ranks are ignored. The ace is also tried as the card below the
    two, which makes A-2-3-4-5 (the wheel) a five-high straight.
    """
    ranks = sorted({int(c.rank) for c in cards})
    if int(Rank.ACE) in ranks:
        ranks = [-1] + ranks

    top = -1
    for i in range(len(ranks) - STRAIGHT_LENGTH + 1):
        # Distinct sorted ranks spanning exactly 4 steps are consecutive
        if ranks[i + STRAIGHT_LENGTH - 1] - ranks[i] == STRAIGHT_LENGTH - 1:
            top = max(top, ranks[i + STRAIGHT_LENGTH - 1])

    if top == -1:
        return None
    return Straight(high=Rank(top))


def is_flush(cards: Sequence[Card]) -> Optional[Flush]:
    """Detect five or more cards of one suit.

    The payload holds the top five ranks of that suit. If several suits
    qualify, the highest five-card set wins.
    """
    best: Optional[Tuple[Rank, ...]] = None
    for suit, count in get_suit_counts(cards).items():
        if count < FLUSH_SIZE:
            continue
        ranks = _ranks_desc((c for c in cards if c.suit == suit), FLUSH_SIZE)
        if best is None or compare_flush(ranks, best) > 0:
            best = ranks

    if best is None:
        return None
    return Flush(ranks=best)


def is_full_house(cards: Sequence[Card]) -> Optional[FullHouse]:
    """Detect a triple plus a pair of a different rank.

    Either part may be larger than needed (two triples count, the lower one
    playing as the pair).
    """
    counts = get_rank_counts(cards)
    triples = [rank for rank, count in counts.items() if count >= 3]
    if not triples:
        return None

    trips = max(triples)
    pairs = [rank for rank, count in counts.items() if count >= 2 and rank != trips]
    if not pairs:
        return None

    return FullHouse(trips=trips, pair=max(pairs))


def is_four_of_a_kind(cards: Sequence[Card]) -> Optional[FourOfAKind]:
    quads_index = highest_rank_with_count(cards, 4)
    if quads_index == -1:
        return None

    remaining = [c for c in cards if c.rank != quads_index]
    kicker = max(c.rank for c in remaining) if remaining else None
    return FourOfAKind(quads=Rank(quads_index), kicker=kicker)


def is_straight_flush(cards: Sequence[Card]) -> Optional[StraightFlush]:
    """Detect a straight and a flush in the same hand.

    The two are detected independently: a seven-card hand with an offsuit
    straight and an unrelated flush still reports a straight flush.
    """
    straight = is_straight(cards)
    if straight is None or is_flush(cards) is None:
        return None
    return StraightFlush(high=straight.high)


def is_royal_flush(cards: Sequence[Card]) -> bool:
    straight_flush = is_straight_flush(cards)
    return straight_flush is not None and straight_flush.high == Rank.ACE


# Detection order below the royal flush, strongest first
_DETECTORS: Tuple[Tuple[Ranking, Callable[[Sequence[Card]], Optional[HandData]]], ...] = (
    (Ranking.STRAIGHT_FLUSH, is_straight_flush),
    (Ranking.FOUR_OF_A_KIND, is_four_of_a_kind),
    (Ranking.FULL_HOUSE, is_full_house),
    (Ranking.FLUSH, is_flush),
    (Ranking.STRAIGHT, is_straight),
    (Ranking.THREE_OF_A_KIND, is_three_of_a_kind),
    (Ranking.TWO_PAIR, is_two_pair),
    (Ranking.ONE_PAIR, is_one_pair),
    (Ranking.HIGH_CARD, is_high_card),
)


def classify(cards: Iterable[Card]) -> HandRank:
    """Classify a hand into its highest matching category.

    Args:
        cards: Card objects (not modified)

    Returns:
        HandRank with the category and its tie-break payload. An empty hand
        is a high card with no ranks.
    """
    cards = list(cards)

    if is_royal_flush(cards):
        return HandRank(ranking=Ranking.ROYAL_FLUSH, data=RoyalFlush())

    for ranking, detector in _DETECTORS:
        data = detector(cards)
        if data is not None:
            return HandRank(ranking=ranking, data=data)

    return HandRank(ranking=Ranking.HIGH_CARD, data=HighCard(ranks=()))


def hand_to_rank(tokens: Iterable[str]) -> HandRank:
    """Parse card tokens (dropping invalid ones) and classify the hand."""
    return classify(parse_hand(tokens))
