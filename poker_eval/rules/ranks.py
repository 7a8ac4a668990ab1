"""Card rank definitions, parsing and frequency utilities.

Rank order (low to high): 2 < 3 < 4 < 5 < 6 < 7 < 8 < 9 < T < J < Q < K < A

This module provides:
- Rank and suit constants and ordering
- Card representation and token parsing
- Rank/suit frequency tables
- Sorting helpers that never touch the caller's list
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)


class Rank(IntEnum):
    """Card ranks ordered by strength (higher value = stronger rank).

    The enum value is the rank index used for every comparison (2=0 ... A=12).
    """

    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12  # Highest rank, also plays low in the wheel


class Suit(IntEnum):
    """Card suits. Values are lookup indices only; suits never outrank each other."""

    DIAMOND = 0
    HEART = 1
    CLUB = 2
    SPADE = 3


NUM_RANKS = len(Rank)
NUM_SUITS = len(Suit)
NUM_CARDS = NUM_RANKS * NUM_SUITS

# Token symbols (upper case, as accepted by the parser)
RANK_SYMBOLS = {
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
    Rank.ACE: "A",
}

SUIT_SYMBOLS = {
    Suit.DIAMOND: "D",
    Suit.HEART: "H",
    Suit.CLUB: "C",
    Suit.SPADE: "S",
}

# Suit glyphs for display
SUIT_GLYPHS = {
    Suit.DIAMOND: "♦",
    Suit.HEART: "♥",
    Suit.CLUB: "♣",
    Suit.SPADE: "♠",
}

SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}


class InvalidCardError(ValueError):
    """Raised when a token cannot be parsed as a card."""

    def __init__(self, token: str):
        super().__init__(f"Invalid card token: {token!r}")
        self.token = token


@dataclass(frozen=True, order=True)
class Card:
    """A playing card with rank and suit.

    Cards are ordered by rank first (for sorting hands), then by suit.
    Immutable and hashable; equality is structural.
    """

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a two-character token like 'AS' or 'ts'.

        Args:
            s: Rank symbol followed by suit symbol, any case

        Returns:
            Card object

        Raises:
            InvalidCardError: If the token is not exactly a rank and a suit
        """
        card = parse_card(s)
        if card is None:
            raise InvalidCardError(s)
        return card


def is_rank_symbol(ch: str) -> bool:
    """Check if a character is a canonical (upper case) rank symbol."""
    return ch in SYMBOL_TO_RANK


def is_suit_symbol(ch: str) -> bool:
    """Check if a character is a canonical (upper case) suit symbol."""
    return ch in SYMBOL_TO_SUIT


def parse_card(token: str) -> Optional[Card]:
    """Parse a card token, returning None when it is malformed.

    Args:
        token: Two characters, rank then suit, case-insensitive

    Returns:
        Card object, or None for wrong length or unknown rank/suit
    """
    if not isinstance(token, str) or len(token) != 2:
        return None

    rank_char = token[0].upper()
    suit_char = token[1].upper()
    if not is_rank_symbol(rank_char) or not is_suit_symbol(suit_char):
        return None

    return Card(rank=SYMBOL_TO_RANK[rank_char], suit=SYMBOL_TO_SUIT[suit_char])


def parse_hand(tokens: Iterable[str]) -> List[Card]:
    """Parse a list of card tokens, silently dropping the invalid ones.

    The result can be shorter than the input; duplicates are kept.

    Args:
        tokens: Card tokens like ["AS", "kd", "7H"]

    Returns:
        List of Card objects in input order
    """
    cards = []
    for token in tokens:
        card = parse_card(token)
        if card is None:
            logger.debug("Dropping invalid card token %r", token)
            continue
        cards.append(card)
    return cards


def get_rank_counts(cards: Iterable[Card]) -> Dict[Rank, int]:
    """Count occurrences of each rank in a list of cards.

    Args:
        cards: Card objects

    Returns:
        Dict mapping every Rank to its count (zero if absent)
    """
    counts = {rank: 0 for rank in Rank}
    for card in cards:
        counts[card.rank] += 1
    return counts


def get_suit_counts(cards: Iterable[Card]) -> Dict[Suit, int]:
    """Count occurrences of each suit in a list of cards.

    Args:
        cards: Card objects

    Returns:
        Dict mapping every Suit to its count (zero if absent)
    """
    counts = {suit: 0 for suit in Suit}
    for card in cards:
        counts[card.suit] += 1
    return counts


def highest_rank_with_count(cards: Iterable[Card], n: int) -> int:
    """Find the highest rank index appearing exactly n times.

    A rank appearing three times does not count as a pair.

    Args:
        cards: Card objects
        n: Exact count to match

    Returns:
        Rank index (0-12), or -1 if no rank has exactly n cards
    """
    best = -1
    for rank, count in get_rank_counts(cards).items():
        if count == n:
            best = max(best, int(rank))
    return best


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck.

    Returns:
        List of 52 Card objects (13 ranks × 4 suits)
    """
    return [Card(rank=rank, suit=suit) for rank in Rank for suit in Suit]


def sort_cards(cards: Iterable[Card], descending: bool = False) -> List[Card]:
    """Sort cards by rank, then by suit.

    Args:
        cards: Card objects (left untouched)
        descending: Highest rank first when True

    Returns:
        New sorted list of cards
    """
    return sorted(cards, reverse=descending)


def compare_ranks(rank1: Rank, rank2: Rank) -> int:
    """Compare two ranks.

    Returns:
        Positive if rank1 > rank2, negative if rank1 < rank2, zero if equal
    """
    return int(rank1) - int(rank2)


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "AS KD 5C", raising on bad tokens.

    Args:
        s: Space-separated card tokens

    Returns:
        List of Card objects
    """
    return [Card.from_string(cs) for cs in s.split()]
