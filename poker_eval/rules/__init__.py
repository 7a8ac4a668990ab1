"""Poker hand rules.

This module provides:
- Card and rank definitions, parsing and frequency tables (ranks.py)
- Category detection and classification (hands.py)
- Multi-hand comparison (showdown.py)
"""

from .ranks import (
    Rank,
    Suit,
    Card,
    InvalidCardError,
    NUM_RANKS,
    NUM_SUITS,
    NUM_CARDS,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    SUIT_GLYPHS,
    is_rank_symbol,
    is_suit_symbol,
    parse_card,
    parse_hand,
    get_rank_counts,
    get_suit_counts,
    highest_rank_with_count,
    create_standard_deck,
    sort_cards,
    compare_ranks,
    make_cards_from_string,
)

from .hands import (
    Ranking,
    RANKING_NAMES,
    HIGH_CARD_SIZE,
    FLUSH_SIZE,
    STRAIGHT_LENGTH,
    HandData,
    HighCard,
    OnePair,
    TwoPair,
    ThreeOfAKind,
    Straight,
    Flush,
    FullHouse,
    FourOfAKind,
    StraightFlush,
    RoyalFlush,
    HandRank,
    compare_flush,
    is_high_card,
    is_one_pair,
    is_two_pair,
    is_three_of_a_kind,
    is_straight,
    is_flush,
    is_full_house,
    is_four_of_a_kind,
    is_straight_flush,
    is_royal_flush,
    classify,
    hand_to_rank,
)

from .showdown import (
    compare_hand_ranks,
    can_beat,
    rank_hands,
    find_winners,
    compare_hands,
)

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "InvalidCardError",
    "NUM_RANKS",
    "NUM_SUITS",
    "NUM_CARDS",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "SUIT_GLYPHS",
    "is_rank_symbol",
    "is_suit_symbol",
    "parse_card",
    "parse_hand",
    "get_rank_counts",
    "get_suit_counts",
    "highest_rank_with_count",
    "create_standard_deck",
    "sort_cards",
    "compare_ranks",
    "make_cards_from_string",
    # Hands
    "Ranking",
    "RANKING_NAMES",
    "HIGH_CARD_SIZE",
    "FLUSH_SIZE",
    "STRAIGHT_LENGTH",
    "HandData",
    "HighCard",
    "OnePair",
    "TwoPair",
    "ThreeOfAKind",
    "Straight",
    "Flush",
    "FullHouse",
    "FourOfAKind",
    "StraightFlush",
    "RoyalFlush",
    "HandRank",
    "compare_flush",
    "is_high_card",
    "is_one_pair",
    "is_two_pair",
    "is_three_of_a_kind",
    "is_straight",
    "is_flush",
    "is_full_house",
    "is_four_of_a_kind",
    "is_straight_flush",
    "is_royal_flush",
    "classify",
    "hand_to_rank",
    # Showdown
    "compare_hand_ranks",
    "can_beat",
    "rank_hands",
    "find_winners",
    "compare_hands",
]
