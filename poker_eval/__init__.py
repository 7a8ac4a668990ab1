"""Poker Eval - poker hand evaluation.

Parses card tokens, classifies five to seven card hands into the ten
standard categories, and picks the winner(s) among several hands.
"""

__version__ = "0.1.0"
__author__ = "Poker Eval Team"

from poker_eval.rules import (
    Card,
    HandRank,
    Ranking,
    classify,
    compare_hands,
    hand_to_rank,
    parse_card,
    parse_hand,
)

__all__ = [
    "__version__",
    "Card",
    "HandRank",
    "Ranking",
    "classify",
    "compare_hands",
    "hand_to_rank",
    "parse_card",
    "parse_hand",
]
