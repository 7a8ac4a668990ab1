"""Array encoding of hands for batched evaluation.

Card encoding: 0-51 for the standard deck (4 suits × 13 ranks)
card_idx = suit * 13 + rank

A hand is a length-52 vector of card counts. Counts rather than a boolean
mask keep duplicated cards, which the evaluator accepts.
"""

from typing import List, Sequence

import numpy as np

from poker_eval.rules.ranks import NUM_CARDS, NUM_RANKS, Card, Rank, Suit


class HandEncodingError(Exception):
    """Raised when a hand cannot be encoded."""

    pass


def card_to_idx(card: Card) -> int:
    """Convert Card to index 0-51."""
    return card.suit.value * NUM_RANKS + card.rank.value


def idx_to_card(idx: int) -> Card:
    """Convert index 0-51 to Card."""
    if idx < 0 or idx >= NUM_CARDS:
        raise HandEncodingError(f"Card index {idx} out of range [0, {NUM_CARDS})")
    return Card(rank=Rank(idx % NUM_RANKS), suit=Suit(idx // NUM_RANKS))


def encode_hand(cards: Sequence[Card]) -> np.ndarray:
    """Encode a hand as per-card counts.

    Args:
        cards: Card objects

    Returns:
        Numpy int64 array of shape (52,)

    Raises:
        HandEncodingError: If an element is not a Card
    """
    vec = np.zeros(NUM_CARDS, dtype=np.int64)
    for card in cards:
        if not isinstance(card, Card):
            raise HandEncodingError(f"Expected Card, got {type(card).__name__}: {card!r}")
        vec[card_to_idx(card)] += 1
    return vec


def encode_hands(hands: Sequence[Sequence[Card]]) -> np.ndarray:
    """Encode a batch of hands.

    Returns:
        Numpy int64 array of shape (len(hands), 52)
    """
    batch = np.zeros((len(hands), NUM_CARDS), dtype=np.int64)
    for i, cards in enumerate(hands):
        batch[i] = encode_hand(cards)
    return batch


def decode_hand(vec: np.ndarray) -> List[Card]:
    """Decode a count vector back into cards, lowest index first."""
    if vec.shape != (NUM_CARDS,):
        raise HandEncodingError(f"Expected shape ({NUM_CARDS},), got {vec.shape}")

    cards = []
    for idx in np.flatnonzero(vec):
        cards.extend([idx_to_card(int(idx))] * int(vec[idx]))
    return cards
