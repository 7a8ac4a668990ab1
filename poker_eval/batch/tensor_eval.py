"""Batched hand classification with PyTorch.

This module provides:
- Conversion of hands to [batch, 52] card-count tensors
- Category classification for a whole batch at once (CPU or GPU)

Key insight: every category test reduces to rank and suit counts, so a
batch of hands can be classified with a handful of tensor reductions
instead of a Python loop per hand. Results match rules.hands.classify,
including the independent straight/flush check for straight flushes.
Tie-breaks are left to the CPU path.
"""

from typing import List, Sequence

import torch

from poker_eval.rules.hands import FLUSH_SIZE, STRAIGHT_LENGTH, Ranking
from poker_eval.rules.ranks import NUM_RANKS, NUM_SUITS, Card, Rank

from .encoding import encode_hands


def hands_to_tensor(hands: Sequence[Sequence[Card]], device: torch.device) -> torch.Tensor:
    """Convert a batch of hands to a [batch, 52] long tensor of card counts."""
    return torch.as_tensor(encode_hands(hands), dtype=torch.long, device=device)


class TensorHandClassifier:
    """Batched hand classifier.

    Keeps its lookup tensors on the target device to avoid transfers.
    """

    def __init__(self, device: torch.device):
        self.device = device
        self._build_tensors()

    def _build_tensors(self):
        # Rank presence is extended with the ace in front (ace plays low),
        # giving 14 slots and 10 windows of five. Window j spans ranks
        # j-1 .. j+3, so its top card is rank index j + 3.
        num_windows = NUM_RANKS + 1 - STRAIGHT_LENGTH + 1
        self.window_tops = torch.arange(num_windows, device=self.device, dtype=torch.long) + (
            STRAIGHT_LENGTH - 2
        )

    def rank_counts(self, card_counts: torch.Tensor) -> torch.Tensor:
        """[batch, 52] card counts -> [batch, 13] rank counts."""
        return card_counts.view(card_counts.shape[0], NUM_SUITS, NUM_RANKS).sum(dim=1)

    def suit_counts(self, card_counts: torch.Tensor) -> torch.Tensor:
        """[batch, 52] card counts -> [batch, 4] suit counts."""
        return card_counts.view(card_counts.shape[0], NUM_SUITS, NUM_RANKS).sum(dim=2)

    def straight_high(self, card_counts: torch.Tensor) -> torch.Tensor:
        """Top rank index of the best straight per hand, -1 where there is none.

        Args:
            card_counts: [batch, 52] card counts

        Returns:
            [batch] long tensor
        """
        return self._straight_high_from_ranks(self.rank_counts(card_counts))

    def _straight_high_from_ranks(self, rank_counts: torch.Tensor) -> torch.Tensor:
        present = (rank_counts > 0).long()
        ace = int(Rank.ACE)
        extended = torch.cat([present[:, ace : ace + 1], present], dim=1)  # [batch, 14]

        windows = extended.unfold(1, STRAIGHT_LENGTH, 1).sum(dim=2) == STRAIGHT_LENGTH
        tops = self.window_tops.unsqueeze(0).expand(windows.shape[0], -1)
        return torch.where(windows, tops, torch.full_like(tops, -1)).max(dim=1).values

    def classify(self, card_counts: torch.Tensor) -> torch.Tensor:
        """Classify a batch of hands.

        Args:
            card_counts: [batch, 52] card counts (see hands_to_tensor)

        Returns:
            [batch] long tensor of Ranking values
        """
        card_counts = card_counts.to(self.device)
        ranks = self.rank_counts(card_counts)
        suits = self.suit_counts(card_counts)

        high = self._straight_high_from_ranks(ranks)
        straight = high >= 0
        flush = (suits >= FLUSH_SIZE).any(dim=1)
        straight_flush = straight & flush
        royal = straight_flush & (high == int(Rank.ACE))

        num_pairs = (ranks == 2).sum(dim=1)
        num_trips = (ranks == 3).sum(dim=1)
        quads = (ranks == 4).any(dim=1)
        # A triple (3+) plus a second rank holding at least two cards
        full_house = ((ranks >= 3).sum(dim=1) >= 1) & ((ranks >= 2).sum(dim=1) >= 2)
        three_kind = (num_trips >= 1) & (num_pairs == 0)
        two_pair = num_pairs >= 2
        one_pair = (num_pairs == 1) & (num_trips == 0)

        result = torch.full(
            (card_counts.shape[0],), int(Ranking.HIGH_CARD), dtype=torch.long, device=self.device
        )
        # Weakest first so stronger categories overwrite
        for mask, ranking in (
            (one_pair, Ranking.ONE_PAIR),
            (two_pair, Ranking.TWO_PAIR),
            (three_kind, Ranking.THREE_OF_A_KIND),
            (straight, Ranking.STRAIGHT),
            (flush, Ranking.FLUSH),
            (full_house, Ranking.FULL_HOUSE),
            (quads, Ranking.FOUR_OF_A_KIND),
            (straight_flush, Ranking.STRAIGHT_FLUSH),
            (royal, Ranking.ROYAL_FLUSH),
        ):
            result = torch.where(mask, torch.full_like(result, int(ranking)), result)

        return result

    def classify_hands(self, hands: Sequence[Sequence[Card]]) -> List[Ranking]:
        """Classify hands of Card objects, returning one Ranking per hand."""
        card_counts = hands_to_tensor(hands, self.device)
        return [Ranking(v) for v in self.classify(card_counts).tolist()]
