"""Tests for multi-hand comparison.

Tests cover:
- Best category wins outright
- Category-specific tie-breaks (top card, main rank then kicker, full payload)
- Split pots: every hand equal to the best shares the win
- Degenerate input: no hands, one hand, invalid tokens
"""

from poker_eval.rules import (
    HandRank,
    HighCard,
    Rank,
    Ranking,
    RoyalFlush,
    can_beat,
    compare_hand_ranks,
    compare_hands,
    find_winners,
    hand_to_rank,
    rank_hands,
)

ROYAL = ["KS", "QS", "JS", "TS", "AS", "2D"]
STRAIGHT_FLUSH_6 = ["2S", "3S", "4S", "5S", "6S", "KD"]
HIGH_CARD = ["2D", "4H", "6S", "8C", "TD", "QH", "KS"]


class TestCategoryWins:
    """The best category wins regardless of ranks."""

    def test_royal_flush_beats_high_card(self):
        assert compare_hands([ROYAL, HIGH_CARD]) == [0]

    def test_winner_in_middle(self):
        hands = [
            HIGH_CARD,
            ["9D", "9H", "9S", "9C", "KD", "2H", "3S"],
            ["AD", "AH", "KS", "KC", "QD", "2H", "3S"],
        ]
        assert compare_hands(hands) == [1]

    def test_low_two_pair_beats_high_one_pair(self):
        hands = [
            ["AD", "AH", "KS", "QC", "JD", "2H", "4S"],
            ["2D", "2H", "3S", "3C", "7D", "8H", "9S"],
        ]
        assert compare_hands(hands) == [1]

    def test_three_way_category_order(self):
        ranks = rank_hands(
            [
                ["2D", "2H", "5S", "9C", "JD"],
                ["2S", "3S", "4S", "5S", "6S"],
                ["7D", "7H", "7S", "KC", "2D"],
            ]
        )
        assert [r.ranking for r in ranks] == [
            Ranking.ONE_PAIR,
            Ranking.STRAIGHT_FLUSH,
            Ranking.THREE_OF_A_KIND,
        ]
        assert find_winners(ranks) == [1]


class TestTieBreaks:
    """Hands sharing the best category are separated by their payloads."""

    def test_identical_straight_flushes_tie(self):
        assert compare_hands([STRAIGHT_FLUSH_6, STRAIGHT_FLUSH_6]) == [0, 1]

    def test_royal_flushes_always_tie(self):
        other_royal = ["KH", "QH", "JH", "TH", "AH", "9C"]
        assert compare_hands([ROYAL, other_royal]) == [0, 1]

    def test_higher_straight_flush_wins(self):
        higher = ["3H", "4H", "5H", "6H", "7H", "2C"]
        assert compare_hands([STRAIGHT_FLUSH_6, higher]) == [1]

    def test_wheel_loses_to_six_high_straight(self):
        wheel = ["AS", "2D", "3H", "4S", "5C", "9H", "JD"]
        six_high = ["2C", "3D", "4H", "5S", "6C", "9D", "JH"]
        assert compare_hands([wheel, six_high]) == [1]

    def test_straights_with_same_top_tie(self):
        a = ["5S", "6D", "7H", "8S", "9C", "2H"]
        b = ["5D", "6H", "7S", "8C", "9H", "3D"]
        assert compare_hands([a, b]) == [0, 1]

    def test_four_of_a_kind_by_quads_then_kicker(self):
        low_quads = ["8D", "8H", "8S", "8C", "AD"]
        high_quads = ["9D", "9H", "9S", "9C", "2D"]
        assert compare_hands([low_quads, high_quads]) == [1]

        weak_kicker = ["9D", "9H", "9S", "9C", "2D"]
        strong_kicker = ["9D", "9H", "9S", "9C", "KD"]
        assert compare_hands([weak_kicker, strong_kicker]) == [1]

    def test_full_house_by_trips_then_pair(self):
        tens_full = ["TD", "TH", "TS", "2C", "2D"]
        nines_full = ["9D", "9H", "9S", "AC", "AD"]
        assert compare_hands([tens_full, nines_full]) == [0]

        nines_over_twos = ["9D", "9H", "9S", "2C", "2D"]
        nines_over_kings = ["9C", "9H", "9S", "KC", "KD"]
        assert compare_hands([nines_over_twos, nines_over_kings]) == [1]

    def test_flush_decided_by_lower_card(self):
        a = ["AH", "JH", "9H", "6H", "3H", "2C"]
        b = ["AD", "JD", "9D", "6D", "4D", "2C"]
        assert compare_hands([a, b]) == [1]

    def test_three_of_a_kind_kickers(self):
        a = ["7D", "7H", "7S", "KC", "2D"]
        b = ["7C", "7H", "7S", "KD", "3D"]
        assert compare_hands([a, b]) == [1]

    def test_two_pair_by_kicker(self):
        a = ["AD", "AH", "KS", "KC", "QD"]
        b = ["AC", "AS", "KD", "KH", "JD"]
        assert compare_hands([a, b]) == [0]

    def test_one_pair_by_kicker(self):
        a = ["QD", "QH", "9S", "7C", "5D", "3H", "2S"]
        b = ["QC", "QS", "9D", "8C", "5H", "3D", "2C"]
        assert compare_hands([a, b]) == [1]

    def test_high_card_split(self):
        a = ["AD", "KH", "9S", "7C", "5D"]
        b = ["AH", "KS", "9C", "7D", "5S"]
        c = ["AC", "KD", "9H", "7S", "4D"]
        assert compare_hands([a, b, c]) == [0, 1]

    def test_shorter_payload_loses_on_equal_prefix(self):
        four_cards = ["AS", "KD", "9C", "7H"]
        five_cards = ["AD", "KS", "9H", "7C", "2D"]
        assert compare_hands([four_cards, five_cards]) == [1]


class TestDegenerateInput:
    def test_no_hands(self):
        assert compare_hands([]) == []
        assert find_winners([]) == []

    def test_single_hand(self):
        assert compare_hands([HIGH_CARD]) == [0]

    def test_invalid_tokens_dropped(self):
        assert compare_hands([["XX", "1S"], ["2D"]]) == [1]

    def test_input_hands_untouched(self):
        hands = [list(HIGH_CARD), list(ROYAL)]
        compare_hands(hands)
        assert hands == [HIGH_CARD, ROYAL]


class TestPairwiseComparison:
    def test_compare_hand_ranks(self):
        royal = hand_to_rank(ROYAL)
        high = hand_to_rank(HIGH_CARD)
        assert compare_hand_ranks(royal, high) > 0
        assert compare_hand_ranks(high, royal) < 0
        assert compare_hand_ranks(high, high) == 0

    def test_can_beat(self):
        royal = hand_to_rank(ROYAL)
        high = hand_to_rank(HIGH_CARD)
        assert can_beat(royal, high)
        assert not can_beat(high, royal)
        assert not can_beat(royal, royal)

    def test_royal_flushes_compare_equal(self):
        assert compare_hand_ranks(
            HandRank(Ranking.ROYAL_FLUSH, RoyalFlush()),
            HandRank(Ranking.ROYAL_FLUSH),
        ) == 0

    def test_rank_hands_tags_indices(self):
        ranks = rank_hands([HIGH_CARD, ROYAL])
        assert [r.index for r in ranks] == [0, 1]

    def test_find_winners_uses_position_without_index(self):
        hand_ranks = [
            HandRank(Ranking.HIGH_CARD, HighCard((Rank.KING,))),
            HandRank(Ranking.HIGH_CARD, HighCard((Rank.ACE,))),
        ]
        assert find_winners(hand_ranks) == [1]

    def test_find_winners_prefers_explicit_index(self):
        hand_ranks = [
            HandRank(Ranking.HIGH_CARD, HighCard((Rank.ACE,)), index=7),
            HandRank(Ranking.HIGH_CARD, HighCard((Rank.KING,)), index=3),
        ]
        assert find_winners(hand_ranks) == [7]
