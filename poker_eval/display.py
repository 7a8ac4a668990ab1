"""Rich renderables for cards and showdowns."""

from typing import Iterable, Sequence

from rich import box
from rich.table import Table
from rich.text import Text

from poker_eval.rules.hands import HandRank
from poker_eval.rules.ranks import RANK_SYMBOLS, SUIT_GLYPHS, Card, Rank, Suit, parse_hand
from poker_eval.rules.showdown import find_winners, rank_hands

# Suit colors, high contrast on dark terminals
SUIT_COLORS = {
    Suit.DIAMOND: "red1",
    Suit.HEART: "red1",
    Suit.CLUB: "green1",
    Suit.SPADE: "cyan1",
}
COLOR_WINNER = "gold1"


def card_text(card: Card) -> Text:
    """Return a Rich Text object for a card with symbol and color."""
    return Text(
        f"{RANK_SYMBOLS[card.rank]}{SUIT_GLYPHS[card.suit]}",
        style=f"bold {SUIT_COLORS[card.suit]}",
    )


def hand_text(cards: Iterable[Card]) -> Text:
    return Text(" ").join(card_text(card) for card in cards)


def tiebreak_text(hand_rank: HandRank) -> str:
    """Tie-break ranks as symbols, e.g. "A K 9"."""
    return " ".join(RANK_SYMBOLS[Rank(i)] for i in hand_rank.tiebreak)


def showdown_table(raw_hands: Sequence[Sequence[str]], title: str = "Showdown") -> Table:
    """Build a table with one row per hand: cards, category, tie-break, result.

    Args:
        raw_hands: One list of card tokens per hand
        title: Table title

    Returns:
        Rich Table ready to print
    """
    hand_ranks = rank_hands(raw_hands)
    winners = set(find_winners(hand_ranks))

    table = Table(title=title, box=box.SIMPLE, show_header=True)
    table.add_column("#", justify="right")
    table.add_column("Cards")
    table.add_column("Hand")
    table.add_column("Tie-break")
    table.add_column("Result", justify="center")

    for hand_rank, tokens in zip(hand_ranks, raw_hands):
        result = Text("WINNER", style=f"bold {COLOR_WINNER}") if hand_rank.index in winners else Text("")
        table.add_row(
            str(hand_rank.index),
            hand_text(parse_hand(tokens)),
            str(hand_rank.ranking),
            tiebreak_text(hand_rank),
            result,
        )

    return table
