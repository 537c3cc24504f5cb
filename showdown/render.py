from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Sequence

from rich.console import Console
from rich.text import Text

from pokerhands.cards import RANK_COUNT, Card, Suit
from pokerhands.models import Hand, PokerRank

# Console rendering only. Nothing in pokerhands knows about glyphs or names.

SUIT_GLYPHS: Dict[Suit, str] = {
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
    Suit.CLUB: "♣",
    Suit.SPADE: "♠",
}

CATEGORY_NAMES: Dict[PokerRank, str] = {
    PokerRank.HIGH_CARD: "High Card",
    PokerRank.ONE_PAIR: "One Pair",
    PokerRank.TWO_PAIRS: "Two Pairs",
    PokerRank.THREE_OF_A_KIND: "Three of a Kind",
    PokerRank.STRAIGHT: "Straight",
    PokerRank.FLUSH: "Flush",
    PokerRank.FULL_HOUSE: "Full House",
    PokerRank.FOUR_OF_A_KIND: "Four of a Kind",
    PokerRank.STRAIGHT_FLUSH: "Straight Flush",
}

RED_SUITS = (Suit.HEART, Suit.DIAMOND)


class DisplayMode(str, Enum):
    DEFAULT = "DEFAULT"
    WITH_RANK = "WITH_RANK"
    WINNER = "WINNER"
    TESTING = "TESTING"


def card_color(card: Card) -> str:
    return "red" if card.suit in RED_SUITS else "white"


def format_card(card: Card) -> Text:
    return Text(f"[ {card.rank.symbol}-{SUIT_GLYPHS[card.suit]} ] ", style=card_color(card))


def render_deck(console: Console, deck: Sequence[Card], title: str) -> None:
    """Print the title and then the deck, one suit-sized row at a time."""
    console.print(title, markup=False, highlight=False)
    for start in range(0, len(deck), RANK_COUNT):
        line = Text()
        for card in deck[start : start + RANK_COUNT]:
            line.append_text(format_card(card))
        console.print(line, soft_wrap=True)
    console.print()


def render_hands(
    console: Console,
    hands: Sequence[Hand],
    title: str,
    mode: DisplayMode = DisplayMode.DEFAULT,
    winning: Optional[PokerRank] = None,
) -> None:
    if mode is DisplayMode.WINNER and winning is None:
        raise ValueError("WINNER mode needs the winning category")

    console.print(f"Player Hands: {title}", markup=False, highlight=False)
    for idx, hand in enumerate(hands):
        line = Text("Hand: " if mode is DisplayMode.TESTING else f"Player  {idx + 1}] - ")
        for card in hand.cards:
            line.append_text(format_card(card))
        if mode is not DisplayMode.DEFAULT:
            line.append(f" - {CATEGORY_NAMES[hand.category]}", style="bold")
            if mode is DisplayMode.WINNER and hand.category == winning:
                line.append(" - winner", style="bold green")
        console.print(line, soft_wrap=True)
    console.print()
