"""Nine hands, one per category, classified on every run as a regression check."""

from __future__ import annotations

from typing import List, Tuple

from .cards import parse_cards
from .models import Hand, PokerRank

FIXTURE_LABELS: Tuple[Tuple[Tuple[str, ...], PokerRank], ...] = (
    (("2D", "3C", "4D", "6S", "QH"), PokerRank.HIGH_CARD),
    (("4H", "5H", "5D", "7H", "TS"), PokerRank.ONE_PAIR),
    (("3D", "3H", "TC", "TD", "QC"), PokerRank.TWO_PAIRS),
    (("3D", "3H", "3S", "TD", "QC"), PokerRank.THREE_OF_A_KIND),
    (("AS", "2D", "3C", "4D", "5D"), PokerRank.STRAIGHT),
    (("2C", "3C", "4C", "6C", "QC"), PokerRank.FLUSH),
    (("3D", "3H", "3S", "TD", "TC"), PokerRank.FULL_HOUSE),
    (("3D", "3H", "3S", "3C", "QC"), PokerRank.FOUR_OF_A_KIND),
    (("AD", "TD", "JD", "QD", "KD"), PokerRank.STRAIGHT_FLUSH),
)

EXPECTED_CATEGORIES: List[PokerRank] = [category for _, category in FIXTURE_LABELS]


def fixture_hands() -> List[Hand]:
    """Fresh, unclassified copies of the fixture hands in their listed order."""
    return [Hand(parse_cards(labels)) for labels, _ in FIXTURE_LABELS]
