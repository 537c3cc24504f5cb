"""Deck, shuffle, deal and poker-hand classification primitives shared by the command line host."""

from .cards import (
    DECK_SIZE,
    Card,
    Rank,
    Suit,
    build_deck,
    cards_to_labels,
    deal_hands,
    parse_cards,
    parse_label,
    shuffle_deck,
)
from .evaluator import SortedHand, best_category, classify, classify_all, sort_hand, sort_hands, winning_hands
from .models import HAND_SIZE, DealConfig, Hand, PokerRank

__all__ = [
    "DECK_SIZE",
    "HAND_SIZE",
    "Card",
    "Rank",
    "Suit",
    "build_deck",
    "cards_to_labels",
    "deal_hands",
    "parse_cards",
    "parse_label",
    "shuffle_deck",
    "SortedHand",
    "best_category",
    "classify",
    "classify_all",
    "sort_hand",
    "sort_hands",
    "winning_hands",
    "DealConfig",
    "Hand",
    "PokerRank",
]
