from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import List, MutableSequence, Optional, Protocol, Sequence

from .models import HAND_SIZE, Hand

RANK_SYMBOLS = "A23456789TJQK"
SUIT_LETTERS = "HDCS"

RANK_COUNT = len(RANK_SYMBOLS)
SUIT_COUNT = len(SUIT_LETTERS)
DECK_SIZE = RANK_COUNT * SUIT_COUNT


class Rank(IntEnum):
    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12

    @property
    def symbol(self) -> str:
        return RANK_SYMBOLS[self.value]


class Suit(IntEnum):
    HEART = 0
    DIAMOND = 1
    CLUB = 2
    SPADE = 3

    @property
    def letter(self) -> str:
        return SUIT_LETTERS[self.value]


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        # Accept plain ints so callers can index straight into the enums.
        object.__setattr__(self, "rank", Rank(self.rank))
        object.__setattr__(self, "suit", Suit(self.suit))

    @property
    def label(self) -> str:
        return f"{self.rank.symbol}{self.suit.letter}"

    @property
    def sort_key(self) -> int:
        """Rank-major, suit-minor ordering value (0..51)."""
        return self.rank * SUIT_COUNT + self.suit


def build_deck() -> List[Card]:
    """Return the 52 cards in canonical order: 13 ranks per suit block."""
    return [Card(Rank(idx % RANK_COUNT), Suit(idx // RANK_COUNT)) for idx in range(DECK_SIZE)]


def shuffle_deck(deck: MutableSequence[Card], rng: Optional[RandomSource] = None) -> None:
    """Fisher-Yates shuffle in place.

    Walks from the last position down to 1, swapping each position with one
    drawn uniformly from ``[0, idx]``. ``rng`` only needs ``randrange``, so a
    seeded ``random.Random`` or a scripted stub both work.
    """
    if rng is None:
        rng = random.Random()
    for idx in range(len(deck) - 1, 0, -1):
        swap = rng.randrange(idx + 1)
        deck[idx], deck[swap] = deck[swap], deck[idx]


def deal_hands(deck: Sequence[Card], players: int) -> List[Hand]:
    """Deal five cards to each player round-robin from the front of the deck.

    Card ``k`` goes to player ``k % players`` at slot ``k // players``. The
    deck itself is left untouched.
    """
    if players < 1:
        raise ValueError(f"Need at least one player, got {players}")
    needed = players * HAND_SIZE
    if len(deck) < needed:
        raise ValueError(f"Not enough cards in deck. Need {needed}, have {len(deck)}")

    slots: List[List[Card]] = [[] for _ in range(players)]
    for position in range(needed):
        slots[position % players].append(deck[position])
    return [Hand(cards) for cards in slots]


def cards_to_labels(cards: Sequence[Card]) -> List[str]:
    return [card.label for card in cards]


def parse_label(label: str) -> Card:
    if len(label) != 2:
        raise ValueError(f"Invalid card label: {label}")
    rank_symbol, suit_letter = label[0].upper(), label[1].upper()
    if rank_symbol not in RANK_SYMBOLS:
        raise ValueError(f"Invalid rank: {label[0]}")
    if suit_letter not in SUIT_LETTERS:
        raise ValueError(f"Invalid suit: {label[1]}")
    return Card(Rank(RANK_SYMBOLS.index(rank_symbol)), Suit(SUIT_LETTERS.index(suit_letter)))


def parse_cards(labels: Sequence[str]) -> List[Card]:
    return [parse_label(label) for label in labels]
