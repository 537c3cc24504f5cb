from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .cards import Card

HAND_SIZE = 5


class PokerRank(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIRS = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8


@dataclass
class Hand:
    cards: List["Card"]
    category: PokerRank = PokerRank.HIGH_CARD

    def __post_init__(self) -> None:
        if len(self.cards) != HAND_SIZE:
            raise ValueError(f"A hand holds exactly {HAND_SIZE} cards, got {len(self.cards)}")

    @property
    def labels(self) -> List[str]:
        return [card.label for card in self.cards]


@dataclass
class DealConfig:
    cards_per_hand: int
    players: int
    seed: Optional[int] = None
    hand_size: int = field(default=HAND_SIZE, init=False)
