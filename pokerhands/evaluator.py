from __future__ import annotations

from typing import Callable, Iterable, List, Sequence, Tuple

from .cards import Card, Rank
from .models import HAND_SIZE, Hand, PokerRank

# Every predicate below reads the five cards by position, so it only holds
# for cards already in ascending sort-key order. SortedHand carries that
# guarantee; classify() refuses anything else.


class SortedHand(tuple):
    """Immutable five-card view known to be in ascending sort-key order."""

    __slots__ = ()

    def __new__(cls, cards: Iterable[Card]) -> "SortedHand":
        cards = tuple(cards)
        if len(cards) != HAND_SIZE:
            raise ValueError(f"A hand holds exactly {HAND_SIZE} cards, got {len(cards)}")
        keys = [card.sort_key for card in cards]
        if keys != sorted(keys):
            raise ValueError(f"Hand is not sorted: {[card.label for card in cards]}")
        return super().__new__(cls, cards)

    @classmethod
    def from_hand(cls, hand: Hand) -> "SortedHand":
        return cls(hand.cards)

    @property
    def ranks(self) -> List[Rank]:
        return [card.rank for card in self]


def sort_hand(hand: Hand) -> SortedHand:
    """Sort the hand's cards in place by ``rank * 4 + suit`` and return the sorted view."""
    hand.cards.sort(key=lambda card: card.sort_key)
    return SortedHand(hand.cards)


def sort_hands(hands: Sequence[Hand]) -> List[SortedHand]:
    return [sort_hand(hand) for hand in hands]


def is_flush(cards: SortedHand) -> bool:
    return len({card.suit for card in cards}) == 1


def is_straight(cards: SortedHand) -> bool:
    ranks = cards.ranks
    if ranks[0] == Rank.ACE:
        if ranks[1] == Rank.TWO:
            start = Rank.ACE
        elif ranks[1] == Rank.TEN:
            # Ace plays high: pretend it is the nine below T-J-Q-K.
            start = Rank.NINE
        else:
            return False
    else:
        start = ranks[0]
    return all(rank == start + offset for offset, rank in enumerate(ranks[1:], start=1))


def is_straight_flush(cards: SortedHand) -> bool:
    return is_straight(cards) and is_flush(cards)


def _same_rank(cards: SortedHand, first: int, last: int) -> bool:
    # Positions are 0-based and inclusive.
    return len({card.rank for card in cards[first : last + 1]}) == 1


def is_four_of_a_kind(cards: SortedHand) -> bool:
    return _same_rank(cards, 0, 3) or _same_rank(cards, 1, 4)


def is_full_house(cards: SortedHand) -> bool:
    triple_low = _same_rank(cards, 0, 2) and _same_rank(cards, 3, 4)
    triple_high = _same_rank(cards, 0, 1) and _same_rank(cards, 2, 4)
    return triple_low or triple_high


def is_three_of_a_kind(cards: SortedHand) -> bool:
    return any(_same_rank(cards, start, start + 2) for start in range(3))


def is_two_pairs(cards: SortedHand) -> bool:
    layouts = (((0, 1), (2, 3)), ((0, 1), (3, 4)), ((1, 2), (3, 4)))
    return any(
        _same_rank(cards, *low_pair) and _same_rank(cards, *high_pair)
        for low_pair, high_pair in layouts
    )


def is_one_pair(cards: SortedHand) -> bool:
    ranks = cards.ranks
    return any(left == right for left, right in zip(ranks, ranks[1:]))


# Strongest first; the first predicate that holds wins.
CATEGORY_CHECKS: List[Tuple[PokerRank, Callable[[SortedHand], bool]]] = [
    (PokerRank.STRAIGHT_FLUSH, is_straight_flush),
    (PokerRank.FOUR_OF_A_KIND, is_four_of_a_kind),
    (PokerRank.FULL_HOUSE, is_full_house),
    (PokerRank.FLUSH, is_flush),
    (PokerRank.STRAIGHT, is_straight),
    (PokerRank.THREE_OF_A_KIND, is_three_of_a_kind),
    (PokerRank.TWO_PAIRS, is_two_pairs),
    (PokerRank.ONE_PAIR, is_one_pair),
]


def classify(cards: SortedHand) -> PokerRank:
    """Return the strongest category the sorted five cards satisfy."""
    if not isinstance(cards, SortedHand):
        raise TypeError(f"classify() needs a SortedHand, got {type(cards).__name__}")
    for category, check in CATEGORY_CHECKS:
        if check(cards):
            return category
    return PokerRank.HIGH_CARD


def classify_all(hands: Sequence[Hand]) -> None:
    """Store each hand's category on the hand. Cards must already be sorted."""
    for hand in hands:
        hand.category = classify(SortedHand.from_hand(hand))


def best_category(hands: Sequence[Hand]) -> PokerRank:
    best = PokerRank.HIGH_CARD
    for hand in hands:
        if hand.category > best:
            best = hand.category
    return best


def winning_hands(hands: Sequence[Hand]) -> List[int]:
    """Indices of every hand that reached the best category (no tie-breaks)."""
    best = best_category(hands)
    return [idx for idx, hand in enumerate(hands) if hand.category == best]
