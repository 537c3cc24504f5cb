# Property tests for the deck/deal/sort/classify invariants.

import random
from collections import Counter

from hypothesis import given, strategies as st

from pokerhands.cards import DECK_SIZE, build_deck, deal_hands, shuffle_deck
from pokerhands.evaluator import SortedHand, classify, sort_hand
from pokerhands.models import HAND_SIZE, Hand, PokerRank

seeds = st.integers(min_value=0, max_value=2**32 - 1)
player_counts = st.integers(min_value=1, max_value=DECK_SIZE // HAND_SIZE)
five_cards = st.lists(st.sampled_from(build_deck()), min_size=HAND_SIZE, max_size=HAND_SIZE, unique=True)


@given(seeds)
def test_shuffle_is_a_permutation(seed):
    deck = build_deck()
    shuffle_deck(deck, random.Random(seed))
    assert len(deck) == DECK_SIZE
    assert Counter(deck) == Counter(build_deck())


@given(seeds)
def test_shuffle_is_reproducible_for_a_seed(seed):
    first, second = build_deck(), build_deck()
    shuffle_deck(first, random.Random(seed))
    shuffle_deck(second, random.Random(seed))
    assert first == second


@given(st.lists(st.integers(), max_size=60), seeds)
def test_shuffle_works_for_any_length(items, seed):
    shuffled = list(items)
    shuffle_deck(shuffled, random.Random(seed))
    assert sorted(shuffled) == sorted(items)


@given(seeds, player_counts)
def test_deal_partitions_a_prefix_of_the_deck(seed, players):
    deck = build_deck()
    shuffle_deck(deck, random.Random(seed))
    hands = deal_hands(deck, players)

    assert len(hands) == players
    assert all(len(hand.cards) == HAND_SIZE for hand in hands)
    dealt = [card for hand in hands for card in hand.cards]
    assert len(set(dealt)) == len(dealt)
    assert set(dealt) == set(deck[: players * HAND_SIZE])
    for position, card in enumerate(deck[: players * HAND_SIZE]):
        assert hands[position % players].cards[position // players] == card


@given(five_cards)
def test_sorting_orders_by_key_and_is_idempotent(cards):
    hand = Hand(list(cards))
    view = sort_hand(hand)
    keys = [card.sort_key for card in view]
    assert keys == sorted(keys)
    assert Counter(view) == Counter(cards)
    assert sort_hand(hand) == view


@given(five_cards, st.randoms(use_true_random=False))
def test_classification_ignores_original_card_order(cards, rnd):
    reordered = list(cards)
    rnd.shuffle(reordered)
    assert classify(sort_hand(Hand(list(cards)))) == classify(sort_hand(Hand(reordered)))


@given(five_cards)
def test_classification_is_deterministic_and_in_range(cards):
    hand = Hand(list(cards))
    sort_hand(hand)
    first = classify(SortedHand.from_hand(hand))
    assert first == classify(SortedHand.from_hand(hand))
    assert PokerRank.HIGH_CARD <= first <= PokerRank.STRAIGHT_FLUSH


@given(five_cards)
def test_category_agrees_with_rank_counts(cards):
    category = classify(sort_hand(Hand(list(cards))))
    shape = sorted(Counter(card.rank for card in cards).values(), reverse=True)
    expected_by_shape = {
        (4, 1): PokerRank.FOUR_OF_A_KIND,
        (3, 2): PokerRank.FULL_HOUSE,
        (3, 1, 1): PokerRank.THREE_OF_A_KIND,
        (2, 2, 1): PokerRank.TWO_PAIRS,
        (2, 1, 1, 1): PokerRank.ONE_PAIR,
    }
    if tuple(shape) in expected_by_shape:
        assert category == expected_by_shape[tuple(shape)]
    else:
        assert category in (
            PokerRank.HIGH_CARD,
            PokerRank.STRAIGHT,
            PokerRank.FLUSH,
            PokerRank.STRAIGHT_FLUSH,
        )
