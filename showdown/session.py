from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import List, Optional

from rich.console import Console

from pokerhands.cards import Card, RandomSource, build_deck, deal_hands, shuffle_deck
from pokerhands.evaluator import best_category, classify_all, sort_hands, winning_hands
from pokerhands.fixtures import EXPECTED_CATEGORIES, fixture_hands
from pokerhands.models import DealConfig, Hand, PokerRank

from .render import CATEGORY_NAMES, DisplayMode, render_deck, render_hands

LOGGER = logging.getLogger("showdown")

# One run of the program: every stage of the deck/deal/classify pipeline is
# rendered as it happens. The engine stays pure; printing lives here.


@dataclass
class SessionResult:
    seed: Optional[int]
    deck: List[Card]
    hands: List[Hand]
    best: PokerRank
    winners: List[int]
    fixtures: List[Hand] = field(default_factory=list)


def check_fixtures(console: Console) -> List[Hand]:
    """Sort, classify and render the fixture hands, warning on any mismatch."""
    hands = fixture_hands()
    sort_hands(hands)
    classify_all(hands)
    render_hands(console, hands, "test", DisplayMode.TESTING)
    for hand, expected in zip(hands, EXPECTED_CATEGORIES):
        if hand.category != expected:
            LOGGER.warning(
                "Fixture %s classified as %s, expected %s",
                " ".join(hand.labels),
                CATEGORY_NAMES[hand.category],
                CATEGORY_NAMES[expected],
            )
    return hands


def run_session(config: DealConfig, console: Console, rng: Optional[RandomSource] = None) -> SessionResult:
    seed: Optional[int] = None
    if rng is None:
        seed = config.seed
        if seed is None:
            seed = int(time.time() * 1000) & 0xFFFFFFFF
        rng = random.Random(seed)
        LOGGER.info("Shuffling with seed %s", seed)

    if config.cards_per_hand != config.hand_size:
        LOGGER.info(
            "Requested %s cards per hand; dealing %s-card poker hands",
            config.cards_per_hand,
            config.hand_size,
        )

    deck = build_deck()
    render_deck(console, deck, "Original Ordered Deck:")
    shuffle_deck(deck, rng)
    render_deck(console, deck, "Random Shuffled Deck:")

    hands = deal_hands(deck, config.players)
    render_hands(console, hands, "(dealt from top/front of deck)")
    sort_hands(hands)
    render_hands(console, hands, "sorted")
    classify_all(hands)
    render_hands(console, hands, "ranked", DisplayMode.WITH_RANK)

    best = best_category(hands)
    winners = winning_hands(hands)
    render_hands(console, hands, "winner(s)", DisplayMode.WINNER, winning=best)
    LOGGER.info(
        "Best category %s held by player(s) %s",
        CATEGORY_NAMES[best],
        ", ".join(str(idx + 1) for idx in winners),
    )

    fixtures = check_fixtures(console)
    return SessionResult(seed=seed, deck=deck, hands=hands, best=best, winners=winners, fixtures=fixtures)
