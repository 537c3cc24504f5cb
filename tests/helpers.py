from __future__ import annotations

import io
from typing import Iterable, List

from rich.console import Console

from pokerhands.cards import parse_cards
from pokerhands.evaluator import SortedHand, sort_hand
from pokerhands.models import Hand


class ScriptedRandom:
    """Random source that replays fixed ``randrange`` results."""

    def __init__(self, draws: Iterable[int]) -> None:
        self.draws = list(draws)
        self.calls: List[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        value = self.draws.pop(0)
        assert 0 <= value < stop, f"scripted draw {value} outside [0, {stop})"
        return value


class TopRandom:
    """Always picks the current position, so the shuffle swaps nothing."""

    def randrange(self, stop: int) -> int:
        return stop - 1


def make_hand(labels: str) -> Hand:
    """Build a hand from space separated labels such as ``"AS 2D 3C 4D 5D"``."""
    return Hand(parse_cards(labels.split()))


def sorted_hand(labels: str) -> SortedHand:
    return sort_hand(make_hand(labels))


def record_console() -> Console:
    return Console(record=True, width=200, color_system=None, file=io.StringIO())
