from __future__ import annotations

from typing import Optional

from pokerhands.cards import DECK_SIZE
from pokerhands.models import HAND_SIZE, DealConfig

MIN_ARGUMENT = 1
MAX_ARGUMENT = 13
MAX_ARGUMENT_LENGTH = 2

USAGE = (
    "The program expects two arguments: [Cards per hand] and [Players]\n"
    f"[Cards per hand] must be an integer between {MIN_ARGUMENT}-{MAX_ARGUMENT}.\n"
    f"[Players] must also be an integer between {MIN_ARGUMENT}-{MAX_ARGUMENT}.\n"
    f"Every player is dealt {HAND_SIZE} cards, so {HAND_SIZE} x Players must not\n"
    f"exceed the {DECK_SIZE} cards in the deck."
)


class InvalidArgumentsError(Exception):
    def __init__(self, code: str, msg: str) -> None:
        super().__init__(msg)
        self.code = code
        self.msg = msg


def parse_argument(name: str, raw: str) -> int:
    """Turn one raw command-line value into an int in ``MIN_ARGUMENT..MAX_ARGUMENT``."""
    if not 1 <= len(raw) <= MAX_ARGUMENT_LENGTH or not raw.isascii() or not raw.isdigit():
        raise InvalidArgumentsError("BAD_FORMAT", f"{name} must be a 1-2 digit number, got {raw!r}")
    value = int(raw)
    if not MIN_ARGUMENT <= value <= MAX_ARGUMENT:
        raise InvalidArgumentsError(
            "OUT_OF_RANGE", f"{name} must be between {MIN_ARGUMENT} and {MAX_ARGUMENT}, got {value}"
        )
    return value


def validate_arguments(cards_per_hand: str, players: str, seed: Optional[int] = None) -> DealConfig:
    hand_arg = parse_argument("Cards per hand", cards_per_hand)
    player_count = parse_argument("Players", players)
    # Hands are always HAND_SIZE cards, whatever cards_per_hand says.
    if player_count * HAND_SIZE > DECK_SIZE:
        raise InvalidArgumentsError(
            "TOO_MANY_CARDS",
            f"{player_count} players x {HAND_SIZE} cards exceeds the {DECK_SIZE}-card deck",
        )
    return DealConfig(cards_per_hand=hand_arg, players=player_count, seed=seed)
