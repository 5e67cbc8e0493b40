from __future__ import annotations

from typing import Sequence

from poker_cards import Hand, parse_cards


def make_hand(labels: Sequence[str]) -> Hand:
    """Build a complete (or partial) hand from short labels like "AH"."""
    return Hand.from_cards(parse_cards(labels))


def hand_value(labels: Sequence[str]) -> int:
    return make_hand(labels).value
