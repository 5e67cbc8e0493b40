from __future__ import annotations

import itertools
import logging
from typing import Iterable, List, Optional, Tuple

from .cards import ACE, FIVE, FOUR, KING, THREE, TWO, Card
from .errors import InvalidHandStateError
from .models import HandRank

LOGGER = logging.getLogger("poker_cards")

HAND_SIZE = 5

# Pairs of equal faces among the 10 card pairs identify every paired shape.
PAIR_COUNT_RANKS = {
    1: HandRank.PAIR,
    2: HandRank.TWO_PAIR,
    3: HandRank.THREE_OF_A_KIND,
    4: HandRank.FULL_HOUSE,
    6: HandRank.FOUR_OF_A_KIND,
}

WHEEL_ORDER = (FIVE, FOUR, THREE, TWO, ACE)


class Hand:
    """Five cards kept in descending face order.

    Rank and value are computed once, when the fifth card arrives, and never
    change afterwards. ``value`` totally orders complete hands: the higher
    value is the stronger poker hand.
    """

    def __init__(self) -> None:
        self._cards: List[Card] = []
        self._rank: Optional[HandRank] = None
        self._value: Optional[int] = None

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> Hand:
        hand = cls()
        for card in cards:
            hand.add_card(card)
        return hand

    # Filling -----------------------------------------------------------

    def add_card(self, card: Card) -> None:
        if self.is_complete:
            raise InvalidHandStateError("Hand already holds 5 cards")
        if card in self._cards:
            raise InvalidHandStateError(f"Duplicate card: {card.short_label}")

        # New card goes after every card of equal or higher face.
        index = 0
        for idx, held in enumerate(self._cards):
            if card.face <= held.face:
                index = idx + 1
        self._cards.insert(index, card)

        if len(self._cards) == HAND_SIZE:
            self._rank = _calculate_rank(self._cards)
            self._value = _calculate_value(self._cards, self._rank)
            LOGGER.debug("Hand complete: %s (value=%s)", self.display(), self._value)

    # Accessors ---------------------------------------------------------

    @property
    def is_complete(self) -> bool:
        return len(self._cards) == HAND_SIZE

    @property
    def rank(self) -> HandRank:
        if self._rank is None:
            raise InvalidHandStateError("Hand rank requires 5 cards")
        return self._rank

    @property
    def value(self) -> int:
        if self._value is None:
            raise InvalidHandStateError("Hand value requires 5 cards")
        return self._value

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def card(self, index: int) -> Card:
        return self._cards[index]

    def display(self) -> str:
        labels = " ".join(card.short_label for card in self._cards)
        return f"{self.rank.label} {labels}"

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        labels = ", ".join(card.short_label for card in self._cards)
        if self._rank is None:
            return f"Hand([{labels}])"
        return f"Hand([{labels}], rank={self._rank.name}, value={self._value})"


def _count_pairs(cards: List[Card]) -> int:
    return sum(1 for a, b in itertools.combinations(cards, 2) if a.face == b.face)


def _is_straight(cards: List[Card]) -> bool:
    # Cards are sorted high to low; the wheel shows up as an Ace followed by a Five.
    for high, low in zip(cards, cards[1:]):
        gap = high.face - low.face
        if gap != 1 and not (high.face == ACE and gap == ACE - FIVE):
            return False
    return True


def _is_flush(cards: List[Card]) -> bool:
    return len({card.suit for card in cards}) == 1


def _contains_face(cards: List[Card], face: int) -> bool:
    return any(card.face == face for card in cards)


def _calculate_rank(cards: List[Card]) -> HandRank:
    pairs = _count_pairs(cards)
    if pairs:
        return PAIR_COUNT_RANKS[pairs]

    straight = _is_straight(cards)
    flush = _is_flush(cards)
    if straight and flush:
        if _contains_face(cards, ACE) and _contains_face(cards, KING):
            return HandRank.ROYAL_FLUSH
        return HandRank.STRAIGHT_FLUSH
    if flush:
        return HandRank.FLUSH
    if straight:
        return HandRank.STRAIGHT
    return HandRank.HIGH_CARD


def _kicker_order(cards: List[Card], rank: HandRank) -> List[int]:
    if rank in (HandRank.STRAIGHT, HandRank.STRAIGHT_FLUSH):
        if _contains_face(cards, ACE) and _contains_face(cards, FIVE):
            return list(WHEEL_ORDER)

    counts = {}
    for card in cards:
        counts.setdefault(card.face, 0)
        counts[card.face] += 1

    ordered_counts = sorted(counts.items(), key=lambda x: (x[1], x[0]), reverse=True)
    order: List[int] = []
    for face, count in ordered_counts:
        order.extend([face] * count)
    return order


def _calculate_value(cards: List[Card], rank: HandRank) -> int:
    # rank digit followed by five two-digit faces: R FF FF FF FF FF
    value = int(rank)
    for face in _kicker_order(cards, rank):
        value = value * 100 + face
    return value
