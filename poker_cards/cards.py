from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from .errors import EmptyDeckError, InvalidCardSeedError

LOGGER = logging.getLogger("poker_cards")

NUM_FACES = 13
NUM_SUITS = 4
NUM_CARDS = NUM_FACES * NUM_SUITS

# Short chars indexed by face (Two..Ace) and by suit.
FACES = "23456789TJQKA"
SUITS = "HSDC"

FACE_NAMES = ("Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine", "Ten", "Jack", "Queen", "King", "Ace")
SUIT_NAMES = ("Hearts", "Spades", "Diamonds", "Clubs")

TWO = 0
THREE = 1
FOUR = 2
FIVE = 3
KING = 11
ACE = 12


@dataclass(frozen=True)
class Card:
    face: int
    suit: int

    def __post_init__(self) -> None:
        if not 0 <= self.face < NUM_FACES:
            raise ValueError(f"Invalid face: {self.face}")
        if not 0 <= self.suit < NUM_SUITS:
            raise ValueError(f"Invalid suit: {self.suit}")

    @classmethod
    def from_seed(cls, seed: int) -> Card:
        if isinstance(seed, bool) or not isinstance(seed, int) or not 0 <= seed < NUM_CARDS:
            raise InvalidCardSeedError(f"Invalid card seed: {seed!r}")
        return cls(seed % NUM_FACES, seed // NUM_FACES)

    @property
    def seed(self) -> int:
        return self.suit * NUM_FACES + self.face

    @property
    def short_label(self) -> str:
        return f"{FACES[self.face]}{SUITS[self.suit]}"

    @property
    def label(self) -> str:
        return f"{FACE_NAMES[self.face]}_of_{SUIT_NAMES[self.suit]}"

    def __str__(self) -> str:
        return self.label


def build_deck(seed: Optional[int] = None) -> List[Card]:
    rng = random.Random(seed)
    deck = [Card.from_seed(idx) for idx in range(NUM_CARDS)]
    rng.shuffle(deck)
    return deck


class Deck:
    """Shuffled 52-card deck dealt from the top.

    Not safe for concurrent use; keep one deck per game and deal from a single
    thread or task.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._cards = build_deck(seed)
        LOGGER.debug("Shuffled deck of %s cards (seed=%s)", len(self._cards), seed)

    def deal_top(self) -> Card:
        if not self._cards:
            raise EmptyDeckError("Not enough cards left in deck")
        return self._cards.pop(0)

    def deal(self, count: int) -> List[Card]:
        if count < 0:
            raise ValueError(f"Invalid deal count: {count}")
        if len(self._cards) < count:
            raise EmptyDeckError("Not enough cards left in deck")
        cards = self._cards[:count]
        del self._cards[:count]
        return cards

    @property
    def remaining(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self._cards)})"


def cards_to_labels(cards: Iterable[Card]) -> List[str]:
    return [card.short_label for card in cards]


def parse_label(label: str) -> Card:
    if len(label) != 2:
        raise ValueError(f"Invalid card label: {label}")
    face_char, suit_char = label[0].upper(), label[1].upper()
    if face_char not in FACES or suit_char not in SUITS:
        raise ValueError(f"Invalid card label: {label}")
    return Card(FACES.index(face_char), SUITS.index(suit_char))


def parse_cards(labels: Sequence[str]) -> List[Card]:
    return [parse_label(label) for label in labels]
