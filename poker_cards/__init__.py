"""Playing cards, a shuffled deck and a 5-card poker hand evaluator."""

from .cards import Card, Deck, FACES, SUITS, build_deck, cards_to_labels, parse_cards, parse_label
from .errors import EmptyDeckError, InvalidCardSeedError, InvalidHandStateError, PokerCardsError
from .evaluator import HAND_SIZE, Hand
from .models import HandRank

__all__ = [
    "Card",
    "Deck",
    "FACES",
    "SUITS",
    "build_deck",
    "cards_to_labels",
    "parse_cards",
    "parse_label",
    "EmptyDeckError",
    "InvalidCardSeedError",
    "InvalidHandStateError",
    "PokerCardsError",
    "HAND_SIZE",
    "Hand",
    "HandRank",
]
