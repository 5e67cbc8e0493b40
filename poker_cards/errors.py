"""Errors raised when callers break the card, deck or hand contracts."""


class PokerCardsError(Exception):
    """Base class for every error raised by poker_cards."""


class InvalidCardSeedError(PokerCardsError, ValueError):
    """Card seed outside [0, 52)."""


class EmptyDeckError(PokerCardsError, ValueError):
    """Deal requested from a deck without enough cards."""


class InvalidHandStateError(PokerCardsError, RuntimeError):
    """Hand used outside its Filling/Complete lifecycle."""
