"""Twenty-One engine - 100% UI-agnostic."""

from twentyone.cards import Card, Deck, Rank, Suit
from twentyone.errors import DeckExhaustedError, InvalidStateError, InvariantViolation, TwentyOneError
from twentyone.hand import Hand, hand_total, is_busted
from twentyone.rules import RuleSet

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "DeckExhaustedError",
    "InvalidStateError",
    "InvariantViolation",
    "TwentyOneError",
    "Hand",
    "hand_total",
    "is_busted",
    "RuleSet",
]
