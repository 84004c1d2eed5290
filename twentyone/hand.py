"""Hand evaluation for Twenty-One."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from twentyone.cards import Card
from twentyone.rules import RuleSet


def hand_total(cards: Iterable[Card], rules: RuleSet | None = None) -> int:
    """
    Calculate a hand's total.

    Every card first counts its base value (Ace = 1). Then each Ace, in
    order, is upgraded by the rules' ``ace_bonus`` if the running total
    stays within ``bust_value``. The decision for each Ace sees the
    upgrades already applied to earlier Aces.
    """
    rules = rules or RuleSet()
    cards = list(cards)
    total = sum(card.value for card in cards)

    for card in cards:
        if card.is_ace and total + rules.ace_bonus <= rules.bust_value:
            total += rules.ace_bonus

    return total


def is_busted(cards: Iterable[Card], rules: RuleSet | None = None) -> bool:
    """Check if the cards total more than the rules' ``bust_value``."""
    rules = rules or RuleSet()
    return hand_total(cards, rules) > rules.bust_value


@dataclass
class Hand:
    """An append-only sequence of cards with value calculation."""

    cards: list[Card] = field(default_factory=list)
    rules: RuleSet = field(default_factory=RuleSet)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    @property
    def total(self) -> int:
        """Return the hand total."""
        return hand_total(self.cards, self.rules)

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted."""
        return self.total > self.rules.bust_value

    @property
    def first_card(self) -> Card | None:
        """Return the first card dealt, if any."""
        return self.cards[0] if self.cards else None

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        value_str = "(BUST)" if self.is_busted else f"({self.total})"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, total={self.total})"


def evaluate_hands(player_hand: Hand, dealer_hand: Hand) -> int:
    """
    Compare player and dealer hands.

    Returns:
        1 if player wins
        -1 if dealer wins
        0 if tie
    """
    # Player busts always loses, even if the dealer would also bust
    if player_hand.is_busted:
        return -1

    # Dealer busts, player wins
    if dealer_hand.is_busted:
        return 1

    player_total = player_hand.total
    dealer_total = dealer_hand.total

    if player_total > dealer_total:
        return 1
    if dealer_total > player_total:
        return -1
    return 0  # Tie
