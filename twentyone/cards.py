"""Card and Deck classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import TYPE_CHECKING, Iterator

from twentyone.errors import DeckExhaustedError
from twentyone.logging_utils import get_logger

if TYPE_CHECKING:
    from twentyone.game.participant import Participant

logger = get_logger(__name__)


class Suit(Enum):
    """Card suits."""

    HEARTS = "♥"
    CLUBS = "♣"
    DIAMONDS = "♦"
    SPADES = "♠"

    def __str__(self) -> str:
        return self.value


class Rank(Enum):
    """Card ranks, in deck-building order."""

    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "Jack"
    QUEEN = "Queen"
    KING = "King"
    ACE = "Ace"

    def __str__(self) -> str:
        return self.value

    @property
    def base_value(self) -> int:
        """Return the base point value (Ace = 1, face cards = 10)."""
        if self.value.isdigit():
            return int(self.value)
        if self == Rank.ACE:
            return 1
        return 10  # Face cards

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the base point value."""
        return self.rank.base_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '4♦', 'KC', 'Jack♣' or '10h'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {rank.value.upper(): rank for rank in Rank}
        rank_map.update({
            "T": Rank.TEN,
            "J": Rank.JACK,
            "Q": Rank.QUEEN,
            "K": Rank.KING,
            "A": Rank.ACE,
        })

        suit_map = {
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


FULL_DECK_SIZE = len(Suit) * len(Rank)


class Deck:
    """
    A standard 52-card deck.

    Cards are dealt from the end of the list, so the shuffled order is the
    deal order read backwards.
    """

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize a freshly shuffled deck.

        Args:
            rng: Random number generator for reproducible shuffles
        """
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Rebuild all 52 cards and shuffle them."""
        self._cards = [Card(rank, suit) for suit in Suit for rank in Rank]
        # random.shuffle is an unbiased Fisher-Yates shuffle
        self._rng.shuffle(self._cards)
        logger.debug("Deck reset: %d cards", len(self._cards))

    def deal_card(self) -> Card:
        """Remove and return the top card."""
        if not self._cards:
            logger.error("Attempted to deal from an empty deck")
            raise DeckExhaustedError("Cannot deal from an empty deck")
        card = self._cards.pop()
        logger.debug("Dealt %s (%d remaining)", card, len(self._cards))
        return card

    def initial_deal(
        self,
        player: "Participant",
        dealer: "Participant",
        cards_each: int = 2,
    ) -> None:
        """Deal the opening hands, alternating player then dealer."""
        for _ in range(cards_each):
            player.receive(self.deal_card())
            dealer.receive(self.deal_card())

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    @property
    def cards_dealt(self) -> int:
        """Return the number of cards dealt since the last reset."""
        return FULL_DECK_SIZE - len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
