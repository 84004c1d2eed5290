"""Twenty-One rule constants."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RuleSet:
    """
    Immutable game constants.

    Owned by the match controller and handed down to the participants
    and the scoring functions. There is a single supported variant;
    the fields exist so the values live in one place.
    """

    # Match
    win_limit: int = 5

    # Scoring
    bust_value: int = 21
    ace_bonus: int = 10  # Added when an Ace counts high

    # Dealer
    dealer_stay_threshold: int = 17
    dealer_name: str = "Alice"

    # Dealing
    initial_cards: int = 2

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if self.win_limit < 1:
            raise ValueError("win_limit must be at least 1")
        if self.bust_value < 1:
            raise ValueError("bust_value must be positive")
        if self.ace_bonus < 0:
            raise ValueError("ace_bonus cannot be negative")
        if self.dealer_stay_threshold > self.bust_value:
            raise ValueError("dealer_stay_threshold cannot exceed bust_value")
        if self.initial_cards < 1:
            raise ValueError("initial_cards must be at least 1")
        if not self.dealer_name.strip():
            raise ValueError("dealer_name cannot be empty")
