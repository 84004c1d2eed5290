"""Participants: one type for the player and the dealer."""

from twentyone.cards import Card, Deck
from twentyone.errors import InvalidStateError
from twentyone.hand import Hand
from twentyone.logging_utils import get_logger
from twentyone.rules import RuleSet
from twentyone.game.decisions import Action, DealerRule, DecisionStrategy, HumanDecision
from twentyone.game.events import EventEmitter, EventType
from twentyone.game.prompter import Prompter
from twentyone.game.machine import GameMachine
from twentyone.game.state import TURN_TRANSITIONS, TurnState, machine_states

logger = get_logger(__name__)


class Participant:
    """
    A seat at the table with a turn state machine.

    The player and the dealer differ only in their name and in the
    strategy that decides between hitting and staying.
    """

    # State machine states
    STATES = machine_states(TurnState)

    # State machine transitions
    TRANSITIONS = TURN_TRANSITIONS

    def __init__(
        self,
        name: str,
        strategy: DecisionStrategy,
        rules: RuleSet | None = None,
        events: EventEmitter | None = None,
        is_dealer: bool = False,
    ) -> None:
        """
        Initialize a participant with an empty hand and no points.

        Args:
            name: Display name
            strategy: Decides hit or stay on each step of the turn
            rules: Game constants (defaults if not provided)
            events: Emitter shared with the controllers
            is_dealer: Whether this seat is the dealer's
        """
        self.name = name
        self.strategy = strategy
        self.rules = rules or RuleSet()
        self.events = events or EventEmitter()
        self.is_dealer = is_dealer

        self.hand = Hand(rules=self.rules)
        self.score = 0
        self.is_bust = False

        self.machine = GameMachine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="awaiting_decision",
            auto_transitions=False,
            model_attribute="_machine_state",
            after_state_change="_log_turn_state",
        )

    @classmethod
    def player(
        cls,
        name: str,
        prompter: Prompter,
        rules: RuleSet | None = None,
        events: EventEmitter | None = None,
    ) -> "Participant":
        """Create the human player's seat."""
        return cls(name, HumanDecision(prompter), rules, events)

    @classmethod
    def dealer(
        cls,
        rules: RuleSet | None = None,
        events: EventEmitter | None = None,
    ) -> "Participant":
        """Create the dealer's seat."""
        rules = rules or RuleSet()
        return cls(
            rules.dealer_name,
            DealerRule(rules.dealer_stay_threshold),
            rules,
            events,
            is_dealer=True,
        )

    @property
    def turn_state(self) -> TurnState:
        """Get current turn state as enum."""
        return TurnState[self._machine_state.upper()]  # type: ignore

    @property
    def total(self) -> int:
        """Return the current hand total."""
        return self.hand.total

    @property
    def cards(self) -> list[Card]:
        """Return a copy of the cards in hand."""
        return list(self.hand.cards)

    def _log_turn_state(self) -> None:
        logger.debug("%s: %s (total %d)", self.name, self.turn_state, self.total)

    def receive(self, card: Card) -> None:
        """Add a dealt card to the hand."""
        self.hand.add_card(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            participant=self.name,
            is_dealer=self.is_dealer,
            card=str(card),
        )

    def hit(self, deck: Deck) -> Card:
        """Draw one card; the turn ends if it busts the hand."""
        if self.turn_state != TurnState.AWAITING_DECISION:
            raise InvalidStateError("hit", self._machine_state)

        card = deck.deal_card()
        self.receive(card)
        self.events.emit_new(
            EventType.PARTICIPANT_HIT,
            participant=self.name,
            is_dealer=self.is_dealer,
            card=str(card),
            cards=[str(c) for c in self.hand],
            total=self.total,
        )

        if self.hand.is_busted:
            self._bust()
        else:
            self.draw()
        return card

    def stay(self) -> None:
        """End the turn without drawing."""
        self.stand()
        self.events.emit_new(
            EventType.PARTICIPANT_STAYED,
            participant=self.name,
            is_dealer=self.is_dealer,
            total=self.total,
        )

    def _bust(self) -> None:
        self.is_bust = True
        self.go_bust()
        self.events.emit_new(
            EventType.PARTICIPANT_BUSTED,
            participant=self.name,
            is_dealer=self.is_dealer,
            total=self.total,
        )

    def take_turn(self, deck: Deck) -> TurnState:
        """
        Hit or stay, as the strategy decides, until the turn completes.

        Returns:
            The terminal turn state
        """
        if self.hand.is_busted and self.turn_state == TurnState.AWAITING_DECISION:
            self._bust()

        while self.turn_state == TurnState.AWAITING_DECISION:
            action = self.strategy.decide(self)
            if action == Action.STAY:
                self.stay()
            else:
                self.hit(deck)

        return self.turn_state

    def reset_hand(self) -> None:
        """Empty the hand and clear the bust flag for a new round."""
        self.hand.clear()
        self.is_bust = False
        self.begin_turn()

    def award_point(self) -> None:
        """Record a round win."""
        self.score += 1

    def reset_score(self) -> None:
        """Clear the score for a new match."""
        self.score = 0

    def has_won_match(self, win_limit: int) -> bool:
        """Check if the score has reached the win limit."""
        return self.score >= win_limit

    def __repr__(self) -> str:
        return f"Participant({self.name!r}, score={self.score}, hand={self.hand!r})"
