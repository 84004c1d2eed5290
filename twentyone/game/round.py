"""Round controller: one deal-to-resolution cycle."""

from dataclasses import dataclass
from enum import Enum, auto

from twentyone.cards import Deck
from twentyone.hand import evaluate_hands
from twentyone.logging_utils import get_logger
from twentyone.rules import RuleSet
from twentyone.game.events import EventEmitter, EventType
from twentyone.game.participant import Participant

logger = get_logger(__name__)


class RoundOutcome(Enum):
    """Who took the round."""

    PLAYER_WINS = auto()
    DEALER_WINS = auto()
    TIE = auto()


@dataclass(frozen=True)
class RoundResult:
    """Final snapshot of a resolved round."""

    outcome: RoundOutcome
    winner: str | None
    player_total: int
    dealer_total: int
    player_bust: bool
    dealer_bust: bool
    dealer_played: bool


def resolve_round(player: Participant, dealer: Participant) -> RoundOutcome:
    """Decide the round; a player bust loses before the dealer is looked at."""
    result = evaluate_hands(player.hand, dealer.hand)
    if result > 0:
        return RoundOutcome.PLAYER_WINS
    if result < 0:
        return RoundOutcome.DEALER_WINS
    return RoundOutcome.TIE


class Round:
    """
    Deals, runs both turns in order, and scores a single round.

    The deck is rebuilt and reshuffled at the start of every round.
    """

    def __init__(
        self,
        player: Participant,
        dealer: Participant,
        deck: Deck,
        rules: RuleSet | None = None,
        events: EventEmitter | None = None,
        number: int = 1,
    ) -> None:
        self.player = player
        self.dealer = dealer
        self.deck = deck
        self.rules = rules or RuleSet()
        self.events = events or EventEmitter()
        self.number = number

    def deal(self) -> None:
        """Reset the deck and both hands, then deal the opening cards."""
        self.deck.reset()
        self.player.reset_hand()
        self.dealer.reset_hand()
        self.events.emit_new(EventType.ROUND_STARTED, number=self.number)

        self.deck.initial_deal(self.player, self.dealer, self.rules.initial_cards)

        up_card = self.dealer.hand.first_card
        self.events.emit_new(
            EventType.INITIAL_DEAL,
            player=self.player.name,
            player_cards=[str(c) for c in self.player.hand],
            player_total=self.player.total,
            dealer=self.dealer.name,
            dealer_up_card=str(up_card) if up_card else None,
            dealer_hidden=len(self.dealer.hand) - 1,
        )

    def play(self) -> RoundResult:
        """Play the round to completion and update the winner's score."""
        self.deal()

        self.player.take_turn(self.deck)

        dealer_played = not self.player.is_bust
        if dealer_played:
            self.dealer.take_turn(self.deck)
        else:
            self.events.emit_new(EventType.DEALER_TURN_SKIPPED, dealer=self.dealer.name)

        return self.finish(dealer_played)

    def finish(self, dealer_played: bool = True) -> RoundResult:
        """Resolve the round from the current hands and award the point."""
        outcome = resolve_round(self.player, self.dealer)
        winner = None
        if outcome == RoundOutcome.PLAYER_WINS:
            winner = self.player
        elif outcome == RoundOutcome.DEALER_WINS:
            winner = self.dealer

        if winner is not None:
            winner.award_point()

        result = RoundResult(
            outcome=outcome,
            winner=winner.name if winner else None,
            player_total=self.player.total,
            dealer_total=self.dealer.total,
            player_bust=self.player.is_bust,
            dealer_bust=self.dealer.is_bust,
            dealer_played=dealer_played,
        )
        logger.debug("Round resolved: %s", result)

        self.events.emit_new(
            EventType.HANDS_REVEALED,
            hands={
                p.name: {"cards": [str(c) for c in p.hand], "total": p.total, "bust": p.is_bust}
                for p in (self.dealer, self.player)
            },
        )
        self.events.emit_new(
            EventType.ROUND_ENDED,
            outcome=outcome.name,
            winner=result.winner,
            player_total=result.player_total,
            dealer_total=result.dealer_total,
        )
        self.events.emit_new(
            EventType.SCORES_UPDATED,
            scores={self.player.name: self.player.score, self.dealer.name: self.dealer.score},
            win_limit=self.rules.win_limit,
        )
        return result
