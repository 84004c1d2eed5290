"""Match controller: rounds until someone is champion, then rematches."""

from random import Random

from twentyone.cards import Deck
from twentyone.errors import InvalidStateError
from twentyone.logging_utils import get_logger
from twentyone.rules import RuleSet
from twentyone.game.events import EventEmitter, EventType
from twentyone.game.participant import Participant
from twentyone.game.prompter import Prompter
from twentyone.game.round import Round, RoundResult
from twentyone.game.machine import GameMachine
from twentyone.game.state import MATCH_TRANSITIONS, MatchState, machine_states

logger = get_logger(__name__)

CONTINUE_PROMPT = "Press enter to continue the match (or 'q' to quit this match)."
CONTINUE_OPTIONS = ["", "q"]
PLAY_AGAIN_PROMPT = "Would you like to play another match? (y/n)"


class TwentyOneGame:
    """
    Twenty-One match controller using a state machine.

    Owns both participants and the deck. All user interaction goes through
    the prompter for questions and through events for everything shown.
    """

    # State machine states
    STATES = machine_states(MatchState)

    # State machine transitions
    TRANSITIONS = MATCH_TRANSITIONS

    def __init__(
        self,
        player_name: str,
        prompter: Prompter,
        rules: RuleSet | None = None,
        deck: Deck | None = None,
        rng: Random | None = None,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Initialize a new game.

        Args:
            player_name: The human's name, fixed for the whole game
            prompter: Input collaborator for every question asked
            rules: Game constants (uses defaults if not provided)
            deck: Deck to deal from (a fresh shuffled deck if not provided)
            rng: Random number generator for reproducible games
            events: Emitter for presentation events
        """
        self.rules = rules or RuleSet()
        self.prompter = prompter
        self.events = events or EventEmitter()
        self.deck = deck if deck is not None else Deck(rng=rng)

        if player_name == self.rules.dealer_name:
            raise ValueError(f"Player name cannot be {self.rules.dealer_name!r}")

        self.player = Participant.player(player_name, prompter, self.rules, self.events)
        self.dealer = Participant.dealer(self.rules, self.events)
        self.champion: Participant | None = None
        self.rounds_played = 0

        # Initialize state machine
        self.machine = GameMachine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="ready",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> MatchState:
        """Get current match state as enum."""
        return MatchState[self._machine_state.upper()]  # type: ignore

    @property
    def participants(self) -> tuple[Participant, Participant]:
        """Return (player, dealer)."""
        return self.player, self.dealer

    def play_round(self) -> RoundResult:
        """
        Play one round and check for a champion.

        Raises:
            InvalidStateError: if the match is over or a round is running
        """
        if self.state not in (MatchState.READY, MatchState.BETWEEN_ROUNDS):
            raise InvalidStateError("play a round", self._machine_state)

        self.start_round()
        self.rounds_played += 1
        result = Round(
            self.player,
            self.dealer,
            self.deck,
            self.rules,
            self.events,
            number=self.rounds_played,
        ).play()

        champion = next(
            (p for p in self.participants if p.has_won_match(self.rules.win_limit)),
            None,
        )
        if champion is None:
            self.round_done()
            return result

        self.champion = champion
        self.crown_champion()
        logger.debug("%s is champion after %d rounds", champion.name, self.rounds_played)
        self.events.emit_new(
            EventType.CHAMPION_CROWNED,
            champion=champion.name,
            win_limit=self.rules.win_limit,
        )
        return result

    def wants_to_continue(self) -> bool:
        """Ask whether to play another round of this match."""
        answer = self.prompter.ask_closed(CONTINUE_PROMPT, CONTINUE_OPTIONS)
        return answer == ""

    def play_match(self) -> Participant | None:
        """
        Play rounds until a champion emerges or the player quits.

        Returns:
            The champion, or None if the match was abandoned
        """
        while True:
            self.play_round()
            if self.champion is not None:
                return self.champion

            if not self.wants_to_continue():
                self.abandon()
                logger.debug("Match abandoned after %d rounds", self.rounds_played)
                self.events.emit_new(
                    EventType.MATCH_ABANDONED,
                    scores=self.scores,
                    rounds_played=self.rounds_played,
                )
                return None

    def reset_match(self) -> None:
        """Start a rematch: scores, hands and deck all start over."""
        if self.state not in (MatchState.CHAMPION_CROWNED, MatchState.ABANDONED):
            raise InvalidStateError("start a rematch", self._machine_state)

        for participant in self.participants:
            participant.reset_score()
            participant.reset_hand()
        self.deck.reset()
        self.champion = None
        self.rounds_played = 0

        self.rematch()
        logger.debug("Match reset")
        self.events.emit_new(
            EventType.REMATCH_STARTED,
            player=self.player.name,
            dealer=self.dealer.name,
            win_limit=self.rules.win_limit,
        )

    def start(self) -> None:
        """Run matches until the player declines a rematch."""
        self.events.emit_new(
            EventType.MATCH_STARTED,
            player=self.player.name,
            dealer=self.dealer.name,
            win_limit=self.rules.win_limit,
        )

        while True:
            self.play_match()
            if not self.prompter.ask_yes_no(PLAY_AGAIN_PROMPT):
                break
            self.reset_match()

        self.end_game()
        self.events.emit_new(EventType.GAME_ENDED, player=self.player.name)

    @property
    def scores(self) -> dict[str, int]:
        """Return the current score for each participant."""
        return {p.name: p.score for p in self.participants}
