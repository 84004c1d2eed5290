"""Game controllers, participants and state management."""

from twentyone.game.decisions import Action, DealerRule, HumanDecision
from twentyone.game.events import EventEmitter, EventType, GameEvent
from twentyone.game.match import TwentyOneGame
from twentyone.game.participant import Participant
from twentyone.game.prompter import Prompter
from twentyone.game.round import Round, RoundOutcome, RoundResult, resolve_round
from twentyone.game.state import MatchState, TurnState

__all__ = [
    "Action",
    "DealerRule",
    "HumanDecision",
    "EventEmitter",
    "EventType",
    "GameEvent",
    "TwentyOneGame",
    "Participant",
    "Prompter",
    "Round",
    "RoundOutcome",
    "RoundResult",
    "resolve_round",
    "MatchState",
    "TurnState",
]
