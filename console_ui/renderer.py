"""Turns engine events into console output."""

from typing import Callable

from twentyone.game.events import EventEmitter, EventType, GameEvent
from console_ui.console import Console
from console_ui.formatting import describe_hand, describe_partial_hand, point_string

GOODBYE_MESSAGE = "Thank you for playing Twenty-One! Goodbye!"


class ConsoleRenderer:
    """Subscribes to a game's events and displays each one."""

    def __init__(self, console: Console) -> None:
        self.console = console
        self._handlers: dict[EventType, Callable[[GameEvent], None]] = {
            EventType.MATCH_STARTED: self._on_match_started,
            EventType.REMATCH_STARTED: self._on_rematch_started,
            EventType.ROUND_STARTED: self._on_round_started,
            EventType.INITIAL_DEAL: self._on_initial_deal,
            EventType.PARTICIPANT_HIT: self._on_hit,
            EventType.PARTICIPANT_STAYED: self._on_stayed,
            EventType.PARTICIPANT_BUSTED: self._on_busted,
            EventType.DEALER_TURN_SKIPPED: self._on_dealer_skipped,
            EventType.HANDS_REVEALED: self._on_hands_revealed,
            EventType.ROUND_ENDED: self._on_round_ended,
            EventType.SCORES_UPDATED: self._on_scores_updated,
            EventType.CHAMPION_CROWNED: self._on_champion,
            EventType.MATCH_ABANDONED: self._on_abandoned,
            EventType.GAME_ENDED: self._on_game_ended,
        }

    def attach(self, events: EventEmitter) -> None:
        """Subscribe to every event the emitter sends."""
        events.subscribe(self.handle)

    def handle(self, event: GameEvent) -> None:
        handler = self._handlers.get(event.event_type)
        if handler is not None:
            handler(event)

    def _on_match_started(self, event: GameEvent) -> None:
        data = event.data
        self.console.clear()
        self.console.display(f"Hi {data['player']}. Welcome to Twenty-One!")
        self.console.display(f"You are playing against {data['dealer']}.")
        self.console.display(f"The first to win {data['win_limit']} games is the Champion!")
        self.console.blank_line()

    def _on_rematch_started(self, event: GameEvent) -> None:
        data = event.data
        self.console.clear()
        self.console.display(f"Hi {data['player']}. Welcome back to Twenty-One!")
        self.console.display(f"You are playing against {data['dealer']}.")
        self.console.display(
            f"Remember, the first to win {data['win_limit']} games is the Champion!"
        )
        self.console.blank_line()

    def _on_round_started(self, event: GameEvent) -> None:
        # The first round shares the screen with the welcome message
        if event.data.get("number", 1) > 1:
            self.console.clear()

    def _on_initial_deal(self, event: GameEvent) -> None:
        data = event.data
        self.console.display(
            describe_partial_hand(data["dealer"], data["dealer_up_card"], data["dealer_hidden"])
        )
        self.console.display(
            describe_hand(data["player"], data["player_cards"], data["player_total"])
        )
        self.console.blank_line()

    def _on_hit(self, event: GameEvent) -> None:
        data = event.data
        self.console.display(f"{data['participant']} hits and draws {data['card']}.")
        self.console.display(describe_hand(data["participant"], data["cards"], data["total"]))

    def _on_stayed(self, event: GameEvent) -> None:
        self.console.display(f"{event.data['participant']} chose to stay.")
        self.console.blank_line()

    def _on_busted(self, event: GameEvent) -> None:
        self.console.display(f"{event.data['participant']} busted with {event.data['total']}!")
        self.console.blank_line()

    def _on_dealer_skipped(self, event: GameEvent) -> None:
        self.console.display(f"{event.data['dealer']} doesn't need to draw.")
        self.console.blank_line()

    def _on_hands_revealed(self, event: GameEvent) -> None:
        for name, hand in event.data["hands"].items():
            self.console.display(describe_hand(name, hand["cards"], hand["total"]))
        self.console.blank_line()

    def _on_round_ended(self, event: GameEvent) -> None:
        winner = event.data["winner"]
        if winner is None:
            self.console.display("It's a tie!")
        else:
            self.console.display(f"{winner} won!")

    def _on_scores_updated(self, event: GameEvent) -> None:
        data = event.data
        self.console.display(
            f"Remember, the first to win {data['win_limit']} games is the Champion!"
        )
        for name, score in data["scores"].items():
            self.console.display(f"{name} has {score} {point_string(score)}.")

    def _on_champion(self, event: GameEvent) -> None:
        data = event.data
        self.console.blank_line()
        self.console.display(
            f"{data['champion']} won {data['win_limit']} games and is the CHAMPION!"
        )
        self.console.blank_line()

    def _on_abandoned(self, event: GameEvent) -> None:
        self.console.blank_line()
        self.console.display("Match abandoned. No champion this time.")
        self.console.blank_line()

    def _on_game_ended(self, event: GameEvent) -> None:
        self.console.display(GOODBYE_MESSAGE)
        self.console.blank_line()
