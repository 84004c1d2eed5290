"""Turn and match state enumerations and their transitions."""

from enum import Enum, auto
from typing import Any


class TurnState(Enum):
    """
    Participant turn states.

    Flow: AWAITING_DECISION → (AWAITING_DECISION | STAY_COMPLETE | BUST_COMPLETE)
    """

    AWAITING_DECISION = auto()
    STAY_COMPLETE = auto()
    BUST_COMPLETE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

    @property
    def is_complete(self) -> bool:
        """Check if the turn has ended."""
        return self != TurnState.AWAITING_DECISION


class MatchState(Enum):
    """
    Match controller states.

    Flow: READY → ROUND_IN_PROGRESS → BETWEEN_ROUNDS → ... → CHAMPION_CROWNED
    """

    # Fresh match, no round played yet
    READY = auto()

    # Cards are out
    ROUND_IN_PROGRESS = auto()

    # Round resolved, no champion yet
    BETWEEN_ROUNDS = auto()

    # Someone reached the win limit
    CHAMPION_CROWNED = auto()

    # Player quit the match early
    ABANDONED = auto()

    # Player declined a rematch
    GAME_OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# State machine transitions; begin_turn starts the next round's turn
TURN_TRANSITIONS: list[dict[str, Any]] = [
    {"trigger": "begin_turn", "source": "*", "dest": "awaiting_decision"},
    {"trigger": "draw", "source": "awaiting_decision", "dest": "awaiting_decision"},
    {"trigger": "stand", "source": "awaiting_decision", "dest": "stay_complete"},
    {"trigger": "go_bust", "source": "awaiting_decision", "dest": "bust_complete"},
]

MATCH_TRANSITIONS: list[dict[str, Any]] = [
    {"trigger": "start_round", "source": ["ready", "between_rounds"], "dest": "round_in_progress"},
    {"trigger": "round_done", "source": "round_in_progress", "dest": "between_rounds"},
    {"trigger": "crown_champion", "source": "round_in_progress", "dest": "champion_crowned"},
    {"trigger": "abandon", "source": "between_rounds", "dest": "abandoned"},
    {"trigger": "rematch", "source": ["champion_crowned", "abandoned"], "dest": "ready"},
    {
        "trigger": "end_game",
        "source": ["ready", "between_rounds", "champion_crowned", "abandoned"],
        "dest": "game_over",
    },
]


def machine_states(states: type[Enum]) -> list[str]:
    """Return the machine state names for an enum."""
    return [s.name.lower() for s in states]


def transition_table(
    states: type[Enum],
    transitions: list[dict[str, Any]],
) -> dict[Enum, list[Enum]]:
    """Build a source → destinations table from machine transitions."""
    table: dict[Enum, list[Enum]] = {state: [] for state in states}
    for transition in transitions:
        sources = transition["source"]
        if sources == "*":
            sources = machine_states(states)
        elif isinstance(sources, str):
            sources = [sources]

        dest = states[transition["dest"].upper()]
        for source in sources:
            destinations = table[states[source.upper()]]
            if dest not in destinations:
                destinations.append(dest)
    return table


VALID_TURN_TRANSITIONS = transition_table(TurnState, TURN_TRANSITIONS)
VALID_MATCH_TRANSITIONS = transition_table(MatchState, MATCH_TRANSITIONS)


def is_valid_transition(from_state: Enum, to_state: Enum) -> bool:
    """
    Check if a turn or match state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    if isinstance(from_state, TurnState):
        return to_state in VALID_TURN_TRANSITIONS.get(from_state, [])
    if isinstance(from_state, MatchState):
        return to_state in VALID_MATCH_TRANSITIONS.get(from_state, [])
    return False
