"""Turn decision strategies for participants."""

from enum import Enum
from typing import TYPE_CHECKING, Protocol

from twentyone.game.prompter import Prompter
from twentyone.rules import RuleSet

if TYPE_CHECKING:
    from twentyone.game.participant import Participant

HIT_OR_STAY_PROMPT = "Would you like to (h)it or (s)tay?"
HIT_OR_STAY_OPTIONS = ["h", "hit", "s", "stay"]


class Action(Enum):
    """What a participant does next."""

    HIT = "hit"
    STAY = "stay"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_answer(cls, answer: str) -> "Action":
        """Map a short or long answer ('h', 'Hit', 's', 'stay') to an action."""
        answer = answer.strip().lower()
        for action in cls:
            if answer and action.value.startswith(answer):
                return action
        raise ValueError(f"Invalid action: {answer!r}")


class DecisionStrategy(Protocol):
    """Decides a participant's next action from the current hand."""

    def decide(self, participant: "Participant") -> Action:
        ...


class HumanDecision:
    """Asks the human whether to hit or stay."""

    def __init__(self, prompter: Prompter) -> None:
        self.prompter = prompter

    def decide(self, participant: "Participant") -> Action:
        answer = self.prompter.ask_closed(HIT_OR_STAY_PROMPT, HIT_OR_STAY_OPTIONS)
        return Action.from_answer(answer)


class DealerRule:
    """Hits below a fixed threshold, stays at or above it."""

    def __init__(self, stay_threshold: int | None = None) -> None:
        if stay_threshold is None:
            stay_threshold = RuleSet().dealer_stay_threshold
        self.stay_threshold = stay_threshold

    def decide(self, participant: "Participant") -> Action:
        if participant.total < self.stay_threshold:
            return Action.HIT
        return Action.STAY
