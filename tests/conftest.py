"""Pytest fixtures for Twenty-One tests."""

from random import Random
from typing import Iterable, Sequence

import pytest

from twentyone.cards import Card, Deck
from twentyone.hand import Hand
from twentyone.rules import RuleSet
from twentyone.validation import match_choice, parse_yes_no, validate_name
from twentyone.game import EventEmitter, Participant, TwentyOneGame


class StackedDeck(Deck):
    """
    A deck that deals a fixed sequence of cards, in the order given.

    Every reset restores the same sequence, so each round replays it.
    """

    def __init__(self, cards: Iterable[Card | str]) -> None:
        self._script = [c if isinstance(c, Card) else Card.from_string(c) for c in cards]
        self.resets = 0
        super().__init__()

    def reset(self) -> None:
        self._cards = list(reversed(self._script))
        self.resets += 1


class ScriptedPrompter:
    """A prompter that answers from a script and records what it was shown."""

    def __init__(self, answers: Iterable[str] = ()) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.messages: list[str] = []

    def _next(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"No scripted answer left for {prompt!r}")
        return self.answers.pop(0)

    def ask_yes_no(self, prompt: str) -> bool:
        answer = parse_yes_no(self._next(prompt))
        assert answer is not None, "scripted yes/no answer is invalid"
        return answer

    def ask_open(self, prompt: str, forbidden_value: str) -> str:
        answer = validate_name(self._next(prompt), forbidden_value)
        assert answer is not None, "scripted open answer is invalid"
        return answer

    def ask_closed(self, prompt: str, options: Sequence[str]) -> str:
        answer = match_choice(self._next(prompt), options)
        assert answer is not None, "scripted closed answer is invalid"
        return answer

    def display(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def rules():
    """Default rules."""
    return RuleSet()


@pytest.fixture
def events():
    """A fresh event emitter."""
    return EventEmitter()


@pytest.fixture
def prompter():
    """A prompter with no scripted answers."""
    return ScriptedPrompter()


@pytest.fixture
def dealer(rules, events):
    """The dealer's seat."""
    return Participant.dealer(rules, events)


@pytest.fixture
def make_player(rules, events):
    """Factory for a player seat answering from a script."""

    def _make(*answers: str, name: str = "Bob") -> Participant:
        return Participant.player(name, ScriptedPrompter(answers), rules, events)

    return _make


@pytest.fixture
def make_game(rules, events):
    """Factory for a game dealing from a stacked deck."""

    def _make(script: Sequence[str], answers: Sequence[str] = (), name: str = "Bob"):
        prompter = ScriptedPrompter(answers)
        game = TwentyOneGame(
            name,
            prompter,
            rules=rules,
            deck=StackedDeck(script),
            events=events,
        )
        return game, prompter

    return _make


@pytest.fixture
def make_hand():
    """Factory building a hand from card strings like '4D', 'KC', 'A♠'."""

    def _make(*cards: str) -> Hand:
        hand = Hand()
        for card in cards:
            hand.add_card(Card.from_string(card))
        return hand

    return _make


@pytest.fixture
def stacked_deck():
    """Factory for a deck dealing the given cards in order."""
    return StackedDeck


@pytest.fixture
def scripted_prompter():
    """Factory for a prompter answering from a script."""
    return ScriptedPrompter


# Stacked deals, in deal order: player, dealer, player, dealer, then draws.
# Player [4♦, 3♦] hits King♣ for 17; dealer [9♣, 7♠] hits 2♥ for 18.
@pytest.fixture
def dealer_wins_script():
    return ["4D", "9C", "3D", "7S", "KC", "2H"]


# Player stays on 20; dealer stands on 17.
@pytest.fixture
def player_wins_script():
    return ["10S", "9C", "KH", "8D"]


# Both stay on 18.
@pytest.fixture
def tie_script():
    return ["10S", "10C", "8H", "8D"]


# Player hits 16 into 26; dealer's 11 is never played.
@pytest.fixture
def player_busts_script():
    return ["10S", "9C", "6H", "2D", "KC"]


# Player stays on 18; dealer hits 16 into 26.
@pytest.fixture
def dealer_busts_script():
    return ["10S", "10C", "8H", "6D", "KD"]
