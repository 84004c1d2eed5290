"""The input collaborator the engine asks questions through."""

from typing import Protocol, Sequence


class Prompter(Protocol):
    """
    Line-based question asking.

    Implementations keep asking until they get an acceptable answer, so
    every method returns a valid value.
    """

    def ask_yes_no(self, prompt: str) -> bool:
        """Return True for y/yes, False for n/no."""
        ...

    def ask_open(self, prompt: str, forbidden_value: str) -> str:
        """Return a non-empty answer different from ``forbidden_value``."""
        ...

    def ask_closed(self, prompt: str, options: Sequence[str]) -> str:
        """Return the lowercased answer, one of ``options``."""
        ...

    def display(self, message: str) -> None:
        """Render a line of text."""
        ...
