"""Text formatting helpers for the console."""

from typing import Sequence

CLEAR_SCREEN = "\033[2J\033[H"


def joinor(items: Sequence[str], delimiter: str = ", ", word: str = "and") -> str:
    """
    Join items into an English list.

    Examples:
        joinor(["4♦"]) -> "4♦"
        joinor(["4♦", "3♦"]) -> "4♦ and 3♦"
        joinor(["4♦", "3♦", "King♣"]) -> "4♦, 3♦, and King♣"
    """
    items = [str(item) for item in items]
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f" {word} ".join(items)
    return delimiter.join(items[:-1] + [f"{word} {items[-1]}"])


def describe_hand(name: str, cards: Sequence[str], total: int | None = None) -> str:
    """Render a hand such as 'Bob has 4♦ and 3♦ (total: 7)'."""
    line = f"{name} has {joinor(cards)}"
    if total is not None:
        line += f" (total: {total})"
    return line


def describe_partial_hand(name: str, up_card: str, hidden: int = 1) -> str:
    """Render the dealer's opening hand with only the first card showing."""
    unknown = ["unknown card"] * hidden
    return describe_hand(name, [up_card, *unknown])


def point_string(score: int) -> str:
    return "point" if score == 1 else "points"
