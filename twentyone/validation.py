"""Pure helpers for validating line-based answers.

Each helper returns the accepted value, or None when the answer must be
asked again. Re-prompting is left to the caller.
"""

from typing import Sequence

YES_NO_OPTIONS = ("y", "yes", "n", "no")


def normalize(answer: str) -> str:
    """Strip surrounding whitespace (including the newline) and lowercase."""
    return answer.strip().lower()


def parse_yes_no(answer: str) -> bool | None:
    """Return True for y/yes, False for n/no, None for anything else."""
    answer = normalize(answer)
    if answer not in YES_NO_OPTIONS:
        return None
    return answer.startswith("y")


def match_choice(answer: str, options: Sequence[str]) -> str | None:
    """
    Match an answer against a closed set of options, case-insensitively.

    Returns the normalized answer when it is one of the options.
    """
    answer = normalize(answer)
    if answer in (option.lower() for option in options):
        return answer
    return None


def validate_name(answer: str, forbidden: str) -> str | None:
    """Return the stripped answer unless it is empty or the forbidden value."""
    answer = answer.strip()
    if not answer or answer == forbidden:
        return None
    return answer
