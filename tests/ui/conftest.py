"""Fixtures for console front-end tests."""

import pytest

from console_ui.console import Console


class ScriptedInput:
    """Feeds lines to the console; raises EOFError when the script runs out."""

    def __init__(self, lines):
        self.lines = list(lines)

    def __call__(self) -> str:
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def output():
    """Collected output lines."""
    return []


@pytest.fixture
def make_console(output):
    """Factory for a console reading scripted lines into ``output``."""

    def _make(*lines: str, clear_screen: bool = False) -> Console:
        return Console(ScriptedInput(lines), output.append, clear_screen=clear_screen)

    return _make
