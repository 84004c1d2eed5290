"""Line-based console input and output."""

from typing import Callable, Sequence

from twentyone.validation import match_choice, parse_yes_no, validate_name
from console_ui.formatting import CLEAR_SCREEN

YES_NO_ERROR = "Sorry, must be y or n."
CLOSED_ERROR = "Sorry, invalid choice."
OPEN_ERROR = "Sorry, must enter a value (it can't be '{forbidden}'!)."


class Console:
    """
    Prompts on stdout and reads answers from stdin.

    Every ``ask_*`` method keeps asking, with a corrective message, until
    the answer is acceptable.
    """

    def __init__(
        self,
        input_func: Callable[[], str] = input,
        output_func: Callable[[str], None] = print,
        clear_screen: bool = True,
    ) -> None:
        """
        Args:
            input_func: Reads one line of input (no prompt argument)
            output_func: Writes one line of output
            clear_screen: Whether ``clear()`` emits the ANSI clear sequence
        """
        self._input = input_func
        self._output = output_func
        self.clear_screen = clear_screen

    def display(self, message: str) -> None:
        self._output(message)

    def blank_line(self) -> None:
        self._output("")

    def clear(self) -> None:
        if self.clear_screen:
            self._output(CLEAR_SCREEN)

    def _ask(self, prompt: str) -> str:
        self.display(prompt)
        return self._input()

    def _reject(self, message: str) -> None:
        self.display(message)
        self.blank_line()

    def ask_yes_no(self, prompt: str) -> bool:
        while True:
            answer = parse_yes_no(self._ask(prompt))
            if answer is not None:
                return answer
            self._reject(YES_NO_ERROR)

    def ask_open(self, prompt: str, forbidden_value: str) -> str:
        while True:
            answer = validate_name(self._ask(prompt), forbidden_value)
            if answer is not None:
                return answer
            self._reject(OPEN_ERROR.format(forbidden=forbidden_value))

    def ask_closed(self, prompt: str, options: Sequence[str]) -> str:
        while True:
            answer = match_choice(self._ask(prompt), options)
            if answer is not None:
                return answer
            self._reject(CLOSED_ERROR)
