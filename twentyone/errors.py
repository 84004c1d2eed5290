"""Engine exceptions."""


class TwentyOneError(Exception):
    """Base class for all engine errors."""


class InvariantViolation(TwentyOneError):
    """
    A logic bug inside the engine.

    These are never recovered from; the round (and usually the process)
    stops with the error.
    """


class DeckExhaustedError(InvariantViolation, IndexError):
    """Raised when a card is dealt from an empty deck."""


class InvalidStateError(InvariantViolation):
    """Raised when a controller operation is invoked in the wrong state."""

    def __init__(self, operation: str, state: str) -> None:
        self.operation = operation
        self.state = state
        super().__init__(f"Cannot {operation} while {state}")
