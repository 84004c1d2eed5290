"""State machine base shared by participants and the match controller."""

from transitions import Machine, MachineError
from transitions.core import Event

from twentyone.errors import InvalidStateError
from twentyone.logging_utils import get_logger

logger = get_logger(__name__)


class GuardedEvent(Event):
    """A trigger that reports an illegal transition as ``InvalidStateError``."""

    def trigger(self, model, *args, **kwargs):
        try:
            return super().trigger(model, *args, **kwargs)
        except MachineError as exc:
            state = getattr(model, self.machine.model_attribute)
            logger.error("Illegal trigger %r in state %r", self.name, state)
            raise InvalidStateError(self.name, state) from exc


class GameMachine(Machine):
    """Machine whose triggers raise engine errors instead of ``MachineError``."""

    event_cls = GuardedEvent
