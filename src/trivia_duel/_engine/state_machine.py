# Area: Engine
"""
trivia_duel._engine.state_machine — Match status state machine
==============================================================

Tracks the match status and validates transitions. The status only
moves forward: waiting -> in-progress -> finished.
"""

import logging

from ..errors import InvalidOperationError
from .enums import MatchEvent, MatchStatus

logger = logging.getLogger("trivia_duel.state_machine")


# Valid transitions: {current_status: {event: next_status}}
TRANSITIONS = {
    MatchStatus.WAITING: {
        MatchEvent.START: MatchStatus.IN_PROGRESS,
    },
    MatchStatus.IN_PROGRESS: {
        MatchEvent.FINISH: MatchStatus.FINISHED,
    },
    MatchStatus.FINISHED: {},
}


class MatchStateMachine:
    """
    State machine for a match's status.

    Attributes:
        status: The current status
    """

    def __init__(self, status: MatchStatus = MatchStatus.WAITING):
        self.status = status

    def can_transition(self, event: MatchEvent) -> bool:
        """
        Check if a transition is valid from the current status.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        return event in TRANSITIONS.get(self.status, {})

    def transition(self, event: MatchEvent) -> MatchStatus:
        """
        Execute a status transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new status

        Raises:
            InvalidOperationError: If the transition is not valid
        """
        if not self.can_transition(event):
            raise InvalidOperationError(
                f"Invalid transition: {event.value} from {self.status.value}",
                status=self.status.value,
                event=event.value,
            )

        next_status = TRANSITIONS[self.status][event]
        logger.info(f"Match status: {self.status.value} → {next_status.value}")
        self.status = next_status
        return next_status
