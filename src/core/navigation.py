"""Screen flow of the planner shell as an explicit state machine.

Home --start--> Collecting --submit_success--> Reviewing
Collecting --submit_failure--> Collecting
Collecting --back--> Home
Reviewing --back--> Collecting (the plan is discarded)
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Tuple

from src.core.errors import InvalidTransitionError

logger = logging.getLogger(__name__)


class Screen(str, Enum):
    HOME = "home"
    COLLECTING = "collecting"
    REVIEWING = "reviewing"


class NavEvent(str, Enum):
    START = "start"
    SUBMIT_SUCCESS = "submit_success"
    SUBMIT_FAILURE = "submit_failure"
    BACK = "back"


TRANSITIONS: Dict[Tuple[Screen, NavEvent], Screen] = {
    (Screen.HOME, NavEvent.START): Screen.COLLECTING,
    (Screen.COLLECTING, NavEvent.SUBMIT_SUCCESS): Screen.REVIEWING,
    (Screen.COLLECTING, NavEvent.SUBMIT_FAILURE): Screen.COLLECTING,
    (Screen.COLLECTING, NavEvent.BACK): Screen.HOME,
    (Screen.REVIEWING, NavEvent.BACK): Screen.COLLECTING,
}


class ScreenMachine:
    """Tracks the current screen and applies navigation events."""

    def __init__(self, state: Screen = Screen.HOME) -> None:
        self.state = state

    def __repr__(self) -> str:
        return f"ScreenMachine(state={self.state.value!r})"

    def can(self, event: NavEvent) -> bool:
        return (self.state, NavEvent(event)) in TRANSITIONS

    def dispatch(self, event: NavEvent) -> Screen:
        """Apply ``event`` and return the new screen.

        Raises:
            InvalidTransitionError: ``event`` is not allowed from the current screen.
        """
        event = NavEvent(event)
        target = TRANSITIONS.get((self.state, event))
        if target is None:
            raise InvalidTransitionError(self.state.value, event.value)
        logger.debug("Navigation %s --%s--> %s", self.state.value, event.value, target.value)
        self.state = target
        return target
