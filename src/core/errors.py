"""Exception taxonomy for request validation, synthesis and the planner shell."""
from __future__ import annotations

from typing import Iterable, Tuple

MISSING_FIELDS_MESSAGE = "Please fill in all required fields"
SYNTHESIS_FAILED_MESSAGE = "Failed to generate trip. Please try again."


class TripPlannerError(Exception):
    """Base class for every error raised by the planner."""


class MissingFieldsError(TripPlannerError, ValueError):
    """One or more required request fields are empty or absent.

    Raised once for the whole request; ``fields`` lists every missing field
    so callers can still highlight them individually.
    """

    def __init__(self, fields: Iterable[str]) -> None:
        self.fields: Tuple[str, ...] = tuple(fields)
        super().__init__(MISSING_FIELDS_MESSAGE)

    def __str__(self) -> str:
        return f"{MISSING_FIELDS_MESSAGE}: {', '.join(self.fields)}"


class SynthesisError(TripPlannerError, RuntimeError):
    """A plan generator failed; no partial plan is ever returned."""

    def __init__(self, message: str = SYNTHESIS_FAILED_MESSAGE) -> None:
        super().__init__(message)


class InvalidTransitionError(TripPlannerError):
    """Navigation event that is not allowed from the current screen."""

    def __init__(self, state: str, event: str) -> None:
        self.state = state
        self.event = event
        super().__init__(f"Cannot apply '{event}' while on '{state}' screen")


class SessionNotFoundError(TripPlannerError, LookupError):
    """Unknown planner session id."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Unknown planner session '{session_id}'.")


__all__ = [
    "MISSING_FIELDS_MESSAGE",
    "SYNTHESIS_FAILED_MESSAGE",
    "TripPlannerError",
    "MissingFieldsError",
    "SynthesisError",
    "InvalidTransitionError",
    "SessionNotFoundError",
]
