"""Public surface of the trip plan synthesis engine.

The implementations live in ``src.core.validator`` and ``src.core.synthesis``;
this module gathers what callers outside ``src.core`` are expected to use.
"""
from __future__ import annotations

from src.core.errors import MissingFieldsError, SynthesisError, TripPlannerError
from src.core.schemas import TripPlan, TripRequest
from src.core.synthesis import synthesize
from src.core.validator import parse_request, validate_request

__all__ = [
    "MissingFieldsError",
    "SynthesisError",
    "TripPlannerError",
    "TripPlan",
    "TripRequest",
    "parse_request",
    "synthesize",
    "validate_request",
]
