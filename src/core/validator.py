"""Presence checks performed before a plan is synthesized."""
from __future__ import annotations

import logging
from typing import Any, List, Mapping

from src.core.errors import MissingFieldsError
from src.core.schemas import TripRequest

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("destination", "day_count", "budget_tier", "traveler_count")


def missing_fields(request: TripRequest) -> List[str]:
    """Return the required fields that are empty or absent, in form order."""
    missing: List[str] = []
    for name in REQUIRED_FIELDS:
        value = getattr(request, name, None)
        if value is None or not str(value).strip():
            missing.append(name)
    return missing


def validate_request(request: TripRequest) -> None:
    """Fail fast with a single error when any required field is missing.

    Only presence is checked. Date ordering, day-count bounds and tier names
    are accepted as entered.
    """
    missing = missing_fields(request)
    if missing:
        logger.info("Trip request rejected, missing fields: %s", ", ".join(missing))
        raise MissingFieldsError(missing)


def parse_request(payload: Mapping[str, Any]) -> TripRequest:
    """Build a frozen request from raw form data (snake_case or camelCase keys)."""
    return TripRequest.model_validate(dict(payload))
