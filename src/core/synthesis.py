"""Plan assembly: turns a validated trip request into a complete ``TripPlan``.

Synthesis is all-or-nothing. Missing fields are reported before any
generator runs; any other failure inside a generator is wrapped in a single
``SynthesisError`` and no partial plan is returned.
"""
from __future__ import annotations

import logging
import random
from typing import Optional

from src.core.costs import format_cost, total_estimated_cost
from src.core.errors import SynthesisError
from src.core.itinerary import coerce_day_count, generate_itinerary
from src.core.recommendations import (
    generate_hotels,
    generate_local_tips,
    generate_packing_list,
    generate_restaurants,
    generate_transportation,
    generate_weather,
)
from src.core.schemas import TripPlan, TripRequest
from src.core.validator import validate_request

logger = logging.getLogger(__name__)

FLEXIBLE_DATES = "Flexible dates"
DEFAULT_TRAVEL_STYLE = "Mixed"


def dates_label(request: TripRequest) -> str:
    if request.start_date and request.end_date:
        return f"{request.start_date.isoformat()} to {request.end_date.isoformat()}"
    return FLEXIBLE_DATES


def duration_label(day_count: str) -> str:
    """Label built from the day count as entered; only the itinerary length is coerced."""
    return f"{day_count} days"


def synthesize(request: TripRequest, *, rng: Optional[random.Random] = None) -> TripPlan:
    """Validate ``request`` and build the full plan.

    Args:
        request: Frozen trip request from the planner form
        rng: Random source for the walking-distance estimates. A fresh,
            unseeded generator is used when omitted.

    Returns:
        The synthesized ``TripPlan``.

    Raises:
        MissingFieldsError: A required field is empty; nothing was generated.
        SynthesisError: A generator failed.
    """
    validate_request(request)
    rng = rng or random.Random()

    logger.info(
        "Synthesizing plan for %s (%s days, tier=%s)",
        request.destination,
        request.day_count,
        request.budget_tier,
    )
    try:
        days = coerce_day_count(request.day_count)
        plan = TripPlan(
            destination=request.destination,
            duration=duration_label(request.day_count),
            budget=request.budget_tier,
            travelers=request.traveler_count,
            dates=dates_label(request),
            travel_style=request.travel_style or DEFAULT_TRAVEL_STYLE,
            total_estimated_cost=format_cost(total_estimated_cost(request.budget_tier, days)),
            itinerary=generate_itinerary(request.destination, days, rng),
            hotels=generate_hotels(request.destination),
            restaurants=generate_restaurants(request.destination),
            transportation=generate_transportation(request.destination),
            local_tips=generate_local_tips(request.destination),
            weather=generate_weather(),
            packing_list=generate_packing_list(request.interests),
        )
    except Exception as exc:
        logger.error(f"Plan synthesis failed for {request.destination}: {exc}", exc_info=True)
        raise SynthesisError() from exc

    logger.info("Plan for %s ready: %s days, total %s", plan.destination, len(plan.itinerary), plan.total_estimated_cost)
    return plan
