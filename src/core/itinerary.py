"""Day-by-day itinerary generation.

Every day gets one of five rotating themes, the same four activity templates
(sightseeing, dining, culture, entertainment) and a per-day cost ramp. The
walking distance is the only randomised field; the random source is passed
in so callers control determinism.
"""
from __future__ import annotations

import logging
import random
import re
from typing import Any, List, Optional

from src.core.costs import day_cost, format_cost
from src.core.schemas import Activity, DayPlan

logger = logging.getLogger(__name__)

DEFAULT_DAY_COUNT = 3

THEMES = (
    "City Highlights & Landmarks",
    "Culture & History",
    "Local Life & Cuisine",
    "Nature & Outdoors",
    "Hidden Gems & Relaxation",
)

DAY_HIGHLIGHTS = (
    "Iconic landmarks and photo spots",
    "Authentic local food",
    "Evening atmosphere",
)

WALKING_MIN_KM = 2.0
WALKING_SPREAD_KM = 3.0

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def coerce_day_count(value: Any) -> int:
    """Parse the requested day count, falling back to ``DEFAULT_DAY_COUNT``.

    The leading integer of the text is used ("5 days" -> 5, "2.5" -> 2).
    Unparsable input and counts of zero or less yield the default.
    """
    if isinstance(value, bool):
        return DEFAULT_DAY_COUNT
    if isinstance(value, int):
        parsed = value
    else:
        match = _LEADING_INT.match(str(value)) if value is not None else None
        if match is None:
            logger.debug("Unparsable day count %r, using default", value)
            return DEFAULT_DAY_COUNT
        parsed = int(match.group(1))
    if parsed <= 0:
        logger.debug("Non-positive day count %r, using default", value)
        return DEFAULT_DAY_COUNT
    return parsed


def theme_for_day(day_index: int) -> str:
    """Theme for the zero-based ``day_index``; cycles every five days."""
    return THEMES[day_index % len(THEMES)]


def walking_distance(rng: random.Random) -> str:
    distance = WALKING_MIN_KM + rng.random() * WALKING_SPREAD_KM
    return f"{distance:.1f} km"


def build_activities(destination: str, day: int) -> List[Activity]:
    """The four canonical activities for ``day`` (1-based), in time order."""
    return [
        Activity(
            time="9:00 AM",
            title=f"Morning exploration of {destination} - Day {day}",
            description="Start your day with a visit to the city's most iconic landmarks and attractions.",
            type="sightseeing",
            estimated_cost="$25",
            duration="3 hours",
            booking_required=False,
        ),
        Activity(
            time="1:00 PM",
            title=f"Local cuisine experience in {destination}",
            description="Enjoy authentic local dishes at a highly-rated restaurant recommended by locals.",
            type="dining",
            estimated_cost="$40",
            duration="2 hours",
            booking_required=True,
        ),
        Activity(
            time="4:00 PM",
            title=f"Cultural immersion in {destination} - Day {day}",
            description="Visit museums, galleries, or cultural sites that showcase the local heritage.",
            type="culture",
            estimated_cost="$20",
            duration="2 hours",
            booking_required=False,
        ),
        Activity(
            time="7:30 PM",
            title=f"Evening entertainment in {destination}",
            description="Experience the nightlife or attend a local performance.",
            type="entertainment",
            estimated_cost="$35",
            duration="3 hours",
            booking_required=True,
        ),
    ]


def build_day(destination: str, day_index: int, rng: random.Random) -> DayPlan:
    day = day_index + 1
    return DayPlan(
        day=day,
        title=f"Day {day} in {destination}",
        theme=theme_for_day(day_index),
        activities=build_activities(destination, day),
        estimated_cost=format_cost(day_cost(day_index)),
        walking_distance=walking_distance(rng),
        highlights=list(DAY_HIGHLIGHTS),
    )


def generate_itinerary(
    destination: str,
    day_count: Any,
    rng: Optional[random.Random] = None,
) -> List[DayPlan]:
    """Build one ``DayPlan`` per (coerced) requested day."""
    rng = rng or random.Random()
    days = coerce_day_count(day_count)
    logger.debug("Generating %s-day itinerary for %s", days, destination)
    return [build_day(destination, index, rng) for index in range(days)]
