"""Tests for plan assembly end to end."""
from __future__ import annotations

import random
from datetime import date

import pytest

from src.core import synthesis
from src.core.engine import synthesize, validate_request
from src.core.errors import MissingFieldsError, SynthesisError
from src.core.recommendations import ADVENTURE_PACKING_ITEMS
from src.core.schemas import TripRequest


def test_paris_scenario(paris_request, rng):
    plan = synthesize(paris_request, rng=rng)

    assert plan.destination == "Paris"
    assert plan.duration == "3 days"
    assert plan.budget == "moderate"
    assert plan.travelers == "2"
    assert len(plan.itinerary) == 3
    assert [day.theme for day in plan.itinerary] == [
        "City Highlights & Landmarks",
        "Culture & History",
        "Local Life & Cuisine",
    ]
    assert plan.total_estimated_cost == "$2400"


def test_labels_defaults(paris_request, rng):
    plan = synthesize(paris_request, rng=rng)
    assert plan.dates == "Flexible dates"
    assert plan.travel_style == "Mixed"


def test_dates_label_uses_both_dates_as_entered(rng):
    request = TripRequest(
        destination="Paris",
        day_count="3",
        budget_tier="moderate",
        traveler_count="2",
        start_date=date(2025, 7, 9),
        end_date=date(2025, 7, 1),
        travel_style="Relaxed",
    )
    plan = synthesize(request, rng=rng)
    assert plan.dates == "2025-07-09 to 2025-07-01"
    assert plan.travel_style == "Relaxed"


def test_single_date_is_flexible(rng):
    request = TripRequest(
        destination="Paris",
        day_count="3",
        budget_tier="moderate",
        traveler_count="2",
        start_date=date(2025, 7, 1),
    )
    assert synthesize(request, rng=rng).dates == "Flexible dates"


def test_zero_days_coerced_to_default(paris_request, rng):
    plan = synthesize(paris_request.model_copy(update={"day_count": "0"}), rng=rng)
    assert len(plan.itinerary) == 3
    assert plan.duration == "0 days"
    assert plan.total_estimated_cost == "$2400"


@pytest.mark.parametrize("entered", ["5", "2.5", "3 nights"])
def test_duration_label_keeps_entered_day_count(paris_request, rng, entered):
    plan = synthesize(paris_request.model_copy(update={"day_count": entered}), rng=rng)
    assert plan.duration == f"{entered} days"


def test_unknown_tier_uses_default_rate(paris_request, rng):
    request = paris_request.model_copy(update={"budget_tier": "unknown-tier", "day_count": "4"})
    plan = synthesize(request, rng=rng)
    assert plan.total_estimated_cost == "$2000"
    assert plan.budget == "unknown-tier"


@pytest.mark.parametrize(
    "tier, days, expected",
    [("budget", "2", "$600"), ("luxury", "7", "$17500"), ("ultra-luxury", "14", "$70000")],
)
def test_total_cost_per_tier(paris_request, rng, tier, days, expected):
    request = paris_request.model_copy(update={"budget_tier": tier, "day_count": days})
    assert synthesize(request, rng=rng).total_estimated_cost == expected


def test_every_day_has_the_four_activity_types(paris_request, rng):
    plan = synthesize(paris_request.model_copy(update={"day_count": "9"}), rng=rng)
    for day in plan.itinerary:
        assert {a.type for a in day.activities} == {"sightseeing", "dining", "culture", "entertainment"}


def test_companion_sections_present(paris_request, rng):
    plan = synthesize(paris_request, rng=rng)
    assert len(plan.hotels) == 3
    assert len(plan.restaurants) == 2
    assert len(plan.transportation) == 4
    assert plan.local_tips
    assert plan.weather.temperature
    assert plan.packing_list


def test_adventure_interest_reaches_packing_list(paris_request, rng):
    plan = synthesize(paris_request.model_copy(update={"interests": "Food and Adventure"}), rng=rng)
    assert plan.packing_list[-3:] == list(ADVENTURE_PACKING_ITEMS)


def test_same_seed_same_plan(paris_request):
    assert synthesize(paris_request, rng=random.Random(5)) == synthesize(paris_request, rng=random.Random(5))


def test_missing_fields_rejected_before_generation(monkeypatch):
    calls = []
    monkeypatch.setattr(synthesis, "generate_itinerary", lambda *args: calls.append(args))

    with pytest.raises(MissingFieldsError):
        synthesize(TripRequest(destination="Paris"))

    assert calls == []


def test_generator_failure_is_reported_as_synthesis_error(paris_request, monkeypatch):
    def _boom(destination):
        raise KeyError("hotel catalogue unavailable")

    monkeypatch.setattr(synthesis, "generate_hotels", _boom)

    with pytest.raises(SynthesisError) as excinfo:
        synthesize(paris_request)

    assert isinstance(excinfo.value.__cause__, KeyError)
    assert str(excinfo.value) == "Failed to generate trip. Please try again."


def test_validate_request_is_exported(paris_request):
    validate_request(paris_request)
