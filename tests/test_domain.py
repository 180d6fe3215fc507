"""Tests for domain models and data validation."""
from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from src.core.schemas import (
    Activity,
    DayPlan,
    Hotel,
    Restaurant,
    TripRequest,
    WeatherInfo,
)


def _activity(**overrides) -> Activity:
    values = dict(
        time="9:00 AM",
        title="Morning walk",
        description="Walk around",
        type="sightseeing",
        estimated_cost="$25",
        duration="3 hours",
    )
    values.update(overrides)
    return Activity(**values)


def test_trip_request_accepts_camel_case_form_keys():
    """Form payloads use camelCase keys; the model stores snake_case fields."""
    request = TripRequest.model_validate(
        {
            "destination": "Lisbon",
            "dayCount": "4",
            "budgetTier": "luxury",
            "travelerCount": "3-4",
            "travelStyle": "relaxed",
            "accommodationType": "boutique",
        }
    )
    assert request.day_count == "4"
    assert request.budget_tier == "luxury"
    assert request.traveler_count == "3-4"
    assert request.travel_style == "relaxed"
    assert request.accommodation_type == "boutique"


def test_trip_request_stringifies_integer_day_count():
    request = TripRequest(destination="Rome", day_count=5, budget_tier="budget", traveler_count="1")
    assert request.day_count == "5"


def test_trip_request_is_frozen(paris_request):
    with pytest.raises(ValidationError):
        paris_request.destination = "Berlin"


def test_trip_request_blank_dates_become_none():
    request = TripRequest(destination="Oslo", start_date="", end_date="  ")
    assert request.start_date is None
    assert request.end_date is None


def test_trip_request_accepts_unordered_dates():
    """End before start is accepted as entered."""
    request = TripRequest(
        destination="Oslo",
        start_date=date(2025, 6, 10),
        end_date=date(2025, 6, 1),
    )
    assert request.start_date > request.end_date


def test_trip_request_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        TripRequest(destination="Oslo", favourite_colour="blue")


def test_activity_rejects_unknown_type():
    with pytest.raises(ValidationError):
        _activity(type="shopping")


def test_activity_defaults():
    activity = _activity()
    assert activity.difficulty == "Easy"
    assert activity.booking_required is False


def test_day_plan_requires_exactly_four_activities():
    with pytest.raises(ValidationError):
        DayPlan(
            day=1,
            title="Day 1 in Paris",
            theme="Culture & History",
            activities=[_activity()],
            estimated_cost="$80",
            walking_distance="2.5 km",
        )


def test_day_plan_rejects_malformed_distance():
    with pytest.raises(ValidationError):
        DayPlan(
            day=1,
            title="Day 1 in Paris",
            theme="Culture & History",
            activities=[_activity() for _ in range(4)],
            estimated_cost="$80",
            walking_distance="2.53km",
        )


def test_hotel_rating_is_bounded():
    with pytest.raises(ValidationError):
        Hotel(
            name="Too Good",
            rating=5.5,
            price_per_night="$100",
            location="Center",
            description="Impossible",
        )


def test_restaurant_price_range_symbols():
    restaurant = Restaurant(
        name="Chez Test",
        cuisine="French",
        rating=4.2,
        price_range="$$",
        location="Le Marais",
    )
    assert restaurant.specialties == []

    with pytest.raises(ValidationError):
        Restaurant(name="Bad", cuisine="Any", rating=4, price_range="cheap", location="X")


def test_weather_info_is_strict():
    with pytest.raises(ValidationError):
        WeatherInfo(temperature="20°C", conditions="Sunny", recommendation="Hat")
