"""Pydantic data models for the trip plan synthesis engine.

This module contains the request record submitted by the planner form and
every structure that makes up a synthesized plan. The models are the contract
between the engine and whatever renders, exports or shares the result.

Key model categories:
- TripRequest: Immutable form submission describing the desired trip
- Activity / DayPlan: Day-by-day itinerary entries
- Hotel / Restaurant / TransportOption / WeatherInfo: Companion recommendations
- TripPlan: Complete synthesized plan consumed by the presentation layer
- SharePayload / ShareResult: Outcome of sharing a plan
"""
from __future__ import annotations

from datetime import date
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.core.types import (
    ActivityType,
    DistanceKm,
    DollarLabel,
    PriceRange,
    Rating,
    TimeSlot,
)


class TripRequest(BaseModel):
    """Trip parameters collected by the planner form.

    Values are kept as the form delivers them: free text for the categorical
    fields so that unknown budget tiers or traveler groups still reach the
    engine. Only the presence of the required fields is checked, by
    ``src.core.validator.validate_request``.

    Attributes:
        destination: Free-text destination name
        day_count: Requested number of days, as entered (e.g. "3", "0", "abc")
        start_date/end_date: Optional travel dates, never cross-checked
        budget_tier: budget, moderate, luxury, ultra-luxury or any other text
        traveler_count: Traveler group such as "1", "2", "3-4" or "5+"
        interests: Free-text interests, may be empty
        travel_style: Optional travel style label
        accommodation_type: Optional accommodation preference
    """
    destination: str = ""
    day_count: str = Field(default="", alias="dayCount")
    start_date: Optional[date] = Field(default=None, alias="startDate")
    end_date: Optional[date] = Field(default=None, alias="endDate")
    budget_tier: str = Field(default="", alias="budgetTier")
    traveler_count: str = Field(default="", alias="travelerCount")
    interests: str = ""
    travel_style: str = Field(default="", alias="travelStyle")
    accommodation_type: str = Field(default="", alias="accommodationType")

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    @field_validator(
        "destination",
        "budget_tier",
        "traveler_count",
        "interests",
        "travel_style",
        "accommodation_type",
        mode="before",
    )
    @classmethod
    def _none_is_blank(cls, value):
        return "" if value is None else value

    @field_validator("day_count", mode="before")
    @classmethod
    def _stringify_day_count(cls, value: Union[str, int, None]) -> str:
        if value is None:
            return ""
        if isinstance(value, bool):
            raise ValueError("day_count must be text or an integer")
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _blank_date_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class Activity(BaseModel):
    """Single scheduled slot inside a day of the itinerary."""
    time: TimeSlot
    title: str
    description: str
    type: ActivityType
    estimated_cost: DollarLabel
    duration: str
    difficulty: Literal["Easy", "Moderate", "Challenging"] = "Easy"
    booking_required: bool = False

    model_config = ConfigDict(extra="forbid")


class DayPlan(BaseModel):
    """Represents a single day in the itinerary with its theme and activities."""
    day: int = Field(ge=1)
    title: str
    theme: str
    activities: List[Activity] = Field(min_length=4, max_length=4)
    estimated_cost: DollarLabel
    walking_distance: DistanceKm
    highlights: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class Hotel(BaseModel):
    """Lodging recommendation shown next to the itinerary."""
    name: str
    rating: Rating
    price_per_night: DollarLabel
    amenities: List[str] = Field(default_factory=list)
    location: str
    description: str
    reviews: int = Field(default=0, ge=0)
    images: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class Restaurant(BaseModel):
    """Dining recommendation surfaced for the destination."""
    name: str
    cuisine: str
    rating: Rating
    price_range: PriceRange
    specialties: List[str] = Field(default_factory=list)
    location: str

    model_config = ConfigDict(extra="forbid")


class TransportOption(BaseModel):
    """Way of getting around inside the destination."""
    type: str
    cost: str
    description: str

    model_config = ConfigDict(extra="forbid")


class WeatherInfo(BaseModel):
    """Generic weather summary attached to every plan."""
    temperature: str
    conditions: str
    recommendation: str
    uv_index: str

    model_config = ConfigDict(extra="forbid")


class TripPlan(BaseModel):
    """Complete synthesized plan handed to the presentation layer.

    ``total_estimated_cost`` is derived from the budget tier's per-diem rate,
    while each ``DayPlan.estimated_cost`` follows its own per-day ramp. The
    two figures are independent and are not expected to add up.
    """
    destination: str
    duration: str
    budget: str
    travelers: str
    dates: str
    travel_style: str = "Mixed"
    total_estimated_cost: DollarLabel
    itinerary: List[DayPlan]
    hotels: List[Hotel] = Field(default_factory=list)
    restaurants: List[Restaurant] = Field(default_factory=list)
    transportation: List[TransportOption] = Field(default_factory=list)
    local_tips: List[str] = Field(default_factory=list)
    weather: WeatherInfo
    packing_list: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class SharePayload(BaseModel):
    """Message handed to a native share sheet."""
    title: str
    text: str
    url: str

    model_config = ConfigDict(extra="forbid")


class ShareResult(BaseModel):
    """Outcome of a share attempt and the notice to surface to the user."""
    method: Literal["native", "clipboard"]
    payload: SharePayload
    notice: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


__all__ = [
    "TripRequest",
    "Activity",
    "DayPlan",
    "Hotel",
    "Restaurant",
    "TransportOption",
    "WeatherInfo",
    "TripPlan",
    "SharePayload",
    "ShareResult",
]
