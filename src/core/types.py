"""Shared type aliases used across the planner modules."""
from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field, StringConstraints

Rating = Annotated[float, Field(ge=0, le=5)]
DollarLabel = Annotated[
    str,
    StringConstraints(pattern=r"^\$\d+$", strip_whitespace=True),
]
DistanceKm = Annotated[
    str,
    StringConstraints(pattern=r"^\d+\.\d km$", strip_whitespace=True),
]
PriceRange = Annotated[str, StringConstraints(pattern=r"^\${1,4}$")]

TimeSlot = Literal["9:00 AM", "1:00 PM", "4:00 PM", "7:30 PM"]
ActivityType = Literal["sightseeing", "dining", "culture", "entertainment"]
