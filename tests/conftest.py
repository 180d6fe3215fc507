"""Pytest configuration for the trip planner project."""
from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest

# Ensure the project root is on sys.path so that import src works under pytest.
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.core.schemas import TripRequest  # noqa: E402


@pytest.fixture
def paris_request() -> TripRequest:
    """Minimal valid request used across the engine tests."""
    return TripRequest(
        destination="Paris",
        day_count="3",
        budget_tier="moderate",
        traveler_count="2",
    )


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
