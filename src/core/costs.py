"""Cost figures attached to a synthesized plan.

Two independent numbers are produced here:

- the trip total, ``per_diem_rate(budget_tier) * day_count``;
- the per-day estimate, a linear ramp of ``80 + 20 * index``.

They are derived separately and are not reconciled with each other.
"""
from __future__ import annotations

from typing import Dict

PER_DIEM_RATES: Dict[str, int] = {
    "budget": 300,
    "moderate": 800,
    "luxury": 2500,
    "ultra-luxury": 5000,
}
DEFAULT_PER_DIEM = 500

DAY_COST_BASE = 80
DAY_COST_STEP = 20


def format_cost(amount: int) -> str:
    """Render a whole-dollar amount as ``$N`` without thousands separators."""
    return f"${amount}"


def per_diem_rate(budget_tier: str) -> int:
    return PER_DIEM_RATES.get(budget_tier, DEFAULT_PER_DIEM)


def total_estimated_cost(budget_tier: str, day_count: int) -> int:
    return per_diem_rate(budget_tier) * day_count


def day_cost(day_index: int) -> int:
    """Per-day estimate for the zero-based ``day_index``."""
    return DAY_COST_BASE + DAY_COST_STEP * day_index
