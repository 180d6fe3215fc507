"""Companion recommendations attached to every plan.

Each generator takes only the request values it actually uses, so the fields
it ignores (budget tier, traveler count, style, accommodation) are visible in
its signature rather than hidden behind the full request.
"""
from __future__ import annotations

import logging
from typing import List

from src.core.schemas import Hotel, Restaurant, TransportOption, WeatherInfo

logger = logging.getLogger(__name__)

IMAGE_PLACEHOLDER = "/placeholder.svg"

BASE_PACKING_ITEMS = (
    "Comfortable walking shoes",
    "Weather-appropriate clothing",
    "Portable phone charger",
    "Travel adapter",
    "Reusable water bottle",
    "Sunscreen and sunglasses",
    "Travel documents and copies",
    "Basic first aid kit",
)

ADVENTURE_PACKING_ITEMS = (
    "Hiking boots",
    "Quick-dry clothing",
    "Daypack with rain cover",
)


def generate_hotels(destination: str) -> List[Hotel]:
    """Premium, boutique and modern stays, whatever the budget tier."""
    return [
        Hotel(
            name=f"The Grand {destination} Hotel",
            rating=4.8,
            price_per_night="$280",
            amenities=["WiFi", "Pool", "Spa", "Restaurant", "Concierge"],
            location="City Center",
            description="Premium hotel with stunning views and world-class service in the heart of the city.",
            reviews=2847,
            images=[IMAGE_PLACEHOLDER, IMAGE_PLACEHOLDER],
        ),
        Hotel(
            name=f"Boutique Hotel {destination}",
            rating=4.5,
            price_per_night="$180",
            amenities=["WiFi", "Breakfast", "Bar", "Rooftop Terrace"],
            location="Historic District",
            description="Charming boutique hotel with unique character and excellent service.",
            reviews=1523,
            images=[IMAGE_PLACEHOLDER, IMAGE_PLACEHOLDER],
        ),
        Hotel(
            name=f"{destination} Modern Suites",
            rating=4.3,
            price_per_night="$140",
            amenities=["WiFi", "Gym", "Kitchenette", "Parking"],
            location="Business District",
            description="Contemporary suites with everything you need for a comfortable stay.",
            reviews=986,
            images=[IMAGE_PLACEHOLDER, IMAGE_PLACEHOLDER],
        ),
    ]


def generate_restaurants(destination: str) -> List[Restaurant]:
    return [
        Restaurant(
            name=f"Taste of {destination}",
            cuisine="Local Cuisine",
            rating=4.7,
            price_range="$$",
            specialties=["Traditional dishes", "Seasonal specials", "Local wines"],
            location="Old Town",
        ),
        Restaurant(
            name="The Rooftop Bistro",
            cuisine="International",
            rating=4.5,
            price_range="$$$",
            specialties=["Sunset views", "Fusion menu", "Craft cocktails"],
            location="City Center",
        ),
    ]


def generate_transportation(destination: str) -> List[TransportOption]:
    return [
        TransportOption(
            type="Public Transit",
            cost="$2-5 per ride",
            description=f"Metro and bus network covering most of {destination}; day passes are the best value.",
        ),
        TransportOption(
            type="Taxi/Rideshare",
            cost="$10-25 per ride",
            description="Convenient door-to-door option, especially late in the evening.",
        ),
        TransportOption(
            type="Bike Rental",
            cost="$15 per day",
            description="Explore neighbourhoods at your own pace with bike-share stations around the city.",
        ),
        TransportOption(
            type="Walking",
            cost="Free",
            description="The best way to discover the historic center and hidden corners.",
        ),
    ]


def generate_local_tips(destination: str) -> List[str]:
    return [
        f"Learn a few basic phrases in the local language before visiting {destination}.",
        "Book popular attractions online in advance to skip the lines.",
        "Carry some cash for small shops, markets and street food.",
        "Ask locals for restaurant recommendations away from the main tourist areas.",
        "Check opening hours: many museums close one day a week.",
    ]


def generate_weather() -> WeatherInfo:
    """Same summary for every destination and season."""
    return WeatherInfo(
        temperature="18-25°C",
        conditions="Partly cloudy with occasional sunshine",
        recommendation="Pack layers and a light rain jacket",
        uv_index="Moderate - sunscreen recommended",
    )


def wants_adventure(interests: str) -> bool:
    return "adventure" in (interests or "").lower()


def generate_packing_list(interests: str) -> List[str]:
    """Base packing list, plus adventure gear when the interests mention it."""
    items = list(BASE_PACKING_ITEMS)
    if wants_adventure(interests):
        logger.debug("Adding adventure gear to packing list")
        items.extend(ADVENTURE_PACKING_ITEMS)
    return items
