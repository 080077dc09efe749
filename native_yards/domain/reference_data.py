"""
Static reference data for package recommendations and the signup form.

All tables are module-level constants built once at import time and
never mutated afterwards.
"""
from types import MappingProxyType
from typing import Mapping

from native_yards.domain.models import PlantCategory, PlantSpec, Sunlight


DEFAULT_ZONE = "6b"
DEFAULT_SQUARE_FEET = 5000

# Simplified ZIP -> hardiness zone lookup keyed on the first ZIP digit
ZONE_BY_DIGIT: Mapping[str, str] = MappingProxyType({
    "0": "5a", "1": "5b", "2": "6a", "3": "6b", "4": "7a",
    "5": "7b", "6": "8a", "7": "8b", "8": "9a", "9": "9b",
})


def _plant(name: str, category: PlantCategory, sunlight: Sunlight) -> PlantSpec:
    return PlantSpec(name=name, category=category, sunlight=sunlight)


_W, _G = PlantCategory.WILDFLOWER, PlantCategory.GRASS

# Zones missing here fall back to the DEFAULT_ZONE pool
PLANTS_BY_ZONE: Mapping[str, tuple[PlantSpec, ...]] = MappingProxyType({
    "5a": (
        _plant("Wild Bergamot", _W, Sunlight.FULL),
        _plant("Purple Prairie Clover", _W, Sunlight.FULL),
        _plant("Little Bluestem Grass", _G, Sunlight.FULL),
    ),
    "5b": (
        _plant("Black-Eyed Susan", _W, Sunlight.FULL),
        _plant("Purple Coneflower", _W, Sunlight.PARTIAL),
        _plant("Prairie Dropseed", _G, Sunlight.FULL),
    ),
    "6a": (
        _plant("Wild Columbine", _W, Sunlight.SHADE),
        _plant("Butterfly Milkweed", _W, Sunlight.FULL),
        _plant("Switchgrass", _G, Sunlight.FULL),
    ),
    "6b": (
        _plant("Purple Coneflower", _W, Sunlight.FULL),
        _plant("Black-Eyed Susan", _W, Sunlight.FULL),
        _plant("Little Bluestem Grass", _G, Sunlight.FULL),
        _plant("Wild Bergamot", _W, Sunlight.PARTIAL),
        _plant("Blazing Star", _W, Sunlight.FULL),
    ),
    "7a": (
        _plant("Blanket Flower", _W, Sunlight.FULL),
        _plant("Purple Coneflower", _W, Sunlight.FULL),
        _plant("Mexican Feather Grass", _G, Sunlight.FULL),
    ),
})

ZONE_CODES = frozenset(ZONE_BY_DIGIT.values()) | {DEFAULT_ZONE}


class FormOptions:
    """Option lists and step layout of the signup form."""

    YARD_SIZES = (
        {"value": "tiny", "label": "Tiny (< 1,000 sq ft)", "sqft": 500},
        {"value": "small", "label": "Small (1,000 - 5,000 sq ft)", "sqft": 3000},
        {"value": "medium", "label": "Medium (5,000 - 10,000 sq ft)", "sqft": 7500},
        {"value": "large", "label": "Large (10,000 - 20,000 sq ft)", "sqft": 15000},
        {"value": "xlarge", "label": "Extra Large (20,000+ sq ft)", "sqft": 30000},
    )

    TIME_COMMITMENTS = (
        {"value": "none", "label": "None - Set it and forget it"},
        {"value": "minimal", "label": "Minimal - Few hours per season"},
        {"value": "moderate", "label": "Moderate - Few hours per month"},
        {"value": "active", "label": "Active - I enjoy gardening"},
    )

    DESIRES = (
        {"value": "low_maintenance", "label": "Save time on maintenance"},
        {"value": "water_saving", "label": "Reduce water usage"},
        {"value": "pollinators", "label": "Support pollinators"},
        {"value": "wildlife", "label": "Create wildlife habitat"},
        {"value": "edible", "label": "Grow food"},
        {"value": "curb_appeal", "label": "Improve curb appeal"},
        {"value": "save_money", "label": "Save money"},
        {"value": "climate", "label": "Fight climate change"},
        {"value": "educational", "label": "Educational for kids"},
        {"value": "beauty", "label": "Natural beauty"},
    )

    STYLES = (
        {"value": "wild", "label": "Wild & Natural"},
        {"value": "cottage", "label": "Cottage Garden"},
        {"value": "modern", "label": "Modern & Structured"},
        {"value": "meadow", "label": "Prairie Meadow"},
        {"value": "woodland", "label": "Woodland Shade"},
        {"value": "desert", "label": "Xeriscape"},
        {"value": "mixed", "label": "Mix of Everything"},
    )

    BUDGETS = (
        {"value": "low", "label": "Under $200"},
        {"value": "medium", "label": "$200 - $500"},
        {"value": "high", "label": "$500 - $1,000"},
        {"value": "premium", "label": "$1,000+"},
        {"value": "unsure", "label": "Not sure yet"},
    )

    STEPS = (
        {
            "id": 1,
            "title": "Let's start with your email",
            "subtitle": "We'll send your personalized native yard guide here.",
            "fields": ["email"],
        },
        {
            "id": 2,
            "title": "Tell us about your location",
            "subtitle": "This helps us select native plants perfect for your climate.",
            "fields": ["zip_code", "yard_size"],
        },
        {
            "id": 3,
            "title": "What are your goals?",
            "subtitle": "Check all that apply - this helps us customize your kit.",
            "fields": ["desires", "time_commitment"],
        },
        {
            "id": 4,
            "title": "Choose your style",
            "subtitle": "Almost done! Let's talk aesthetics and budget.",
            "fields": ["vibe", "budget"],
        },
        {
            "id": 5,
            "title": "Your Custom Native Yard Kit",
            "subtitle": "Based on your preferences, here's what we recommend:",
            "fields": [],
        },
    )

    @classmethod
    def square_feet_by_yard_size(cls) -> dict[str, int]:
        """
        Map each yard size value to its square footage.

        Returns:
            Dictionary of yard size value to square feet
        """
        return {size["value"]: size["sqft"] for size in cls.YARD_SIZES}

    @classmethod
    def as_dict(cls) -> dict:
        """
        Get every option list keyed by form field group.

        Returns:
            Dictionary suitable for a JSON response
        """
        return {
            "yard_sizes": list(cls.YARD_SIZES),
            "time_commitments": list(cls.TIME_COMMITMENTS),
            "desires": list(cls.DESIRES),
            "styles": list(cls.STYLES),
            "budgets": list(cls.BUDGETS),
            "steps": list(cls.STEPS),
        }


SQUARE_FEET_BY_YARD_SIZE: Mapping[str, int] = MappingProxyType(
    FormOptions.square_feet_by_yard_size()
)
