"""
Domain service: Native yard package recommendation.

Maps a visitor's form answers to a recommended kit:
- Hardiness zone from the first ZIP digit
- Square footage from the yard size bucket
- Plant selection filtered by stated desires
- Seed bundle, printed extras and pricing
- Summary figures (plant count, coverage, CO2 offset)

Everything here is pure and deterministic; no I/O and no state is kept
between calls.
"""
import logging
import math
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from native_yards.domain.models import (
    Budget,
    DisplayRow,
    FormAnswers,
    Package,
    PackageSummary,
    PlantAllocation,
    PlantCategory,
    Pricing,
    SeedBundle,
    Sunlight,
)
from native_yards.domain.reference_data import (
    DEFAULT_SQUARE_FEET,
    DEFAULT_ZONE,
    PLANTS_BY_ZONE,
    SQUARE_FEET_BY_YARD_SIZE,
    ZONE_BY_DIGIT,
)
from native_yards.utils.rounding import ceil_to_half, round_half_up, round_to_tenth

logger = logging.getLogger(__name__)


# Desire tags that change the package contents
POLLINATORS = "pollinators"
LOW_MAINTENANCE = "low_maintenance"
MEADOW = "meadow"
WILDLIFE = "wildlife"
EDIBLE = "edible"

MEADOW_MIX = "Wildflower Meadow Mix"
STANDARD_MIX = "Native Grass & Flower Mix"

SETUP_GUIDE = "Native Yards Setup Guide"
CARE_CALENDAR = "Plant Care Calendar"
WILDLIFE_SIGN = "Certified Wildlife Habitat Sign"
EDIBLES_GUIDE = "Native Edibles Guide"

PLANT_ICON = "\U0001F331"
SEED_ICON = "\U0001F330"
EXTRA_ICON = "\U0001F4DA"


@dataclass(frozen=True)
class RecommendationConfig:
    """Configuration for package generation."""

    plants_per_sqft: float = 0.03
    """Plant plugs per square foot (3 per 100 sq ft)"""

    seed_coverage_per_lb: int = 200
    """Square feet covered by one pound of seed"""

    base_discount: float = 0.25
    """Discount off retail for every visitor"""

    low_budget_discount: float = 0.35
    """Discount off retail when the visitor picked the lowest budget"""

    plant_unit_price: int = 8
    seed_unit_price: int = 25
    guide_flat_price: int = 15

    min_plants_per_type: int = 5
    """Floor for the quantity of every selected plant type"""

    min_seed_lbs: float = 0.5

    co2_tons_per_sqft: float = 0.0003
    """Yearly CO2 offset per converted square foot"""


DEFAULT_CONFIG = RecommendationConfig()


def resolve_zone(zip_code: Optional[Union[str, int]]) -> str:
    """
    Resolve a hardiness zone from the first digit of a ZIP code.

    Args:
        zip_code: ZIP code; may be empty, None or non-numeric

    Returns:
        Zone code, DEFAULT_ZONE when the ZIP cannot be resolved
    """
    first_char = str(zip_code)[:1] if zip_code is not None else ""
    return ZONE_BY_DIGIT.get(first_char, DEFAULT_ZONE)


def resolve_square_feet(yard_size: Optional[str]) -> int:
    """
    Convert a yard size bucket to square feet.

    Args:
        yard_size: Yard size value (tiny, small, medium, large, xlarge)

    Returns:
        Square feet for the bucket, DEFAULT_SQUARE_FEET when unknown
    """
    if not isinstance(yard_size, str):
        return DEFAULT_SQUARE_FEET
    return SQUARE_FEET_BY_YARD_SIZE.get(yard_size, DEFAULT_SQUARE_FEET)


def select_plants(
    zone: str,
    desires: Iterable[str],
    square_feet: int,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> tuple[PlantAllocation, ...]:
    """
    Select plants for a zone and spread the plant count evenly across them.

    Only one desire filter is ever applied: pollinator support takes
    precedence over low maintenance when both are requested.

    Args:
        zone: Hardiness zone code
        desires: Desire tags selected by the visitor
        square_feet: Area to plant
        config: Recommendation configuration

    Returns:
        Plant allocations in the zone pool's order; empty if no plant
        survives the filter
    """
    desires = set(desires)
    plant_pool = PLANTS_BY_ZONE.get(zone) or PLANTS_BY_ZONE[DEFAULT_ZONE]

    if POLLINATORS in desires:
        plant_pool = [p for p in plant_pool if p.category == PlantCategory.WILDFLOWER]
    elif LOW_MAINTENANCE in desires:
        plant_pool = [
            p for p in plant_pool
            if p.category == PlantCategory.GRASS or p.sunlight == Sunlight.FULL
        ]

    if not plant_pool:
        logger.debug(f"No plants left for zone {zone} after desire filtering")
        return ()

    total_plants = max(
        config.min_plants_per_type * 3,
        math.ceil(square_feet * config.plants_per_sqft),
    )
    per_type = max(config.min_plants_per_type, math.ceil(total_plants / len(plant_pool)))

    logger.debug(f"Zone {zone}: {len(plant_pool)} plant types x {per_type} "
                 f"(target {total_plants} plants)")

    return tuple(
        PlantAllocation(**plant.model_dump(), quantity=per_type)
        for plant in plant_pool
    )


def _format_amount(value: float) -> str:
    # Whole amounts print without a decimal point, never in exponent form
    return str(int(value)) if float(value).is_integer() else str(value)


def format_for_display(package: Package) -> list[DisplayRow]:
    """
    Flatten a package into display rows: plants, then seeds, then extras.

    Args:
        package: Package to display

    Returns:
        List of DisplayRow, len(plants) + 1 + len(extras) long
    """
    rows = [
        DisplayRow(
            icon=PLANT_ICON,
            label=f"{plant.quantity} {plant.name}",
            detail=f"{plant.category.value}, {plant.sunlight.value} sun",
        )
        for plant in package.plants
    ]

    rows.append(DisplayRow(
        icon=SEED_ICON,
        label=f"{_format_amount(package.seeds.amount_lbs)} lb {package.seeds.mix_name}",
        detail=f"Covers {package.seeds.coverage_sqft} sq ft",
    ))

    rows.extend(DisplayRow(icon=EXTRA_ICON, label=extra) for extra in package.extras)
    return rows


class PackageRecommender:
    """
    Domain service that builds recommended packages from form answers.

    Each sub-structure of the package (plants, seeds, extras, pricing,
    summary) is computed on its own and assembled into one immutable
    Package at the end.
    """

    def __init__(self, config: Optional[RecommendationConfig] = None):
        """
        Initialize the recommender.

        Args:
            config: Recommendation configuration (defaults used if omitted)
        """
        self.config = config or DEFAULT_CONFIG

    def build_package(self, answers: FormAnswers) -> Package:
        """
        Build a recommended package for a visitor.

        Never raises for well-formed answers; unknown ZIPs and yard sizes
        fall back to defaults and an empty plant list is a valid result.

        Args:
            answers: Form answers

        Returns:
            The recommended Package
        """
        desires = set(answers.desires)

        zone = resolve_zone(answers.zip_code)
        square_feet = resolve_square_feet(answers.yard_size)
        plants = select_plants(zone, desires, square_feet, self.config)
        seeds = self._build_seeds(square_feet, desires)
        extras = self._build_extras(desires)
        pricing = self._build_pricing(plants, seeds, answers.budget)
        summary = self._build_summary(plants, square_feet)

        logger.info(f"Built package: zone={zone}, sqft={square_feet}, "
                    f"plant_types={len(plants)}, final_price={pricing.final}")

        return Package(
            zone=zone,
            square_feet=square_feet,
            plants=plants,
            seeds=seeds,
            extras=extras,
            pricing=pricing,
            summary=summary,
        )

    def format_for_display(self, package: Package) -> list[DisplayRow]:
        return format_for_display(package)

    def discount_rate(self, budget: Optional[str]) -> float:
        """
        Get the discount rate for a budget choice.

        Args:
            budget: Budget value, may be None

        Returns:
            Low-budget rate for "low", the base rate otherwise
        """
        if budget == Budget.LOW.value:
            return self.config.low_budget_discount
        return self.config.base_discount

    def _build_seeds(self, square_feet: int, desires: set[str]) -> SeedBundle:
        seed_amount = ceil_to_half(max(
            self.config.min_seed_lbs,
            square_feet / self.config.seed_coverage_per_lb,
        ))
        return SeedBundle(
            mix_name=MEADOW_MIX if MEADOW in desires else STANDARD_MIX,
            amount_lbs=seed_amount,
            coverage_sqft=round_half_up(seed_amount * self.config.seed_coverage_per_lb),
        )

    def _build_extras(self, desires: set[str]) -> tuple[str, ...]:
        extras = [SETUP_GUIDE, CARE_CALENDAR]
        if WILDLIFE in desires:
            extras.append(WILDLIFE_SIGN)
        if EDIBLE in desires:
            extras.append(EDIBLES_GUIDE)
        return tuple(extras)

    def _build_pricing(
        self,
        plants: tuple[PlantAllocation, ...],
        seeds: SeedBundle,
        budget: Optional[str],
    ) -> Pricing:
        """
        Price a package.

        discount and final are rounded independently and are not
        reconciled against retail.

        Args:
            plants: Selected plants
            seeds: Seed bundle
            budget: Visitor's budget choice

        Returns:
            Pricing
        """
        plants_cost = sum(p.quantity * self.config.plant_unit_price for p in plants)
        seeds_cost = seeds.amount_lbs * self.config.seed_unit_price
        retail = plants_cost + seeds_cost + self.config.guide_flat_price

        rate = self.discount_rate(budget)
        return Pricing(
            retail=retail,
            discount=round_half_up(retail * rate),
            final=round_half_up(retail * (1 - rate)),
        )

    def _build_summary(
        self,
        plants: tuple[PlantAllocation, ...],
        square_feet: int,
    ) -> PackageSummary:
        return PackageSummary(
            total_plants=sum(p.quantity for p in plants),
            total_coverage_sqft=square_feet,
            co2_offset_tons_per_year=round_to_tenth(square_feet * self.config.co2_tons_per_sqft),
        )
