"""
Domain models for yard answers, recommended packages and analytics.

These models represent the core domain entities and should be independent
of any infrastructure concerns (API clients, databases, etc.).
"""
import re
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator


EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")


class YardSize(str, Enum):
    """Yard size buckets offered by the signup form."""
    TINY = "tiny"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    XLARGE = "xlarge"


class Budget(str, Enum):
    """Budget choices offered by the signup form."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    PREMIUM = "premium"
    UNSURE = "unsure"


class PlantCategory(str, Enum):
    WILDFLOWER = "wildflower"
    GRASS = "grass"


class Sunlight(str, Enum):
    FULL = "full"
    PARTIAL = "partial"
    SHADE = "shade"


class EventType(str, Enum):
    """Analytics event types recorded by the landing page."""
    PAGE_VIEW = "page_view"
    CONVERSION = "conversion"
    STEP_STARTED = "step_started"
    STEP_COMPLETED = "step_completed"
    SECTION_NAVIGATION = "section_navigation"
    MESSAGING_INTERACTION = "messaging_interaction"
    BENEFIT_INTERACTION = "benefit_interaction"


class FormAnswers(BaseModel):
    """
    Answers collected by the signup form.

    Only zip_code, yard_size, desires and budget drive the recommendation;
    the remaining fields are stored with the signup as-is. yard_size and
    budget stay plain strings so unknown values degrade to defaults
    instead of failing validation.
    """
    zip_code: str = ""
    yard_size: Optional[str] = None
    desires: List[str] = Field(default_factory=list)
    budget: Optional[str] = None
    time_commitment: Optional[str] = None
    vibe: Optional[str] = None

    @field_validator("zip_code", "yard_size", mode="before")
    @classmethod
    def coerce_number_to_text(cls, value: Any) -> Any:
        """Accept ZIP codes and yard sizes sent as JSON numbers."""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class WaitlistSignup(FormAnswers):
    """
    A completed signup form.

    email and zip_code are required here; session fields tie the signup to
    the visitor's analytics session and are not stored with the signup.
    """
    email: str
    zip_code: str = Field(min_length=1)
    session_id: Optional[str] = None
    messaging_variant: Optional[str] = None
    customer_segments: List[str] = Field(default_factory=list)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        if not EMAIL_PATTERN.search(value):
            raise ValueError("Please enter a valid email address")
        return value

    def to_row(self) -> Dict[str, Any]:
        """Columns stored in the waitlist table."""
        return self.model_dump(
            include={
                "email", "zip_code", "yard_size", "time_commitment",
                "desires", "vibe", "budget",
            }
        )


class PlantSpec(BaseModel):
    """A native plant candidate for a hardiness zone."""
    name: str
    category: PlantCategory
    sunlight: Sunlight

    class Config:
        frozen = True


class PlantAllocation(PlantSpec):
    """A plant included in a package with its per-type quantity."""
    quantity: int = Field(description="Number of plugs of this plant type")


class SeedBundle(BaseModel):
    """Seed mix included in a package."""
    mix_name: str
    amount_lbs: float = Field(description="Seed weight, rounded up to the nearest half pound")
    coverage_sqft: int

    class Config:
        frozen = True


class Pricing(BaseModel):
    """
    Package pricing.

    discount and final are rounded independently, so discount + final can
    differ from retail by one unit.
    """
    retail: float
    discount: int
    final: int

    class Config:
        frozen = True


class PackageSummary(BaseModel):
    """Headline numbers shown alongside a package."""
    total_plants: int
    total_coverage_sqft: int
    co2_offset_tons_per_year: float

    class Config:
        frozen = True


class Package(BaseModel):
    """A recommended native yard kit."""
    zone: str = Field(description="Resolved hardiness zone code")
    square_feet: int
    plants: tuple[PlantAllocation, ...]
    seeds: SeedBundle
    extras: tuple[str, ...]
    pricing: Pricing
    summary: PackageSummary

    class Config:
        frozen = True


class DisplayRow(BaseModel):
    """A single line item of a package as shown to the visitor."""
    icon: str
    label: str
    detail: Optional[str] = None

    class Config:
        frozen = True


class ImpactStats(BaseModel):
    """Aggregate impact of everyone on the waitlist."""
    total_yards: int
    co2_saved_tons: int


class MessagingVariant(BaseModel):
    """Copy shown for one arm of the messaging experiment."""
    key: str
    hero: str
    subhero: str
    cta: str
    benefits_heading: str

    class Config:
        frozen = True


class AnalyticsEvent(BaseModel):
    """An analytics event row."""
    session_id: str
    event_type: EventType
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    step: Optional[int] = None
    duration_ms: Optional[int] = None
    messaging_variant: Optional[str] = None
    customer_segments: Optional[List[str]] = None
    benefit_type: Optional[str] = None
    action: Optional[str] = None
    to_section: Optional[str] = None
    element: Optional[str] = None
    message: Optional[str] = None

    def to_row(self) -> Dict[str, Any]:
        """Serialize to a table row, leaving out unset columns."""
        return self.model_dump(mode="json", exclude_none=True)


class VariantPerformance(BaseModel):
    """Views and conversions for one messaging variant."""
    views: int = 0
    conversions: int = 0
    conversion_rate: Optional[float] = Field(
        default=None,
        description="Conversions per 100 views, None until the variant has views"
    )


class SegmentConversions(BaseModel):
    segment: str
    conversions: int


class BenefitEngagement(BaseModel):
    benefit: str
    hover: int = 0
    click: int = 0


class DashboardData(BaseModel):
    """Aggregated marketing analytics."""
    messaging_performance: Dict[str, VariantPerformance]
    top_segments: List[SegmentConversions]
    benefit_engagement: List[BenefitEngagement]
