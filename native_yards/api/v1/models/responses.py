"""
API response models using Pydantic.
"""
from typing import List
from pydantic import BaseModel, Field

from native_yards.domain.models import DisplayRow, ImpactStats, MessagingVariant, Package


class PackagePreviewResponse(BaseModel):
    """Response model for the package preview endpoint."""
    package: Package = Field(
        description="Recommended native yard kit"
    )
    items: List[DisplayRow] = Field(
        description="Package flattened into display rows: plants, seeds, then extras"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "package": {
                    "zone": "7a",
                    "square_feet": 3000,
                    "plants": [
                        {"name": "Blanket Flower", "category": "wildflower",
                         "sunlight": "full", "quantity": 30},
                    ],
                    "seeds": {"mix_name": "Native Grass & Flower Mix",
                              "amount_lbs": 15.0, "coverage_sqft": 3000},
                    "extras": ["Native Yards Setup Guide", "Plant Care Calendar"],
                    "pricing": {"retail": 1110.0, "discount": 278, "final": 833},
                    "summary": {"total_plants": 90, "total_coverage_sqft": 3000,
                                "co2_offset_tons_per_year": 0.9},
                },
                "items": [
                    {"icon": "\U0001F331", "label": "30 Blanket Flower",
                     "detail": "wildflower, full sun"},
                ],
            }
        }


class SignupResponse(PackagePreviewResponse):
    """Response model for the waitlist signup endpoint."""
    stats: ImpactStats = Field(
        description="Impact statistics including this signup"
    )


class SessionResponse(BaseModel):
    """Response model for a new analytics session."""
    session_id: str = Field(
        description="Identifier to send with every analytics event"
    )
    variant: MessagingVariant = Field(
        description="Messaging copy assigned to the session"
    )


class EventAcceptedResponse(BaseModel):
    status: str = "recorded"
