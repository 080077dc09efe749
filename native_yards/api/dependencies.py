"""
Dependency injection for FastAPI.
"""
from typing import Annotated
from fastapi import Depends

from native_yards.infrastructure.supabase_client import (
    SupabaseClient,
    get_backend_client,
)
from native_yards.services.application.analytics_service import AnalyticsService
from native_yards.services.application.waitlist_service import WaitlistService
from native_yards.services.domain.impact_calculator import ImpactCalculator
from native_yards.services.domain.package_recommender import PackageRecommender


def get_package_recommender() -> PackageRecommender:
    """
    Dependency factory for PackageRecommender.

    Returns:
        PackageRecommender instance
    """
    return PackageRecommender()


def get_impact_calculator() -> ImpactCalculator:
    return ImpactCalculator()


def get_waitlist_service(
    backend: Annotated[SupabaseClient, Depends(get_backend_client)],
    recommender: Annotated[PackageRecommender, Depends(get_package_recommender)],
    impact_calculator: Annotated[ImpactCalculator, Depends(get_impact_calculator)],
) -> WaitlistService:
    """
    Dependency factory for WaitlistService.

    Args:
        backend: Hosted table client (injected)
        recommender: Package recommender (injected)
        impact_calculator: Impact calculator (injected)

    Returns:
        WaitlistService instance
    """
    return WaitlistService(
        backend=backend,
        recommender=recommender,
        impact_calculator=impact_calculator,
    )


def get_analytics_service(
    backend: Annotated[SupabaseClient, Depends(get_backend_client)],
) -> AnalyticsService:
    """
    Dependency factory for AnalyticsService.

    Args:
        backend: Hosted table client (injected)

    Returns:
        AnalyticsService instance
    """
    return AnalyticsService(backend=backend)


# Type aliases for cleaner route signatures
PackageRecommenderDep = Annotated[PackageRecommender, Depends(get_package_recommender)]
WaitlistServiceDep = Annotated[WaitlistService, Depends(get_waitlist_service)]
AnalyticsServiceDep = Annotated[AnalyticsService, Depends(get_analytics_service)]
