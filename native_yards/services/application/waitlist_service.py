"""
Application service: Orchestration layer for waitlist operations.
"""
import logging
from dataclasses import dataclass

from native_yards.config import settings
from native_yards.domain.models import (
    AnalyticsEvent,
    EventType,
    FormAnswers,
    ImpactStats,
    Package,
    WaitlistSignup,
)
from native_yards.infrastructure.supabase_client import BackendError, SupabaseClient
from native_yards.services.domain.impact_calculator import ImpactCalculator
from native_yards.services.domain.messaging_experiment import assign_variant
from native_yards.services.domain.package_recommender import PackageRecommender

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignupResult:
    """Outcome of a waitlist signup."""
    package: Package
    stats: ImpactStats


class WaitlistService:
    """
    Application service for waitlist-related operations.

    Coordinates the hosted backend with the recommendation and impact
    domain services; the business rules live in the domain layer.
    """

    def __init__(
        self,
        backend: SupabaseClient,
        recommender: PackageRecommender,
        impact_calculator: ImpactCalculator,
    ):
        """
        Initialize the service with dependencies.

        Args:
            backend: Hosted table client
            recommender: Package recommender
            impact_calculator: Impact statistics calculator
        """
        self.backend = backend
        self.recommender = recommender
        self.impact_calculator = impact_calculator

    def preview_package(self, answers: FormAnswers) -> Package:
        """
        Build the package preview shown before the form is submitted.

        Args:
            answers: Form answers so far

        Returns:
            Recommended Package
        """
        return self.recommender.build_package(answers)

    async def signup(self, signup: WaitlistSignup) -> SignupResult:
        """
        Store a signup and return the visitor's package and refreshed stats.

        This method orchestrates:
        1. Storing the raw form answers
        2. Recording a conversion for the visitor's session
        3. Building the recommended package
        4. Recounting the waitlist

        Args:
            signup: Completed signup form

        Returns:
            SignupResult

        Raises:
            BackendError: If the signup cannot be stored or counted
        """
        await self.backend.insert(settings.waitlist_table, signup.to_row())
        logger.info(f"Stored waitlist signup for ZIP prefix {signup.zip_code[:1]}")

        if signup.session_id:
            await self._record_conversion(signup)

        package = self.recommender.build_package(signup)
        stats = await self.get_impact_stats()
        return SignupResult(package=package, stats=stats)

    async def get_impact_stats(self) -> ImpactStats:
        """
        Get impact statistics for the whole waitlist.

        Returns:
            ImpactStats

        Raises:
            BackendError: If the waitlist cannot be counted
        """
        count = await self.backend.count(settings.waitlist_table)
        return self.impact_calculator.calculate(count)

    async def _record_conversion(self, signup: WaitlistSignup) -> None:
        event = AnalyticsEvent(
            session_id=signup.session_id,
            event_type=EventType.CONVERSION,
            messaging_variant=signup.messaging_variant or assign_variant(signup.session_id),
            customer_segments=signup.customer_segments or None,
        )
        try:
            await self.backend.insert(settings.analytics_table, event.to_row())
        except BackendError as e:
            # The signup is already stored; a lost analytics row must not fail it
            logger.warning(f"Failed to record conversion for session {signup.session_id}: {e.message}")
