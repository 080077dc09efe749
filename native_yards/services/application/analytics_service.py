"""
Application service: Orchestration layer for analytics operations.
"""
import logging

from native_yards.config import settings
from native_yards.domain.models import AnalyticsEvent, DashboardData, EventType
from native_yards.infrastructure.api_constants import SupabaseEndpoints
from native_yards.infrastructure.supabase_client import SupabaseClient
from native_yards.services.domain.analytics_aggregator import build_dashboard

logger = logging.getLogger(__name__)


class AnalyticsService:
    """
    Application service for analytics events and the marketing dashboard.

    Only fetches and stores rows; aggregation is done by the
    analytics_aggregator domain module.
    """

    def __init__(self, backend: SupabaseClient):
        """
        Initialize the service with dependencies.

        Args:
            backend: Hosted table client
        """
        self.backend = backend

    async def record_event(self, event: AnalyticsEvent) -> None:
        """
        Store an analytics event.

        Args:
            event: Event to store

        Raises:
            BackendError: If the event cannot be stored
        """
        await self.backend.insert(settings.analytics_table, event.to_row())
        logger.debug(f"Recorded {event.event_type.value} for session {event.session_id}")

    async def get_dashboard(self) -> DashboardData:
        """
        Fetch analytics rows and aggregate them for the dashboard.

        Returns:
            DashboardData

        Raises:
            BackendError: If any query fails
        """
        table = settings.analytics_table

        messaging = await self.backend.select(
            table,
            columns=["messaging_variant", "event_type"],
            filters={"event_type": SupabaseEndpoints.in_(
                [EventType.PAGE_VIEW.value, EventType.CONVERSION.value]
            )},
        )
        segments = await self.backend.select(
            table,
            columns=["customer_segments", "event_type"],
            filters={"event_type": SupabaseEndpoints.eq(EventType.CONVERSION.value)},
        )
        benefits = await self.backend.select(
            table,
            columns=["benefit_type", "action"],
            filters={"event_type": SupabaseEndpoints.eq(EventType.BENEFIT_INTERACTION.value)},
        )

        logger.info(f"Dashboard rows: messaging={len(messaging)}, "
                    f"segments={len(segments)}, benefits={len(benefits)}")
        return build_dashboard(messaging, segments, benefits)
