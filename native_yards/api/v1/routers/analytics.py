"""
API router for analytics and messaging experiment endpoints.
"""
from fastapi import APIRouter, Path, status
from typing import Annotated

from native_yards.api.dependencies import AnalyticsServiceDep
from native_yards.api.v1.models.responses import EventAcceptedResponse, SessionResponse
from native_yards.domain.models import AnalyticsEvent, DashboardData, MessagingVariant
from native_yards.services.domain.messaging_experiment import get_variant, new_session_id


router = APIRouter(
    prefix="/analytics",
    tags=["analytics"],
)


@router.post(
    "/sessions",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Start an analytics session",
)
async def create_session() -> SessionResponse:
    """
    Create a session id and assign its messaging variant.

    Returns:
        SessionResponse
    """
    session_id = new_session_id()
    return SessionResponse(session_id=session_id, variant=get_variant(session_id))


@router.get(
    "/variants/{session_id}",
    response_model=MessagingVariant,
    summary="Get the messaging variant for a session",
)
async def read_variant(
    session_id: Annotated[str, Path(description="Visitor session identifier")],
) -> MessagingVariant:
    return get_variant(session_id)


@router.post(
    "/events",
    response_model=EventAcceptedResponse,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Record an analytics event",
)
async def record_event(
    event: AnalyticsEvent,
    analytics_service: AnalyticsServiceDep,
) -> EventAcceptedResponse:
    """
    Record an analytics event.

    Args:
        event: Event to record
        analytics_service: Analytics service (injected dependency)

    Returns:
        EventAcceptedResponse
    """
    await analytics_service.record_event(event)
    return EventAcceptedResponse()


@router.get(
    "/dashboard",
    response_model=DashboardData,
    summary="Get the marketing analytics dashboard",
    description="""
    Aggregate analytics events into:
    - Conversion rate per messaging variant
    - Top five converting customer segments
    - Hover and click counts per benefit, most engaging first
    """,
)
async def get_dashboard(
    analytics_service: AnalyticsServiceDep,
) -> DashboardData:
    return await analytics_service.get_dashboard()
