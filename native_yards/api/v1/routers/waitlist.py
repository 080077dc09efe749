"""
API router for waitlist endpoints.
"""
import logging
from fastapi import APIRouter, HTTPException, status

from native_yards.api.dependencies import WaitlistServiceDep
from native_yards.api.v1.models.responses import SignupResponse
from native_yards.domain.models import ImpactStats, WaitlistSignup
from native_yards.infrastructure.supabase_client import BackendError

logger = logging.getLogger(__name__)


router = APIRouter(
    tags=["waitlist"],
)


@router.post(
    "/waitlist",
    response_model=SignupResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Join the waitlist",
    description="""
    Store a completed signup form and return the visitor's recommended kit
    together with refreshed impact statistics.

    When a session_id is supplied, a conversion is recorded for the
    visitor's messaging variant and customer segments.
    """,
    responses={
        422: {
            "description": "Missing email or ZIP code, or an invalid email address",
        },
        502: {
            "description": "The hosted backend rejected or failed the request",
        },
    }
)
async def join_waitlist(
    signup: WaitlistSignup,
    waitlist_service: WaitlistServiceDep,
) -> SignupResponse:
    """
    Join the waitlist.

    Args:
        signup: Completed signup form
        waitlist_service: Waitlist service (injected dependency)

    Returns:
        SignupResponse with package, display rows and stats

    Raises:
        HTTPException: If the signup cannot be stored
    """
    try:
        result = await waitlist_service.signup(signup)
    except BackendError as e:
        logger.error(f"Signup failed: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to store signup: {e.message}",
        )

    return SignupResponse(
        package=result.package,
        items=waitlist_service.recommender.format_for_display(result.package),
        stats=result.stats,
    )


@router.get(
    "/stats",
    response_model=ImpactStats,
    summary="Get impact statistics",
    responses={
        502: {
            "description": "The hosted backend rejected or failed the request",
        },
    }
)
async def get_stats(
    waitlist_service: WaitlistServiceDep,
) -> ImpactStats:
    """
    Get the number of pledged yards and the yearly CO2 they save.

    Args:
        waitlist_service: Waitlist service (injected dependency)

    Returns:
        ImpactStats

    Raises:
        HTTPException: If the waitlist cannot be counted
    """
    try:
        return await waitlist_service.get_impact_stats()
    except BackendError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to fetch stats: {e.message}",
        )
