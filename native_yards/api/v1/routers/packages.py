"""
API router for package recommendation endpoints.
"""
from fastapi import APIRouter

from native_yards.api.dependencies import PackageRecommenderDep
from native_yards.api.v1.models.responses import PackagePreviewResponse
from native_yards.domain.models import FormAnswers


router = APIRouter(
    prefix="/packages",
    tags=["packages"],
)


@router.post(
    "/preview",
    response_model=PackagePreviewResponse,
    summary="Preview a recommended kit",
    description="""
    Build the recommended native yard kit for a set of form answers without
    storing anything.

    The recommendation:
    1. Resolves a hardiness zone from the first ZIP digit
    2. Converts the yard size to square feet
    3. Filters the zone's plant pool by pollinator or low-maintenance goals
    4. Sizes the seed bundle and adds printed extras
    5. Prices the kit with a 25% discount (35% for the lowest budget)
    """,
)
async def preview_package(
    answers: FormAnswers,
    recommender: PackageRecommenderDep,
) -> PackagePreviewResponse:
    """
    Preview a package for form answers.

    Args:
        answers: Form answers
        recommender: Package recommender (injected dependency)

    Returns:
        PackagePreviewResponse with the package and its display rows
    """
    package = recommender.build_package(answers)
    return PackagePreviewResponse(
        package=package,
        items=recommender.format_for_display(package),
    )
