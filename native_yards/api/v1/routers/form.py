"""
API router for signup form configuration.
"""
from fastapi import APIRouter

from native_yards.domain.reference_data import FormOptions


router = APIRouter(
    prefix="/form",
    tags=["form"],
)


@router.get(
    "/options",
    summary="Get signup form options",
    description="Yard sizes, goals, styles, budgets and the step layout of the signup form.",
)
async def get_form_options() -> dict:
    return FormOptions.as_dict()
