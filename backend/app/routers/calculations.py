"""
Saved bill-split calculations router.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.database.store import DocumentStore
from app.dependencies.auth import get_current_active_user
from app.dependencies.store import get_store
from app.models.calculation import SavedCalculation
from app.models.user import User
from app.routers.common import bad_request, not_found
from app.schemas.calculation import CalculationCreate, CalculationInput, CalculationPreview
from app.services.calculation_service import CalculationService, calculate_split

router = APIRouter(prefix="/calculations", tags=["Calculations"])


async def get_calculation_service(
    store: Annotated[DocumentStore, Depends(get_store)],
) -> CalculationService:
    """Dependency to get CalculationService instance."""
    return CalculationService(store)


@router.post(
    "/preview",
    response_model=CalculationPreview,
    summary="Calculate a split without saving",
)
async def preview_calculation(body: CalculationInput):
    """Tip, total and per-person amounts for the given inputs."""
    split = calculate_split(body.bill, body.tip, body.people)
    return CalculationPreview(
        tip_amount=split.tip_amount,
        total_amount=split.total_amount,
        per_person_amount=split.per_person_amount,
    )


@router.get(
    "",
    response_model=list[SavedCalculation],
    summary="List saved calculations",
)
async def list_calculations(
    current_user: Annotated[User, Depends(get_current_active_user)],
    calculation_service: CalculationService = Depends(get_calculation_service),
):
    """
    Saved calculations of the current user, newest first.

    Requires valid token as query parameter: `?token=xxx`
    """
    return await calculation_service.list_for_user(current_user.id)


@router.post(
    "",
    response_model=SavedCalculation,
    status_code=status.HTTP_201_CREATED,
    summary="Save calculation",
)
async def save_calculation(
    body: CalculationCreate,
    current_user: Annotated[User, Depends(get_current_active_user)],
    calculation_service: CalculationService = Depends(get_calculation_service),
):
    """
    Calculate a split and save it.

    - **name**: Label for the saved bill
    - **bill**: Bill amount (> 0)
    - **tip**: Tip percentage (0-100)
    - **people**: Number of people (>= 1)
    """
    try:
        return await calculation_service.save(
            current_user.id, body.name, body.bill, body.tip, body.people
        )
    except ValueError as e:
        raise bad_request(e)


@router.delete(
    "/{calculation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete saved calculation",
)
async def delete_calculation(
    calculation_id: str,
    current_user: Annotated[User, Depends(get_current_active_user)],
    calculation_service: CalculationService = Depends(get_calculation_service),
):
    """
    Delete one of the current user's saved calculations.

    **Warning**: This action cannot be undone.
    """
    if not await calculation_service.delete(current_user.id, calculation_id):
        raise not_found("Calculation")
