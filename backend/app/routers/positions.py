"""
Employee positions settings router.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.database.store import DocumentStore
from app.dependencies.permissions import SettingsSession, require_permission
from app.dependencies.store import get_store
from app.loaders.pages import positions_page
from app.models.position import EmployeePosition
from app.models.role import PermissionKey
from app.models.user import User
from app.routers.common import bad_request, not_found, render_page
from app.schemas.settings import PageResponse, PositionCreate
from app.services.position_service import PositionService

router = APIRouter(prefix="/settings/positions", tags=["Positions"])

CanManagePositions = Annotated[User, Depends(require_permission(PermissionKey.SETTINGS_POSITIONS))]


async def get_position_service(
    store: Annotated[DocumentStore, Depends(get_store)],
) -> PositionService:
    """Dependency to get PositionService instance."""
    return PositionService(store)


@router.get("", response_model=PageResponse, summary="Positions page")
async def get_positions_page(
    session: SettingsSession,
    store: Annotated[DocumentStore, Depends(get_store)],
):
    """
    Load all employee positions.

    Requires valid token as query parameter: `?token=xxx`
    and at least one settings permission (403 otherwise).
    """
    return await render_page(positions_page(session, store))


@router.post(
    "",
    response_model=EmployeePosition,
    status_code=status.HTTP_201_CREATED,
    summary="Create position",
)
async def create_position(
    body: PositionCreate,
    current_user: CanManagePositions,
    position_service: PositionService = Depends(get_position_service),
):
    """
    Create an employee position.

    - **name**: Position name
    - **code**: Unique code, stored upper-case
    """
    try:
        return await position_service.create(body.name, body.code)
    except ValueError as e:
        raise bad_request(e)


@router.delete(
    "/{position_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete position",
)
async def delete_position(
    position_id: str,
    current_user: CanManagePositions,
    position_service: PositionService = Depends(get_position_service),
):
    if not await position_service.delete(position_id):
        raise not_found("Position")
