"""
Phases settings router.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.database.store import DocumentStore
from app.dependencies.permissions import SettingsSession, require_permission
from app.dependencies.store import get_store
from app.loaders.pages import phases_page
from app.models.phase import Phase
from app.models.role import PermissionKey
from app.models.user import User
from app.routers.common import bad_request, not_found, render_page
from app.schemas.settings import PageResponse, PhaseCreate
from app.services.phase_service import PhaseService

router = APIRouter(prefix="/settings/phases", tags=["Phases"])

CanManagePhases = Annotated[User, Depends(require_permission(PermissionKey.SETTINGS_PHASES))]


async def get_phase_service(
    store: Annotated[DocumentStore, Depends(get_store)],
) -> PhaseService:
    """Dependency to get PhaseService instance."""
    return PhaseService(store)


@router.get(
    "",
    response_model=PageResponse,
    summary="Phases page",
)
async def get_phases_page(
    session: SettingsSession,
    store: Annotated[DocumentStore, Depends(get_store)],
):
    """
    Load all phases, plus the projects they can be attached to.

    Requires valid token as query parameter: `?token=xxx`
    and at least one settings permission (403 otherwise).
    """
    return await render_page(phases_page(session, store))


@router.get(
    "/by-project/{project_id}",
    response_model=list[Phase],
    summary="List phases of a project",
)
async def list_project_phases(
    project_id: str,
    current_user: CanManagePhases,
    phase_service: PhaseService = Depends(get_phase_service),
):
    """Phases of one project sorted by name."""
    return await phase_service.list_for_project(project_id)


@router.post(
    "",
    response_model=Phase,
    status_code=status.HTTP_201_CREATED,
    summary="Create phase",
)
async def create_phase(
    body: PhaseCreate,
    current_user: CanManagePhases,
    phase_service: PhaseService = Depends(get_phase_service),
):
    """
    Create a phase in a project.

    - **project_id**: Owning project (must exist)
    - **name**: Unique within the project
    - **pep_element**: Stored upper-case
    """
    try:
        return await phase_service.create(body.project_id, body.name, body.pep_element)
    except ValueError as e:
        raise bad_request(e)


@router.delete(
    "/{phase_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete phase",
)
async def delete_phase(
    phase_id: str,
    current_user: CanManagePhases,
    phase_service: PhaseService = Depends(get_phase_service),
):
    """Delete a phase."""
    if not await phase_service.delete(phase_id):
        raise not_found("Phase")
