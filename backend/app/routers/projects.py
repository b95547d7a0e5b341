"""
Projects settings router.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.database.store import DocumentStore
from app.dependencies.permissions import SettingsSession, require_permission
from app.dependencies.store import get_store
from app.loaders.pages import projects_page
from app.models.project import Project
from app.models.role import PermissionKey
from app.models.user import User
from app.routers.common import bad_request, not_found, render_page
from app.schemas.settings import PageResponse, ProjectCreate, ProjectUpdate
from app.services.project_service import ProjectService

router = APIRouter(prefix="/settings/projects", tags=["Projects"])

CanManageProjects = Annotated[User, Depends(require_permission(PermissionKey.SETTINGS_PROJECTS))]


async def get_project_service(
    store: Annotated[DocumentStore, Depends(get_store)],
) -> ProjectService:
    """Dependency to get ProjectService instance."""
    return ProjectService(store)


@router.get("", response_model=PageResponse, summary="Projects page")
async def get_projects_page(
    session: SettingsSession,
    store: Annotated[DocumentStore, Depends(get_store)],
):
    """
    Load all projects.

    Requires valid token as query parameter: `?token=xxx`
    and at least one settings permission (403 otherwise).
    """
    return await render_page(projects_page(session, store))


@router.post(
    "",
    response_model=Project,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
)
async def create_project(
    body: ProjectCreate,
    current_user: CanManageProjects,
    project_service: ProjectService = Depends(get_project_service),
):
    """
    Create a project.

    - **identifier**: Unique, stored upper-case
    - **name**: Project name
    - **requires_control_approval** / **requires_site_manager_approval**: Approval flags
    """
    try:
        return await project_service.create(body)
    except ValueError as e:
        raise bad_request(e)


@router.patch(
    "/{project_id}",
    response_model=Project,
    summary="Update project",
)
async def update_project(
    project_id: str,
    body: ProjectUpdate,
    current_user: CanManageProjects,
    project_service: ProjectService = Depends(get_project_service),
):
    """Update project details. Omitted fields are left untouched."""
    try:
        project = await project_service.update(project_id, body)
    except ValueError as e:
        raise bad_request(e)

    if not project:
        raise not_found("Project")

    return project


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project",
)
async def delete_project(
    project_id: str,
    current_user: CanManageProjects,
    project_service: ProjectService = Depends(get_project_service),
):
    if not await project_service.delete(project_id):
        raise not_found("Project")
