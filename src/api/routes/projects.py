"""Project API routes."""

from fastapi import APIRouter, status

from src.schemas.project import (
    DeleteProjectResponse,
    ProjectCreate,
    ProjectResponse,
    ProjectUpdate,
)
from src.services.project_service import ProjectService

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=list[ProjectResponse],
    summary="List projects",
    description="Returns all projects, newest first.",
)
async def get_projects() -> list[ProjectResponse]:
    """List projects ordered by creation time, newest first.

    Returns:
        list[ProjectResponse]: All projects.
    """
    service = ProjectService()
    projects = await service.list_projects()
    return [ProjectResponse(**project) for project in projects]


@router.post(
    "",
    response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a project",
    description="Creates a project. Titles need not be unique.",
)
async def create_project(data: ProjectCreate) -> ProjectResponse:
    """Create a new project.

    Args:
        data: Project creation data.

    Returns:
        ProjectResponse: The created project.
    """
    service = ProjectService()
    project = await service.create_project(data)
    return ProjectResponse(**project)


@router.patch(
    "/{project_id}",
    response_model=ProjectResponse,
    summary="Update a project",
    description="Partially updates a project. Omitted fields are unchanged, null clears link fields.",
    responses={404: {"description": "Project not found"}},
)
async def update_project(project_id: int, data: ProjectUpdate) -> ProjectResponse:
    """Partially update an existing project.

    Args:
        project_id: The project's id.
        data: Fields to update.

    Returns:
        ProjectResponse: The updated project.

    Raises:
        NotFoundError: 404 if the project does not exist.
    """
    service = ProjectService()
    project = await service.update_project(project_id, data)
    return ProjectResponse(**project)


@router.delete(
    "/{project_id}",
    response_model=DeleteProjectResponse,
    summary="Delete a project",
    description="Deletes a project. Reports success=false instead of 404 when it does not exist.",
)
async def delete_project(project_id: int) -> DeleteProjectResponse:
    """Delete a project by id.

    Args:
        project_id: The project's id.

    Returns:
        DeleteProjectResponse: success is False when nothing was deleted.
    """
    service = ProjectService()
    result = await service.delete_project(project_id)
    return DeleteProjectResponse(**result)
