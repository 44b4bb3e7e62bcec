# =============================================================================
# app/routers/admin/projects.py - Project Management
# =============================================================================

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Path, status

from core.models import ProjectCreate, ProjectUpdate
from core.services import projects_service

router = APIRouter()


@router.get("")
async def list_projects() -> list[dict[str, Any]]:
    """All projects, newest first."""
    return projects_service.list()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_project(body: ProjectCreate) -> dict[str, Any]:
    """
    Create a project.

    `technologies` may be a list or a comma-separated string.
    """
    return projects_service.create(body)


@router.get("/{project_id}")
async def get_project(project_id: UUID = Path(...)) -> dict[str, Any]:
    return projects_service.get(project_id)


@router.put("/{project_id}")
async def update_project(body: ProjectUpdate, project_id: UUID = Path(...)) -> dict[str, Any]:
    """Partially update a project. Only fields sent in the body change."""
    return projects_service.update(project_id, body)


@router.delete("/{project_id}")
async def delete_project(project_id: UUID = Path(...)) -> dict[str, str]:
    projects_service.delete(project_id)
    return {"message": "Project deleted successfully"}
