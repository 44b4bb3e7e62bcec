# =============================================================================
# app/routers/projects.py - Public Project Endpoints
# =============================================================================
# Project listing and detail for the portfolio frontend. Writes live under
# /api/admin/projects.
# =============================================================================

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Path, Query

from core.models import ProjectStatus
from core.services import PUBLIC_PROJECT_ORDER, projects_service

router = APIRouter()


@router.get("")
async def list_projects(
    featured: bool | None = Query(None, description="Only featured (true) or non-featured (false)"),
    category: str | None = Query(None, description="Exact category match"),
    status: ProjectStatus | None = Query(None, description="Project status"),
) -> dict[str, Any]:
    """
    List projects.

    Ordered by sort_order ascending, then newest first.
    """
    filters = {
        "featured": featured,
        "category": category,
        "status": status.value if status else None,
    }
    projects = projects_service.list(filters=filters, order=PUBLIC_PROJECT_ORDER)
    return {"data": projects}


@router.get("/{project_id}")
async def get_project(
    project_id: UUID = Path(..., description="Project UUID"),
) -> dict[str, Any]:
    """
    Get one project.

    Raises:
        404: Project not found
    """
    return {"data": projects_service.get(project_id)}
