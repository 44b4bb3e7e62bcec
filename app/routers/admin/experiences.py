# =============================================================================
# app/routers/admin/experiences.py - Experience & Education Management
# =============================================================================
# The admin editor works with `description` as one textarea string, so the
# list endpoint joins the stored bullet lines with newlines. Create/update
# accept either a string or a list.
# =============================================================================

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Path, status

from core.models import ExperienceCreate, ExperienceUpdate
from core.services import experiences_service
from lib.utils import join_lines

router = APIRouter()


@router.get("")
async def list_experiences() -> list[dict[str, Any]]:
    """All timeline entries, description joined for editing."""
    return [
        {**row, "description": join_lines(row.get("description"))}
        for row in experiences_service.list()
    ]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_experience(body: ExperienceCreate) -> dict[str, Any]:
    return experiences_service.create(body)


@router.put("/{experience_id}")
async def update_experience(
    body: ExperienceUpdate,
    experience_id: UUID = Path(...),
) -> dict[str, Any]:
    return experiences_service.update(experience_id, body)


@router.delete("/{experience_id}")
async def delete_experience(experience_id: UUID = Path(...)) -> dict[str, str]:
    experiences_service.delete(experience_id)
    return {"message": "Experience deleted successfully"}
