# =============================================================================
# app/routers/admin/skills.py - Skill Management
# =============================================================================

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Path, status

from core.models import SkillCreate, SkillUpdate
from core.services import skills_service

router = APIRouter()


@router.get("")
async def list_skills() -> list[dict[str, Any]]:
    """All skills in display order."""
    return skills_service.list()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_skill(body: SkillCreate) -> dict[str, Any]:
    return skills_service.create(body)


@router.put("/{skill_id}")
async def update_skill(body: SkillUpdate, skill_id: UUID = Path(...)) -> dict[str, Any]:
    return skills_service.update(skill_id, body)


@router.delete("/{skill_id}")
async def delete_skill(skill_id: UUID = Path(...)) -> dict[str, str]:
    skills_service.delete(skill_id)
    return {"message": "Skill deleted successfully"}
