# =============================================================================
# app/routers/public.py - Public Portfolio Content
# =============================================================================
# Read-only endpoints the portfolio frontend renders from. Every response is
# wrapped as {"data": ...} so the client can tell "empty" from "error".
# =============================================================================

import logging
from typing import Any

from fastapi import APIRouter, Query

from core.models import ExperienceType, SkillCategory, hero_to_api, public_settings
from core.services import (
    experiences_service,
    hero_service,
    personal_info_service,
    site_settings_service,
    skills_service,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/personal-info")
async def get_personal_info() -> dict[str, Any]:
    """Personal info row, or null before the admin has saved it."""
    return {"data": personal_info_service.get()}


@router.get("/skills")
async def list_skills(
    category: SkillCategory | None = Query(None, description="Only skills in this category"),
) -> dict[str, Any]:
    """Skills in display order."""
    filters = {"category": category.value if category else None}
    return {"data": skills_service.list(filters=filters)}


@router.get("/experiences")
async def list_experiences(
    type: ExperienceType | None = Query(None, description="experience or education"),
) -> dict[str, Any]:
    """Timeline entries in display order, newest first within equal sort_order."""
    filters = {"type": type.value if type else None}
    return {"data": experiences_service.list(filters=filters)}


@router.get("/hero")
async def get_hero() -> dict[str, Any]:
    """Hero section in frontend field names, with defaults filled in."""
    return {"data": hero_to_api(hero_service.get())}


@router.get("/settings")
async def get_public_settings() -> dict[str, Any]:
    """Public display settings with defaults for anything not yet saved."""
    return {"data": public_settings(site_settings_service.get())}
