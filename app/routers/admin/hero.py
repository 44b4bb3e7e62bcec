# =============================================================================
# app/routers/admin/hero.py - Hero Section
# =============================================================================
# Request and response use the frontend field names (typing_texts, quote);
# core.models.hero maps them to the stored columns.
# =============================================================================

from typing import Any

from fastapi import APIRouter

from core.models import HeroUpdate, hero_to_api
from core.services import hero_service

router = APIRouter()


@router.get("")
async def get_hero() -> dict[str, Any]:
    """Hero section with defaults and row metadata."""
    return hero_to_api(hero_service.get(), include_meta=True)


@router.put("")
async def update_hero(body: HeroUpdate) -> dict[str, Any]:
    """
    Update the hero section, creating it on first save.

    Raises:
        400: First save without a name
    """
    row = hero_service.save(body.to_db_fields())
    return hero_to_api(row, include_meta=True)
