# =============================================================================
# app/routers/admin/personal.py - Personal Info
# =============================================================================

from typing import Any

from fastapi import APIRouter

from core.models import PersonalInfoUpdate
from core.services import personal_info_service

router = APIRouter()


@router.get("")
async def get_personal_info() -> dict[str, Any] | None:
    """The personal info row, or null if it hasn't been created yet."""
    return personal_info_service.get()


@router.put("")
async def update_personal_info(body: PersonalInfoUpdate) -> dict[str, Any]:
    """Update personal info, creating the row on first save."""
    return personal_info_service.save(body.model_dump(mode="json", exclude_unset=True))
