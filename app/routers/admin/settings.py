# =============================================================================
# app/routers/admin/settings.py - Site Settings
# =============================================================================

from typing import Any

from fastapi import APIRouter, Body, Path
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from app.exceptions import NotFoundError
from core.models import SiteSettingsUpdate, merge_with_defaults
from core.services import site_settings_service

router = APIRouter()


@router.get("")
async def get_settings() -> dict[str, Any]:
    """All settings; defaults are returned until the row exists."""
    return merge_with_defaults(site_settings_service.get())


@router.put("")
async def update_settings(body: dict[str, Any] = Body(...)) -> dict[str, Any]:
    """
    Update settings, creating the row on first save.

    The fields may be sent at the top level or wrapped in {"settings": ...}.
    """
    try:
        update = SiteSettingsUpdate.from_body(body)
    except ValidationError as e:
        raise RequestValidationError(e.errors())
    row = site_settings_service.save(update.model_dump(mode="json", exclude_unset=True))
    return merge_with_defaults(row)


@router.get("/{key}")
async def get_setting(key: str = Path(..., description="Setting name")) -> dict[str, Any]:
    """
    One setting by name.

    Raises:
        404: Unknown setting name
    """
    merged = merge_with_defaults(site_settings_service.get())
    if key in ("id", "created_at", "updated_at") or key not in merged:
        raise NotFoundError("Setting", key)
    return {"key": key, "value": merged[key]}
