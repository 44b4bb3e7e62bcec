# =============================================================================
# app/routers/admin/resume.py - Resume Upload
# =============================================================================
# Replaces the stored resume and points personal_info.resume_url at it.
# If personal info hasn't been created yet the upload still succeeds; the
# URL is returned for the admin to save manually.
# =============================================================================

import logging
from typing import Any

from fastapi import APIRouter, File, UploadFile

from app.dependencies import AdminDep
from core.services import StorageService, personal_info_service
from lib.supabase_client import SupabaseClient, SupabaseClientError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/resume")
async def upload_resume(
    admin: AdminDep,
    resume: UploadFile = File(..., description="Resume PDF"),
) -> dict[str, Any]:
    """
    Upload a new resume PDF.

    Raises:
        400: Not a PDF / empty file
        413: Larger than MAX_RESUME_SIZE_MB
    """
    content = await resume.read()
    stored = StorageService.store_resume(content, resume.filename, resume.content_type or "")
    logger.info(f"Resume replaced by {admin.username}: {stored.path}")

    personal_info_updated = False
    try:
        existing = personal_info_service.get()
        if existing:
            SupabaseClient.update("personal_info", existing["id"], {"resume_url": stored.url})
            personal_info_updated = True
            logger.info("Updated personal info with new resume URL")
        else:
            logger.warning("No personal info row to attach the resume URL to")
    except SupabaseClientError as e:
        logger.warning(f"Could not update personal info with resume URL: {e}")

    return {
        "success": True,
        **stored.to_dict(),
        "personal_info_updated": personal_info_updated,
    }
