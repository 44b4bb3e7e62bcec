# =============================================================================
# app/routers/uploads.py - File Upload Endpoints
# =============================================================================
# Admin-only uploads to Supabase Storage. Files are validated (type, size)
# before anything is written.
# =============================================================================

import logging

from fastapi import APIRouter, File, Path, UploadFile

from app.exceptions import NotFoundError
from core.services import StorageService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/image")
async def upload_image(image: UploadFile = File(..., description="Image file (image/*)")) -> dict:
    """
    Upload an image.

    Raises:
        400: Not an image / empty file
        413: Larger than MAX_IMAGE_SIZE_MB
    """
    content = await image.read()
    stored = StorageService.store_image(content, image.filename, image.content_type or "")
    return stored.to_dict()


@router.post("/resume")
async def upload_resume(resume: UploadFile = File(..., description="Resume PDF")) -> dict:
    """
    Upload a resume PDF, replacing the previous one in storage.

    Raises:
        400: Not a PDF / empty file
        413: Larger than MAX_RESUME_SIZE_MB
    """
    content = await resume.read()
    stored = StorageService.store_resume(content, resume.filename, resume.content_type or "")
    return stored.to_dict()


@router.delete("/image/{path:path}")
async def delete_image(path: str = Path(..., description="Object path or bare image name")) -> dict:
    """
    Delete an image from storage.

    Raises:
        404: No such object
    """
    if not StorageService.delete_image(path):
        raise NotFoundError("Image", path)
    return {"message": "Image deleted successfully"}
