# =============================================================================
# core/services/storage_service.py - Supabase Storage Operations
# =============================================================================
# Handles image and resume uploads against the configured storage bucket.
#
# Layout inside the bucket:
#   images/{uuid}{ext}                      - project/profile images
#   resumes/resume_{ms}_{random}.pdf       - only the latest resume is kept
# =============================================================================

import logging
import os
import secrets
import time
import uuid
from dataclasses import dataclass

from lib.supabase_client import SupabaseClient
from app.config import settings
from app.exceptions import (
    EmptyFileError,
    FileTooLargeError,
    InvalidFileTypeError,
    StorageDeleteError,
    StorageUploadError,
)

logger = logging.getLogger(__name__)

IMAGE_FOLDER = "images"
RESUME_FOLDER = "resumes"
PDF_CONTENT_TYPE = "application/pdf"


@dataclass
class StoredFile:
    """Result of a successful upload."""

    url: str
    path: str
    size: int
    content_type: str
    original_name: str | None = None

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "path": self.path,
            "size": self.size,
            "content_type": self.content_type,
            "original_name": self.original_name,
        }


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------

def validate_upload(
    content: bytes,
    filename: str | None,
    content_type: str | None,
    field: str,
    max_bytes: int,
) -> None:
    """
    Check an upload before it reaches storage.

    Images accept any image/* type; resumes must be application/pdf.

    Raises:
        EmptyFileError: No content
        InvalidFileTypeError: Wrong content type for the field
        FileTooLargeError: Larger than max_bytes
    """
    if not content:
        raise EmptyFileError(field)

    content_type = content_type or ""
    if field == "image":
        allowed, ok = "image", content_type.startswith("image/")
    else:
        allowed, ok = "PDF", content_type == PDF_CONTENT_TYPE
    if not ok:
        raise InvalidFileTypeError(filename or field, content_type or None, allowed)

    if len(content) > max_bytes:
        raise FileTooLargeError(len(content) / (1024 * 1024), max_bytes // (1024 * 1024))


def image_path(filename: str | None) -> str:
    """Random object path for an image, keeping the original extension."""
    ext = os.path.splitext(filename or "")[1].lower()
    return f"{IMAGE_FOLDER}/{uuid.uuid4().hex}{ext}"


def resume_path() -> str:
    """Timestamped object path for a resume PDF."""
    return f"{RESUME_FOLDER}/resume_{int(time.time() * 1000)}_{secrets.token_hex(6)}.pdf"


# -----------------------------------------------------------------------------
# Storage Service
# -----------------------------------------------------------------------------

class StorageService:
    """
    Service for Supabase Storage operations.

    All methods work against settings.STORAGE_BUCKET.
    """

    @staticmethod
    def _bucket():
        client = SupabaseClient.get_client()
        return client.storage.from_(settings.STORAGE_BUCKET)

    @staticmethod
    def upload_bytes(path: str, content: bytes, content_type: str, upsert: bool = False) -> str:
        """
        Upload raw bytes to storage.

        Args:
            path: Object path inside the bucket
            content: File bytes
            content_type: MIME type stored with the object
            upsert: Overwrite an existing object at the same path

        Returns:
            Storage path

        Raises:
            StorageUploadError: If upload fails
        """
        try:
            StorageService._bucket().upload(
                path=path,
                file=content,
                file_options={
                    "content-type": content_type,
                    "cache-control": "3600",
                    "upsert": "true" if upsert else "false",
                },
            )
            logger.info(f"Uploaded file to storage: {path} ({len(content)} bytes)")
            return path

        except Exception as e:
            logger.error(f"Storage upload failed: {e}")
            raise StorageUploadError(str(e))

    @staticmethod
    def get_public_url(storage_path: str) -> str:
        """Get a public URL for a storage file."""
        return StorageService._bucket().get_public_url(storage_path)

    @staticmethod
    def list_folder(folder: str) -> list[dict]:
        """
        List objects in a folder.

        Returns:
            List of file info dicts (empty if the folder is missing)
        """
        try:
            response = StorageService._bucket().list(folder, {"limit": 100})
            return response or []

        except Exception as e:
            logger.error(f"Failed to list {folder}: {e}")
            return []

    @staticmethod
    def remove(paths: list[str]) -> list[str]:
        """
        Delete objects.

        Returns:
            Paths that were actually removed

        Raises:
            StorageDeleteError: If the storage call fails
        """
        if not paths:
            return []
        try:
            response = StorageService._bucket().remove(paths) or []
        except Exception as e:
            logger.error(f"Failed to delete {paths}: {e}")
            raise StorageDeleteError(", ".join(paths), str(e))

        removed = [item.get("name") for item in response if isinstance(item, dict)]
        logger.info(f"Deleted {len(removed)} file(s) from storage")
        return [name for name in removed if name]

    # -------------------------------------------------------------------------
    # Portfolio uploads
    # -------------------------------------------------------------------------

    @staticmethod
    def store_image(content: bytes, filename: str | None, content_type: str) -> StoredFile:
        """Validate and upload an image; returns its public URL."""
        validate_upload(content, filename, content_type, "image", settings.max_image_size_bytes)
        path = StorageService.upload_bytes(image_path(filename), content, content_type)
        return StoredFile(
            url=StorageService.get_public_url(path),
            path=path,
            size=len(content),
            content_type=content_type,
            original_name=filename,
        )

    @staticmethod
    def store_resume(content: bytes, filename: str | None, content_type: str) -> StoredFile:
        """
        Validate and upload a resume PDF, replacing any previous resume.

        Cleanup of old resumes is best effort: a failure there is logged and
        the upload still goes ahead.
        """
        validate_upload(content, filename, content_type, "resume", settings.max_resume_size_bytes)

        existing = [
            f"{RESUME_FOLDER}/{item['name']}"
            for item in StorageService.list_folder(RESUME_FOLDER)
            if item.get("name")
        ]
        if existing:
            try:
                StorageService.remove(existing)
            except StorageDeleteError as e:
                logger.warning(f"Could not clean up existing resumes: {e.message}")

        path = StorageService.upload_bytes(resume_path(), content, PDF_CONTENT_TYPE)
        return StoredFile(
            url=StorageService.get_public_url(path),
            path=path,
            size=len(content),
            content_type=PDF_CONTENT_TYPE,
            original_name=filename,
        )

    @staticmethod
    def delete_image(path: str) -> bool:
        """
        Delete one image.

        Bare names are looked up in the images folder.

        Returns:
            True if the object existed and was removed
        """
        if "/" not in path:
            path = f"{IMAGE_FOLDER}/{path}"
        return bool(StorageService.remove([path]))
