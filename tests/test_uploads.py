# =============================================================================
# tests/test_uploads.py - Upload Tests
# =============================================================================
# Supabase Storage is replaced by a MagicMock bucket so uploads never leave
# the process.
# =============================================================================

from unittest.mock import MagicMock, patch

import pytest

from app.config import settings
from app.exceptions import EmptyFileError, FileTooLargeError, InvalidFileTypeError
from core.services.storage_service import StorageService, validate_upload

PUBLIC_URL = "https://test-project.supabase.co/storage/v1/object/public/portfolio/x"
PDF_BYTES = b"%PDF-1.4 test resume"


@pytest.fixture
def bucket():
    mock = MagicMock()
    mock.get_public_url.return_value = PUBLIC_URL
    mock.list.return_value = []
    with patch.object(StorageService, "_bucket", return_value=mock):
        yield mock


# =============================================================================
# Validation
# =============================================================================

class TestValidateUpload:
    """Tests for validate_upload."""

    def test_empty(self):
        with pytest.raises(EmptyFileError):
            validate_upload(b"", "a.png", "image/png", "image", 1024)

    def test_image_type(self):
        validate_upload(b"x", "a.webp", "image/webp", "image", 1024)
        with pytest.raises(InvalidFileTypeError):
            validate_upload(b"x", "a.txt", "text/plain", "image", 1024)

    def test_resume_must_be_pdf(self):
        with pytest.raises(InvalidFileTypeError) as exc_info:
            validate_upload(b"x", "cv.docx", "application/msword", "resume", 1024)
        assert exc_info.value.details["allowed"] == "PDF"

    def test_too_large(self):
        with pytest.raises(FileTooLargeError) as exc_info:
            validate_upload(b"x" * 2048, "a.png", "image/png", "image", 1024)
        assert exc_info.value.status_code == 413


# =============================================================================
# Image Endpoints
# =============================================================================

class TestImageUpload:
    """Tests for /api/uploads/image."""

    def test_upload_image(self, client, auth_headers, bucket):
        response = client.post(
            "/api/uploads/image",
            files={"image": ("photo.PNG", b"\x89PNG data", "image/png")},
            headers=auth_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["url"] == PUBLIC_URL
        assert body["path"].startswith("images/")
        assert body["path"].endswith(".png")
        assert body["original_name"] == "photo.PNG"

        kwargs = bucket.upload.call_args.kwargs
        assert kwargs["file_options"]["content-type"] == "image/png"

    def test_wrong_type(self, client, auth_headers, bucket):
        response = client.post(
            "/api/uploads/image",
            files={"image": ("notes.txt", b"hello", "text/plain")},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_FILE_TYPE"
        bucket.upload.assert_not_called()

    def test_oversize(self, client, auth_headers, bucket):
        with patch.object(settings, "MAX_IMAGE_SIZE_MB", 1):
            response = client.post(
                "/api/uploads/image",
                files={"image": ("big.jpg", b"x" * (1024 * 1024 + 1), "image/jpeg")},
                headers=auth_headers,
            )

        assert response.status_code == 413
        assert response.json()["code"] == "FILE_TOO_LARGE"

    def test_storage_failure(self, client, auth_headers, bucket):
        bucket.upload.side_effect = RuntimeError("bucket not found")

        response = client.post(
            "/api/uploads/image",
            files={"image": ("photo.png", b"data", "image/png")},
            headers=auth_headers,
        )

        assert response.status_code == 500
        assert response.json()["code"] == "STORAGE_UPLOAD_ERROR"

    def test_delete_bare_name(self, client, auth_headers, bucket):
        bucket.remove.return_value = [{"name": "images/abc.png"}]

        response = client.delete("/api/uploads/image/abc.png", headers=auth_headers)

        assert response.status_code == 200
        bucket.remove.assert_called_once_with(["images/abc.png"])

    def test_delete_not_found(self, client, auth_headers, bucket):
        bucket.remove.return_value = []

        response = client.delete("/api/uploads/image/images/missing.png", headers=auth_headers)

        assert response.status_code == 404
        bucket.remove.assert_called_once_with(["images/missing.png"])


# =============================================================================
# Resume Endpoints
# =============================================================================

class TestResumeUpload:
    """Tests for resume uploads."""

    def test_non_pdf_rejected(self, client, auth_headers, bucket):
        response = client.post(
            "/api/uploads/resume",
            files={"resume": ("cv.docx", b"doc", "application/msword")},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_FILE_TYPE"

    def test_replaces_previous_resumes(self, client, auth_headers, bucket):
        bucket.list.return_value = [{"name": "resume_1_old.pdf"}]
        bucket.remove.return_value = [{"name": "resumes/resume_1_old.pdf"}]

        response = client.post(
            "/api/uploads/resume",
            files={"resume": ("cv.pdf", PDF_BYTES, "application/pdf")},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["path"].startswith("resumes/resume_")
        bucket.remove.assert_called_once_with(["resumes/resume_1_old.pdf"])

    def test_cleanup_failure_does_not_block_upload(self, client, auth_headers, bucket):
        bucket.list.return_value = [{"name": "resume_1_old.pdf"}]
        bucket.remove.side_effect = RuntimeError("permission denied")

        response = client.post(
            "/api/uploads/resume",
            files={"resume": ("cv.pdf", PDF_BYTES, "application/pdf")},
            headers=auth_headers,
        )

        assert response.status_code == 200
        bucket.upload.assert_called_once()

    def test_admin_upload_updates_personal_info(self, client, auth_headers, bucket, mock_db):
        mock_db["fetch_first"].return_value = {"id": "p1"}
        mock_db["update"].return_value = {"id": "p1"}

        response = client.post(
            "/api/admin/upload/resume",
            files={"resume": ("cv.pdf", PDF_BYTES, "application/pdf")},
            headers=auth_headers,
        )

        body = response.json()
        assert body["success"] is True
        assert body["personal_info_updated"] is True
        mock_db["update"].assert_called_once_with("personal_info", "p1", {"resume_url": PUBLIC_URL})

    def test_admin_upload_without_personal_info(self, client, auth_headers, bucket, mock_db):
        response = client.post(
            "/api/admin/upload/resume",
            files={"resume": ("cv.pdf", PDF_BYTES, "application/pdf")},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["personal_info_updated"] is False
