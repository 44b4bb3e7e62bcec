# =============================================================================
# tests/test_services.py - Service Layer Tests
# =============================================================================
# Unit tests for the pieces of the service layer that carry logic of their
# own: the activity merge, singleton save, database error mapping and the
# contact notification email.
#
# Run with: pytest tests/test_services.py -v
# =============================================================================

import asyncio
from unittest.mock import AsyncMock, patch

import aiosmtplib
import pytest

from app.config import settings
from app.exceptions import BadRequestError, database_error_response
from core.services.dashboard_service import merge_activity
from core.services.email_service import (
    EmailService,
    build_contact_message,
    render_contact_notification,
)
from core.services.singleton_service import SingletonService, hero_service
from lib.supabase_client import SupabaseClientError

CONTACT = {
    "name": "Jane <script>alert(1)</script>",
    "email": "jane@company.com",
    "subject": "Hello & welcome",
    "message": "Line one\nLine two",
    "phone": None,
}

SMTP_SETTINGS = {
    "SMTP_HOST": "smtp.test.com",
    "SMTP_USER": "owner@test.com",
    "SMTP_PASS": "app-password",
}


# =============================================================================
# Dashboard Activity
# =============================================================================

class TestMergeActivity:
    """Tests for merge_activity."""

    def test_newest_first_and_limited(self):
        sources = {
            "project": ([{"id": "p", "updated_at": "2024-05-01T00:00:00+00:00",
                          "created_at": "2024-01-01T00:00:00+00:00"}],
                        ("updated_at", "created_at")),
            "message": ([{"id": "m1", "created_at": "2024-06-01T00:00:00+00:00"},
                         {"id": "m2", "created_at": "2024-02-01T00:00:00+00:00"}],
                        ("created_at",)),
        }

        result = merge_activity(sources, limit=2)

        assert [entry["item"]["id"] for entry in result] == ["m1", "p"]
        assert result[1]["type"] == "project"

    def test_falls_back_to_created_at(self):
        sources = {
            "skill": ([{"id": "s", "updated_at": None, "created_at": "2024-01-01T00:00:00+00:00"}],
                      ("updated_at", "created_at")),
        }

        assert merge_activity(sources, limit=10)[0]["date"] == "2024-01-01T00:00:00+00:00"

    def test_undated_rows_sort_last(self):
        sources = {
            "skill": ([{"id": "old"}, {"id": "new", "created_at": "2024-01-01"}], ("created_at",)),
        }

        result = merge_activity(sources, limit=10)

        assert [entry["item"]["id"] for entry in result] == ["new", "old"]
        assert result[1]["date"] is None


# =============================================================================
# Singleton Save
# =============================================================================

class TestSingletonSave:
    """Tests for SingletonService.save."""

    def test_updates_existing_row(self, mock_db):
        mock_db["fetch_first"].return_value = {"id": "row-1"}
        mock_db["update"].return_value = {"id": "row-1", "bio": "Hi"}

        row = SingletonService("personal_info", "personal info").save(
            {"id": "spoofed", "created_at": "x", "bio": "Hi"}
        )

        assert row == {"id": "row-1", "bio": "Hi"}
        table, row_id, data = mock_db["update"].call_args.args
        assert (table, row_id) == ("personal_info", "row-1")
        assert set(data) == {"bio", "updated_at"}
        mock_db["insert"].assert_not_called()

    def test_inserts_when_empty(self, mock_db):
        mock_db["insert"].return_value = {"id": "new"}

        row = SingletonService("site_settings", "site settings").save({"show_footer": False})

        assert row == {"id": "new"}
        mock_db["update"].assert_not_called()
        assert mock_db["insert"].call_args.args[1]["show_footer"] is False

    def test_inserts_when_row_vanished(self, mock_db):
        mock_db["fetch_first"].return_value = {"id": "gone"}
        mock_db["update"].return_value = None
        mock_db["insert"].return_value = {"id": "new"}

        assert SingletonService("site_settings", "site settings").save({})["id"] == "new"

    def test_hero_create_needs_name(self, mock_db):
        with pytest.raises(BadRequestError):
            hero_service.save({"greeting": "Hi"})

    def test_hero_update_without_name_allowed(self, mock_db):
        mock_db["fetch_first"].return_value = {"id": "h1"}
        mock_db["update"].return_value = {"id": "h1"}

        hero_service.save({"greeting": "Hi"})

        mock_db["update"].assert_called_once()


# =============================================================================
# Database Error Mapping
# =============================================================================

@pytest.mark.parametrize(
    "db_code,status_code,code",
    [
        ("PGRST116", 404, "NOT_FOUND"),
        ("23505", 409, "CONFLICT"),
        ("23503", 400, "INVALID_REFERENCE"),
        ("23514", 400, "CONSTRAINT_VIOLATION"),
        ("23502", 400, "CONSTRAINT_VIOLATION"),
        ("22P02", 400, "INVALID_INPUT"),
    ],
)
def test_database_error_mapping(db_code, status_code, code):
    status, body = database_error_response(SupabaseClientError("db said no", code=db_code))

    assert status == status_code
    assert body["code"] == code


def test_unknown_database_error_is_500_with_details_outside_production():
    status, body = database_error_response(SupabaseClientError("connection reset"))

    assert status == 500
    assert body["code"] == "DATABASE_ERROR"
    assert body["details"]["error"] == "connection reset"


# =============================================================================
# Contact Notification Email
# =============================================================================

class TestContactEmail:
    """Tests for rendering and sending the contact notification."""

    def test_html_escapes_visitor_input(self):
        html, text = render_contact_notification(CONTACT)

        assert "<script>" not in html
        assert "&lt;script&gt;" in html
        assert "Hello &amp; welcome" in html
        # Plain text keeps the raw characters
        assert "<script>" in text
        assert "Line one\nLine two" in text

    def test_phone_rendered_when_present(self):
        html, text = render_contact_notification({**CONTACT, "phone": "+1 555 0100"})

        assert "+1 555 0100" in html
        assert "+1 555 0100" in text

    def test_message_headers(self):
        with patch.multiple(settings, **SMTP_SETTINGS):
            msg = build_contact_message(CONTACT)

        assert msg["To"] == "owner@test.com"
        assert msg["Reply-To"] == "jane@company.com"
        assert msg["Subject"] == "New Contact: Hello & welcome"
        assert "owner@test.com" in msg["From"]
        assert msg.get_body(("html",)) is not None
        assert msg.get_body(("plain",)) is not None

    def test_skipped_when_not_configured(self):
        with patch.object(aiosmtplib, "send", new=AsyncMock()) as send:
            assert asyncio.run(EmailService.send_contact_notification(CONTACT)) is False
        send.assert_not_called()

    def test_sends_with_starttls(self):
        with patch.multiple(settings, SMTP_PORT=587, **SMTP_SETTINGS), \
                patch.object(aiosmtplib, "send", new=AsyncMock()) as send:
            assert asyncio.run(EmailService.send_contact_notification(CONTACT)) is True

        kwargs = send.call_args.kwargs
        assert kwargs["hostname"] == "smtp.test.com"
        assert kwargs["start_tls"] is True
        assert kwargs["use_tls"] is False

    def test_implicit_tls_on_465(self):
        with patch.multiple(settings, SMTP_PORT=465, **SMTP_SETTINGS), \
                patch.object(aiosmtplib, "send", new=AsyncMock()) as send:
            asyncio.run(EmailService.send_contact_notification(CONTACT))

        assert send.call_args.kwargs["use_tls"] is True
        assert send.call_args.kwargs["start_tls"] is False

    def test_smtp_failure_returns_false(self):
        error = aiosmtplib.SMTPException("auth failed")
        with patch.multiple(settings, **SMTP_SETTINGS), \
                patch.object(aiosmtplib, "send", new=AsyncMock(side_effect=error)):
            assert asyncio.run(EmailService.send_contact_notification(CONTACT)) is False
