# =============================================================================
# tests/test_contact_api.py - Contact Form Tests
# =============================================================================

from unittest.mock import patch

import pytest

from core.services import EmailService

VALID_BODY = {
    "name": "Jane Doe",
    "email": "jane@company.com",
    "subject": "Freelance project",
    "message": "Hi, are you available in March?",
}


@pytest.fixture
def send_mock():
    with patch.object(EmailService, "send_contact_notification", return_value=True) as mock:
        yield mock


class TestSubmitContact:
    """Tests for POST /api/contact."""

    def test_stores_message_and_notifies(self, client, mock_db, send_mock, sample_message):
        mock_db["insert"].return_value = sample_message

        response = client.post(
            "/api/contact",
            json=VALID_BODY,
            headers={"User-Agent": "pytest", "X-Forwarded-For": "203.0.113.7"},
        )

        assert response.status_code == 201
        assert response.json() == {
            "message": "Message sent successfully",
            "id": sample_message["id"],
        }

        table, data = mock_db["insert"].call_args.args
        assert table == "contact_messages"
        assert data["status"] == "unread"
        assert data["ip_address"] == "203.0.113.7"
        assert data["user_agent"] == "pytest"
        assert data["phone"] is None

        send_mock.assert_called_once()
        assert send_mock.call_args.args[0]["email"] == "jane@company.com"

    def test_disposable_email_rejected(self, client, mock_db, send_mock):
        response = client.post(
            "/api/contact",
            json={**VALID_BODY, "email": "spam@mailinator.com"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
        mock_db["insert"].assert_not_called()
        send_mock.assert_not_called()

    def test_missing_fields(self, client, mock_db, send_mock):
        response = client.post("/api/contact", json={"name": "Jane"})

        assert response.status_code == 400
        fields = {error["field"] for error in response.json()["errors"]}
        assert {"email", "subject", "message"} <= fields

    def test_database_failure_is_500(self, client, mock_db, send_mock):
        from lib.supabase_client import SupabaseClientError

        mock_db["insert"].side_effect = SupabaseClientError("boom")

        response = client.post("/api/contact", json=VALID_BODY)

        assert response.status_code == 500
        assert response.json()["code"] == "DATABASE_ERROR"
        send_mock.assert_not_called()

    def test_email_failure_does_not_fail_request(self, client, mock_db, sample_message):
        mock_db["insert"].return_value = sample_message

        # SMTP isn't configured in tests, so the real sender just logs and returns
        response = client.post("/api/contact", json=VALID_BODY)

        assert response.status_code == 201
