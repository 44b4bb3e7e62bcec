# =============================================================================
# tests/test_analytics.py - Analytics Capture & Reporting Tests
# =============================================================================

from core.services.analytics_service import AnalyticsService, count_by


def test_count_by_groups_missing_values():
    rows = [{"page": "/"}, {"page": "/"}, {"page": "/about"}, {"page": None}, {}]

    assert count_by(rows, "page") == {"/": 2, "/about": 1, "unknown": 2}
    assert count_by([{}], "category", "Uncategorized") == {"Uncategorized": 1}


class TestSummaries:
    """Tests for AnalyticsService summaries with the database mocked."""

    def test_summary_window(self, mock_db):
        page_views = [{"page": "/"}, {"page": "/"}, {"page": "/projects"}]
        events = [{"event_type": "project_click", "page": "/projects"}]

        def fake_select(table, **kwargs):
            if kwargs.get("filters") == {"event_type": "page_view"}:
                return page_views
            return events

        mock_db["select"].side_effect = fake_select

        result = AnalyticsService.summary_window(7)

        assert result == {
            "total_page_views": 3,
            "total_events": 1,
            "page_views_by_page": {"/": 2, "/projects": 1},
            "events_by_type": {"project_click": 1},
            "period": "7 days",
        }
        for call in mock_db["select"].call_args_list:
            column, since = call.kwargs["since"]
            assert column == "created_at"
            assert since
        assert mock_db["select"].call_args_list[1].kwargs["exclude"] == {"event_type": "page_view"}

    def test_summary(self, mock_db):
        recent = [{"id": 1, "event_type": "page_view"}]
        types = [{"event_type": "page_view"}, {"event_type": "page_view"}, {"event_type": "click"}]
        mock_db["select"].side_effect = [recent, types]

        result = AnalyticsService.summary()

        assert result == {
            "total": 3,
            "by_type": {"page_view": 2, "click": 1},
            "recent": recent,
        }

    def test_record_omits_empty_event_data(self, mock_db):
        mock_db["insert"].return_value = {"id": 1}

        AnalyticsService.record("page_view", "/", "1.2.3.4", None)

        table, data = mock_db["insert"].call_args.args
        assert table == "analytics"
        assert data == {
            "event_type": "page_view",
            "page": "/",
            "ip_address": "1.2.3.4",
            "user_agent": "",
            "referrer": "",
            "metadata": {},
        }


class TestCaptureEndpoints:
    """Tests for the public capture endpoints."""

    def test_capture_generic_event(self, client, mock_db):
        mock_db["insert"].return_value = {"id": 1}

        response = client.post(
            "/api/analytics",
            json={"event_type": "resume_download", "event_data": {"source": "hero"}},
            headers={"Referer": "https://site.com/"},
        )

        assert response.status_code == 201
        assert response.json() == {"message": "Captured", "event_type": "resume_download"}
        data = mock_db["insert"].call_args.args[1]
        assert data["event_data"] == {"source": "hero"}
        assert data["referrer"] == "https://site.com/"

    def test_page_view_body_wins_over_headers(self, client, mock_db):
        mock_db["insert"].return_value = {"id": 1}

        response = client.post(
            "/api/analytics/page-view",
            json={"page": "/about", "referrer": "https://google.com"},
            headers={"Referer": "https://site.com/"},
        )

        assert response.status_code == 201
        assert response.json() == {"message": "Page view tracked"}
        data = mock_db["insert"].call_args.args[1]
        assert data["event_type"] == "page_view"
        assert data["referrer"] == "https://google.com"

    def test_page_view_requires_page(self, client, mock_db):
        response = client.post("/api/analytics/page-view", json={})
        assert response.status_code == 400

    def test_custom_event(self, client, mock_db):
        mock_db["insert"].return_value = {"id": 1}

        response = client.post(
            "/api/analytics/event",
            json={"event_type": "project_click", "metadata": {"project_id": "p1"}},
        )

        assert response.status_code == 201
        assert mock_db["insert"].call_args.args[1]["metadata"] == {"project_id": "p1"}


class TestReportingEndpoints:
    """Reporting endpoints are admin only."""

    def test_requires_token(self, client, mock_db):
        assert client.get("/api/analytics").status_code == 401
        assert client.get("/api/analytics/summary").status_code == 401
        assert client.get("/api/analytics/detailed").status_code == 401

    def test_detailed_pagination(self, client, mock_db, auth_headers):
        client.get(
            "/api/analytics/detailed",
            params={"page": "/about", "limit": 20, "offset": 40},
            headers=auth_headers,
        )

        kwargs = mock_db["select"].call_args.kwargs
        assert kwargs["filters"] == {"page": "/about", "event_type": None}
        assert (kwargs["limit"], kwargs["offset"]) == (20, 40)

    def test_summary_days_bounds(self, client, mock_db, auth_headers):
        response = client.get(
            "/api/analytics/summary", params={"days": 0}, headers=auth_headers
        )
        assert response.status_code == 400
