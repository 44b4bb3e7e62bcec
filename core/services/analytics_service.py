# =============================================================================
# core/services/analytics_service.py - Analytics Capture & Reporting
# =============================================================================
# Writes visitor events to the `analytics` table and builds the summaries the
# admin dashboard reads. Aggregation happens in Python over the selected
# rows; the table is small enough that no SQL GROUP BY is needed.
# =============================================================================

import logging
from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable

from lib.supabase_client import SupabaseClient
from core.models.analytics import PAGE_VIEW_EVENT

logger = logging.getLogger(__name__)

TABLE = "analytics"
RECENT_EVENTS = 5


def count_by(
    rows: Iterable[dict[str, Any]], key: str, missing: str = "unknown"
) -> dict[str, int]:
    """
    Count rows by the value of one column.

    Missing values are counted under `missing`.
    """
    return dict(Counter(str(row.get(key) or missing) for row in rows))


def since_iso(days: int) -> str:
    """ISO timestamp `days` days ago (UTC)."""
    return (datetime.now(timezone.utc) - timedelta(days=days)).isoformat()


class AnalyticsService:
    """Service for analytics events."""

    @staticmethod
    def record(
        event_type: str,
        page: str | None,
        ip_address: str,
        user_agent: str | None,
        referrer: str | None = None,
        metadata: dict[str, Any] | None = None,
        event_data: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Store one event.

        Returns:
            The inserted row
        """
        data = {
            "event_type": event_type,
            "page": page,
            "ip_address": ip_address,
            "user_agent": user_agent or "",
            "referrer": referrer or "",
            "metadata": metadata or {},
        }
        if event_data:
            data["event_data"] = event_data

        row = SupabaseClient.insert(TABLE, data)
        logger.debug(f"Recorded analytics event {event_type} on {page}")
        return row

    @staticmethod
    def summary() -> dict[str, Any]:
        """
        All-time totals.

        Returns:
            {"total", "by_type", "recent"} where recent is the 5 newest events
        """
        recent = SupabaseClient.select(
            TABLE, order=[("created_at", True)], limit=RECENT_EVENTS
        )
        types = SupabaseClient.select(TABLE, columns="event_type")
        return {
            "total": len(types),
            "by_type": count_by(types, "event_type"),
            "recent": recent,
        }

    @staticmethod
    def summary_window(days: int = 30) -> dict[str, Any]:
        """
        Page views by page and other events by type over the last `days` days.
        """
        since = ("created_at", since_iso(days))
        page_views = SupabaseClient.select(
            TABLE,
            columns="page",
            filters={"event_type": PAGE_VIEW_EVENT},
            since=since,
        )
        events = SupabaseClient.select(
            TABLE,
            columns="event_type, page",
            exclude={"event_type": PAGE_VIEW_EVENT},
            since=since,
        )
        return {
            "total_page_views": len(page_views),
            "total_events": len(events),
            "page_views_by_page": count_by(page_views, "page"),
            "events_by_type": count_by(events, "event_type"),
            "period": f"{days} days",
        }

    @staticmethod
    def detailed(
        page: str | None = None,
        event_type: str | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[dict[str, Any]]:
        """Newest-first events, optionally filtered by page and type."""
        return SupabaseClient.select(
            TABLE,
            filters={"page": page, "event_type": event_type},
            order=[("created_at", True)],
            limit=limit,
            offset=offset,
        )
