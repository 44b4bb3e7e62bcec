# =============================================================================
# core/services/dashboard_service.py - Admin Dashboard Aggregates
# =============================================================================
# Read-only rollups for the admin landing page: table counts, newest
# messages, recent traffic and a merged "what changed lately" feed.
# =============================================================================

import logging
from typing import Any

from lib.supabase_client import SupabaseClient
from core.models.contact import MessageStatus
from core.services.analytics_service import count_by, since_iso

logger = logging.getLogger(__name__)

RECENT_MESSAGES = 5
RECENT_VIEW_DAYS = 30

# Activity feed sources: (type, table, columns, date columns newest-first)
ACTIVITY_SOURCES: list[tuple[str, str, str, tuple[str, ...]]] = [
    ("project", "projects", "id, title, created_at, updated_at", ("updated_at", "created_at")),
    ("skill", "skills", "id, name, created_at, updated_at", ("updated_at", "created_at")),
    ("experience", "experiences", "id, company, created_at, updated_at", ("updated_at", "created_at")),
    ("message", "contact_messages", "id, name, email, created_at", ("created_at",)),
]


def merge_activity(
    sources: dict[str, tuple[list[dict[str, Any]], tuple[str, ...]]],
    limit: int,
) -> list[dict[str, Any]]:
    """
    Merge per-table rows into one newest-first feed.

    Args:
        sources: {type: (rows, date_columns)}; the first non-empty date
            column of each row is its activity date
        limit: Maximum entries to return

    Returns:
        [{"type", "item", "date"}, ...]
    """
    activities = []
    for kind, (rows, date_columns) in sources.items():
        for row in rows:
            date = next((row[col] for col in date_columns if row.get(col)), None)
            activities.append({"type": kind, "item": row, "date": date})

    # ISO-8601 strings with the same offset sort chronologically
    activities.sort(key=lambda entry: entry["date"] or "", reverse=True)
    return activities[:limit]


class DashboardService:
    """Service for admin dashboard data."""

    @staticmethod
    def overview() -> dict[str, Any]:
        """
        Counts, 5 newest messages and page views from the last 30 days.
        """
        stats = {
            "projects": SupabaseClient.count("projects"),
            "skills": SupabaseClient.count("skills"),
            "messages": SupabaseClient.count("contact_messages"),
            "page_views": SupabaseClient.count("analytics"),
        }
        recent_messages = SupabaseClient.select(
            "contact_messages", order=[("created_at", True)], limit=RECENT_MESSAGES
        )
        recent_views = SupabaseClient.select(
            "analytics",
            order=[("created_at", True)],
            since=("created_at", since_iso(RECENT_VIEW_DAYS)),
        )
        return {
            "stats": stats,
            "recent_messages": recent_messages,
            "recent_views": recent_views,
        }

    @staticmethod
    def stats() -> dict[str, Any]:
        """Totals, unread count and per-category breakdowns."""
        projects = SupabaseClient.select("projects", columns="id, category")
        skills = SupabaseClient.select("skills", columns="id, category")
        return {
            "total_projects": len(projects),
            "total_skills": len(skills),
            "total_experiences": SupabaseClient.count("experiences"),
            "total_messages": SupabaseClient.count("contact_messages"),
            "unread_messages": SupabaseClient.count(
                "contact_messages", filters={"status": MessageStatus.UNREAD.value}
            ),
            "recent_messages": SupabaseClient.select(
                "contact_messages", order=[("created_at", True)], limit=RECENT_MESSAGES
            ),
            "projects_by_category": count_by(projects, "category", "Uncategorized"),
            "skills_by_category": count_by(skills, "category", "Uncategorized"),
        }

    @staticmethod
    def activity(limit: int = 10) -> list[dict[str, Any]]:
        """Newest changes across projects, skills, experiences and messages."""
        sources = {}
        for kind, table, columns, date_columns in ACTIVITY_SOURCES:
            rows = SupabaseClient.select(
                table,
                columns=columns,
                order=[(date_columns[0], True)],
                limit=limit,
            )
            sources[kind] = (rows, date_columns)
        return merge_activity(sources, limit)
