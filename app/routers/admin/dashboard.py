# =============================================================================
# app/routers/admin/dashboard.py - Admin Dashboard
# =============================================================================

from typing import Any

from fastapi import APIRouter, Query

from core.services import DashboardService

router = APIRouter()


@router.get("")
async def dashboard() -> dict[str, Any]:
    """Table counts, the 5 newest messages and the last 30 days of analytics."""
    return DashboardService.overview()


@router.get("/stats")
async def dashboard_stats() -> dict[str, Any]:
    """Totals, unread messages and per-category breakdowns."""
    return DashboardService.stats()


@router.get("/activity")
async def dashboard_activity(
    limit: int = Query(10, ge=1, le=100, description="Maximum entries"),
) -> list[dict[str, Any]]:
    """Newest changes across all admin-managed content."""
    return DashboardService.activity(limit)
