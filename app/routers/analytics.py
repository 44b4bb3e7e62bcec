# =============================================================================
# app/routers/analytics.py - Analytics Endpoints
# =============================================================================
# Capture (public):
#   POST /api/analytics            - generic event, type defaults to "event"
#   POST /api/analytics/page-view  - page view
#   POST /api/analytics/event      - custom event, type required
#
# Reporting (admin):
#   GET  /api/analytics            - totals by type + 5 newest
#   GET  /api/analytics/summary    - windowed page view / event counts
#   GET  /api/analytics/detailed   - filtered, paginated raw events
# =============================================================================

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query, Request, status

from app.auth import get_current_admin
from app.dependencies import PaginationDep
from core.models import (
    PAGE_VIEW_EVENT,
    AnalyticsEventCreate,
    CustomEventCreate,
    PageViewCreate,
)
from core.services import AnalyticsService
from lib.utils import client_ip, request_referrer

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Capture
# =============================================================================

@router.post("", status_code=status.HTTP_201_CREATED)
async def capture_event(body: AnalyticsEventCreate, request: Request) -> dict:
    """Record a generic analytics event."""
    AnalyticsService.record(
        event_type=body.event_type,
        page=body.page,
        ip_address=client_ip(request),
        user_agent=request.headers.get("user-agent", ""),
        referrer=request_referrer(request),
        metadata=body.metadata,
        event_data=body.event_data,
    )
    return {"message": "Captured", "event_type": body.event_type}


@router.post("/page-view", status_code=status.HTTP_201_CREATED)
async def track_page_view(body: PageViewCreate, request: Request) -> dict:
    """Record a page view. Body values for referrer/user agent win over headers."""
    AnalyticsService.record(
        event_type=PAGE_VIEW_EVENT,
        page=body.page,
        ip_address=client_ip(request),
        user_agent=body.user_agent or request.headers.get("user-agent", ""),
        referrer=body.referrer or request_referrer(request),
    )
    return {"message": "Page view tracked"}


@router.post("/event", status_code=status.HTTP_201_CREATED)
async def track_event(body: CustomEventCreate, request: Request) -> dict:
    """Record a named custom event."""
    AnalyticsService.record(
        event_type=body.event_type,
        page=body.page,
        ip_address=client_ip(request),
        user_agent=request.headers.get("user-agent", ""),
        metadata=body.metadata,
    )
    return {"message": "Event tracked"}


# =============================================================================
# Reporting
# =============================================================================

@router.get("", dependencies=[Depends(get_current_admin)])
async def analytics_overview() -> dict[str, Any]:
    """Total event count, counts per type and the 5 newest events."""
    return AnalyticsService.summary()


@router.get("/summary", dependencies=[Depends(get_current_admin)])
async def analytics_summary(
    days: int = Query(30, ge=1, le=365, description="Window size in days"),
) -> dict[str, Any]:
    """Page views by page and other events by type over the last N days."""
    return AnalyticsService.summary_window(days)


@router.get("/detailed", dependencies=[Depends(get_current_admin)])
async def analytics_detailed(
    page_info: PaginationDep,
    page: str | None = Query(None, description="Exact page path"),
    event_type: str | None = Query(None, description="Exact event type"),
) -> list[dict[str, Any]]:
    """Raw events, newest first."""
    return AnalyticsService.detailed(
        page=page,
        event_type=event_type,
        limit=page_info["limit"],
        offset=page_info["offset"],
    )
