# =============================================================================
# core/models/analytics.py - Analytics Event Schemas
# =============================================================================
# Events are free-form: the frontend chooses the event_type ("page_view",
# "project_click", "resume_download", ...) and attaches arbitrary metadata.
# IP address, user agent and referrer are taken from request headers by the
# router, not trusted from the body (except where a client reports its own
# referrer for a page view).
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field


PAGE_VIEW_EVENT = "page_view"


class AnalyticsEventCreate(BaseModel):
    """
    Generic analytics capture body.

    Example:
        {
            "event_type": "project_click",
            "page": "/projects",
            "metadata": {"project_id": "..."}
        }
    """

    event_type: str = Field(default="event", min_length=1, max_length=50)
    page: str | None = Field(default=None, max_length=500)
    metadata: dict[str, Any] = Field(default_factory=dict)
    event_data: dict[str, Any] = Field(default_factory=dict)


class PageViewCreate(BaseModel):
    """Body for POST /analytics/page-view."""

    page: str = Field(..., min_length=1, max_length=500)
    referrer: str | None = Field(default=None, max_length=500)
    user_agent: str | None = None


class CustomEventCreate(BaseModel):
    """Body for POST /analytics/event (event_type required)."""

    event_type: str = Field(..., min_length=1, max_length=50)
    page: str | None = Field(default=None, max_length=500)
    metadata: dict[str, Any] = Field(default_factory=dict)
