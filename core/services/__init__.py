# =============================================================================
# core/services/ - Business Logic Layer
# =============================================================================
# Services sit between routes and the database client:
# - content_service.py: CRUD for projects, skills, experiences, messages
# - singleton_service.py: personal info, hero section, site settings
# - dashboard_service.py: admin dashboard rollups and activity feed
# - analytics_service.py: event capture and summaries
# - storage_service.py: image/resume uploads to Supabase Storage
# - email_service.py: contact notification email
# =============================================================================

from .content_service import (
    PUBLIC_PROJECT_ORDER,
    ContentService,
    experiences_service,
    messages_service,
    projects_service,
    skills_service,
)
from .singleton_service import (
    SingletonService,
    hero_service,
    personal_info_service,
    site_settings_service,
)
from .dashboard_service import DashboardService, merge_activity
from .analytics_service import AnalyticsService, count_by
from .storage_service import StorageService, StoredFile
from .email_service import EmailService, render_contact_notification

__all__ = [
    "PUBLIC_PROJECT_ORDER",
    "ContentService",
    "experiences_service",
    "messages_service",
    "projects_service",
    "skills_service",
    "SingletonService",
    "hero_service",
    "personal_info_service",
    "site_settings_service",
    "DashboardService",
    "merge_activity",
    "AnalyticsService",
    "count_by",
    "StorageService",
    "StoredFile",
    "EmailService",
    "render_contact_notification",
]
