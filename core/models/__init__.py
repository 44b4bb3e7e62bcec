# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for request validation:
# - project.py: Portfolio projects
# - skill.py: Skills with proficiency level
# - experience.py: Work experience and education timeline
# - contact.py: Contact form submissions and message status
# - analytics.py: Analytics capture bodies
# - personal.py: Personal info singleton
# - hero.py: Hero section singleton (with API <-> DB field mapping)
# - settings.py: Site settings singleton and defaults
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Content Models - Admin-managed collections
# -----------------------------------------------------------------------------
from .project import ProjectCreate, ProjectStatus, ProjectUpdate
from .skill import SkillCategory, SkillCreate, SkillUpdate
from .experience import ExperienceCreate, ExperienceType, ExperienceUpdate

# -----------------------------------------------------------------------------
# Visitor Models - Contact form and analytics
# -----------------------------------------------------------------------------
from .contact import (
    DISPOSABLE_EMAIL_DOMAINS,
    ContactMessageCreate,
    MessageStatus,
    MessageStatusUpdate,
    is_disposable_email,
)
from .analytics import (
    PAGE_VIEW_EVENT,
    AnalyticsEventCreate,
    CustomEventCreate,
    PageViewCreate,
)

# -----------------------------------------------------------------------------
# Singleton Models - One row per table
# -----------------------------------------------------------------------------
from .personal import PersonalInfoUpdate
from .hero import DEFAULT_GREETING, HeroUpdate, hero_to_api
from .settings import (
    DEFAULT_SITE_SETTINGS,
    PUBLIC_SETTINGS_FIELDS,
    SiteSettings,
    SiteSettingsUpdate,
    Theme,
    merge_with_defaults,
    public_settings,
)

__all__ = [
    # Projects
    "ProjectCreate",
    "ProjectStatus",
    "ProjectUpdate",
    # Skills
    "SkillCategory",
    "SkillCreate",
    "SkillUpdate",
    # Experiences
    "ExperienceCreate",
    "ExperienceType",
    "ExperienceUpdate",
    # Contact
    "DISPOSABLE_EMAIL_DOMAINS",
    "ContactMessageCreate",
    "MessageStatus",
    "MessageStatusUpdate",
    "is_disposable_email",
    # Analytics
    "PAGE_VIEW_EVENT",
    "AnalyticsEventCreate",
    "CustomEventCreate",
    "PageViewCreate",
    # Personal info
    "PersonalInfoUpdate",
    # Hero
    "DEFAULT_GREETING",
    "HeroUpdate",
    "hero_to_api",
    # Settings
    "DEFAULT_SITE_SETTINGS",
    "PUBLIC_SETTINGS_FIELDS",
    "SiteSettings",
    "SiteSettingsUpdate",
    "Theme",
    "merge_with_defaults",
    "public_settings",
]
