# =============================================================================
# core/models/settings.py - Site Settings Schemas
# =============================================================================
# site_settings is a singleton row of feature flags and display toggles.
# Until the admin saves it for the first time, DEFAULT_SITE_SETTINGS is
# served instead, so the public site always gets a complete object.
# =============================================================================

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class Theme(str, Enum):
    """Default color scheme for first-time visitors."""
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class SiteSettings(BaseModel):
    """
    Full settings object with defaults.

    Also used to validate an admin update: see SiteSettingsUpdate.
    """

    maintenance_mode: bool = False
    maintenance_message: str = Field(
        default="Site is under maintenance. Please check back soon.",
        max_length=500,
    )
    show_analytics: bool = True
    featured_sections: list[str] = Field(
        default_factory=lambda: ["projects", "skills", "experiences"]
    )
    visible_sections: list[str] = Field(
        default_factory=lambda: ["hero", "about", "skills", "projects", "experience", "contact"]
    )
    hero_headline: str | None = Field(default=None, max_length=200)
    hero_subheadline: str | None = Field(default=None, max_length=400)
    show_footer: bool = True
    show_navigation: bool = True
    enable_animations: bool = True
    contact_form_enabled: bool = True
    show_social_links: bool = True
    show_resume_button: bool = True
    default_theme: Theme = Theme.SYSTEM
    accent_color: str = Field(default="#3B82F6", pattern=r"^#[0-9A-Fa-f]{6}$")


class SiteSettingsUpdate(BaseModel):
    """
    Body for PUT /admin/settings.

    Accepts the fields either at the top level or nested under "settings"
    (older admin builds wrap them).
    """

    maintenance_mode: bool | None = None
    maintenance_message: str | None = Field(default=None, max_length=500)
    show_analytics: bool | None = None
    featured_sections: list[str] | None = None
    visible_sections: list[str] | None = None
    hero_headline: str | None = Field(default=None, max_length=200)
    hero_subheadline: str | None = Field(default=None, max_length=400)
    show_footer: bool | None = None
    show_navigation: bool | None = None
    enable_animations: bool | None = None
    contact_form_enabled: bool | None = None
    show_social_links: bool | None = None
    show_resume_button: bool | None = None
    default_theme: Theme | None = None
    accent_color: str | None = Field(default=None, pattern=r"^#[0-9A-Fa-f]{6}$")

    @classmethod
    def from_body(cls, body: dict[str, Any]) -> "SiteSettingsUpdate":
        """Validate a raw request body, unwrapping {"settings": {...}}."""
        nested = body.get("settings")
        return cls.model_validate(nested if isinstance(nested, dict) else body)


# Settings exposed on the public GET /api/settings endpoint
PUBLIC_SETTINGS_FIELDS = (
    "maintenance_mode",
    "maintenance_message",
    "visible_sections",
    "show_footer",
    "show_navigation",
    "enable_animations",
    "contact_form_enabled",
    "show_social_links",
    "show_resume_button",
    "default_theme",
    "accent_color",
)

DEFAULT_SITE_SETTINGS: dict[str, Any] = SiteSettings().model_dump(mode="json")


def merge_with_defaults(row: dict[str, Any] | None) -> dict[str, Any]:
    """
    Overlay a stored settings row on the defaults.

    NULL columns fall back to the default value; row metadata (id,
    timestamps) is kept.
    """
    merged = dict(DEFAULT_SITE_SETTINGS)
    for key, value in (row or {}).items():
        if value is not None or key not in merged:
            merged[key] = value
    return merged


def public_settings(row: dict[str, Any] | None) -> dict[str, Any]:
    """Public subset of the settings with defaults applied."""
    merged = merge_with_defaults(row)
    return {key: merged[key] for key in PUBLIC_SETTINGS_FIELDS}
