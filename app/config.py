# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.SUPABASE_URL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# The Settings class validates all values at startup, catching configuration
# errors early rather than at runtime.
# =============================================================================

import re
from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Fallback signing secret for local development only
DEV_JWT_SECRET = "dev-fallback-insecure-jwt-secret"

# Credentials accepted outside production when ADMIN_USERNAME/ADMIN_PASSWORD are unset
DEV_ADMIN_USERNAME = "admin"
DEV_ADMIN_PASSWORD = "admin-dev-password"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Supabase Configuration
    # -------------------------------------------------------------------------
    # URL and service key are required - app won't start without them

    SUPABASE_URL: str = Field(
        ...,
        description="Supabase project URL (e.g., https://xxx.supabase.co)"
    )

    SUPABASE_SERVICE_KEY: str = Field(
        ...,
        validation_alias=AliasChoices("SUPABASE_SERVICE_KEY", "SUPABASE_SERVICE_ROLE_KEY"),
        description="Supabase service_role key (bypasses RLS)"
    )

    SUPABASE_ANON_KEY: str | None = Field(
        default=None,
        description="Supabase anon/public API key (used for Supabase Auth sign-in)"
    )

    SUPABASE_JWT_SECRET: str | None = Field(
        default=None,
        description="Legacy Supabase JWT secret for HS256 tokens (AUTH_MODE=supabase)"
    )

    STORAGE_BUCKET: str = Field(
        default="Portfolio-storage",
        description="Supabase Storage bucket for images and resumes"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, auto-reload)"
    )

    STATIC_UPLOADS_DIR: str = Field(
        default="uploads",
        description="Local directory served under /uploads (mounted only if it exists)"
    )

    # -------------------------------------------------------------------------
    # Authentication
    # -------------------------------------------------------------------------

    AUTH_MODE: Literal["local", "supabase"] = Field(
        default="local",
        description="local = JWT issued from ADMIN_USERNAME/ADMIN_PASSWORD, "
                    "supabase = delegate to Supabase Auth"
    )

    JWT_SECRET: str = Field(
        default=DEV_JWT_SECRET,
        min_length=16,
        description="Secret key for signing admin tokens"
    )

    JWT_ALGORITHM: str = Field(
        default="HS256",
        description="Signing algorithm for admin tokens"
    )

    JWT_EXPIRE_HOURS: int = Field(
        default=24,
        ge=1,
        le=24 * 30,
        description="Admin token lifetime in hours"
    )

    ADMIN_USERNAME: str | None = Field(
        default=None,
        description="Admin login name (AUTH_MODE=local)"
    )

    ADMIN_PASSWORD: str | None = Field(
        default=None,
        description="Admin password (AUTH_MODE=local)"
    )

    ADMIN_EMAILS: str = Field(
        default="",
        description="Comma-separated emails allowed as admin (AUTH_MODE=supabase, empty = any user)"
    )

    # -------------------------------------------------------------------------
    # CORS & Rate Limiting
    # -------------------------------------------------------------------------

    # CORS origins (comma-separated string that gets parsed)
    # Entries like "*.example.com" allow every subdomain
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins in production (comma-separated)"
    )

    ALLOW_LOCALHOST: bool = Field(
        default=False,
        description="Also allow http://localhost:3000 in production"
    )

    RATE_LIMIT_ENABLED: bool = Field(
        default=True,
        description="Enable per-IP rate limiting"
    )

    RATE_LIMIT: str = Field(
        default="100/15 minutes",
        description="Default per-IP limit (limits library notation)"
    )

    # -------------------------------------------------------------------------
    # Email (SMTP) Settings
    # -------------------------------------------------------------------------
    # Notifications are disabled unless host, user and password are all set

    SMTP_HOST: str | None = Field(default=None, description="SMTP relay host")

    SMTP_PORT: int = Field(
        default=587,
        ge=1,
        le=65535,
        description="SMTP port (465 = implicit TLS, 587 = STARTTLS)"
    )

    SMTP_USER: str | None = Field(default=None, description="SMTP username / sender address")

    SMTP_PASS: str | None = Field(default=None, description="SMTP password")

    SMTP_TIMEOUT: int = Field(default=30, ge=1, description="SMTP timeout in seconds")

    NOTIFICATION_EMAIL: str | None = Field(
        default=None,
        description="Where contact notifications go (defaults to SMTP_USER)"
    )

    EMAIL_FROM_NAME: str = Field(
        default="Portfolio Contact",
        description="Display name on notification emails"
    )

    SITE_OWNER_NAME: str = Field(
        default="Portfolio",
        description="Name printed in the notification email footer"
    )

    # -------------------------------------------------------------------------
    # File Upload Settings
    # -------------------------------------------------------------------------

    MAX_IMAGE_SIZE_MB: int = Field(
        default=5,
        ge=1,
        le=100,
        description="Maximum image upload size in MB"
    )

    MAX_RESUME_SIZE_MB: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum resume (PDF) upload size in MB"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # Load from .env file in project root
        env_file=".env",
        env_file_encoding="utf-8",
        # Don't fail if .env doesn't exist (useful for production where
        # env vars are set directly)
        env_ignore_empty=True,
        # Case-sensitive environment variable names
        case_sensitive=True,
        extra="ignore",
    )

    @model_validator(mode="after")
    def _check_production_secrets(self) -> "Settings":
        """Refuse to start in production with the development signing secret."""
        if (
            self.ENVIRONMENT == "production"
            and self.AUTH_MODE == "local"
            and self.JWT_SECRET == DEV_JWT_SECRET
        ):
            raise ValueError("JWT_SECRET is required in production")
        return self

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list of exact origins.

        Wildcard entries ("*.example.com") are excluded here and handled by
        cors_origin_regex. ALLOW_LOCALHOST appends http://localhost:3000.
        """
        origins = [
            origin.strip()
            for origin in self.CORS_ORIGINS.split(",")
            if origin.strip() and not origin.strip().startswith("*.")
        ]
        if self.ALLOW_LOCALHOST and "http://localhost:3000" not in origins:
            origins.append("http://localhost:3000")
        return origins

    @property
    def cors_origin_regex(self) -> str | None:
        """
        Build an origin regex from wildcard CORS entries.

        Example: "*.example.com" -> r"https?://([a-z0-9-]+\\.)+example\\.com"
        """
        bases = [
            origin.strip()[2:]
            for origin in self.CORS_ORIGINS.split(",")
            if origin.strip().startswith("*.")
        ]
        if not bases:
            return None
        alternatives = "|".join(re.escape(base) for base in bases)
        return rf"https?://([a-z0-9-]+\.)+({alternatives})"

    @property
    def admin_emails_list(self) -> list[str]:
        """Parse ADMIN_EMAILS into a lowercase list."""
        return [e.strip().lower() for e in self.ADMIN_EMAILS.split(",") if e.strip()]

    @property
    def admin_credentials(self) -> tuple[str, str] | None:
        """
        Admin username/password pair for local login.

        Outside production, missing values fall back to development defaults.
        Returns None when production credentials are not configured.
        """
        username = self.ADMIN_USERNAME
        password = self.ADMIN_PASSWORD
        if not self.is_production:
            username = username or DEV_ADMIN_USERNAME
            password = password or DEV_ADMIN_PASSWORD
        if not username or not password:
            return None
        return username, password

    @property
    def email_enabled(self) -> bool:
        """Check if SMTP notifications are configured."""
        return bool(self.SMTP_HOST and self.SMTP_USER and self.SMTP_PASS)

    @property
    def notification_recipient(self) -> str | None:
        """Address that receives contact notifications."""
        return self.NOTIFICATION_EMAIL or self.SMTP_USER

    @property
    def max_image_size_bytes(self) -> int:
        return self.MAX_IMAGE_SIZE_MB * 1024 * 1024

    @property
    def max_resume_size_bytes(self) -> int:
        return self.MAX_RESUME_SIZE_MB * 1024 * 1024

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
