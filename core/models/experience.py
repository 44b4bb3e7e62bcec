# =============================================================================
# core/models/experience.py - Experience & Education Schemas
# =============================================================================
# `description` is stored as a list of bullet lines. The admin editor sends
# it as one newline-separated string, so input accepts both forms and the
# admin list endpoint joins it back (see join_lines).
# =============================================================================

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from lib.utils import split_lines


class ExperienceType(str, Enum):
    """Timeline entry kind."""
    EXPERIENCE = "experience"
    EDUCATION = "education"


class ExperienceCreate(BaseModel):
    """
    Schema for creating a timeline entry.

    Example:
        {
            "title": "Frontend Developer Intern",
            "company": "Tech Innovators",
            "period": "Jun 2024 - Aug 2024",
            "description": "Built React apps\\nImproved load time by 30%",
            "type": "experience"
        }
    """

    title: str = Field(..., min_length=1, max_length=200)
    company: str = Field(..., min_length=1, max_length=200)
    period: str = Field(..., min_length=1, max_length=100)
    description: list[str] = Field(default_factory=list)
    type: ExperienceType
    location: str | None = Field(default=None, max_length=100)
    company_url: str | None = Field(default=None, max_length=200)
    sort_order: int = 0
    is_current: bool = False
    start_date: date | None = None
    end_date: date | None = None

    @field_validator("description", mode="before")
    @classmethod
    def _split_description(cls, value):
        if value is None:
            return []
        return split_lines(value)


class ExperienceUpdate(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    company: str | None = Field(default=None, min_length=1, max_length=200)
    period: str | None = Field(default=None, min_length=1, max_length=100)
    description: list[str] | None = None
    type: ExperienceType | None = None
    location: str | None = Field(default=None, max_length=100)
    company_url: str | None = Field(default=None, max_length=200)
    sort_order: int | None = None
    is_current: bool | None = None
    start_date: date | None = None
    end_date: date | None = None

    @field_validator("description", mode="before")
    @classmethod
    def _split_description(cls, value):
        return split_lines(value)
