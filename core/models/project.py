# =============================================================================
# core/models/project.py - Project Schemas
# =============================================================================
# These models define the API contract for portfolio projects:
# - ProjectCreate: Admin input for a new project
# - ProjectUpdate: Partial update (only fields sent are written)
#
# `technologies` accepts either a JSON list or a comma-separated string
# ("React, Node.js") since the admin form posts both.
# =============================================================================

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from lib.utils import split_comma_list


class ProjectStatus(str, Enum):
    """
    Lifecycle of a project as shown on the site.

    - completed: Shipped / finished
    - in-progress: Actively being built
    - planning: Announced but not started
    """
    COMPLETED = "completed"
    IN_PROGRESS = "in-progress"
    PLANNING = "planning"


class ProjectBase(BaseModel):
    """Optional project fields with their defaults."""

    image_url: str | None = Field(default=None, max_length=500)
    category: str = Field(default="General", min_length=1, max_length=100)
    technologies: list[str] = Field(default_factory=list)
    demo_url: str | None = Field(default=None, max_length=200)
    github_url: str | None = Field(default=None, max_length=200)
    featured: bool = False
    status: ProjectStatus = ProjectStatus.COMPLETED
    sort_order: int = 0
    start_date: date | None = None
    end_date: date | None = None

    @field_validator("technologies", mode="before")
    @classmethod
    def _parse_technologies(cls, value):
        if value is None:
            return []
        return split_comma_list(value)


class ProjectCreate(ProjectBase):
    """
    Schema for creating a project.

    Example:
        {
            "title": "AI Chatbot",
            "description": "NLP chatbot for customer support",
            "technologies": ["Python", "FastAPI"],
            "status": "in-progress"
        }
    """

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)


class ProjectUpdate(BaseModel):
    """
    Schema for a partial project update.

    Fields left out of the request body are not touched.
    """

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, min_length=1)
    image_url: str | None = Field(default=None, max_length=500)
    category: str | None = Field(default=None, min_length=1, max_length=100)
    technologies: list[str] | None = None
    demo_url: str | None = Field(default=None, max_length=200)
    github_url: str | None = Field(default=None, max_length=200)
    featured: bool | None = None
    status: ProjectStatus | None = None
    sort_order: int | None = None
    start_date: date | None = None
    end_date: date | None = None

    @field_validator("technologies", mode="before")
    @classmethod
    def _parse_technologies(cls, value):
        return split_comma_list(value)
