# =============================================================================
# core/models/skill.py - Skill Schemas
# =============================================================================

from enum import Enum

from pydantic import BaseModel, Field


class SkillCategory(str, Enum):
    """Groups used by the skills section of the site."""
    FRONTEND = "frontend"
    BACKEND = "backend"
    DATABASE = "database"
    DEVOPS = "devops"
    TOOLS = "tools"
    AI_ML = "ai-ml"
    SOFT_SKILLS = "soft-skills"
    OTHER = "other"


class SkillCreate(BaseModel):
    """
    Schema for creating a skill.

    Example:
        {"name": "TypeScript", "level": 85, "category": "frontend"}
    """

    name: str = Field(..., min_length=1, max_length=100)
    level: int = Field(..., ge=0, le=100, description="Proficiency from 0 to 100")
    category: SkillCategory
    icon_name: str | None = Field(default=None, max_length=100)
    sort_order: int = 0
    is_featured: bool = False


class SkillUpdate(BaseModel):
    """Partial skill update; omitted fields are left unchanged."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    level: int | None = Field(default=None, ge=0, le=100)
    category: SkillCategory | None = None
    icon_name: str | None = Field(default=None, max_length=100)
    sort_order: int | None = None
    is_featured: bool | None = None
