# =============================================================================
# core/models/hero.py - Hero Section Schemas
# =============================================================================
# The hero_section table predates the current frontend, so column names and
# API field names differ:
#
#   API field      DB column
#   ------------   -----------
#   typing_texts   titles
#   quote          description
#
# hero_to_api / HeroUpdate.to_db_fields translate between the two.
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field

DEFAULT_GREETING = "Hello, I'm"


class HeroUpdate(BaseModel):
    """
    Body for PUT /admin/hero.

    Only fields present in the request are written; explicit nulls clear a
    column.
    """

    greeting: str | None = Field(default=None, max_length=100)
    name: str | None = Field(default=None, max_length=100)
    typing_texts: list[str] | None = None
    quote: str | None = None
    social_links: dict[str, str] | None = None

    def to_db_fields(self) -> dict[str, Any]:
        """Map the fields that were sent to their DB column names."""
        column_for = {
            "greeting": "greeting",
            "name": "name",
            "typing_texts": "titles",
            "quote": "description",
            "social_links": "social_links",
        }
        sent = self.model_dump(exclude_unset=True)
        return {column_for[field]: value for field, value in sent.items()}


def hero_to_api(row: dict[str, Any] | None, include_meta: bool = False) -> dict[str, Any]:
    """
    Map a hero_section row to the frontend shape, filling defaults.

    Args:
        row: DB row or None when no hero has been saved yet
        include_meta: Also return id/created_at/updated_at (admin view)
    """
    row = row or {}
    result = {
        "greeting": row.get("greeting") or DEFAULT_GREETING,
        "name": row.get("name") or "",
        "typing_texts": row.get("titles") or [],
        "quote": row.get("description") or "",
        "social_links": row.get("social_links") or {},
    }
    if include_meta:
        result = {
            "id": row.get("id"),
            **result,
            "created_at": row.get("created_at"),
            "updated_at": row.get("updated_at"),
        }
    return result
