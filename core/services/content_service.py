# =============================================================================
# core/services/content_service.py - Collection CRUD
# =============================================================================
# One ContentService per admin-managed table (projects, skills, experiences,
# contact messages). Each method is a single SupabaseClient call plus the
# not-found check, so routes stay thin.
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from lib.supabase_client import OrderSpec, SupabaseClient
from lib.utils import normalize_uuid, utc_now_iso
from app.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class ContentService:
    """
    CRUD operations for one table.

    Example:
        projects = ContentService("projects", "Project", order=[("created_at", True)])
        row = projects.create(ProjectCreate(title="...", description="..."))
    """

    def __init__(
        self,
        table: str,
        label: str,
        order: OrderSpec = (("created_at", True),),
        touch_updated_at: bool = True,
    ):
        self.table = table
        self.label = label
        self.order = list(order)
        # Stamp updated_at on partial updates
        self.touch_updated_at = touch_updated_at

    def list(
        self,
        filters: dict[str, Any] | None = None,
        order: OrderSpec | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[dict[str, Any]]:
        """List rows with optional equality filters in the configured order."""
        return SupabaseClient.select(
            self.table,
            filters=filters,
            order=order if order is not None else self.order,
            limit=limit,
            offset=offset,
        )

    def get(self, row_id: str | UUID) -> dict[str, Any]:
        """
        Fetch one row.

        Raises:
            NotFoundError: If no row has that id
        """
        row = SupabaseClient.fetch_by_id(self.table, row_id)
        if not row:
            raise NotFoundError(self.label, normalize_uuid(row_id))
        return row

    def create(self, payload: BaseModel | dict[str, Any]) -> dict[str, Any]:
        """Insert a row from a validated model (or prepared dict)."""
        data = payload.model_dump(mode="json") if isinstance(payload, BaseModel) else payload
        row = SupabaseClient.insert(self.table, data)
        logger.info(f"Created {self.label.lower()}: {row.get('id')}")
        return row

    def update(
        self,
        row_id: str | UUID,
        payload: BaseModel | dict[str, Any],
    ) -> dict[str, Any]:
        """
        Apply a partial update.

        Only fields present in the request are written.

        Raises:
            NotFoundError: If no row has that id
        """
        if isinstance(payload, BaseModel):
            data = payload.model_dump(mode="json", exclude_unset=True)
        else:
            data = dict(payload)

        if not data:
            # Nothing to write; return the current row (404 if missing)
            return self.get(row_id)

        if self.touch_updated_at:
            data["updated_at"] = utc_now_iso()

        row = SupabaseClient.update(self.table, row_id, data)
        if not row:
            raise NotFoundError(self.label, normalize_uuid(row_id))
        logger.info(f"Updated {self.label.lower()}: {row.get('id')} ({', '.join(sorted(data))})")
        return row

    def delete(self, row_id: str | UUID) -> None:
        """
        Delete a row.

        Raises:
            NotFoundError: If no row has that id
        """
        if not SupabaseClient.delete(self.table, row_id):
            raise NotFoundError(self.label, normalize_uuid(row_id))
        logger.info(f"Deleted {self.label.lower()}: {normalize_uuid(row_id)}")


# -----------------------------------------------------------------------------
# Service instances
# -----------------------------------------------------------------------------

projects_service = ContentService(
    "projects",
    "Project",
    order=[("created_at", True)],
)

# Public listing order for projects
PUBLIC_PROJECT_ORDER = [("sort_order", False), ("created_at", True)]

skills_service = ContentService(
    "skills",
    "Skill",
    order=[("sort_order", False)],
)

experiences_service = ContentService(
    "experiences",
    "Experience",
    order=[("sort_order", False), ("start_date", True)],
)

messages_service = ContentService(
    "contact_messages",
    "Message",
    order=[("created_at", True)],
)
