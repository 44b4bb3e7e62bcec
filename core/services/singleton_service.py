# =============================================================================
# core/services/singleton_service.py - Single-Row Tables
# =============================================================================
# personal_info, hero_section and site_settings each hold one row. Reads
# return the first row (or None); writes update that row when it exists and
# insert it otherwise.
# =============================================================================

import logging
from typing import Any, Callable

from lib.supabase_client import SupabaseClient
from lib.utils import utc_now_iso
from app.exceptions import BadRequestError

logger = logging.getLogger(__name__)

# System fields never written from a request body
SYSTEM_FIELDS = frozenset({"id", "created_at", "updated_at"})


class SingletonService:
    """
    Get / upsert-if-absent for a singleton table.

    Args:
        table: Table name
        label: Human-readable name for logs and errors
        create_check: Optional callable run on the data before the first
            insert; raises BadRequestError when the row can't be created
    """

    def __init__(
        self,
        table: str,
        label: str,
        create_check: Callable[[dict[str, Any]], None] | None = None,
    ):
        self.table = table
        self.label = label
        self.create_check = create_check

    def get(self) -> dict[str, Any] | None:
        return SupabaseClient.fetch_first(self.table)

    def save(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Update the existing row or create it.

        Returns:
            The stored row
        """
        data = {key: value for key, value in data.items() if key not in SYSTEM_FIELDS}
        data["updated_at"] = utc_now_iso()

        existing = SupabaseClient.fetch_first(self.table, columns="id")
        if existing:
            row = SupabaseClient.update(self.table, existing["id"], data)
            if row:
                logger.info(f"Updated {self.label}")
                return row
            # Row vanished between read and write; fall through to insert
            logger.warning(f"{self.label} row {existing['id']} disappeared during update")

        if self.create_check:
            self.create_check(data)
        row = SupabaseClient.insert(self.table, data)
        logger.info(f"Created {self.label}: {row.get('id')}")
        return row


def _require_hero_name(data: dict[str, Any]) -> None:
    if not data.get("name"):
        raise BadRequestError(
            "Name is required to create hero section",
            suggestion="Include a non-empty 'name' in the first hero update",
        )


personal_info_service = SingletonService("personal_info", "personal info")
hero_service = SingletonService("hero_section", "hero section", create_check=_require_hero_name)
site_settings_service = SingletonService("site_settings", "site settings")
