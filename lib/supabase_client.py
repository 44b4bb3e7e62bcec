# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase database operations.
# It implements the singleton pattern to reuse a single client connection
# and exposes one generic method per PostgREST operation:
# - select / fetch_by_id / fetch_first / count for reads
# - insert / update / delete for writes
#
# Every route in the API is a single-table read or write, so services call
# these methods with a table name and filters instead of touching the
# query builder directly.
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   projects = SupabaseClient.select("projects", order=[("sort_order", False)])
# =============================================================================

from __future__ import annotations

import logging
from typing import Any, Iterable
from uuid import UUID

from supabase import create_client, Client

from app.config import settings
from lib.utils import normalize_uuid

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgREST code returned by .single() when no row matches
NO_ROWS_CODE = "PGRST116"

# Ordering spec: (column, descending)
OrderSpec = Iterable[tuple[str, bool]]


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    `code` carries the PostgREST/Postgres error code when one is available
    (e.g. "23505" for unique violations) so the API layer can map it to an
    HTTP status.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


def _error_code(exc: Exception) -> str:
    """Extract the PostgREST/Postgres code from a client exception."""
    code = getattr(exc, "code", None)
    if isinstance(code, str) and code:
        return code
    if NO_ROWS_CODE in str(exc):
        return NO_ROWS_CODE
    return "SUPABASE_ERROR"


class SupabaseClient:
    """
    Typed wrapper for Supabase database operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.

    Example:
        skills = SupabaseClient.select(
            "skills",
            filters={"category": "backend"},
            order=[("sort_order", False)],
        )
        row = SupabaseClient.fetch_by_id("projects", project_id)
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        This is appropriate for server-side operations.

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    @classmethod
    def _apply_filters(cls, query: Any, filters: dict[str, Any] | None) -> Any:
        """Apply equality filters, skipping None values."""
        for column, value in (filters or {}).items():
            if value is None:
                continue
            if isinstance(value, UUID):
                value = normalize_uuid(value)
            query = query.eq(column, value)
        return query

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @classmethod
    def select(
        cls,
        table: str,
        columns: str = "*",
        filters: dict[str, Any] | None = None,
        order: OrderSpec | None = None,
        limit: int | None = None,
        offset: int = 0,
        since: tuple[str, str] | None = None,
        exclude: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """
        Select rows from a table.

        Args:
            table: Table name
            columns: PostgREST column list (default: all)
            filters: Equality filters {column: value}; None values are ignored
            order: Sequence of (column, descending) pairs
            limit: Maximum rows to return
            offset: Rows to skip (used with limit for pagination)
            since: (column, iso_timestamp) lower bound, inclusive
            exclude: Inequality filters {column: value}

        Returns:
            List of row dicts (empty if nothing matches)

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()

        try:
            query = client.table(table).select(columns)
            query = cls._apply_filters(query, filters)
            for column, value in (exclude or {}).items():
                query = query.neq(column, value)
            if since:
                query = query.gte(since[0], since[1])
            for column, desc in order or []:
                query = query.order(column, desc=desc)
            if limit is not None:
                query = query.range(offset, offset + limit - 1)

            response = query.execute()
            rows = response.data or []
            logger.debug(f"Selected {len(rows)} rows from {table}")
            return rows

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to query {table}: {e}",
                code=_error_code(e),
                details={"table": table, "filters": filters or {}},
            )

    @classmethod
    def fetch_by_id(cls, table: str, row_id: str | UUID) -> dict[str, Any] | None:
        """
        Fetch a single row by primary key.

        Returns:
            Row dict, or None if not found

        Raises:
            SupabaseClientError: If query fails
        """
        rows = cls.select(table, filters={"id": normalize_uuid(row_id)}, limit=1)
        return rows[0] if rows else None

    @classmethod
    def fetch_first(cls, table: str, columns: str = "*") -> dict[str, Any] | None:
        """
        Fetch the first row of a table.

        Used for singleton tables (personal_info, hero_section, site_settings).

        Returns:
            Row dict, or None if the table is empty
        """
        rows = cls.select(table, columns=columns, limit=1)
        return rows[0] if rows else None

    @classmethod
    def count(
        cls,
        table: str,
        filters: dict[str, Any] | None = None,
        since: tuple[str, str] | None = None,
    ) -> int:
        """
        Count rows matching optional equality filters.

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()

        try:
            query = client.table(table).select("id", count="exact")
            query = cls._apply_filters(query, filters)
            if since:
                query = query.gte(since[0], since[1])
            response = query.limit(1).execute()
            return response.count or 0

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to count {table}: {e}",
                code=_error_code(e),
                details={"table": table},
            )

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    @classmethod
    def insert(cls, table: str, data: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a row and return it with generated id/timestamps.

        Raises:
            SupabaseClientError: If insert fails or returns nothing
        """
        client = cls.get_client()

        try:
            response = client.table(table).insert(data).execute()

            if response.data:
                logger.debug(f"Inserted row into {table}: {response.data[0].get('id')}")
                return response.data[0]
            raise SupabaseClientError(
                message="Insert returned no data",
                code="INSERT_NO_DATA",
                details={"table": table},
            )

        except SupabaseClientError:
            raise
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to insert into {table}: {e}",
                code=_error_code(e),
                details={"table": table},
            )

    @classmethod
    def update(
        cls,
        table: str,
        row_id: str | UUID,
        data: dict[str, Any],
    ) -> dict[str, Any] | None:
        """
        Update a row by primary key.

        Returns:
            Updated row dict, or None if no row has that id

        Raises:
            SupabaseClientError: If update fails
        """
        client = cls.get_client()
        row_id_str = normalize_uuid(row_id)

        try:
            response = (
                client.table(table)
                .update(data)
                .eq("id", row_id_str)
                .execute()
            )
            return response.data[0] if response.data else None

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to update {table}: {e}",
                code=_error_code(e),
                details={"table": table, "id": row_id_str},
            )

    @classmethod
    def delete(cls, table: str, row_id: str | UUID) -> bool:
        """
        Delete a row by primary key.

        Returns:
            True if a row was deleted, False if no row had that id

        Raises:
            SupabaseClientError: If delete fails
        """
        client = cls.get_client()
        row_id_str = normalize_uuid(row_id)

        try:
            response = (
                client.table(table)
                .delete()
                .eq("id", row_id_str)
                .execute()
            )
            deleted = bool(response.data)
            if deleted:
                logger.debug(f"Deleted {table} row {row_id_str}")
            return deleted

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to delete from {table}: {e}",
                code=_error_code(e),
                details={"table": table, "id": row_id_str},
            )
