# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common helpers used across the application:
# - UUID normalization for queries
# - Client IP / header extraction for analytics and rate limiting
# - Text helpers for list-valued columns (technologies, descriptions)
# =============================================================================

from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from fastapi import Request


# =============================================================================
# UUID Utilities
# =============================================================================

def normalize_uuid(value: str | UUID) -> str:
    """
    Normalize a UUID to string format.

    Handles both string and UUID objects, ensuring consistent string output.

    Example:
        row_id = normalize_uuid(uuid_obj)  # "550e8400-..."
        row_id = normalize_uuid("550e8400-...")  # "550e8400-..."
    """
    return str(value) if isinstance(value, UUID) else value


# =============================================================================
# Request Utilities
# =============================================================================

def client_ip(request: Request) -> str:
    """
    Best-effort visitor IP address for stored analytics/contact rows.

    The first entry of X-Forwarded-For wins, otherwise the socket peer
    address. The header is client-controlled, so never key security
    decisions on this value; use rate_limit_key for that.
    """
    forwarded = request.headers.get("x-forwarded-for", "")
    if forwarded:
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
    if request.client and request.client.host:
        return request.client.host
    return ""


def rate_limit_key(request: Request) -> str:
    """
    Rate-limit key trusting exactly one proxy hop.

    The last X-Forwarded-For entry is the one appended by our proxy; earlier
    entries are whatever the client sent. Without the header the socket peer
    address is used.
    """
    forwarded = request.headers.get("x-forwarded-for", "")
    hops = [hop.strip() for hop in forwarded.split(",") if hop.strip()]
    if hops:
        return hops[-1]
    if request.client and request.client.host:
        return request.client.host
    return ""


def request_referrer(request: Request) -> str:
    """Referer header (both spellings)."""
    return request.headers.get("referer") or request.headers.get("referrer") or ""


# =============================================================================
# Text Utilities
# =============================================================================

def split_lines(value: Any) -> Any:
    """
    Turn a newline-separated string into a list of trimmed, non-empty lines.

    Lists and other values pass through unchanged.

    Example:
        split_lines("Built APIs\\n\\n  Led team ") -> ["Built APIs", "Led team"]
    """
    if isinstance(value, str):
        return [line.strip() for line in value.split("\n") if line.strip()]
    return value


def split_comma_list(value: Any) -> Any:
    """
    Turn a comma-separated string into a list of trimmed items.

    Example:
        split_comma_list("React, Node.js,") -> ["React", "Node.js"]
    """
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


def join_lines(value: Any) -> str:
    """Inverse of split_lines for display in a textarea."""
    if isinstance(value, list):
        return "\n".join(str(line) for line in value)
    return value or ""


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string for timestamp columns."""
    return datetime.now(timezone.utc).isoformat()
