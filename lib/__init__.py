# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Generic Supabase wrapper for table operations
# - utils.py: Shared helpers (UUIDs, client IP, list-valued text fields)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import (
    client_ip,
    join_lines,
    normalize_uuid,
    rate_limit_key,
    request_referrer,
    split_comma_list,
    split_lines,
    utc_now_iso,
)

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    # Utils
    "client_ip",
    "join_lines",
    "normalize_uuid",
    "rate_limit_key",
    "request_referrer",
    "split_comma_list",
    "split_lines",
    "utc_now_iso",
]
