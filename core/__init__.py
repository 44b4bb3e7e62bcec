# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the portfolio's business logic:
# - models/: Pydantic schemas for request validation and API/DB mapping
# - services/: Table operations, dashboard/analytics rollups, storage, email
# - templates/: Jinja2 templates for the contact notification email
#
# Services never touch Request/Response objects; routes pass plain values
# in and get rows or dicts back. This keeps the logic testable.
# =============================================================================
