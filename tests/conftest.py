# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Patches the Supabase client so no test touches the network
# - Provides an API client and admin auth headers
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("AUTH_MODE", "local")
os.environ.setdefault("ADMIN_USERNAME", "admin")
os.environ.setdefault("ADMIN_PASSWORD", "test-admin-password")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from lib.supabase_client import SupabaseClient


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def client():
    """FastAPI test client."""
    from app.main import app

    return TestClient(app)


@pytest.fixture
def admin_token():
    """A valid locally issued admin token."""
    from app.auth import create_access_token

    token, _ = create_access_token("admin")
    return token


@pytest.fixture
def auth_headers(admin_token):
    """Authorization header for admin routes."""
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def mock_db():
    """
    Patch every SupabaseClient data method.

    Yields a dict of mocks keyed by method name. Reads default to "nothing
    found" so each test only configures what it needs.
    """
    names = ["select", "fetch_by_id", "fetch_first", "count", "insert", "update", "delete"]
    patchers = {name: patch.object(SupabaseClient, name) for name in names}
    mocks = {name: p.start() for name, p in patchers.items()}

    mocks["select"].return_value = []
    mocks["fetch_by_id"].return_value = None
    mocks["fetch_first"].return_value = None
    mocks["count"].return_value = 0
    mocks["update"].return_value = None
    mocks["delete"].return_value = False

    yield mocks

    for p in patchers.values():
        p.stop()


@pytest.fixture
def sample_project():
    """Sample project row."""
    return {
        "id": "11111111-1111-1111-1111-111111111111",
        "title": "Portfolio Site",
        "description": "Personal site built with Next.js",
        "image_url": None,
        "category": "Web",
        "technologies": ["Next.js", "FastAPI"],
        "demo_url": "https://example.com",
        "github_url": None,
        "featured": True,
        "status": "completed",
        "sort_order": 0,
        "start_date": None,
        "end_date": None,
        "created_at": "2024-01-15T10:00:00+00:00",
        "updated_at": "2024-01-15T10:00:00+00:00",
    }


@pytest.fixture
def sample_message():
    """Sample contact message row."""
    return {
        "id": "22222222-2222-2222-2222-222222222222",
        "name": "Jane Doe",
        "email": "jane@company.com",
        "subject": "Freelance project",
        "message": "Hi, are you available in March?",
        "phone": None,
        "status": "unread",
        "ip_address": "203.0.113.7",
        "user_agent": "pytest",
        "replied_at": None,
        "created_at": "2024-02-01T09:00:00+00:00",
    }
