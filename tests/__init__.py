# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Portfolio API:
# - test_models.py / test_config.py / test_utils.py: unit tests
# - test_supabase_client.py / test_services.py: data and service layers
# - test_*_api.py, test_auth.py, test_analytics.py, test_uploads.py:
#   endpoint contracts with the database mocked
#
# Run tests with: pytest
# =============================================================================
