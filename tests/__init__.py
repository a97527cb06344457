# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Random Quote API:
# - test_models.py: Quote and QuoteCollection validation
# - test_quote_service.py: Author filtering, fallback, and random selection
# - test_quote_loader.py: Reading the quotes JSON file
# - test_api.py: Integration tests for API endpoints
#
# Run tests with: pytest
# =============================================================================
