# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - quote.py: Quote and QuoteCollection (reference data + response body)
#
# These models define the "contract" between API and clients.
# =============================================================================

from .quote import (
    UNKNOWN_AUTHOR,
    Quote,
    QuoteCollection,
)

__all__ = [
    "UNKNOWN_AUTHOR",
    "Quote",
    "QuoteCollection",
]
