# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .quote_service import EmptyFallbackError, QuoteService

__all__ = [
    "QuoteService",
    "EmptyFallbackError",
]
