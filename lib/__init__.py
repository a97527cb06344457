# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - quote_loader.py: Reads the quote JSON file into a QuoteCollection
# - utils.py: Shared utilities (error base class, author normalization)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.utils import ApplicationError, normalize_author
from lib.quote_loader import QuoteDataError, load_quotes, parse_quotes

__all__ = [
    # Utils
    "ApplicationError",
    "normalize_author",
    # Loader
    "QuoteDataError",
    "load_quotes",
    "parse_quotes",
]
