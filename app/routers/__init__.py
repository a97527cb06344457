# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - quotes.py: Random quote endpoint
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import quotes

__all__ = [
    "health",
    "quotes",
]
