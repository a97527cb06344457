# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Random Quote API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
import random
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.exceptions import (
    QuoteAPIException,
    application_error_handler,
    quote_api_exception_handler,
)
from app.routers import health, quotes
from lib.quote_loader import load_quotes
from lib.utils import ApplicationError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup loads the quote collection and the shared random generator onto
    app.state. A bad quote file stops startup instead of serving requests.
    """
    logger.info(f"Starting Random Quote API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    try:
        app.state.quote_collection = load_quotes(settings.quotes_path)
    except ApplicationError as e:
        logger.error(f"Failed to load quotes: {e}")
        raise

    app.state.rng = random.Random(settings.QUOTES_RANDOM_SEED)

    yield

    logger.info("Shutting down Random Quote API")


# Create FastAPI application
app = FastAPI(
    title="Random Quote API",
    description="""
## Random Quote API

Returns a random quote, optionally from a matching author.

### Quick Start

```bash
# Any quote
curl http://localhost:8000/api/randomQuote

# A quote by an author whose name contains "wayne"
curl "http://localhost:8000/api/randomQuote?author=wayne"
```

When no author matches, a quote by an unknown author is returned.
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Quotes",
            "description": "Random quote selection",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(QuoteAPIException)
async def handle_quote_api_exception(request: Request, exc: QuoteAPIException):
    """Handle HTTP-level API exceptions."""
    return await quote_api_exception_handler(request, exc)


@app.exception_handler(ApplicationError)
async def handle_application_error(request: Request, exc: ApplicationError):
    """Handle errors raised by quote data or selection."""
    logger.error(f"Application error: {exc}")
    return await application_error_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Quote endpoints
app.include_router(
    quotes.router,
    prefix="/api",
    tags=["Quotes"]
)

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Random Quote API",
        "version": __version__,
        "docs": "/docs",
        "random_quote": "/api/randomQuote",
        "health": "/api/health",
    }


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
    )
