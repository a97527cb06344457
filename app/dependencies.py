# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The quote collection and the random generator live on app.state (set up in
# the lifespan handler). Tests swap either one via app.dependency_overrides.
# =============================================================================

import random
from typing import Annotated

from fastapi import Depends, Request

from app.exceptions import QuotesNotLoadedError
from core.models.quote import QuoteCollection


def get_quote_collection(request: Request) -> QuoteCollection:
    """
    Get the quote collection loaded at startup.

    Raises:
        QuotesNotLoadedError: If startup has not loaded a collection
    """
    collection = getattr(request.app.state, "quote_collection", None)
    if collection is None:
        raise QuotesNotLoadedError()
    return collection


def get_random(request: Request) -> random.Random:
    """
    Get the shared random generator.

    Falls back to a fresh generator if startup did not create one.
    """
    rng = getattr(request.app.state, "rng", None)
    return rng if rng is not None else random.Random()


# Type aliases for dependency injection
QuoteCollectionDep = Annotated[QuoteCollection, Depends(get_quote_collection)]
RandomDep = Annotated[random.Random, Depends(get_random)]
