# =============================================================================
# app/routers/quotes.py - Quote Endpoints
# =============================================================================
# GET /api/randomQuote returns one random quote, optionally narrowed to
# authors whose name contains the `author` query parameter.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Query

from app.dependencies import QuoteCollectionDep, RandomDep
from core.models.quote import Quote
from core.services.quote_service import QuoteService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/randomQuote", response_model=Quote)
async def random_quote(
    collection: QuoteCollectionDep,
    rng: RandomDep,
    author: Annotated[
        str | None,
        Query(description="Case-insensitive part of the author's name")
    ] = None,
):
    """
    Get a random quote.

    With `author`, only quotes whose author contains the value are
    considered. When none match, a quote by an unknown author is returned
    instead, so this endpoint always answers 200 for valid data.
    """
    return QuoteService.select_quote(collection, author, rng=rng)
