# =============================================================================
# core/services/quote_service.py - Quote Selection Logic
# =============================================================================
# Picks a random quote from the reference collection, optionally filtered by
# an author substring. Pure functions over an immutable collection: the only
# outside input is the random generator, which callers can inject.
#
# Selection rules:
#   1. No filter (None or "")  -> every quote is a candidate
#   2. Filter                  -> quotes whose author contains the filter,
#                                 case-insensitively
#   3. No candidates           -> quotes whose author is "unknown"
#   4. Uniform random choice among the candidates
# =============================================================================

import logging
import random

from core.models.quote import Quote, QuoteCollection, UNKNOWN_AUTHOR
from lib.utils import ApplicationError, normalize_author

logger = logging.getLogger(__name__)


class EmptyFallbackError(ApplicationError):
    """Raised when a filter matches nothing and there is no fallback quote."""

    def __init__(self, author_filter: str):
        super().__init__(
            message=f"No quotes match author '{author_filter}' and no fallback quote exists",
            code="EMPTY_FALLBACK",
            suggestion=f"Add at least one quote with author '{UNKNOWN_AUTHOR.title()}' to the quote data",
            details={"author_filter": author_filter},
        )


class QuoteService:
    """
    Service for quote selection.

    Stateless: every method takes the collection it works on.
    """

    @staticmethod
    def filter_by_author(
        collection: QuoteCollection,
        author_filter: str | None,
    ) -> tuple[Quote, ...]:
        """
        Get the quotes whose author contains the filter.

        Plain substring containment, so "man" matches "Batman".
        An empty or missing filter matches every quote.

        Args:
            collection: The quote collection
            author_filter: Case-insensitive author substring

        Returns:
            Matching quotes in source order
        """
        needle = normalize_author(author_filter)
        if not needle:
            return collection.quotes

        return tuple(
            q for q in collection.quotes
            if needle in normalize_author(q.author)
        )

    @staticmethod
    def candidates(
        collection: QuoteCollection,
        author_filter: str | None,
    ) -> tuple[Quote, ...]:
        """
        Get the quotes a random pick is drawn from.

        Falls back to the unknown-author quotes when the filter matches
        nothing.

        Raises:
            EmptyFallbackError: If the fallback set is empty too
        """
        matches = QuoteService.filter_by_author(collection, author_filter)
        if matches:
            return matches

        fallback = collection.fallback_quotes()
        if not fallback:
            raise EmptyFallbackError(author_filter or "")

        logger.info(
            f"No quotes match author '{author_filter}', "
            f"falling back to {len(fallback)} unknown-author quotes"
        )
        return fallback

    @staticmethod
    def select_quote(
        collection: QuoteCollection,
        author_filter: str | None = None,
        rng: random.Random | None = None,
    ) -> Quote:
        """
        Pick one quote uniformly at random.

        Args:
            collection: The quote collection (not modified)
            author_filter: Optional case-insensitive author substring
            rng: Random generator; the module-level one when omitted

        Returns:
            The selected quote

        Raises:
            EmptyFallbackError: If nothing matches and there is no fallback
        """
        pool = QuoteService.candidates(collection, author_filter)
        chooser = rng if rng is not None else random

        quote = chooser.choice(pool)
        logger.debug(
            f"Selected quote by '{quote.author}' from {len(pool)} candidates "
            f"(filter={author_filter!r})"
        )
        return quote
