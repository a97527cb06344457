# =============================================================================
# core/models/quote.py - Quote Schemas
# =============================================================================
# These models define the reference data served by the API:
# - Quote: a single text + author pair (also the response body)
# - QuoteCollection: the read-only set of quotes loaded at startup
#
# Both models are frozen. A collection is built once and shared by every
# request for the lifetime of the process.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, model_validator

from lib.utils import normalize_author

# Author value (compared case-insensitively) for quotes with no known author.
# These quotes form the fallback set when an author filter matches nothing.
UNKNOWN_AUTHOR = "unknown"


class Quote(BaseModel):
    """
    Schema for a single quote.

    Returned by GET /api/randomQuote.

    Example:
        {
            "text": "I'm Batman.",
            "author": "Bruce Wayne"
        }
    """

    model_config = ConfigDict(frozen=True)

    # The quote content
    text: str = Field(
        ...,
        description="Quote content"
    )

    # Attributed author ("Unknown" when not known)
    author: str = Field(
        ...,
        description="Attributed author, or 'Unknown'"
    )

    @property
    def has_unknown_author(self) -> bool:
        """Check if this quote belongs to the fallback set."""
        return normalize_author(self.author) == UNKNOWN_AUTHOR


class QuoteCollection(BaseModel):
    """
    Immutable, ordered collection of quotes.

    The collection must not be empty and must contain at least one quote
    by an unknown author. The second check can be turned off through the
    validation context, which is how tests build degenerate collections:

        QuoteCollection.from_records(records, require_fallback=False)
    """

    model_config = ConfigDict(frozen=True)

    quotes: tuple[Quote, ...] = Field(
        ...,
        min_length=1,
        description="Quotes in source order"
    )

    @model_validator(mode="after")
    def check_fallback_present(self, info: ValidationInfo) -> "QuoteCollection":
        """Reject collections without any unknown-author quote."""
        context = info.context or {}
        if context.get("require_fallback", True) and not self.fallback_quotes():
            raise ValueError(
                f"collection has no quote with author '{UNKNOWN_AUTHOR}'; "
                "unmatched author filters would have nothing to fall back to"
            )
        return self

    @classmethod
    def from_records(
        cls,
        records: list[dict] | list[Quote],
        require_fallback: bool = True,
    ) -> "QuoteCollection":
        """
        Build a collection from raw records or Quote instances.

        Raises:
            pydantic.ValidationError: If a record is malformed or the
                collection breaks its invariants
        """
        return cls.model_validate(
            {"quotes": list(records)},
            context={"require_fallback": require_fallback},
        )

    def __len__(self) -> int:
        return len(self.quotes)

    def fallback_quotes(self) -> tuple[Quote, ...]:
        """Quotes whose author is unknown, in source order."""
        return tuple(q for q in self.quotes if q.has_unknown_author)
