# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the quote models to ensure:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# - Models are immutable
# - The unknown-author invariant is enforced unless explicitly disabled
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import UNKNOWN_AUTHOR, Quote, QuoteCollection


# =============================================================================
# Quote Tests
# =============================================================================

class TestQuote:
    """Tests for Quote model."""

    def test_valid_quote(self):
        """Test creating a valid Quote."""
        quote = Quote(text="I'm Batman.", author="Bruce Wayne")

        assert quote.text == "I'm Batman."
        assert quote.author == "Bruce Wayne"

    def test_serializes_to_text_and_author(self):
        """Test the JSON shape returned by the API."""
        quote = Quote(text="Why so serious?", author="The Joker")

        assert quote.model_dump() == {"text": "Why so serious?", "author": "The Joker"}

    def test_missing_author_rejected(self):
        """Test that author is required."""
        with pytest.raises(ValidationError):
            Quote(text="No author here")

    def test_empty_strings_accepted(self):
        """Test that empty text and author are valid values."""
        quote = Quote(text="", author="")

        assert quote.text == ""
        assert quote.author == ""
        assert not quote.has_unknown_author

    def test_empty_author_in_collection(self):
        """Test that a quote with an empty author does not break loading."""
        collection = QuoteCollection.from_records(
            [{"text": "A", "author": ""}, {"text": "B", "author": "Unknown"}]
        )

        assert len(collection) == 2
        assert collection.fallback_quotes() == (Quote(text="B", author="Unknown"),)

    def test_quote_is_frozen(self):
        """Test that quotes cannot be modified."""
        quote = Quote(text="A", author="Bruce Wayne")

        with pytest.raises(ValidationError):
            quote.author = "Someone Else"

    @pytest.mark.parametrize("author", ["Unknown", "unknown", "UNKNOWN", "uNkNoWn"])
    def test_unknown_author_case_insensitive(self, author):
        """Test that the unknown sentinel ignores case."""
        assert Quote(text="A", author=author).has_unknown_author

    @pytest.mark.parametrize("author", ["Unknown Soldier", "Bruce Wayne", "unknow"])
    def test_other_authors_not_unknown(self, author):
        """Test that only an exact (case-insensitive) match counts."""
        assert not Quote(text="A", author=author).has_unknown_author

    def test_sentinel_value(self):
        assert UNKNOWN_AUTHOR == "unknown"


# =============================================================================
# QuoteCollection Tests
# =============================================================================

class TestQuoteCollection:
    """Tests for QuoteCollection model."""

    def test_from_records(self, wayne_records):
        """Test building a collection from raw dicts."""
        collection = QuoteCollection.from_records(wayne_records)

        assert len(collection) == 2
        assert collection.quotes[0] == Quote(text="A", author="Bruce Wayne")
        assert collection.quotes[1] == Quote(text="B", author="Unknown")

    def test_from_quote_instances(self):
        """Test building a collection from Quote objects."""
        quotes = [Quote(text="A", author="Unknown")]

        collection = QuoteCollection.from_records(quotes)

        assert collection.quotes == tuple(quotes)

    def test_preserves_order(self, sample_records, sample_collection):
        """Test that quotes keep their source order."""
        assert [q.text for q in sample_collection.quotes] == [r["text"] for r in sample_records]

    def test_empty_collection_rejected(self):
        """Test that a collection must have at least one quote."""
        with pytest.raises(ValidationError):
            QuoteCollection.from_records([])

        with pytest.raises(ValidationError):
            QuoteCollection.from_records([], require_fallback=False)

    def test_missing_fallback_rejected(self):
        """Test that a collection without an unknown-author quote is rejected."""
        with pytest.raises(ValidationError, match="unknown"):
            QuoteCollection.from_records([{"text": "A", "author": "Bruce Wayne"}])

    def test_missing_fallback_rejected_by_constructor(self):
        """Test that direct construction also enforces the invariant."""
        with pytest.raises(ValidationError):
            QuoteCollection(quotes=(Quote(text="A", author="Bruce Wayne"),))

    def test_missing_fallback_allowed_when_disabled(self):
        """Test the opt-out used to build degenerate collections."""
        collection = QuoteCollection.from_records(
            [{"text": "A", "author": "Bruce Wayne"}],
            require_fallback=False,
        )

        assert len(collection) == 1
        assert collection.fallback_quotes() == ()

    def test_fallback_quotes(self, sample_collection):
        """Test that fallback quotes match 'unknown' in any case."""
        fallback = sample_collection.fallback_quotes()

        assert [q.text for q in fallback] == [
            "Fortune favors the bold.",
            "Actions speak louder than words.",
            "Every cloud has a silver lining.",
        ]

    def test_collection_is_frozen(self, wayne_collection):
        """Test that the quotes tuple cannot be replaced."""
        with pytest.raises(ValidationError):
            wayne_collection.quotes = ()

        assert isinstance(wayne_collection.quotes, tuple)
