# =============================================================================
# lib/quote_loader.py - Reference Data Loader
# =============================================================================
# Reads the static quote file once at startup and turns it into a validated,
# immutable QuoteCollection. The selector never touches the filesystem.
#
# Accepted file shapes:
#   [{"text": "...", "author": "..."}, ...]
#   {"quotes": [{"text": "...", "author": "..."}, ...]}
#
# Usage:
#   from lib.quote_loader import load_quotes
#   collection = load_quotes(Path("data/quotes.json"))
# =============================================================================

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from core.models.quote import QuoteCollection, UNKNOWN_AUTHOR
from lib.utils import ApplicationError

logger = logging.getLogger(__name__)


class QuoteDataError(ApplicationError):
    """Raised when the quote reference data cannot be loaded."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, code="QUOTE_DATA_ERROR", **kwargs)


def parse_quotes(payload: Any, require_fallback: bool = True) -> QuoteCollection:
    """
    Build a QuoteCollection from decoded JSON.

    Args:
        payload: A list of quote objects, or a dict with a "quotes" list
        require_fallback: Reject data without an unknown-author quote

    Returns:
        The validated collection

    Raises:
        QuoteDataError: If the payload has the wrong shape or fails validation
    """
    if isinstance(payload, dict):
        payload = payload.get("quotes")

    if not isinstance(payload, list):
        raise QuoteDataError(
            "Quote data must be a list of {text, author} objects",
            suggestion='Use a JSON array, or an object with a "quotes" array',
            details={"type": type(payload).__name__},
        )

    try:
        return QuoteCollection.from_records(payload, require_fallback=require_fallback)
    except ValidationError as e:
        raise QuoteDataError(
            f"Invalid quote data: {e.error_count()} validation error(s)",
            suggestion=(
                "Check that every quote has string 'text' and 'author' fields, "
                f"and that at least one quote has author '{UNKNOWN_AUTHOR.title()}'"
            ),
            details={"errors": [err["msg"] for err in e.errors()]},
        ) from e


def load_quotes(path: Path, require_fallback: bool = True) -> QuoteCollection:
    """
    Load the quote collection from a JSON file.

    Args:
        path: Path to the JSON file
        require_fallback: Reject data without an unknown-author quote

    Returns:
        The validated collection

    Raises:
        QuoteDataError: If the file is missing, unreadable, or invalid
    """
    path = Path(path)

    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError as e:
        raise QuoteDataError(
            f"Quote file not found: {path}",
            suggestion="Set QUOTES_FILE to the path of a quotes JSON file",
            details={"path": str(path)},
        ) from e
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise QuoteDataError(
            f"Failed to read quote file: {e}",
            suggestion="Check that the file is valid UTF-8 JSON",
            details={"path": str(path)},
        ) from e

    collection = parse_quotes(payload, require_fallback=require_fallback)
    logger.info(
        f"Loaded {len(collection)} quotes from {path} "
        f"({len(collection.fallback_quotes())} with unknown author)"
    )
    return collection
