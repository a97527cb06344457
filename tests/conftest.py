# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides quote collections and an API client with injected dependencies
# =============================================================================

import os
import random

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_quote_collection, get_random
from app.main import app
from core.models.quote import QuoteCollection


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def wayne_records():
    """The two-quote example: one known author, one unknown."""
    return [
        {"text": "A", "author": "Bruce Wayne"},
        {"text": "B", "author": "Unknown"},
    ]


@pytest.fixture
def wayne_collection(wayne_records):
    """QuoteCollection built from wayne_records."""
    return QuoteCollection.from_records(wayne_records)


@pytest.fixture
def sample_records():
    """A mixed set of quotes with several authors and fallbacks."""
    return [
        {"text": "I'm Batman.", "author": "Batman"},
        {"text": "Why so serious?", "author": "The Joker"},
        {"text": "It's not who I am underneath.", "author": "Bruce Wayne"},
        {"text": "Why do we fall?", "author": "Thomas Wayne"},
        {"text": "Imagination is more important than knowledge.", "author": "Albert Einstein"},
        {"text": "Fortune favors the bold.", "author": "Unknown"},
        {"text": "Actions speak louder than words.", "author": "UNKNOWN"},
        {"text": "Every cloud has a silver lining.", "author": "unknown"},
    ]


@pytest.fixture
def sample_collection(sample_records):
    """QuoteCollection built from sample_records."""
    return QuoteCollection.from_records(sample_records)


@pytest.fixture
def no_fallback_collection():
    """A collection with no unknown-author quote (validation disabled)."""
    return QuoteCollection.from_records(
        [
            {"text": "I'm Batman.", "author": "Batman"},
            {"text": "Why so serious?", "author": "The Joker"},
        ],
        require_fallback=False,
    )


@pytest.fixture
def seeded_rng():
    """Deterministic random generator."""
    return random.Random(1234)


@pytest.fixture
def make_client(seeded_rng):
    """
    Build a TestClient serving a given collection.

    Lifespan does not run, so the collection comes only from the
    dependency override.
    """
    def _make(collection):
        app.dependency_overrides[get_quote_collection] = lambda: collection
        app.dependency_overrides[get_random] = lambda: seeded_rng
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client, sample_collection):
    """TestClient serving sample_collection."""
    return make_client(sample_collection)
