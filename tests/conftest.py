"""Root-level pytest fixtures for the explicit test suite.

Provides the book-search spec set used across the suite. Tests build
their inputs as plain dicts, the way an HTTP layer hands them over.
"""

import json

import pytest

from explicit.model import ModelBuilder
from explicit.schemas import BuilderSettings, FieldSpec
from explicit.services import Book


# =============================================================================
# Spec Fixtures
# =============================================================================

@pytest.fixture
def search_specs():
    """Optional term (blank means absent) and an optional format enum."""
    return (
        FieldSpec(name="term", kind="string", blank_is_absent=True),
        FieldSpec(name="format", kind="enum", values=("paper", "hard", "ebook")),
    )


@pytest.fixture
def mixed_specs():
    """One field of every kind, some required, one defaulted."""
    return (
        FieldSpec(name="title", kind="string", required=True),
        FieldSpec(name="pages", kind="integer", required=True),
        FieldSpec(name="signed", kind="boolean", default=False),
        FieldSpec(name="format", kind="enum", values=("paper", "hard", "ebook"), required=True),
        FieldSpec(name="note", kind="string", blank_is_absent=True),
    )


@pytest.fixture
def settings():
    return BuilderSettings()


@pytest.fixture
def mixed_builder(mixed_specs, settings):
    return ModelBuilder(mixed_specs, settings)


# =============================================================================
# Catalogue Fixtures
# =============================================================================

@pytest.fixture
def catalogue():
    return [
        Book("Programming Ruby", "Dave Thomas", "Pragmatic Bookshelf", "paper"),
        Book("Eloquent Ruby", "Russ Olsen", "Addison-Wesley", "ebook"),
        Book("The Ruby Way", "Hal Fulton", "Addison-Wesley", "hard", in_stock=False),
        Book("Fluent Python", "Luciano Ramalho", "O'Reilly", "ebook"),
    ]


@pytest.fixture
def specs_file(tmp_path):
    """JSON spec file matching the search_specs fixture."""
    path = tmp_path / "specs.json"
    path.write_text(json.dumps([
        {"name": "term", "kind": "string", "blank_is_absent": True},
        {"name": "format", "kind": "enum", "values": ["paper", "hard", "ebook"]},
        {"name": "page", "kind": "integer", "default": 1},
    ]))
    return path
