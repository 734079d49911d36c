"""Book search: an example service behind an explicit request model.

The publisher filter is its own request model, built from the section of
the input nested under ``publisher`` (``publisher[name]=...``) by the same
builder machinery rather than by a separate nested-model mechanism.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from explicit.model.builder import BuildResult
from explicit.model.params import expand_bracket_params
from explicit.model.request_model import RequestModel
from explicit.schemas.field_spec import FieldSpec
from explicit.schemas.kinds import FieldKind
from explicit.schemas.settings import BuilderSettings
from explicit.services.boundary import ServiceBoundary

logger = logging.getLogger(__name__)

BOOK_FORMATS = ("paper", "hard", "ebook")


@dataclass(frozen=True)
class Book:
    """One catalogue entry."""
    title: str
    author: str
    publisher: str
    format: str
    in_stock: bool = True


class PublisherSearchService(ServiceBoundary):
    """Find the publishers whose name contains the requested text."""

    specs = (
        FieldSpec(name="name", kind=FieldKind.STRING, required=True, blank_is_absent=True),
    )

    def __init__(self, catalogue: Iterable[Book]):
        self.catalogue = tuple(catalogue)

    def handle(self, request: RequestModel) -> list[str]:
        needle = request["name"].lower()
        return sorted({b.publisher for b in self.catalogue if needle in b.publisher.lower()})


class BookSearchService(ServiceBoundary):
    """Search the catalogue by term, format and stock."""

    specs = (
        FieldSpec(name="term", kind=FieldKind.STRING, blank_is_absent=True),
        FieldSpec(name="format", kind=FieldKind.ENUM, values=BOOK_FORMATS, blank_is_absent=True),
        FieldSpec(name="in_stock", kind=FieldKind.BOOLEAN, default=False),
    )

    def __init__(self, catalogue: Iterable[Book]):
        self.catalogue = tuple(catalogue)

    def handle(self, request: RequestModel) -> list[Book]:
        term = request.get("term", "").lower()
        book_format = request.get("format")

        matches = [
            book for book in self.catalogue
            if (not term or term in book.title.lower() or term in book.author.lower())
            and (book_format is None or book.format == book_format)
            and (book.in_stock or not request["in_stock"])
        ]
        logger.debug("Book search matched %d of %d books", len(matches), len(self.catalogue))
        return matches


def _mentions(params: Mapping[str, Any], prefix: str) -> bool:
    """True if ``prefix`` is supplied at all, as a section or as a scalar."""
    return prefix in expand_bracket_params(params)


def search_catalogue(
    params: Mapping[str, Any],
    catalogue: Iterable[Book],
    settings: Optional[BuilderSettings] = None,
) -> tuple[BuildResult, list[Book]]:
    """Validate raw search params and run the book search.

    The book request is built from the top-level params; when a
    ``publisher`` parameter is supplied, a publisher request is built from
    its section and restricts the books to the publishers it finds. A
    scalar ``publisher=...`` has no section and reports ``publisher[name]``
    as missing. Errors from both requests are reported together.

    Parameters
    ----------
    params : mapping
        Raw parameters, flat (``publisher[name]``) or already nested.
    catalogue : iterable of Book
        Books to search.
    settings : BuilderSettings, optional
        Builder settings for both requests.

    Returns
    -------
    tuple of (BuildResult, list of Book)
        The book request's result and the matches. On any validation error
        the result carries every error and the list is empty.
    """
    catalogue = tuple(catalogue)
    book_result = BookSearchService.request_builder(settings).build(params)

    publisher_result = None
    if _mentions(params, "publisher"):
        publisher_result = PublisherSearchService.request_builder(settings).build_scoped(params, "publisher")

    errors = book_result.errors + (publisher_result.errors if publisher_result else ())
    if errors:
        return BuildResult(errors=errors), []

    books = BookSearchService(catalogue)(book_result.model)
    if publisher_result is not None:
        publishers = set(PublisherSearchService(catalogue)(publisher_result.model))
        books = [book for book in books if book.publisher in publishers]

    return book_result, books
