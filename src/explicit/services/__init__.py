"""Services that consume validated request models."""

from explicit.services.boundary import ServiceBoundary
from explicit.services.books import (
    Book,
    BookSearchService,
    PublisherSearchService,
    search_catalogue,
)

__all__ = [
    "ServiceBoundary",
    "Book",
    "BookSearchService",
    "PublisherSearchService",
    "search_catalogue",
]
