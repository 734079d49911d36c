"""Tests for the service boundary and the book search service."""

import pytest

from explicit.contracts import ConfigurationError, ContractViolation
from explicit.model import ErrorReason, ModelBuilder, RequestModel
from explicit.schemas import FieldSpec
from explicit.services import (
    BookSearchService,
    PublisherSearchService,
    ServiceBoundary,
    search_catalogue,
)

pytestmark = [pytest.mark.unit, pytest.mark.services]


def _titles(books):
    return [b.title for b in books]


class TestServiceBoundary:
    """Services accept request models built for their own specs."""

    def test_request_builder_uses_service_specs(self):
        builder = BookSearchService.request_builder()

        assert isinstance(builder, ModelBuilder)
        assert builder.field_names == ("term", "format", "in_stock")

    def test_raw_mapping_refused(self, catalogue):
        service = BookSearchService(catalogue)

        with pytest.raises(ContractViolation, match="BookSearchService accepts a RequestModel"):
            service({"term": "ruby"})

    def test_model_with_foreign_fields_refused(self, catalogue):
        service = BookSearchService(catalogue)

        with pytest.raises(ContractViolation, match="does not declare"):
            service(RequestModel({"in_stock": False, "name": "O'Reilly"}))

    def test_duplicate_specs_fail_at_class_definition(self):
        with pytest.raises(ConfigurationError):
            class Broken(ServiceBoundary):
                specs = (FieldSpec(name="a"), FieldSpec(name="a"))

                def handle(self, request):
                    return None

    def test_handle_must_be_implemented(self):
        class Incomplete(ServiceBoundary):
            specs = (FieldSpec(name="a"),)

        with pytest.raises(TypeError):
            Incomplete()

    def test_minimal_service(self):
        class Echo(ServiceBoundary):
            specs = (FieldSpec(name="title", required=True),)

            def handle(self, request):
                return request["title"]

        result = Echo.request_builder().build({"title": "Ruby"})
        assert Echo()(result.model) == "Ruby"


class TestBookSearchService:

    def _search(self, catalogue, **params):
        result = BookSearchService.request_builder().build(params)
        assert result.ok
        return BookSearchService(catalogue)(result.model)

    def test_empty_request_returns_everything(self, catalogue):
        assert len(self._search(catalogue)) == len(catalogue)

    def test_term_matches_title_or_author(self, catalogue):
        assert _titles(self._search(catalogue, term="ruby")) == [
            "Programming Ruby", "Eloquent Ruby", "The Ruby Way",
        ]
        assert _titles(self._search(catalogue, term="ramalho")) == ["Fluent Python"]

    def test_format_filter(self, catalogue):
        assert _titles(self._search(catalogue, term="ruby", format="ebook")) == ["Eloquent Ruby"]

    def test_in_stock_filter(self, catalogue):
        assert "The Ruby Way" not in _titles(self._search(catalogue, in_stock="true"))

    def test_blank_term_means_no_filter(self, catalogue):
        assert len(self._search(catalogue, term="")) == len(catalogue)


class TestPublisherSearchService:

    def test_matches_by_substring(self, catalogue):
        model = PublisherSearchService.request_builder().build({"name": "addison"}).model

        assert PublisherSearchService(catalogue)(model) == ["Addison-Wesley"]

    def test_blank_name_is_missing(self):
        result = PublisherSearchService.request_builder().build({"name": ""})

        assert [(e.field, e.reason) for e in result.errors] == [("name", ErrorReason.MISSING)]


class TestSearchCatalogue:
    """Raw params through both request models."""

    def test_flat_params_with_publisher(self, catalogue):
        result, books = search_catalogue({"term": "ruby", "publisher[name]": "addison"}, catalogue)

        assert result.ok
        assert _titles(books) == ["Eloquent Ruby", "The Ruby Way"]

    def test_nested_params_with_publisher(self, catalogue):
        result, books = search_catalogue({"publisher": {"name": "pragmatic"}}, catalogue)

        assert _titles(books) == ["Programming Ruby"]

    def test_without_publisher_section(self, catalogue):
        result, books = search_catalogue({"format": "ebook"}, catalogue)

        assert result.model == RequestModel({"format": "ebook", "in_stock": False})
        assert _titles(books) == ["Eloquent Ruby", "Fluent Python"]

    def test_errors_from_both_requests_collected(self, catalogue):
        result, books = search_catalogue({"format": "pdf", "publisher[name]": " "}, catalogue)

        assert books == []
        assert result.model is None
        assert [(e.field, e.reason) for e in result.errors] == [
            ("format", ErrorReason.NOT_IN_ENUM),
            ("publisher[name]", ErrorReason.MISSING),
        ]

    def test_scalar_publisher_reports_missing_name(self, catalogue):
        result, books = search_catalogue({"term": "ruby", "publisher": "addison"}, catalogue)

        assert books == []
        assert [(e.field, e.reason) for e in result.errors] == [("publisher[name]", ErrorReason.MISSING)]
