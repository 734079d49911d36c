"""ServiceBoundary: services accept a RequestModel, never raw input.

A concrete service declares, through its own spec set, exactly which
fields it reads. The HTTP layer builds a RequestModel with the service's
builder and hands only that model across the boundary.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional

from explicit.contracts.request import assert_request_model
from explicit.contracts.specs import assert_spec_set
from explicit.model.builder import ModelBuilder
from explicit.model.request_model import RequestModel
from explicit.schemas.field_spec import FieldSpec
from explicit.schemas.settings import BuilderSettings

logger = logging.getLogger(__name__)


class ServiceBoundary(ABC):
    """Base class for services that consume validated request models.

    Subclasses set ``specs`` and implement ``handle``. Calling the service
    checks the boundary contract first.

    Usage
    -----
        class TitleLookup(ServiceBoundary):
            specs = (FieldSpec(name="title", required=True),)

            def handle(self, request):
                return catalogue.get(request["title"])

        result = TitleLookup.request_builder().build(params)
        if result.ok:
            TitleLookup()(result.model)
    """

    specs: ClassVar[tuple[FieldSpec, ...]] = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.specs = tuple(cls.specs)
        assert_spec_set(cls.specs)

    @classmethod
    def request_builder(cls, settings: Optional[BuilderSettings] = None) -> ModelBuilder:
        """Builder for the fields this service declares."""
        return ModelBuilder(cls.specs, settings)

    def __call__(self, request: RequestModel) -> Any:
        assert_request_model(request, self.specs, type(self).__name__)
        logger.debug("%s handling %r", type(self).__name__, request)
        return self.handle(request)

    @abstractmethod
    def handle(self, request: RequestModel) -> Any:
        """Serve one validated request."""
