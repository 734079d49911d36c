"""`explicit` - validated request models at service boundaries.

Raw, untyped input (HTTP parameters) is turned into an immutable RequestModel
by applying an explicit, ordered set of field declarations. Services accept
only RequestModel values, never raw mappings.

Subpackages:
- schemas: Field declarations and builder settings
- model: Builder, RequestModel, field errors
- contracts: Fail-fast boundary checks
- services: ServiceBoundary and an example book search service
- cli: The explicit-check command
"""

__version__ = "0.1.0"
