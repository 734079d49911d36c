"""Boundary contracts: fail-fast enforcement of declaration and service invariants.

Key principle:
- Pydantic validates declarations and settings
- The builder reports bad request input as data
- Contracts raise on programmer errors at the boundaries

The service boundary check lives in explicit.contracts.request; it depends
on the model package and is imported from there.
"""

from explicit.contracts.failure import ContractViolation, ConfigurationError
from explicit.contracts.base import require
from explicit.contracts.specs import assert_spec_set

__all__ = [
    "ContractViolation",
    "ConfigurationError",
    "require",
    "assert_spec_set",
]
