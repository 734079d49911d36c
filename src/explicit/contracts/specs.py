"""Spec-set contract.

Enforced whenever a set of field declarations is bound to a builder.
"""

from collections import Counter

from explicit.contracts.base import require
from explicit.contracts.failure import ConfigurationError


def assert_spec_set(specs) -> None:
    """Enforce that a spec set is usable by the builder.

    Parameters
    ----------
    specs : sequence of FieldSpec
        Ordered field declarations.

    Raises
    ------
    ConfigurationError
        If two declarations share a name.
    """
    counts = Counter(spec.name for spec in specs)
    duplicates = sorted(name for name, n in counts.items() if n > 1)
    require(
        not duplicates,
        f"Spec set contract violated: duplicate field names {duplicates}",
        ConfigurationError,
    )
