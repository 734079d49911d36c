"""Service boundary contract.

Enforces that a service receives a RequestModel built for its own spec set,
never a raw mapping.
"""

from explicit.contracts.base import require
from explicit.model.request_model import RequestModel


def assert_request_model(request, specs, service_name: str = "service") -> None:
    """Enforce the service boundary contract.

    Parameters
    ----------
    request : object
        The argument handed to the service.
    specs : sequence of FieldSpec
        The fields the service declares it reads.
    service_name : str, optional
        Used in error messages.

    Raises
    ------
    ContractViolation
        If ``request`` is not a RequestModel, carries fields the service did
        not declare, or lacks a required field.
    """
    require(
        isinstance(request, RequestModel),
        f"Service contract violated: {service_name} accepts a RequestModel, "
        f"got {type(request).__name__}",
    )

    declared = {spec.name for spec in specs}
    undeclared = sorted(set(request) - declared)
    require(
        not undeclared,
        f"Service contract violated: {service_name} does not declare fields {undeclared}",
    )

    missing = sorted(spec.name for spec in specs if spec.required and spec.name not in request)
    require(
        not missing,
        f"Service contract violated: {service_name} requires fields {missing}",
    )
