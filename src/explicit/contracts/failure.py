"""Centralized failure types for boundary contracts.

Contracts fail fast, loud, and once. Request-time validation problems are
never raised; they travel as data in a BuildResult.
"""


class ContractViolation(RuntimeError):
    """Raised when a boundary contract is violated.

    This indicates a bug in the calling code, not bad request input: a raw
    mapping handed to a service, a request model carrying undeclared fields,
    or a build result that breaks its own invariant.

    Key distinction:
    - FieldValidationError: bad request input (returned, never raised)
    - ConfigurationError: bad field declarations (raised at startup)
    - ContractViolation: programmer error at a service boundary
    """
    pass


class ConfigurationError(ContractViolation):
    """Raised when a field declaration or spec set is inconsistent.

    Examples are a required field that also declares a default, an enum
    field without values, or two fields sharing a name. These are fatal at
    configuration time and never recoverable while serving a request.
    """
    pass
