"""Base contract enforcement utilities.

require() is the single enforcement mechanism for all boundary contracts.
"""

from typing import Type

from explicit.contracts.failure import ContractViolation


def require(
    condition: bool,
    message: str,
    error: Type[ContractViolation] = ContractViolation,
) -> None:
    """Enforce a boundary contract.

    Parameters
    ----------
    condition : bool
        The invariant that must be true.
    message : str
        Error message explaining the violation.
    error : type, optional
        ContractViolation subclass to raise. Configuration checks pass
        ConfigurationError.

    Raises
    ------
    ContractViolation
        If condition is False.

    Examples
    --------
    >>> require(isinstance(request, RequestModel), "Service contract: RequestModel expected")
    >>> require(len(names) == len(set(names)), "duplicate field", ConfigurationError)
    """
    if not condition:
        raise error(message)
