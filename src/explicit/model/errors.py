"""Field-level validation errors.

A FieldValidationError is data: the builder returns a sequence of them
instead of raising, so callers must handle rejected input explicitly.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ErrorReason(str, Enum):
    """Why a single field was rejected."""
    MISSING = "missing"
    WRONG_TYPE = "wrong_type"
    NOT_IN_ENUM = "not_in_enum"


class FieldValidationError(BaseModel):
    """One violation of one field's declaration.

    Equality and hashing consider only ``field`` and ``reason``; ``message``
    is a human-readable detail for logs and error payloads.
    """

    model_config = ConfigDict(frozen=True)

    field: str
    reason: ErrorReason
    message: str = Field(default="", repr=False)

    def __eq__(self, other):
        if not isinstance(other, FieldValidationError):
            return NotImplemented
        return (self.field, self.reason) == (other.field, other.reason)

    def __hash__(self):
        return hash((self.field, self.reason))

    def with_prefix(self, prefix: str) -> "FieldValidationError":
        """Return a copy whose field name is nested under ``prefix``.

        ``name`` becomes ``prefix[name]`` and ``a[b]`` becomes ``prefix[a][b]``,
        matching the bracket form HTTP layers use for nested parameters.
        """
        head, bracket, rest = self.field.partition("[")
        field = f"{prefix}[{head}]{bracket}{rest}"
        return self.model_copy(update={"field": field})


class CoercionError(ValueError):
    """Internal signal that a raw value could not be coerced.

    Raised by coerce() and turned into a FieldValidationError by the
    builder; it never escapes a build.
    """

    def __init__(self, reason: ErrorReason, message: str):
        super().__init__(message)
        self.reason = reason
