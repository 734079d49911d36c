"""Value kinds a declared field may take."""

from enum import Enum


class FieldKind(str, Enum):
    """Type of value a field accepts after coercion."""
    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ENUM = "enum"
