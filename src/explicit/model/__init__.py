"""Validation core: building immutable request models from raw input.

Exports
-------
build : function
    Raw input + ordered spec set -> BuildResult
ModelBuilder : class
    A spec set bound to builder settings
BuildResult : class
    A model, or the complete list of field errors
RequestModel : class
    Immutable, validated field map
FieldValidationError : class
    One field-level violation (data, never raised)
"""

from explicit.model.errors import ErrorReason, FieldValidationError
from explicit.model.request_model import FieldNotPresent, RequestModel
from explicit.model.builder import BuildResult, ModelBuilder, build
from explicit.model.params import expand_bracket_params, flatten_to_params, parse_query

__all__ = [
    "ErrorReason",
    "FieldValidationError",
    "FieldNotPresent",
    "RequestModel",
    "BuildResult",
    "ModelBuilder",
    "build",
    "expand_bracket_params",
    "flatten_to_params",
    "parse_query",
]
