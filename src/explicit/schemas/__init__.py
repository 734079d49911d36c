"""Pydantic schemas for field declarations and builder settings.

Exports
-------
FieldSpec : class
    Declaration of one permitted field
FieldKind : class
    Kinds a field value is coerced into
load_field_specs : function
    Load an ordered spec set from JSON
BuilderSettings : class
    Whitespace and boolean-word rules
resolve_settings : function
    Single entrypoint for settings resolution
"""

from explicit.schemas.kinds import FieldKind
from explicit.schemas.settings import BuilderSettings, CLISettings, resolve_settings
from explicit.schemas.field_spec import FieldSpec, load_field_specs

__all__ = [
    "FieldKind",
    "FieldSpec",
    "load_field_specs",
    "BuilderSettings",
    "CLISettings",
    "resolve_settings",
]
