"""Base Pydantic model with strict defaults for explicit schemas.

Field declarations and builder settings inherit from this base so that
every declarative object in the package validates the same way.
"""

from pydantic import BaseModel, ConfigDict


class ExplicitBaseModel(BaseModel):
    """Base model for all declarative schemas.

    Enforces strict validation:
    - No extra fields allowed
    - Instances are frozen once constructed
    - Whitespace is stripped from string fields
    """

    model_config = ConfigDict(
        extra='forbid',            # Reject unknown keys in declarations
        frozen=True,               # Declarations never change after startup
        str_strip_whitespace=True,
    )
