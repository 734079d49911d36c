"""Coercion of untyped raw values into declared field kinds.

Pydantic does the type conversion: each FieldKind maps to a TypeAdapter.
The steps before it only normalize input (boolean words from the builder
settings, refusing booleans where a string or number is declared), the
way the schema validators do with ``mode="before"``.
"""

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import ConfigDict, TypeAdapter, ValidationError

from explicit.model.errors import CoercionError, ErrorReason
from explicit.schemas.kinds import FieldKind
from explicit.schemas.settings import BuilderSettings

_DEFAULT_SETTINGS = BuilderSettings()

_INTEGER = TypeAdapter(int)
_BOOLEAN = TypeAdapter(bool)


@lru_cache(maxsize=None)
def _string_adapter(strip_whitespace: bool) -> TypeAdapter:
    return TypeAdapter(
        str,
        config=ConfigDict(coerce_numbers_to_str=True, str_strip_whitespace=strip_whitespace),
    )


@lru_cache(maxsize=None)
def _enum_adapter(values: tuple[str, ...]) -> TypeAdapter:
    return TypeAdapter(Literal[values])


def is_blank(value: Any, settings: Optional[BuilderSettings] = None) -> bool:
    """True if value is an empty string (whitespace-only when stripping)."""
    settings = settings or _DEFAULT_SETTINGS
    if not isinstance(value, str):
        return False
    if settings.strip_whitespace:
        return value.strip() == ""
    return value == ""


def _validate(adapter: TypeAdapter, value: Any, original: Any, strict: Optional[bool] = None) -> Any:
    try:
        return adapter.validate_python(value, strict=strict)
    except ValidationError as e:
        error = e.errors()[0]
        reason = ErrorReason.NOT_IN_ENUM if error["type"] == "literal_error" else ErrorReason.WRONG_TYPE
        raise CoercionError(reason, f"{error['msg']}, got {original!r}") from None


def _refuse_bool(value: Any, kind: FieldKind) -> None:
    # pydantic's lax mode reads True as 1 and "True"
    if isinstance(value, bool):
        raise CoercionError(ErrorReason.WRONG_TYPE, f"Input should be of kind '{kind.value}', got {value!r}")


def _words_to_bool(value: Any, settings: BuilderSettings) -> Any:
    if isinstance(value, str):
        word = value.strip().lower()
        if word in settings.true_words:
            return True
        if word in settings.false_words:
            return False
    return value


def coerce(
    value: Any,
    kind: FieldKind,
    values: Optional[tuple[str, ...]] = None,
    settings: Optional[BuilderSettings] = None,
) -> Any:
    """Coerce a raw value into ``kind``.

    Parameters
    ----------
    value : Any
        Untyped raw value (string, number or boolean).
    kind : FieldKind
        Declared kind of the field.
    values : tuple of str, optional
        Declared values when ``kind`` is ENUM.
    settings : BuilderSettings, optional
        Whitespace and boolean-word rules.

    Returns
    -------
    str, int or bool
        The typed value.

    Raises
    ------
    CoercionError
        NOT_IN_ENUM for a scalar outside the declared values, WRONG_TYPE
        for every other pydantic validation error.

    Examples
    --------
    >>> coerce("42", FieldKind.INTEGER)
    42
    >>> coerce("Yes", FieldKind.BOOLEAN)
    True
    """
    settings = settings or _DEFAULT_SETTINGS
    kind = FieldKind(kind)

    if kind is FieldKind.BOOLEAN:
        word = _words_to_bool(value, settings)
        # Strings outside the configured words are never parsed by pydantic
        return _validate(_BOOLEAN, word, value, strict=isinstance(word, str))

    _refuse_bool(value, kind)

    if kind is FieldKind.INTEGER:
        return _validate(_INTEGER, value, value)

    text = _validate(_string_adapter(settings.strip_whitespace), value, value)
    if kind is FieldKind.STRING:
        return text
    return _validate(_enum_adapter(tuple(values or ())), text, value)


def to_raw_value(value: Any) -> Any:
    """Render a typed value back into raw parameter form.

    Booleans stay native: every builder accepts them whatever its words.
    """
    if isinstance(value, bool):
        return value
    return str(value)
