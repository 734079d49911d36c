"""ModelBuilder: raw input + spec set -> RequestModel or field errors.

Every field is checked, in declaration order, and every violation is
collected before the result is returned. A build either yields a model
and no errors, or errors and no model; there is never a partial model.

build() is pure: the same input always gives an equal result, and no
state is shared between calls.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Sequence

from explicit.contracts.base import require
from explicit.contracts.specs import assert_spec_set
from explicit.model.coercion import coerce, is_blank
from explicit.model.errors import CoercionError, ErrorReason, FieldValidationError
from explicit.model.params import expand_bracket_params
from explicit.model.request_model import RequestModel
from explicit.schemas.settings import BuilderSettings

if TYPE_CHECKING:
    from explicit.schemas.field_spec import FieldSpec

logger = logging.getLogger(__name__)

_DEFAULT_SETTINGS = BuilderSettings()


@dataclass(frozen=True)
class BuildResult:
    """Outcome of one build: a model, or the complete list of errors."""

    model: Optional[RequestModel] = None
    errors: tuple[FieldValidationError, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "errors", tuple(self.errors))
        require(
            (self.model is None) == bool(self.errors),
            "Build result contract violated: expected exactly one of model or errors",
        )

    @property
    def ok(self) -> bool:
        return self.model is not None

    def prefixed(self, prefix: str) -> "BuildResult":
        """Nest error field names under ``prefix`` (bracket form)."""
        if self.ok:
            return self
        return BuildResult(errors=tuple(e.with_prefix(prefix) for e in self.errors))

    def error_payload(self) -> list[dict]:
        """JSON-ready description of the errors for the HTTP layer."""
        return [
            {"field": e.field, "reason": e.reason.value, "message": e.message}
            for e in self.errors
        ]


def _absent(raw_input: Mapping, spec: "FieldSpec", settings: BuilderSettings) -> bool:
    if spec.name not in raw_input:
        return True
    value = raw_input[spec.name]
    if value is None:
        return True
    return spec.blank_is_absent and is_blank(value, settings)


def build(
    raw_input: Mapping[str, Any],
    specs: Sequence["FieldSpec"],
    settings: Optional[BuilderSettings] = None,
) -> BuildResult:
    """Validate raw input against an ordered spec set.

    Parameters
    ----------
    raw_input : mapping
        Untyped key/value input, e.g. HTTP query or body parameters.
    specs : sequence of FieldSpec
        Ordered field declarations. Names must be unique.
    settings : BuilderSettings, optional
        Whitespace and boolean-word rules.

    Returns
    -------
    BuildResult
        ``model`` set and ``errors`` empty on success; otherwise ``errors``
        holds one FieldValidationError per violation, in declaration order.

    Raises
    ------
    ConfigurationError
        If the spec set has duplicate names.

    Examples
    --------
    >>> specs = [FieldSpec(name="title", required=True)]
    >>> build({}, specs).errors
    (FieldValidationError(field='title', reason=<ErrorReason.MISSING: 'missing'>),)
    """
    assert_spec_set(specs)
    settings = settings or _DEFAULT_SETTINGS

    fields = {}
    errors = []

    for spec in specs:
        if _absent(raw_input, spec, settings):
            if spec.has_default:
                fields[spec.name] = spec.default
            elif spec.required:
                errors.append(FieldValidationError(
                    field=spec.name,
                    reason=ErrorReason.MISSING,
                    message=f"'{spec.name}' is required",
                ))
            continue

        try:
            fields[spec.name] = coerce(raw_input[spec.name], spec.kind, spec.values, settings)
        except CoercionError as e:
            errors.append(FieldValidationError(field=spec.name, reason=e.reason, message=str(e)))

    unknown = set(raw_input) - {spec.name for spec in specs}
    if unknown:
        logger.debug("Ignoring undeclared input keys: %s", sorted(unknown))

    if errors:
        logger.debug(
            "Rejected input with %d error(s): %s",
            len(errors), [(e.field, e.reason.value) for e in errors],
        )
        return BuildResult(errors=tuple(errors))

    return BuildResult(model=RequestModel(fields))


class ModelBuilder:
    """A spec set bound to builder settings.

    The spec set is checked once, at construction, so a misdeclared set
    fails at startup.

    Usage
    -----
        builder = ModelBuilder([
            FieldSpec(name="term", blank_is_absent=True),
            FieldSpec(name="format", kind="enum", values=("paper", "hard", "ebook")),
        ])
        result = builder.build(request_params)
        if not result.ok:
            return 422, result.error_payload()
    """

    def __init__(self, specs: Sequence["FieldSpec"], settings: Optional[BuilderSettings] = None):
        self.specs = tuple(specs)
        assert_spec_set(self.specs)
        self.settings = settings or _DEFAULT_SETTINGS

    def __repr__(self):
        return f"ModelBuilder(fields={list(self.field_names)})"

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.specs)

    def build(self, raw_input: Mapping[str, Any]) -> BuildResult:
        return build(raw_input, self.specs, self.settings)

    def build_scoped(self, raw_input: Mapping[str, Any], prefix: str) -> BuildResult:
        """Build from the section of ``raw_input`` nested under ``prefix``.

        The section is ``raw_input[prefix]`` when that is a mapping, or the
        bracket-keyed parameters ``prefix[name]`` of a flat input. Error
        field names are reported in bracket form, e.g. ``publisher[name]``.
        """
        section = raw_input.get(prefix)
        if not isinstance(section, Mapping):
            section = expand_bracket_params(raw_input).get(prefix)
        if not isinstance(section, Mapping):
            section = {}
        return self.build(section).prefixed(prefix)
