"""RequestModel: the immutable, validated value handed to services.

A RequestModel is the only thing a service may depend on. It is produced
by the builder from a spec set and raw input, and never changes after that.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Iterator

from explicit.model.coercion import to_raw_value


class FieldNotPresent(KeyError):
    """Raised when reading a field the model does not carry.

    The field was optional and not supplied, or was never declared.
    Subclasses KeyError so ``in`` and ``get()`` behave as on any mapping.
    """

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"Field '{self.name}' is not present in this request"


class RequestModel(Mapping):
    """Immutable mapping from field name to validated, typed value.

    Equality is structural: two models are equal iff their field maps are
    equal. Models are hashable and safe to share between threads.

    Usage
    -----
        result = build({"term": "ruby"}, specs)
        model = result.model
        model["term"]          # 'ruby'
        model.get("format")    # None (optional, not supplied)
        model.value("format")  # raises FieldNotPresent
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, Any]):
        object.__setattr__(self, "_fields", MappingProxyType(dict(fields)))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __getitem__(self, name: str) -> Any:
        try:
            return self._fields[name]
        except KeyError:
            raise FieldNotPresent(name) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other):
        if not isinstance(other, RequestModel):
            return NotImplemented
        return dict(self._fields) == dict(other._fields)

    def __hash__(self):
        return hash(frozenset(self._fields.items()))

    def __repr__(self):
        inner = ", ".join(f"{k}={v!r}" for k, v in self._fields.items())
        return f"{type(self).__name__}({inner})"

    def value(self, name: str) -> Any:
        """Return the typed value of ``name`` or raise FieldNotPresent."""
        return self[name]

    def to_dict(self) -> dict:
        """Return a plain, mutable copy of the field map."""
        return dict(self._fields)

    def to_raw(self) -> dict:
        """Re-serialize the model into raw input shape.

        Values become strings; booleans stay native so that a builder with
        any true/false words reads them back. Building the result with the
        same specs and settings yields a model equal to this one.
        """
        return {name: to_raw_value(value) for name, value in self._fields.items()}
