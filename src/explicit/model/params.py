"""Raw parameter shapes: flat bracket-keyed params vs nested mappings.

HTTP layers deliver nested parameters as flat keys, ``book[publisher][name]``.
These helpers convert between that form and nested dictionaries so nested
request models can be built by applying the same builder to a section.
"""

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl

_KEY_RE = re.compile(r"^([^\[\]]+)((?:\[[^\[\]]*\])*)$")
_PART_RE = re.compile(r"\[([^\[\]]*)\]")


def _split_key(key: str) -> list[str]:
    match = _KEY_RE.match(key)
    if not match:
        return [key]
    head, tail = match.groups()
    parts = [head] + _PART_RE.findall(tail)
    # An empty part ("tags[]") is not a nesting level
    return [p for p in parts if p]


def expand_bracket_params(flat: Mapping[str, Any]) -> dict:
    """Expand bracket-keyed parameters into nested dictionaries.

    Later keys win when a scalar and a section share a name.

    Examples
    --------
    >>> expand_bracket_params({"term": "ruby", "publisher[name]": "Pragmatic"})
    {'term': 'ruby', 'publisher': {'name': 'Pragmatic'}}
    """
    result: dict = {}
    for key, value in flat.items():
        parts = _split_key(key)
        node = result
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[parts[-1]] = value
    return result


def flatten_to_params(nested: Mapping[str, Any], prefix: str = "") -> dict:
    """Inverse of expand_bracket_params.

    Examples
    --------
    >>> flatten_to_params({"publisher": {"name": "Pragmatic"}})
    {'publisher[name]': 'Pragmatic'}
    """
    flat = {}
    for key, value in nested.items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(flatten_to_params(value, name))
        else:
            flat[name] = value
    return flat


def parse_query(query: str) -> dict:
    """Parse a URL query string into a nested parameter mapping.

    The last occurrence of a repeated key wins.
    """
    flat = dict(parse_qsl(query.lstrip("?"), keep_blank_values=True))
    return expand_bracket_params(flat)
