"""
Structural serializer: render a value tree as text.

Rules, first match wins:

1. ``None`` -> ``null``; ``UNDEFINED`` -> ``undefined``.
2. list / tuple / ``SparseSequence`` -> ``[a,b,c]``. An absent slot of a
   ``SparseSequence`` renders as nothing between its commas (``[1,,3]``).
3. Mapping -> ``{"key":value,...}`` in iteration order. Keys go through
   ``str()`` and are quoted but not escaped.
4. ``str`` -> quoted, with ``"`` escaped as ``\\"``. Nothing else is escaped.
5. Everything else -> its default textual form (see ``_leaf_text``).

This is best-effort text, not RFC 8259 JSON: backslashes and control
characters in strings pass through untouched.

A container met again while it is still being rendered raises
``CyclicStructureError``. Shared sub-trees that are not their own
ancestors are rendered at every occurrence.
"""

import math
from collections.abc import Mapping
from typing import Any

from core.errors import CyclicStructureError
from core.sequence import SparseSequence
from core.types import UNDEFINED

# Magnitude from which the native number-to-text switches to exponent form.
_EXPONENT_THRESHOLD = 1e21


def stringify(value: Any) -> str:
    """
    Serialize ``value`` to its textual form.

    Args:
        value: Any value tree of primitives, sequences and mappings.

    Returns:
        The encoded string.

    Raises:
        CyclicStructureError: If a container is nested inside itself.

    Example:
        >>> stringify({"name": 'A"B', "tags": [1, None, True]})
        '{"name":"A\\\\"B","tags":[1,null,true]}'
    """
    return _encode(value, set())


def _encode(value: Any, ancestors: set[int]) -> str:
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"

    if isinstance(value, (list, tuple, SparseSequence, Mapping)):
        marker = id(value)
        if marker in ancestors:
            raise CyclicStructureError(type(value).__name__)
        ancestors.add(marker)
        try:
            if isinstance(value, Mapping):
                return _encode_mapping(value, ancestors)
            return _encode_sequence(value, ancestors)
        finally:
            ancestors.discard(marker)

    if isinstance(value, str):
        return '"' + value.replace('"', '\\"') + '"'

    return _leaf_text(value)


def _encode_sequence(value: Any, ancestors: set[int]) -> str:
    if isinstance(value, SparseSequence):
        parts = [
            _encode(value[index], ancestors) if value.has(index) else ""
            for index in range(len(value))
        ]
    else:
        parts = [_encode(item, ancestors) for item in value]
    return "[" + ",".join(parts) + "]"


def _encode_mapping(value: Mapping[Any, Any], ancestors: set[int]) -> str:
    entries = [f'"{key}":{_encode(item, ancestors)}' for key, item in value.items()]
    return "{" + ",".join(entries) + "}"


def _leaf_text(value: Any) -> str:
    """Default text of a non-container, non-string leaf."""
    # bool first: it is an int subclass.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
            return str(int(value))
        return repr(value)
    return str(value)
