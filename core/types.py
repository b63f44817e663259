"""
Shared marker values and type aliases for the primitives.

Python has a single null (``None``). The native runtime these primitives
mirror distinguishes *null* from *undefined*, and an array slot holding
``undefined`` from an empty slot. Those distinctions are carried by the
singletons below:

- UNDEFINED: the "no value" marker. Serializes to ``undefined``; returned
  when reading an absent index of a ``SparseSequence``.
- HOLE: construction-only marker for an absent slot, e.g.
  ``SparseSequence([1, HOLE, 3])``. It is never stored.
"""

from collections.abc import Callable
from typing import Any, Final, TypeAlias


class _Marker:
    """Named singleton marker with a stable repr and falsy truth value."""

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        # Pickle/copy by name so identity survives.
        return self._name


UNDEFINED: Final = _Marker("UNDEFINED")
HOLE: Final = _Marker("HOLE")

Predicate: TypeAlias = Callable[..., Any]
"""``(value, index, sequence) -> truthy``, bound to a context when one is given."""

Reducer: TypeAlias = Callable[[Any, Any, int, Any], Any]
"""``(accumulator, value, index, sequence) -> accumulator``."""
