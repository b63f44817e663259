"""
Indexed sequences with absent slots, and the filter/fold traversals over them.

A ``SparseSequence`` has a fixed ``length`` and a presence map: an index in
``[0, length)`` either holds a value (possibly ``None`` or ``UNDEFINED``) or
is absent. Plain lists and tuples are accepted by the traversals as dense
sequences.

Traversal rules shared by ``filter_sequence`` and ``reduce_sequence``:

- ``length`` is read once at entry. Growing the sequence from inside a
  callback never extends the walk.
- Indices are visited once each in ascending order; presence and value are
  read live, so a callback that deletes or rewrites a later slot is seen.
- Absent indices are skipped. They never reach the callback.

All functions here are synchronous and do not log.
"""

import functools
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

from core.errors import EmptySequenceError, require_callable
from core.types import HOLE, UNDEFINED, Predicate, Reducer

# Distinguishes "argument not passed" from an explicit None/UNDEFINED.
_UNSET: Any = object()


class SparseSequence:
    """
    Fixed-length indexed sequence whose slots may be absent.

    Attributes are private; use ``len()``, ``has()`` and indexing.

    Example:
        >>> seq = SparseSequence([1, HOLE, 3])
        >>> len(seq), seq.has(1), seq[1]
        (3, False, UNDEFINED)
        >>> seq.filter(lambda v, i, s: True)
        [1, 3]
    """

    __slots__ = ("_items", "_length")

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: dict[int, Any] = {}
        self._length = 0
        for index, value in enumerate(values):
            if value is not HOLE:
                self._items[index] = value
            self._length = index + 1

    @classmethod
    def from_mapping(cls, length: int, items: Mapping[int, Any]) -> "SparseSequence":
        """
        Build a sequence of ``length`` slots with only ``items`` present.

        Raises:
            ValueError: If ``length`` is negative or an index falls outside it.
        """
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        seq = cls()
        seq._length = length
        for index, value in items.items():
            if not 0 <= index < length:
                raise ValueError(f"index {index} outside [0, {length})")
            if value is not HOLE:
                seq._items[index] = value
        return seq

    @classmethod
    def with_length(cls, length: int) -> "SparseSequence":
        """Sequence of ``length`` absent slots."""
        return cls.from_mapping(length, {})

    def __len__(self) -> int:
        return self._length

    def has(self, index: int) -> bool:
        """True if ``index`` holds a value (holding ``None`` counts)."""
        return index in self._items

    def _check(self, index: int) -> None:
        if not 0 <= index < self._length:
            raise IndexError(f"index {index} outside [0, {self._length})")

    def __getitem__(self, index: int) -> Any:
        self._check(index)
        return self._items.get(index, UNDEFINED)

    def __setitem__(self, index: int, value: Any) -> None:
        if index < 0:
            raise IndexError(f"negative index {index}")
        if index >= self._length:
            self._length = index + 1
        if value is HOLE:
            self._items.pop(index, None)
        else:
            self._items[index] = value

    def __delitem__(self, index: int) -> None:
        self._check(index)
        self._items.pop(index, None)

    def append(self, value: Any) -> None:
        self[self._length] = value

    def present(self) -> Iterator[tuple[int, Any]]:
        """Yield ``(index, value)`` for present slots in ascending order."""
        for index in sorted(self._items):
            yield index, self._items[index]

    def __iter__(self) -> Iterator[Any]:
        for index in range(self._length):
            yield self._items.get(index, UNDEFINED)

    def to_list(self, fill: Any = UNDEFINED) -> list[Any]:
        """Dense copy with ``fill`` in every absent slot."""
        return [self._items.get(index, fill) for index in range(self._length)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseSequence):
            return NotImplemented
        return self._length == other._length and self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        slots = [
            repr(self._items[index]) if index in self._items else "<hole>"
            for index in range(self._length)
        ]
        return f"SparseSequence([{', '.join(slots)}])"

    def filter(self, predicate: Predicate, context: Any = _UNSET) -> list[Any]:
        """Method form of ``filter_sequence``."""
        return filter_sequence(self, predicate, context)

    def reduce(self, operator: Reducer, initial: Any = _UNSET) -> Any:
        """Method form of ``reduce_sequence``."""
        return reduce_sequence(self, operator, initial)


def _is_present(seq: Sequence[Any] | SparseSequence, index: int) -> bool:
    if isinstance(seq, SparseSequence):
        return seq.has(index)
    # Dense sequences only lose indices by shrinking.
    return index < len(seq)


def filter_sequence(
    seq: Sequence[Any] | SparseSequence,
    predicate: Predicate,
    context: Any = _UNSET,
) -> list[Any]:
    """
    Keep the present elements for which ``predicate`` is truthy.

    Args:
        seq: List, tuple or ``SparseSequence``. Never mutated.
        predicate: Called as ``predicate(value, index, seq)``.
        context: Optional receiver. When given, ``predicate`` is called with it
            prepended, as ``predicate(context, value, index, seq)``.

    Returns:
        A new list, in original order.

    Raises:
        InvalidCallbackError: If ``predicate`` is not callable.
        Exception: Whatever ``predicate`` raises, unchanged.

    Example:
        >>> filter_sequence([1, 2, 3, 4], lambda v, i, s: v % 2 == 0)
        [2, 4]
    """
    require_callable(predicate)
    if context is not _UNSET:
        predicate = functools.partial(predicate, context)

    result: list[Any] = []
    length = len(seq)
    for index in range(length):
        if not _is_present(seq, index):
            continue
        value = seq[index]
        if predicate(value, index, seq):
            result.append(value)
    return result


def reduce_sequence(
    seq: Sequence[Any] | SparseSequence,
    operator: Reducer,
    initial: Any = _UNSET,
) -> Any:
    """
    Fold the present elements of ``seq`` into one value.

    With ``initial`` given (``None`` and ``UNDEFINED`` included) folding
    starts at index 0. Without it, the first present element is the seed
    and folding resumes after it, so a single-element sequence is returned
    without calling ``operator``.

    Args:
        seq: List, tuple or ``SparseSequence``.
        operator: Called as ``operator(accumulator, value, index, seq)``.
        initial: Optional seed.

    Returns:
        The final accumulator.

    Raises:
        InvalidCallbackError: If ``operator`` is not callable.
        EmptySequenceError: No seed and no present element.
        Exception: Whatever ``operator`` raises, unchanged.

    Example:
        >>> reduce_sequence([1, 2, 3], lambda acc, v, i, s: acc + v)
        6
    """
    require_callable(operator)

    length = len(seq)
    start = 0
    if initial is not _UNSET:
        accumulator = initial
    else:
        while start < length and not _is_present(seq, start):
            start += 1
        if start >= length:
            raise EmptySequenceError()
        accumulator = seq[start]
        start += 1

    for index in range(start, length):
        if _is_present(seq, index):
            accumulator = operator(accumulator, seq[index], index, seq)
    return accumulator
