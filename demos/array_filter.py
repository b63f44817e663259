"""Filter demos: keep the present elements that satisfy a predicate."""

from typing import Any

from core.config import DemoConfig
from core.sequence import SparseSequence, filter_sequence
from core.types import HOLE, UNDEFINED
from demos.base import Demo

NUMBERS = list(range(1, 11))
WORDS = ["apple", "banana", "cherry", "date", "elderberry", "fig"]
MIXED = [1, "hello", 2, "world", 3, "!", 4, None, 5, UNDEFINED]


class FilterEvenNumbers(Demo):
    name = "filter_even_numbers"
    primitive = "filter"
    title = "Filter Even Numbers"
    description = "Keep the numbers divisible by two."
    source = "filter_sequence(numbers, lambda n, i, s: n % 2 == 0)"

    async def execute(self, config: DemoConfig) -> Any:
        return filter_sequence(NUMBERS, lambda n, i, s: n % 2 == 0)


class FilterLongWords(Demo):
    name = "filter_long_words"
    primitive = "filter"
    title = "Filter Words Longer Than 5"
    description = "Keep the words with more than five characters."
    source = "filter_sequence(words, lambda w, i, s: len(w) > 5)"

    async def execute(self, config: DemoConfig) -> Any:
        return filter_sequence(WORDS, lambda w, i, s: len(w) > 5)


class FilterNumbersFromMixed(Demo):
    name = "filter_numbers_from_mixed"
    primitive = "filter"
    title = "Filter Numbers From Mixed Array"
    description = "Keep only the integers from a list of mixed values, nulls included."
    source = "filter_sequence(mixed, lambda v, i, s: isinstance(v, int))"

    async def execute(self, config: DemoConfig) -> Any:
        return filter_sequence(MIXED, lambda v, i, s: isinstance(v, int))


class FilterWordsStartingWithB(Demo):
    name = "filter_words_starting_with_b"
    primitive = "filter"
    title = "Filter Words Starting With 'b'"
    description = "Keep the words whose first letter is b."
    source = "filter_sequence(words, lambda w, i, s: w.startswith('b'))"

    async def execute(self, config: DemoConfig) -> Any:
        return filter_sequence(WORDS, lambda w, i, s: w.startswith("b"))


class FilterGreaterThanFive(Demo):
    name = "filter_greater_than_five"
    primitive = "filter"
    title = "Filter Numbers Greater Than 5"
    description = "Keep the numbers above five."
    source = "filter_sequence(numbers, lambda n, i, s: n > 5)"

    async def execute(self, config: DemoConfig) -> Any:
        return filter_sequence(NUMBERS, lambda n, i, s: n > 5)


class FilterSparseSequence(Demo):
    name = "filter_sparse_sequence"
    primitive = "filter"
    title = "Filter Skips Holes"
    description = (
        "An always-true predicate over [1, <hole>, None, <hole>, 5] returns only "
        "the present slots; None is present, holes are not."
    )
    source = "SparseSequence([1, HOLE, None, HOLE, 5]).filter(lambda v, i, s: True)"

    async def execute(self, config: DemoConfig) -> Any:
        return SparseSequence([1, HOLE, None, HOLE, 5]).filter(lambda v, i, s: True)
