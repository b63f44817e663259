"""Reduce demos: fold a sequence into one value."""

from typing import Any

from core.config import DemoConfig
from core.sequence import reduce_sequence
from demos.base import Demo

NUMBERS = [1, 2, 3, 4, 5]
WORDS = ["hello", "world", "how", "are", "you"]


class ReduceSum(Demo):
    name = "reduce_sum"
    primitive = "reduce"
    title = "Sum Numbers"
    description = "Add every number, starting from 0."
    source = "reduce_sequence(numbers, lambda acc, n, i, s: acc + n, 0)"

    async def execute(self, config: DemoConfig) -> Any:
        return reduce_sequence(NUMBERS, lambda acc, n, i, s: acc + n, 0)


class ReduceProduct(Demo):
    name = "reduce_product"
    primitive = "reduce"
    title = "Multiply Numbers"
    description = "Multiply every number, starting from 1."
    source = "reduce_sequence(numbers, lambda acc, n, i, s: acc * n, 1)"

    async def execute(self, config: DemoConfig) -> Any:
        return reduce_sequence(NUMBERS, lambda acc, n, i, s: acc * n, 1)


class ReduceToMapping(Demo):
    name = "reduce_to_mapping"
    primitive = "reduce"
    title = "Create Object From Array"
    description = "Build a mapping from each number's text to the number itself."
    source = "reduce_sequence(numbers, lambda acc, n, i, s: {**acc, str(n): n}, {})"

    async def execute(self, config: DemoConfig) -> Any:
        return reduce_sequence(NUMBERS, lambda acc, n, i, s: {**acc, str(n): n}, {})


class ReduceSentence(Demo):
    name = "reduce_sentence"
    primitive = "reduce"
    title = "Concatenate Strings"
    description = "Join the words into one sentence."
    source = "reduce_sequence(words, lambda acc, w, i, s: f'{acc} {w}', '').strip()"

    async def execute(self, config: DemoConfig) -> Any:
        return reduce_sequence(WORDS, lambda acc, w, i, s: f"{acc} {w}", "").strip()


class ReduceMax(Demo):
    name = "reduce_max"
    primitive = "reduce"
    title = "Find Max Number"
    description = "Keep the larger of accumulator and element, starting from -infinity."
    source = "reduce_sequence(numbers, lambda acc, n, i, s: max(acc, n), float('-inf'))"

    async def execute(self, config: DemoConfig) -> Any:
        return reduce_sequence(NUMBERS, lambda acc, n, i, s: max(acc, n), float("-inf"))


class ReduceEmptyWithoutSeed(Demo):
    name = "reduce_empty_without_seed"
    primitive = "reduce"
    title = "Empty Sequence, No Seed"
    description = "Folding nothing with no initial value is an error, not None."
    source = "reduce_sequence([], lambda acc, n, i, s: acc + n)"

    async def execute(self, config: DemoConfig) -> Any:
        return reduce_sequence([], lambda acc, n, i, s: acc + n)
