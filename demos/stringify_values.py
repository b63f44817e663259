"""Stringify demos: serialize value trees.

Each demo returns the serialized text, so ``DemoResult.data`` shows it
serialized a second time (quoted, inner quotes escaped), which is also how
the native serializer treats a string.
"""

from typing import Any

from core.config import DemoConfig
from core.serializer import stringify
from core.types import UNDEFINED
from demos.base import Demo

SIMPLE_OBJECT = {
    "name": "John",
    "age": 30,
    "isActive": True,
    "hobbies": ["reading", "gaming"],
    "address": {"city": "New York", "zip": "10001"},
}
MIXED_ARRAY = [1, "hello", {"key": "value"}, [1, 2, 3], None, UNDEFINED, True]
NESTED_ARRAYS = [[1, 2], [3, [4, 5]], [6, [7, [8, 9]]]]
COMPLEX_OBJECT = {
    "numbers": [1, 2, 3, 4, 5],
    "strings": ["a", "b", "c"],
    "booleans": [True, False],
    "nulls": [None, None],
    "nested": {"array": [1, 2, 3], "object": {"key": "value"}},
}


class StringifySimpleObject(Demo):
    name = "stringify_simple_object"
    primitive = "stringify"
    title = "Simple Object"
    description = "A flat mapping with a nested list and mapping."
    source = "stringify(simple_object)"

    async def execute(self, config: DemoConfig) -> Any:
        return stringify(SIMPLE_OBJECT)


class StringifyMixedArray(Demo):
    name = "stringify_mixed_array"
    primitive = "stringify"
    title = "Array With Mixed Types"
    description = "null and undefined render as distinct literals."
    source = "stringify(mixed_array)"

    async def execute(self, config: DemoConfig) -> Any:
        return stringify(MIXED_ARRAY)


class StringifyNestedArrays(Demo):
    name = "stringify_nested_arrays"
    primitive = "stringify"
    title = "Nested Arrays"
    description = "Lists nested four levels deep."
    source = "stringify(nested_arrays)"

    async def execute(self, config: DemoConfig) -> Any:
        return stringify(NESTED_ARRAYS)


class StringifyComplexObject(Demo):
    name = "stringify_complex_object"
    primitive = "stringify"
    title = "Complex Object"
    description = "Lists of every leaf kind under one mapping."
    source = "stringify(complex_object)"

    async def execute(self, config: DemoConfig) -> Any:
        return stringify(COMPLEX_OBJECT)


class StringifyQuotedString(Demo):
    name = "stringify_quoted_string"
    primitive = "stringify"
    title = "Escaping Quotes"
    description = 'Double quotes inside a string are escaped; nothing else is.'
    source = "stringify({'name': 'A\"B'})"

    async def execute(self, config: DemoConfig) -> Any:
        return stringify({"name": 'A"B'})


class StringifyCyclic(Demo):
    name = "stringify_cyclic"
    primitive = "stringify"
    title = "Cyclic Structure"
    description = "A list that contains itself is rejected instead of recursing forever."
    source = "loop = [1]; loop.append(loop); stringify(loop)"

    async def execute(self, config: DemoConfig) -> Any:
        loop: list[Any] = [1]
        loop.append(loop)
        return stringify(loop)
