"""gather_all demos: fan out delayed computations, fan in their results."""

import asyncio
from typing import Any

from core.config import DemoConfig
from demos.base import Demo
from infrastructure.combinators import gather_all


async def delay(seconds: float, value: Any) -> Any:
    """Succeed with ``value`` after ``seconds``."""
    await asyncio.sleep(seconds)
    return value


async def delayed_reject(seconds: float, message: str) -> Any:
    """Fail with ``RuntimeError(message)`` after ``seconds``."""
    await asyncio.sleep(seconds)
    raise RuntimeError(message)


class GatherAllResolved(Demo):
    name = "gather_all_resolved"
    primitive = "gather_all"
    title = "All Resolve"
    description = "Three delays finishing out of order; values come back in input order."
    source = "await gather_all([delay(1.0, 'First'), delay(2.0, 'Second'), delay(1.5, 'Third')])"

    async def execute(self, config: DemoConfig) -> Any:
        return await gather_all(
            [
                delay(config.seconds(1000), "First"),
                delay(config.seconds(2000), "Second"),
                delay(config.seconds(1500), "Third"),
            ]
        )


class GatherAllWithRejection(Demo):
    name = "gather_all_with_rejection"
    primitive = "gather_all"
    title = "With Rejection"
    description = "One input fails at 1.5 s; the result fails then, without waiting for 2 s."
    source = (
        "await gather_all([delay(1.0, 'First'), "
        "delayed_reject(1.5, 'Second computation failed'), delay(2.0, 'Third')])"
    )

    async def execute(self, config: DemoConfig) -> Any:
        return await gather_all(
            [
                delay(config.seconds(1000), "First"),
                delayed_reject(config.seconds(1500), "Second computation failed"),
                delay(config.seconds(2000), "Third"),
            ]
        )


class GatherAllEmpty(Demo):
    name = "gather_all_empty"
    primitive = "gather_all"
    title = "Empty Input"
    description = "No inputs resolve immediately to an empty list."
    source = "await gather_all([])"

    async def execute(self, config: DemoConfig) -> Any:
        return await gather_all([])


class GatherAllMixedTypes(Demo):
    name = "gather_all_mixed_types"
    primitive = "gather_all"
    title = "Mixed Types"
    description = "Inputs resolving to a number, a mapping and a list."
    source = (
        "await gather_all([delay(1.0, 42), "
        "delay(1.5, {'name': 'John', 'age': 30}), delay(2.0, [1, 2, 3])])"
    )

    async def execute(self, config: DemoConfig) -> Any:
        return await gather_all(
            [
                delay(config.seconds(1000), 42),
                delay(config.seconds(1500), {"name": "John", "age": 30}),
                delay(config.seconds(2000), [1, 2, 3]),
            ]
        )


class GatherAllRejected(Demo):
    name = "gather_all_rejected"
    primitive = "gather_all"
    title = "All Reject"
    description = "Every input fails; the earliest failure by time is the one reported."
    source = (
        "await gather_all([delayed_reject(2.0, 'First computation failed'), "
        "delayed_reject(1.0, 'Second computation failed'), "
        "delayed_reject(1.5, 'Third computation failed')])"
    )

    async def execute(self, config: DemoConfig) -> Any:
        return await gather_all(
            [
                delayed_reject(config.seconds(2000), "First computation failed"),
                delayed_reject(config.seconds(1000), "Second computation failed"),
                delayed_reject(config.seconds(1500), "Third computation failed"),
            ]
        )
