"""Tests for infrastructure/debounce.py.

Covers:
- A burst of calls fires the target once, with the last call's arguments
- Firing happens after the delay measured from the last call
- Separate quiet periods fire separately
- Default zero delay still defers to the event loop
- Method binding: the last caller is passed through, timer is shared
- Target failures reach the loop's exception handler
- Coroutine targets are scheduled
- Argument validation and configuration presets
"""

from __future__ import annotations

import asyncio

import pytest

from core.config import DebounceConfig
from core.errors import InvalidCallbackError
from infrastructure.debounce import Debounced, debounce

DELAY = 0.05


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class Recorder:
    """Target that records each call's args/kwargs and the loop time."""

    def __init__(self) -> None:
        self.calls: list[tuple[tuple, dict]] = []
        self.times: list[float] = []

    def __call__(self, *args: object, **kwargs: object) -> None:
        self.calls.append((args, kwargs))
        self.times.append(asyncio.get_running_loop().time())


# ---------------------------------------------------------------------------
# Coalescing
# ---------------------------------------------------------------------------


class TestCoalescing:
    @pytest.mark.asyncio
    async def test_burst_fires_once_with_last_arguments(self) -> None:
        target = Recorder()
        invoker = debounce(target, DELAY)

        invoker("x1")
        invoker("x2")
        invoker("x3")
        await asyncio.sleep(DELAY * 3)

        assert target.calls == [(("x3",), {})]

    @pytest.mark.asyncio
    async def test_spaced_burst_within_delay_fires_once(self) -> None:
        target = Recorder()
        invoker = debounce(target, DELAY)

        for value in ("a", "b", "c"):
            invoker(value)
            await asyncio.sleep(DELAY / 5)
        await asyncio.sleep(DELAY * 3)

        assert target.calls == [(("c",), {})]

    @pytest.mark.asyncio
    async def test_fires_after_delay_from_last_call(self) -> None:
        target = Recorder()
        invoker = debounce(target, DELAY)
        loop = asyncio.get_running_loop()

        invoker("first")
        await asyncio.sleep(DELAY / 2)
        last_call_at = loop.time()
        invoker("second")

        await asyncio.sleep(DELAY / 2)
        assert target.calls == []  # still within the quiet period

        await asyncio.sleep(DELAY * 2)
        assert len(target.calls) == 1
        # Timers may run up to one clock tick early.
        assert target.times[0] - last_call_at >= DELAY - 0.01

    @pytest.mark.asyncio
    async def test_separate_quiet_periods_fire_separately(self) -> None:
        target = Recorder()
        invoker = debounce(target, DELAY)

        invoker(1)
        await asyncio.sleep(DELAY * 3)
        invoker(2)
        await asyncio.sleep(DELAY * 3)

        assert [args for args, _ in target.calls] == [(1,), (2,)]

    @pytest.mark.asyncio
    async def test_keyword_arguments_pass_through(self) -> None:
        target = Recorder()
        invoker = debounce(target, DELAY)

        invoker(1, key="old")
        invoker(2, key="new")
        await asyncio.sleep(DELAY * 3)

        assert target.calls == [((2,), {"key": "new"})]

    @pytest.mark.asyncio
    async def test_calls_are_not_accumulated(self) -> None:
        target = Recorder()
        invoker = debounce(target, DELAY)

        invoker(1, 2)
        invoker(3)
        await asyncio.sleep(DELAY * 3)

        assert target.calls == [((3,), {})]


# ---------------------------------------------------------------------------
# Scheduling
# ---------------------------------------------------------------------------


class TestScheduling:
    @pytest.mark.asyncio
    async def test_invoker_returns_immediately(self) -> None:
        target = Recorder()
        invoker = debounce(target, 10.0)

        assert invoker("x") is None
        assert target.calls == []
        assert invoker.pending is True

    @pytest.mark.asyncio
    async def test_default_delay_defers_to_loop(self) -> None:
        target = Recorder()
        invoker = debounce(target)

        invoker("now")
        assert target.calls == []

        await asyncio.sleep(0.01)
        assert target.calls == [(("now",), {})]

    @pytest.mark.asyncio
    async def test_zero_delay_still_coalesces_same_turn(self) -> None:
        target = Recorder()
        invoker = debounce(target, 0)

        invoker(1)
        invoker(2)
        await asyncio.sleep(0.01)

        assert target.calls == [((2,), {})]

    @pytest.mark.asyncio
    async def test_pending_cleared_after_firing(self) -> None:
        invoker = debounce(Recorder(), DELAY)

        invoker()
        assert invoker.pending is True
        await asyncio.sleep(DELAY * 3)
        assert invoker.pending is False

    @pytest.mark.asyncio
    async def test_explicit_loop(self) -> None:
        target = Recorder()
        invoker = debounce(target, DELAY, loop=asyncio.get_running_loop())

        invoker("x")
        await asyncio.sleep(DELAY * 3)

        assert len(target.calls) == 1

    def test_call_without_running_loop_raises(self) -> None:
        invoker = debounce(Recorder(), DELAY)
        with pytest.raises(RuntimeError):
            invoker("x")


# ---------------------------------------------------------------------------
# Calling context
# ---------------------------------------------------------------------------


class SearchBox:
    def __init__(self, name: str) -> None:
        self.name = name
        self.searched: list[tuple[str, str]] = []

    @debounce(delay=DELAY)
    def search(self, term: str) -> None:
        self.searched.append((self.name, term))


class TestMethodBinding:
    @pytest.mark.asyncio
    async def test_instance_is_passed_as_receiver(self) -> None:
        box = SearchBox("box")
        box.search("abc")
        await asyncio.sleep(DELAY * 3)
        assert box.searched == [("box", "abc")]

    @pytest.mark.asyncio
    async def test_last_caller_wins_shared_timer(self) -> None:
        first, second = SearchBox("first"), SearchBox("second")

        first.search("one")
        second.search("two")
        await asyncio.sleep(DELAY * 3)

        assert first.searched == []
        assert second.searched == [("second", "two")]

    def test_class_access_returns_invoker(self) -> None:
        assert isinstance(SearchBox.search, Debounced)


# ---------------------------------------------------------------------------
# Target behaviour
# ---------------------------------------------------------------------------


class TestTargetBehaviour:
    @pytest.mark.asyncio
    async def test_target_error_goes_to_loop_handler(self, loop_errors: list[dict]) -> None:
        boom = ValueError("target failed")

        def explode() -> None:
            raise boom

        invoker = debounce(explode, 0)
        invoker()
        await asyncio.sleep(0.01)

        assert [ctx.get("exception") for ctx in loop_errors] == [boom]

    @pytest.mark.asyncio
    async def test_target_error_does_not_break_invoker(self, loop_errors: list[dict]) -> None:
        calls: list[int] = []

        def flaky(n: int) -> None:
            calls.append(n)
            if n == 1:
                raise RuntimeError("first fails")

        invoker = debounce(flaky, 0)
        invoker(1)
        await asyncio.sleep(0.01)
        invoker(2)
        await asyncio.sleep(0.01)

        assert calls == [1, 2]
        assert len(loop_errors) == 1

    @pytest.mark.asyncio
    async def test_coroutine_target_is_awaited(self) -> None:
        done = asyncio.Event()
        seen: list[str] = []

        async def save(text: str) -> None:
            await asyncio.sleep(0)
            seen.append(text)
            done.set()

        invoker = debounce(save, DELAY)
        invoker("draft 1")
        invoker("draft 2")
        await asyncio.wait_for(done.wait(), timeout=1.0)

        assert seen == ["draft 2"]


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_non_callable_raises(self) -> None:
        with pytest.raises(InvalidCallbackError):
            debounce(42)

    def test_explicit_none_target_raises(self) -> None:
        with pytest.raises(InvalidCallbackError):
            debounce(None, 0.5)

    def test_keyword_delay_only_returns_decorator(self) -> None:
        decorator = debounce(delay=0.1)
        assert not isinstance(decorator, Debounced)
        assert isinstance(decorator(Recorder()), Debounced)

    def test_decorator_form_validates_target(self) -> None:
        with pytest.raises(InvalidCallbackError):
            debounce(delay=0.1)("not callable")

    def test_negative_delay_raises(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            debounce(Recorder(), -1)

    def test_delay_and_config_are_exclusive(self) -> None:
        with pytest.raises(ValueError, match="either delay or config"):
            debounce(Recorder(), 0.1, config=DebounceConfig(delay=0.2))

    def test_config_supplies_delay(self) -> None:
        invoker = debounce(Recorder(), config=DebounceConfig(delay=0.25))
        assert invoker.delay == 0.25

    def test_default_delay_is_zero(self) -> None:
        assert debounce(Recorder()).delay == 0.0

    def test_preserves_function_name(self) -> None:
        def my_handler() -> None:
            pass

        assert debounce(my_handler).__name__ == "my_handler"

    def test_not_pending_before_first_call(self) -> None:
        assert debounce(Recorder()).pending is False
