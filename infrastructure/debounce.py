"""Debounced invoker on the asyncio event loop.

Coalesces a burst of calls into a single delayed call of the target. Every
call cancels the pending timer (if any) and schedules a fresh one, so the
target fires once per quiet period, ``delay`` seconds after the last call,
with that last call's arguments.

Timeline for ``delay=0.5``::

    call(a) ── call(b) ── call(c) ─────────── 0.5s ──→ target(c)
      └─ timer    └─ timer    └─ timer (the only one still live)

The invoker never blocks: scheduling and cancelling are ``TimerHandle``
bookkeeping on the loop. The target runs on the loop thread; exceptions it
raises are not caught here and go to the loop's exception handler. A target
that returns an awaitable has it scheduled as a task.

Usage::

    from infrastructure.debounce import debounce

    save = debounce(persist_draft, 0.5)
    save(text)            # inside a running event loop

    class SearchBox:
        @debounce(delay=0.3)
        def search(self, term: str) -> None:
            ...

Accessed through an instance, a debounced function is bound like a method:
the target receives the last caller as its first argument, and all
instances share the one timer.
"""

from __future__ import annotations

import asyncio
import functools
import inspect
import logging
from collections.abc import Callable
from types import MethodType
from typing import Any

from core.config import DEFAULT_DEBOUNCE, DebounceConfig
from core.errors import require_callable
from infrastructure.metrics import record_debounce

logger = logging.getLogger(__name__)

# Distinguishes the decorator form from an explicit non-callable such as None.
_UNSET: Any = object()


class Debounced:
    """Callable wrapper holding at most one live timer for its target.

    Args:
        func: Target action.
        delay: Quiet period in seconds (default: 0).
        loop: Event loop to schedule on. Defaults to the loop running at
            call time.

    Raises:
        InvalidCallbackError: If ``func`` is not callable.
        ValueError: If ``delay`` is negative.
    """

    def __init__(
        self,
        func: Callable[..., Any],
        delay: float = 0.0,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        """Initialize with no pending timer."""
        require_callable(func)
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")
        functools.update_wrapper(self, func)
        self.func = func
        self.delay = delay
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Future[Any]] = set()
        self._name = getattr(func, "__qualname__", repr(func))

    @property
    def pending(self) -> bool:
        """True while a scheduled call has neither fired nor been superseded."""
        return self._handle is not None

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        """Supersede any pending call and schedule a new one with these arguments.

        Raises:
            RuntimeError: If no loop was given and none is running.
        """
        loop = self._loop or asyncio.get_running_loop()
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            record_debounce("superseded")
            logger.debug("debounce: %s superseded pending call", self._name)

        self._handle = loop.call_later(self.delay, self._fire, args, kwargs)
        record_debounce("scheduled")
        logger.debug("debounce: %s scheduled in %.3fs", self._name, self.delay)

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        """Bind to ``instance`` so it is passed as the target's first argument."""
        if instance is None:
            return self
        return MethodType(self, instance)

    def _fire(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        self._handle = None
        record_debounce("fired")
        logger.debug("debounce: %s firing", self._name)
        result = self.func(*args, **kwargs)
        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

    def __repr__(self) -> str:
        return f"<Debounced {self._name} delay={self.delay}>"


def debounce(
    func: Callable[..., Any] = _UNSET,
    delay: float | None = None,
    *,
    config: DebounceConfig | None = None,
    loop: asyncio.AbstractEventLoop | None = None,
) -> Any:
    """Wrap ``func`` in a debounced invoker.

    Works as a plain call (``debounce(fn, 0.5)``) and as a decorator
    factory (``@debounce(delay=0.5)``).

    Args:
        func: Target action. Omit to get a decorator.
        delay: Quiet period in seconds. Mutually exclusive with ``config``.
        config: ``DebounceConfig`` preset (default: ``DEFAULT_DEBOUNCE``).
        loop: Event loop to schedule on (default: running loop at call time).

    Returns:
        A ``Debounced`` invoker, or a decorator producing one.

    Raises:
        ValueError: If both ``delay`` and ``config`` are given, or delay < 0.
        InvalidCallbackError: If ``func`` is given and not callable, None included.
    """
    if delay is not None and config is not None:
        raise ValueError("pass either delay or config, not both")
    resolved = delay if delay is not None else (config or DEFAULT_DEBOUNCE).delay

    def decorator(target: Callable[..., Any]) -> Debounced:
        return Debounced(target, resolved, loop=loop)

    if func is _UNSET:
        return decorator
    return decorator(func)
