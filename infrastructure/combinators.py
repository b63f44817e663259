"""Fan-out/fan-in combinator: wait for every awaitable or fail on the first error.

``gather_all`` runs N awaitables concurrently and returns one future that:

- resolves to their values in *input* order once all N have succeeded;
- rejects with the exception of the first input to fail (by completion
  time, not by position) as soon as it fails, discarding everything else.

State machine per call::

    PENDING(remaining=N) ──(each success, remaining → 0)──→ FULFILLED
            │
            └──────────────(first failure)────────────────→ REJECTED

FULFILLED and REJECTED are terminal. Settlements arriving after a terminal
state are consumed and ignored; their exceptions are retrieved so asyncio
does not report them as never-retrieved.

Differences from ``asyncio.gather``:

- The empty case resolves before ``gather_all`` returns, with no task created.
- Losing inputs are never cancelled; they run to completion in the background.
- Cancelling the returned future does not touch the inputs.
- An input that is itself cancelled counts as a failure with
  ``asyncio.CancelledError``.

Usage::

    from infrastructure.combinators import gather_all

    users, orders = await gather_all([fetch_users(), fetch_orders()])
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from collections.abc import Iterable
from enum import Enum
from typing import Any

from infrastructure.metrics import record_gather_all

logger = logging.getLogger(__name__)


class AllState(Enum):
    """Combinator state machine states."""

    PENDING = "pending"
    FULFILLED = "fulfilled"
    REJECTED = "rejected"


class AllCombinator:
    """One fan-in over a fixed list of inputs.

    Usually created through ``gather_all``. Exposed so the state machine can
    be driven directly in tests.

    Args:
        count: Number of inputs (N).
        loop: Event loop owning the result future.
    """

    def __init__(self, count: int, loop: asyncio.AbstractEventLoop) -> None:
        """Initialize in PENDING with ``remaining = count``."""
        self.future: asyncio.Future[list[Any]] = loop.create_future()
        self.remaining = count
        self._results: list[Any] = [None] * count
        self._state = AllState.PENDING
        self._started = time.perf_counter()
        if count == 0:
            self._fulfill()

    @property
    def state(self) -> AllState:
        """Current state."""
        return self._state

    def _fulfill(self) -> None:
        self._state = AllState.FULFILLED
        if not self.future.done():
            self.future.set_result(self._results)
        record_gather_all(
            outcome="fulfilled", latency_seconds=time.perf_counter() - self._started
        )

    def _reject(self, exc: BaseException) -> None:
        self._state = AllState.REJECTED
        if not self.future.done():
            self.future.set_exception(exc)
        logger.info(
            "gather_all: rejected with %s (%d input(s) still outstanding)",
            type(exc).__name__,
            self.remaining - 1,
        )
        record_gather_all(
            outcome="rejected", latency_seconds=time.perf_counter() - self._started
        )

    def resolve(self, index: int, value: Any) -> None:
        """Record a success for input ``index``. Ignored once terminal."""
        if self._state is not AllState.PENDING:
            return
        self._results[index] = value
        self.remaining -= 1
        logger.debug("gather_all: input %d succeeded, %d remaining", index, self.remaining)
        if self.remaining == 0:
            self._fulfill()

    def reject(self, index: int, exc: BaseException) -> None:
        """Record a failure for input ``index``. Ignored once terminal."""
        if self._state is not AllState.PENDING:
            logger.debug("gather_all: late failure from input %d ignored", index)
            return
        logger.debug("gather_all: input %d failed first", index)
        self._reject(exc)

    def settle(self, index: int, fut: asyncio.Future[Any]) -> None:
        """Done-callback for input ``index``; routes to ``resolve``/``reject``."""
        if fut.cancelled():
            self.reject(index, asyncio.CancelledError())
            return
        # Always retrieve the exception, terminal or not.
        exc = fut.exception()
        if exc is not None:
            self.reject(index, exc)
        else:
            self.resolve(index, fut.result())


def gather_all(
    awaitables: Iterable[Any],
    *,
    loop: asyncio.AbstractEventLoop | None = None,
) -> asyncio.Future[list[Any]]:
    """Run ``awaitables`` concurrently and join their results in input order.

    Not a coroutine: it returns a future, already resolved to ``[]`` when the
    input is empty. Items that are not awaitable count as succeeded with
    themselves as the value.

    Args:
        awaitables: Coroutines, tasks, futures or plain values. Consumed once.
        loop: Event loop to use (default: the running loop).

    Returns:
        Future of the list of values, or of the first failure's exception.

    Raises:
        RuntimeError: If no loop was given and none is running.

    Example::

        values = await gather_all([asyncio.sleep(0.03, "a"), asyncio.sleep(0.01, "b")])
        assert values == ["a", "b"]
    """
    items = list(awaitables)
    loop = loop or asyncio.get_running_loop()
    combinator = AllCombinator(len(items), loop)
    if not items:
        return combinator.future

    for index, item in enumerate(items):
        if not inspect.isawaitable(item):
            combinator.resolve(index, item)
            continue
        fut = asyncio.ensure_future(item, loop=loop)
        fut.add_done_callback(lambda f, i=index: combinator.settle(i, f))
    return combinator.future
