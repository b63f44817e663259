"""Prometheus metrics for the runtime primitives.

Metrics:
    primitives_debounce_calls_total          Counter by outcome (scheduled/superseded/fired)
    primitives_gather_all_total              Counter by outcome (fulfilled/rejected)
    primitives_gather_all_latency_seconds    Histogram of time from start to settlement
    primitives_demo_runs_total               Counter of demo runs by primitive and status

Usage::

    from infrastructure.metrics import record_debounce, record_gather_all

    record_debounce("fired")
"""

from __future__ import annotations

import logging
import time

logger = logging.getLogger(__name__)

# Lazy import: prometheus_client is optional. If not installed, all calls
# are no-ops and the /metrics endpoint returns an empty body.
_registry_available = False
try:
    from prometheus_client import (
        CONTENT_TYPE_LATEST,
        CollectorRegistry,
        Counter,
        Histogram,
        generate_latest,
    )

    _REGISTRY = CollectorRegistry()

    debounce_calls_total = Counter(
        "primitives_debounce_calls_total",
        "Debounced invoker events by outcome",
        ["outcome"],
        registry=_REGISTRY,
    )

    gather_all_total = Counter(
        "primitives_gather_all_total",
        "gather_all settlements by outcome",
        ["outcome"],
        registry=_REGISTRY,
    )

    gather_all_latency_seconds = Histogram(
        "primitives_gather_all_latency_seconds",
        "Time from gather_all start to settlement in seconds",
        ["outcome"],
        buckets=[0.001, 0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0],
        registry=_REGISTRY,
    )

    demo_runs_total = Counter(
        "primitives_demo_runs_total",
        "Demo catalog runs by primitive and status",
        ["primitive", "status"],
        registry=_REGISTRY,
    )

    _registry_available = True
    logger.info("Prometheus metrics registry initialized")

except ImportError:
    logger.info("prometheus_client not installed — metrics disabled")
    _REGISTRY = None  # type: ignore[assignment]


# ---------------------------------------------------------------------------
# Public helpers: all are no-ops when prometheus_client is not installed
# ---------------------------------------------------------------------------


def record_debounce(outcome: str) -> None:
    """Count a debounced-invoker event.

    Args:
        outcome: One of "scheduled", "superseded", "fired".
    """
    if _registry_available:
        debounce_calls_total.labels(outcome=outcome).inc()


def record_gather_all(*, outcome: str, latency_seconds: float) -> None:
    """Record a settled gather_all.

    Args:
        outcome: "fulfilled" or "rejected".
        latency_seconds: Wall-clock time from start to settlement.
    """
    if not _registry_available:
        return
    gather_all_total.labels(outcome=outcome).inc()
    gather_all_latency_seconds.labels(outcome=outcome).observe(latency_seconds)


def record_demo_run(*, primitive: str, status: str) -> None:
    """Count a demo catalog run.

    Args:
        primitive: Primitive the demo exercises (e.g. "filter").
        status: "success" or "error".
    """
    if _registry_available:
        demo_runs_total.labels(primitive=primitive, status=status).inc()


def get_metrics_response() -> tuple[bytes, str]:
    """Generate Prometheus text exposition format.

    Returns:
        Tuple of (body_bytes, content_type_string).
        Returns empty bytes if prometheus_client is not available.
    """
    if not _registry_available:
        return b"", "text/plain"
    return generate_latest(_REGISTRY), CONTENT_TYPE_LATEST


class LatencyTimer:
    """Context manager for measuring latency.

    Usage::

        with LatencyTimer() as t:
            result = demo(config)
        logger.info("demo took %.3fs", t.elapsed)
    """

    def __init__(self) -> None:
        """Initialize timer."""
        self._start: float = 0.0
        self.elapsed: float = 0.0

    def __enter__(self) -> LatencyTimer:
        """Start timing."""
        self._start = time.perf_counter()
        return self

    def __exit__(self, *_: object) -> None:
        """Stop timing and record elapsed."""
        self.elapsed = time.perf_counter() - self._start
