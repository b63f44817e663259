"""Infrastructure layer — event-loop primitives and observability.

Modules:
    debounce      Debounced invoker built on loop timers.
    combinators   gather_all fan-out/fan-in with first-failure propagation.
    metrics       Prometheus metrics registry.
"""
