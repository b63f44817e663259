"""
Configuration dataclasses for the timing-based primitives and the demo catalog.

These immutable config objects decouple parameter passing from function
signatures, so standard settings can be named once and reused.
Environment variables are read at the API boundary (``api/deps.py``), never here.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DebounceConfig:
    """
    Settings for a debounced invoker.

    Attributes:
        delay: Quiet period in seconds that must elapse after the last call
            before the target fires. Defaults to 0, which still defers the
            call to the next turn of the event loop.

    Example:
        >>> notify = debounce(send_update, config=INPUT_DEBOUNCE)
    """

    delay: float = 0.0

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.delay < 0:
            raise ValueError(f"delay must be non-negative, got {self.delay}")


@dataclass(frozen=True)
class DemoConfig:
    """
    Settings for running the demo catalog.

    Attributes:
        time_scale: Multiplier applied to every demo delay. 1.0 replays the
            original timings (up to 2s per combinator demo); tests use a
            small value to keep runs fast.
        typing_debounce: Debounce settings for the typing demo.
    """

    time_scale: float = 1.0
    typing_debounce: DebounceConfig = DebounceConfig(delay=0.5)

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.time_scale <= 0:
            raise ValueError(f"time_scale must be positive, got {self.time_scale}")

    def seconds(self, milliseconds: float) -> float:
        """Convert a demo delay in milliseconds to scaled seconds."""
        return milliseconds / 1000 * self.time_scale


# Pre-defined configurations

DEFAULT_DEBOUNCE = DebounceConfig()
"""Zero delay: coalesce calls made within the same event-loop turn."""

INPUT_DEBOUNCE = DebounceConfig(delay=0.5)
"""500 ms quiet period, suited to search-as-you-type input."""

DEFAULT_DEMO_CONFIG = DemoConfig()
"""Original demo timings."""
