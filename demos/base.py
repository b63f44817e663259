"""
Demo base class and common types.

Every catalog entry inherits from Demo and implements execute().
This gives the registry and the HTTP layer one interface to run any
primitive's examples and render what they return.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from core.config import DEFAULT_DEMO_CONFIG, DemoConfig
from core.serializer import stringify
from infrastructure.metrics import LatencyTimer, record_demo_run

logger = logging.getLogger(__name__)

PRIMITIVES: tuple[str, ...] = ("filter", "reduce", "debounce", "stringify", "gather_all")


@dataclass(frozen=True)
class DemoResult:
    """
    Result from running a demo.

    Attributes:
        success: Whether the demo's primitive returned normally
        data: ``stringify`` text of the returned value
        error: Exception type and message if success=False
        metadata: Optional metadata (elapsed time, input echo, etc.)
    """

    success: bool
    data: str | None = None
    error: str | None = None
    metadata: dict[str, Any] | None = None


class Demo(ABC):
    """
    Abstract base class for catalog demos.

    Subclasses must implement:
        - name: Unique demo identifier
        - primitive: One of PRIMITIVES
        - title / description: Human-readable text
        - execute(): Run the primitive and return its raw value

    Example:
        class SumNumbers(Demo):
            name = "reduce_sum"
            primitive = "reduce"
            ...

            async def execute(self, config: DemoConfig) -> Any:
                return reduce_sequence([1, 2, 3], lambda acc, v, i, s: acc + v, 0)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique demo identifier (lowercase, underscores)."""

    @property
    @abstractmethod
    def primitive(self) -> str:
        """Primitive exercised by the demo."""

    @property
    @abstractmethod
    def title(self) -> str:
        """Short heading."""

    @property
    @abstractmethod
    def description(self) -> str:
        """One-sentence explanation of what the demo shows."""

    @property
    def source(self) -> str:
        """Call expression shown next to the result."""
        return ""

    @abstractmethod
    async def execute(self, config: DemoConfig) -> Any:
        """
        Run the primitive.

        Args:
            config: Demo settings (time scale, debounce preset)

        Returns:
            The primitive's raw result; exceptions propagate.
        """

    async def __call__(self, config: DemoConfig = DEFAULT_DEMO_CONFIG) -> DemoResult:
        """
        Run the demo and encode the outcome.

        This is the main entry point. Failures raised by the primitive are
        part of what a demo shows, so they are encoded in the result rather
        than raised.

        Args:
            config: Demo settings

        Returns:
            DemoResult with the serialized value or the error text
        """
        with LatencyTimer() as timer:
            try:
                value = await self.execute(config)
            except Exception as exc:  # noqa: BLE001
                error = f"{type(exc).__name__}: {exc}"
            else:
                error = None

        metadata = {"elapsed_ms": round(timer.elapsed * 1000, 3)}
        if error is not None:
            logger.warning("demo %s failed: %s", self.name, error)
            record_demo_run(primitive=self.primitive, status="error")
            return DemoResult(success=False, error=error, metadata=metadata)

        record_demo_run(primitive=self.primitive, status="success")
        return DemoResult(success=True, data=stringify(value), metadata=metadata)

    def to_dict(self) -> dict[str, Any]:
        """Serialize demo description for API consumption."""
        return {
            "name": self.name,
            "primitive": self.primitive,
            "title": self.title,
            "description": self.description,
            "source": self.source,
        }
