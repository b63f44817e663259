"""
Errors originated by the primitives themselves.

Only three conditions are raised by this package:

    InvalidCallbackError   A callable was required and something else was given.
    EmptySequenceError     Fold with no seed over a sequence with no present element.
    CyclicStructureError   The serializer met a container nested inside itself.

Errors raised *by* caller-supplied callbacks, and the first failure adopted
by ``gather_all``, are re-raised as the original exception object. They are
never wrapped.

InvalidCallbackError and EmptySequenceError also subclass ``TypeError`` so
callers that catch the native error kind keep working.
"""

from typing import Any


class PrimitiveError(Exception):
    """Base class for errors originated by the primitives."""


class InvalidCallbackError(PrimitiveError, TypeError):
    """Raised when a non-callable is passed where a function is required.

    Args:
        callback: The offending value, kept for inspection.
    """

    def __init__(self, callback: Any) -> None:
        self.callback = callback
        super().__init__(f"{callback!r} is not a function")


class EmptySequenceError(PrimitiveError, TypeError):
    """Raised by a fold with no seed when the sequence has no present element."""

    def __init__(self) -> None:
        super().__init__("reduce of empty sequence with no initial value")


class CyclicStructureError(PrimitiveError, ValueError):
    """Raised by the serializer when a container contains itself.

    Args:
        container_type: Type name of the container that closed the cycle.
    """

    def __init__(self, container_type: str) -> None:
        self.container_type = container_type
        super().__init__(f"cannot serialize cyclic structure (via {container_type})")


def require_callable(callback: Any) -> None:
    """Raise ``InvalidCallbackError`` unless ``callback`` is callable."""
    if not callable(callback):
        raise InvalidCallbackError(callback)
