"""
Pydantic schemas for the ``/demos`` endpoints.
"""

from typing import Any

from pydantic import BaseModel, Field


class DemoInfo(BaseModel):
    """Catalog entry as listed by ``GET /demos/list``."""

    name: str = Field(..., description="Unique demo identifier.")
    primitive: str = Field(..., description="Primitive the demo exercises.")
    title: str = Field(..., description="Short heading.")
    description: str = Field(..., description="What the demo shows.")
    source: str = Field(default="", description="Call expression being demonstrated.")


class DemoListResponse(BaseModel):
    """Response body for ``GET /demos/list``."""

    demos: list[DemoInfo]
    count: int


class DemoRunRequest(BaseModel):
    """Request body for ``POST /demos/run``."""

    name: str = Field(..., min_length=1, description="Demo name from /demos/list.")


class DemoRunResponse(BaseModel):
    """Response body for ``POST /demos/run``.

    A primitive that raised is still a 200: ``success`` is False and
    ``error`` holds the exception type and message.
    """

    name: str
    primitive: str
    success: bool
    data: str | None = Field(default=None, description="Serialized result value.")
    error: str | None = None
    metadata: dict[str, Any] | None = None
