"""
Pydantic schemas for the ``/stringify`` endpoint.
"""

from typing import Any

from pydantic import BaseModel, Field


class StringifyRequest(BaseModel):
    """Request body for ``POST /stringify``.

    JSON has no ``undefined``; a JSON ``null`` arrives as ``None``.
    """

    value: Any = Field(..., description="Any JSON value to serialize.")


class StringifyResponse(BaseModel):
    """Response body for ``POST /stringify``."""

    text: str = Field(..., description="Serialized form of the value.")
    length: int = Field(..., description="Length of ``text`` in characters.")
