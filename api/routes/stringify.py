"""
Stringify route.

``POST /stringify`` — serialize an arbitrary JSON value with the
structural serializer. JSON input cannot be cyclic, so this never fails
past request validation.
"""

from fastapi import APIRouter

from api.schemas.stringify import StringifyRequest, StringifyResponse
from core.serializer import stringify

router = APIRouter(tags=["stringify"])


@router.post("/stringify", response_model=StringifyResponse)
def stringify_value(body: StringifyRequest) -> StringifyResponse:
    """Serialize ``body.value`` and return the text."""
    text = stringify(body.value)
    return StringifyResponse(text=text, length=len(text))
