"""api/routes/demos.py — Demo catalog endpoints.

GET  /demos/list  — List every registered demo, optionally for one primitive.
POST /demos/run   — Run a demo by name and return its serialized result.

Thin HTTP boundary: no business logic. Delegates to the DemoRegistry
singleton in demos/registry.py. Errors raised by a primitive are encoded in
the response body (success=False, error=str); this endpoint never returns
500 for them.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from api.deps import get_demo_config, get_demo_registry
from api.schemas.demos import DemoInfo, DemoListResponse, DemoRunRequest, DemoRunResponse
from core.config import DemoConfig
from demos.base import PRIMITIVES
from demos.registry import DemoRegistry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/demos", tags=["demos"])

Registry = Annotated[DemoRegistry, Depends(get_demo_registry)]
Config = Annotated[DemoConfig, Depends(get_demo_config)]


@router.get("/list", response_model=DemoListResponse)
def list_demos(
    registry: Registry,
    primitive: Annotated[str | None, Query(description="Only demos for this primitive.")] = None,
) -> DemoListResponse:
    """List registered demos.

    Raises:
        HTTPException(400): Unknown primitive filter.
    """
    if primitive is not None and primitive not in PRIMITIVES:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown primitive '{primitive}'. Valid: {list(PRIMITIVES)}",
        )
    entries = registry.list_demos()
    if primitive is not None:
        entries = [e for e in entries if e["primitive"] == primitive]
    return DemoListResponse(demos=[DemoInfo(**e) for e in entries], count=len(entries))


@router.post("/run", response_model=DemoRunResponse)
async def run_demo(
    request: DemoRunRequest, registry: Registry, config: Config
) -> DemoRunResponse:
    """Run a registered demo by name.

    Args:
        request: Demo name.

    Returns:
        DemoRunResponse — mirrors the DemoResult fields.

    Raises:
        HTTPException(404): Demo not registered.
    """
    demo = registry.get(request.name)
    if demo is None:
        available = [d["name"] for d in registry.list_demos()]
        raise HTTPException(
            status_code=404,
            detail=f"Demo '{request.name}' not found. Available demos: {available}",
        )

    logger.info("Running demo %s", demo.name)
    result = await demo(config)
    return DemoRunResponse(
        name=demo.name,
        primitive=demo.primitive,
        success=result.success,
        data=result.data,
        error=result.error,
        metadata=result.metadata,
    )
