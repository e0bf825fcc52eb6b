"""Profiling REST API endpoints.

Exposes the current profile snapshot, raw bucket counts, an explicit reset
and a health check.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Depends
from visgoth.core.config import settings
from visgoth.services.profiling import broadcaster
from visgoth.services.profiling.instance import AnyRegistry, get_visgoth
from visgoth.services.profiling.models import (
    BucketSummaryModel,
    ProfilingHealthModel,
    VisgothPayloadModel,
)

router = APIRouter(prefix="/profile", tags=["profile"])

DISABLED_DETAIL = "Profiling is disabled. Set VISGOTH_ENABLE_PROFILING=true to enable."


def get_registry() -> AnyRegistry:
    """FastAPI dependency for registry injection."""
    return get_visgoth()


def require_enabled(registry: AnyRegistry = Depends(get_registry)) -> AnyRegistry:
    if not registry.is_enabled():
        raise HTTPException(status_code=503, detail=DISABLED_DETAIL)
    return registry


@router.get("/", response_model=VisgothPayloadModel)
async def get_profile_snapshot(registry: AnyRegistry = Depends(require_enabled)):
    """Get the current profile snapshot.

    Non-finite metric values (e.g. fps with no samples) are returned as null.

    Raises:
        HTTPException: 503 if profiling is disabled
    """
    return registry.snapshot().to_payload()


@router.get("/buckets", response_model=List[BucketSummaryModel])
async def get_bucket_summary(registry: AnyRegistry = Depends(require_enabled)):
    """Sample and value counts per bucket."""
    return registry.bucket_summary()


@router.post("/reset")
async def reset_profile(registry: AnyRegistry = Depends(require_enabled)):
    registry.reset()
    return {"status": "reset", "client_id": registry.client_id}


@router.get("/health", response_model=ProfilingHealthModel)
async def get_profiling_health(registry: AnyRegistry = Depends(get_registry)):
    """Always returns 200, even when profiling is disabled."""
    enabled = registry.is_enabled()
    return ProfilingHealthModel(
        profiling_enabled=enabled,
        broadcaster_running=enabled and broadcaster.is_running(),
        client_id=registry.client_id,
        version=settings.VERSION,
    )
