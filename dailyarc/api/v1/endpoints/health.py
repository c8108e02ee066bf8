"""Health check endpoint for load balancers and monitoring."""

import os

from fastapi import APIRouter

from dailyarc.core.config import get_settings
from dailyarc.services.tree_builder import build_skill_tree

router = APIRouter()


@router.get("")
async def health():
    """Simple liveness check. Optionally includes built_at if BACKEND_BUILT_AT env is set."""
    payload: dict = {"status": "ok"}
    built_at = os.environ.get("BACKEND_BUILT_AT")
    if built_at:
        payload["built_at"] = built_at
    return payload


@router.get("/ready")
async def readiness():
    """Readiness: the default tree assembles."""
    mode = get_settings().default_training_mode
    return {"status": "ok", "mode": mode.value, "nodes": len(build_skill_tree(mode))}
