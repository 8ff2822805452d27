from fastapi import APIRouter, Depends, Request

from app.halolight.core.deps import get_registry
from app.halolight.services.route_registry import RouteRegistry

router = APIRouter()


@router.get("/health")
async def health(request: Request):
    trace_id = getattr(request.state, "trace_id", "")
    return {"status": "ok", "trace_id": trace_id}


@router.get("/ready")
async def ready(request: Request, registry: RouteRegistry = Depends(get_registry)):
    trace_id = getattr(request.state, "trace_id", "")
    return {"status": "ready", "routes": len(registry), "trace_id": trace_id}
