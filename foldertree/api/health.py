import time

from fastapi import APIRouter, Request

from foldertree.schemas.response import HealthCheck

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthCheck)
async def health(request: Request) -> HealthCheck:
    """Liveness plus a ping of the document store"""
    started_at = getattr(request.app.state, "started_at", None)
    mongodb = getattr(request.app.state, "mongodb", None)
    database_up = await mongodb.ping() if mongodb else False

    return HealthCheck(
        status="healthy" if database_up else "degraded",
        database="up" if database_up else "down",
        version=request.app.version,
        uptime=round(time.monotonic() - started_at, 3) if started_at else None,
    )
