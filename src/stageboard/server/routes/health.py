"""Health endpoint."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel

from stageboard import __version__

health_router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    status: str
    app_name: str
    version: str
    uptime_seconds: float
    task_count: int


@health_router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    settings = request.app.state.settings
    started_at = getattr(request.app.state, "started_at", datetime.now(UTC))
    uptime = (datetime.now(UTC) - started_at).total_seconds()
    return HealthResponse(
        status="ok",
        app_name=settings.app_name,
        version=__version__,
        uptime_seconds=round(uptime, 1),
        task_count=len(request.app.state.task_store.all()),
    )
