"""Observability API routes."""

from datetime import datetime

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException, Query

from ...app import Application
from ...models import EventLevel


class EventRecordResponse(BaseModel):
    """Response model for an event record."""

    source_name: str
    level: str
    message: str
    keywords: int
    timestamp: datetime
    thread_id: int
    exception_detail: str | None = None


class HealthResponse(BaseModel):
    """Response model for health."""

    status: str
    sources: list[str]
    listeners: int


def _parse_level(value: str) -> EventLevel:
    """Accept a level name (any case) or its label."""
    normalized = value.strip().replace(" ", "").upper()
    for level in EventLevel:
        if normalized in (level.name.replace("_", ""), level.label.upper()):
            return level
    raise ValueError(value)


def create_observability_router(app: Application) -> APIRouter:
    """Create observability router."""
    router = APIRouter(prefix="/api", tags=["observability"])

    @router.get("/events", response_model=list[EventRecordResponse])
    async def get_events(
        limit: int = Query(100, ge=1, le=1000),
        min_level: str | None = Query(None, description="Minimum level, e.g. Warning"),
        source: str | None = Query(None, description="Filter by source name"),
    ) -> list[dict]:
        """Get recently published event records."""
        try:
            level = EventLevel.LOG_ALWAYS
            if min_level:
                try:
                    level = _parse_level(min_level)
                except ValueError:
                    raise HTTPException(status_code=400, detail="Invalid level")

            records = app.recent_events.records(
                limit=limit, min_level=level, source_name=source
            )
            return [r.to_dict() for r in records]

        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    @router.get("/health", response_model=HealthResponse)
    async def health() -> dict:
        """Report created sources and active listeners."""
        try:
            return {
                "status": "ok",
                "sources": app.channel.sources,
                "listeners": app.channel.listener_count(),
            }
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    return router
