"""Endpoints de health check."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service="sheetflow-bot",
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness: dependências montadas. Não consulta a planilha."""
    deps = getattr(request.app.state, "deps", None)
    ready = deps is not None
    payload = {
        "status": "ready" if ready else "not_ready",
        "caches": deps.store.cache_stats() if ready else {},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)
