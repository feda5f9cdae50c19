"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.admin.router import router as admin_router
from api.routes.health.router import router as health_router
from api.routes.messages.router import router as messages_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()
    api_router.include_router(health_router, tags=["health"])
    api_router.include_router(messages_router, prefix="/messages", tags=["messages"])
    api_router.include_router(admin_router, prefix="/admin", tags=["admin"])
    return api_router
