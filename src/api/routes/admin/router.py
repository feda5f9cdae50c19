"""Endpoints administrativos do cache de configuração."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from api.routes.dependencies import get_app_dependencies
from app.bootstrap import AppDependencies  # noqa: TC001 - resolvido em runtime pelo FastAPI

router = APIRouter()


@router.get("/cache")
async def cache_stats(
    deps: Annotated[AppDependencies, Depends(get_app_dependencies)],
) -> dict[str, Any]:
    return {"caches": deps.store.cache_stats()}


@router.post("/cache/invalidate")
async def invalidate_cache(
    deps: Annotated[AppDependencies, Depends(get_app_dependencies)],
) -> dict[str, Any]:
    """Descarta flows, prompts e mensagens programadas em cache.

    Os settings de IA já resolvidos também são recarregados na próxima
    mensagem.
    """
    deps.store.invalidate_all()
    deps.prompt_settings.reset()
    return {"status": "invalidated", "caches": deps.store.cache_stats()}
