"""Entrypoint da aplicação sheetflow-bot (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import build_dependencies, initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_google_sheets_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.bootstrap import AppDependencies

initialize_app()

logger = get_logger(__name__)


def create_app(deps: AppDependencies | None = None) -> FastAPI:
    """Cria a aplicação.

    Args:
        deps: Dependências prontas (testes). Sem elas, o lifespan valida as
            settings e monta o grafo real; credenciais inválidas abortam o boot.
    """

    @asynccontextmanager
    async def lifespan(fastapi_app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("app_starting", extra={"service": "sheetflow-bot"})
        if deps is not None:
            fastapi_app.state.deps = deps
        else:
            validate_runtime_settings()
            fastapi_app.state.deps = build_dependencies(
                log_transcripts=get_google_sheets_settings().log_transcripts,
            )
        yield
        logger.info("app_shutting_down", extra={"service": "sheetflow-bot"})

    fastapi_app = FastAPI(
        title="sheetflow-bot",
        description="Roteamento de mensagens por flows da planilha com fallback de IA",
        version="1.0.0",
        lifespan=lifespan,
    )
    fastapi_app.state.deps = deps
    fastapi_app.include_router(create_api_router())
    return fastapi_app


app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    uvicorn.run("app.app:app", host="0.0.0.0", port=8080, reload=True)


if __name__ == "__main__":
    main()
