"""Acesso às dependências montadas no lifespan (app.state)."""

from __future__ import annotations

from fastapi import HTTPException, Request

from app.bootstrap import AppDependencies  # noqa: TC001 - resolvido em runtime pelo FastAPI


def get_app_dependencies(request: Request) -> AppDependencies:
    deps = getattr(request.app.state, "deps", None)
    if deps is None:
        raise HTTPException(status_code=503, detail="service_not_ready")
    return deps
