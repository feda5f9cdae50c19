"""Endpoint de roteamento de mensagens de texto."""

from __future__ import annotations

from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Header
from pydantic import BaseModel, ConfigDict, Field

from api.routes.dependencies import get_app_dependencies
from app.bootstrap import AppDependencies  # noqa: TC001 - resolvido em runtime pelo FastAPI

router = APIRouter()


class InboundMessageRequest(BaseModel):
    """Mensagem de texto recebida pelo canal."""

    model_config = ConfigDict(extra="ignore")

    text: str = Field(..., description="Texto bruto enviado pelo usuário.")
    conversation_id: str | None = Field(
        default=None,
        description="Identificador da conversa (ex.: telefone) para histórico.",
    )


class RouteResponse(BaseModel):
    """Resposta decidida para a mensagem."""

    source: Literal["flow", "ai", "none"]
    answer: str
    media: str | None = None
    matched_keyword: str | None = None
    tier: str | None = None


@router.post("", response_model=RouteResponse)
async def route_message(
    body: InboundMessageRequest,
    deps: Annotated[AppDependencies, Depends(get_app_dependencies)],
    x_correlation_id: Annotated[str | None, Header()] = None,
) -> RouteResponse:
    result = await deps.router.execute(
        body.text,
        body.conversation_id,
        correlation_id=x_correlation_id,
    )
    return RouteResponse(
        source=result.source,
        answer=result.answer,
        media=result.media,
        matched_keyword=result.matched_keyword,
        tier=result.tier,
    )
