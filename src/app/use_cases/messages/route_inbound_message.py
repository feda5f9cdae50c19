"""Use case de roteamento de mensagem inbound: flow da planilha ou IA."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from app.observability import reset_correlation_id, set_correlation_id
from app.services.flow_matcher import find_flow_answer

if TYPE_CHECKING:
    from app.services.ai_responder import AIResponder
    from app.services.configuration_store import ConfigurationStore

logger = logging.getLogger(__name__)

RouteSource = Literal["flow", "ai", "none"]


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Resposta decidida para a mensagem."""

    source: RouteSource
    answer: str
    media: str | None = None
    matched_keyword: str | None = None
    tier: str | None = None


class RouteInboundMessageUseCase:
    """Decide a resposta de uma mensagem de texto.

    1. Tenta resolver um flow (tabela em cache na ConfigurationStore).
    2. Sem flow, cai para a resposta por IA.
    3. Opcionalmente registra entrada/saída na aba de logs.
    """

    def __init__(
        self,
        *,
        store: ConfigurationStore,
        ai_responder: AIResponder,
        log_transcripts: bool = False,
    ) -> None:
        self._store = store
        self._ai_responder = ai_responder
        self._log_transcripts = log_transcripts

    async def execute(
        self,
        text: str,
        conversation_id: str | None = None,
        *,
        correlation_id: str | None = None,
    ) -> RouteResult:
        token = set_correlation_id(correlation_id)
        try:
            if self._log_transcripts and conversation_id:
                await self._store.log_message(conversation_id, text, "IN", "user")

            result = await self._route(text, conversation_id)

            if self._log_transcripts and conversation_id and result.answer:
                await self._store.log_message(conversation_id, result.answer, "OUT", "assistant")

            logger.info(
                "inbound_message_routed",
                extra={
                    "component": "route_inbound_message",
                    "result": result.source,
                    "tier": result.tier,
                },
            )
            return result
        finally:
            reset_correlation_id(token)

    async def _route(self, text: str, conversation_id: str | None) -> RouteResult:
        match = await find_flow_answer(text, self._store)
        if match is not None:
            return RouteResult(
                source="flow",
                answer=match.flow.add_answer or "",
                media=match.flow.media,
                matched_keyword=match.keyword,
                tier=match.tier.value,
            )

        answer = await self._ai_responder.get_response(text, conversation_id)
        return RouteResult(source="ai" if answer else "none", answer=answer)
