"""Resposta por IA quando nenhum flow da planilha casa com a mensagem."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from app.domain.sheet_records import SYSTEM_PROMPT_KEY, ChatMessage
from config.logging import log_fallback
from utils.errors import CompletionError

if TYPE_CHECKING:
    from app.protocols.chat_history import ChatHistoryProtocol
    from app.protocols.completion import CompletionServiceProtocol
    from app.services.prompt_settings import PromptSettingsResolver

logger = logging.getLogger(__name__)

_COMPONENT = "ai_responder"


class AIResponder:
    """Monta as mensagens (system + histórico + usuário) e chama o LLM.

    Falha do provedor devolve string vazia; o histórico só é gravado
    quando há resposta.
    """

    def __init__(
        self,
        *,
        settings_resolver: PromptSettingsResolver,
        completion: CompletionServiceProtocol,
        history: ChatHistoryProtocol | None = None,
        default_system_prompt: str,
    ) -> None:
        self._settings_resolver = settings_resolver
        self._completion = completion
        self._history = history
        self._default_system_prompt = default_system_prompt

    async def get_response(self, user_input: str, conversation_id: str | None = None) -> str:
        settings = await self._settings_resolver.load()
        system_prompt = settings.get(SYSTEM_PROMPT_KEY)
        messages = [
            ChatMessage(
                role="system",
                content=str(system_prompt) if system_prompt else self._default_system_prompt,
            )
        ]
        messages.extend(await self._load_context(conversation_id))
        messages.append(ChatMessage(role="user", content=user_input))

        started_at = time.perf_counter()
        try:
            answer = await self._completion.generate(messages, settings)
        except CompletionError as exc:
            log_fallback(
                logger,
                _COMPONENT,
                reason=str(exc) or "completion_error",
                elapsed_ms=round((time.perf_counter() - started_at) * 1000, 2),
            )
            return ""

        await self._save_exchange(conversation_id, user_input, answer)
        return answer

    async def _load_context(self, conversation_id: str | None) -> list[ChatMessage]:
        """Histórico da conversa; indisponível vira contexto vazio."""
        if not conversation_id or self._history is None:
            return []
        try:
            context = await self._history.get_context(conversation_id)
        except Exception as exc:
            log_fallback(logger, _COMPONENT, reason=f"history_read_failed:{type(exc).__name__}")
            return []
        logger.debug(
            "ai_context_loaded",
            extra={"component": _COMPONENT, "context_messages": len(context)},
        )
        return list(context)

    async def _save_exchange(
        self,
        conversation_id: str | None,
        user_input: str,
        answer: str,
    ) -> None:
        # Falha ao gravar não descarta a resposta já gerada
        if not conversation_id or self._history is None:
            return
        try:
            await self._history.save_message(conversation_id, "user", user_input)
            await self._history.save_message(conversation_id, "assistant", answer)
        except Exception as exc:
            log_fallback(logger, _COMPONENT, reason=f"history_write_failed:{type(exc).__name__}")
