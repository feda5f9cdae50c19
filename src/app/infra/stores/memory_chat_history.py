"""Histórico de conversa em memória, para desenvolvimento e testes.

ATENÇÃO: sem persistência entre reinícios.
"""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Literal

from app.domain.sheet_records import ChatMessage
from app.protocols.chat_history import ChatHistoryProtocol

DEFAULT_CONTEXT_SIZE = 10


class MemoryChatHistory(ChatHistoryProtocol):
    """Mantém as últimas `max_messages` mensagens de cada conversa."""

    def __init__(self, max_messages: int = DEFAULT_CONTEXT_SIZE) -> None:
        if max_messages <= 0:
            raise ValueError("max_messages deve ser positivo")
        self._max_messages = max_messages
        self._store: defaultdict[str, deque[ChatMessage]] = defaultdict(
            lambda: deque(maxlen=self._max_messages)
        )

    async def get_context(self, conversation_id: str) -> list[ChatMessage]:
        return list(self._store.get(conversation_id, ()))

    async def save_message(
        self,
        conversation_id: str,
        role: Literal["user", "assistant"],
        content: str,
    ) -> None:
        self._store[conversation_id].append(ChatMessage(role=role, content=content))

    def clear(self, conversation_id: str | None = None) -> None:
        if conversation_id is None:
            self._store.clear()
            return
        self._store.pop(conversation_id, None)
