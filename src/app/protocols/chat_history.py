"""Contrato do histórico de conversa consumido pelo caminho de IA."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, Protocol, runtime_checkable

if TYPE_CHECKING:
    from app.domain.sheet_records import ChatMessage


@runtime_checkable
class ChatHistoryProtocol(Protocol):
    """Persistência de mensagens por conversa (ex.: telefone do contato)."""

    async def get_context(self, conversation_id: str) -> list[ChatMessage]:
        """Retorna as mensagens recentes em ordem cronológica."""
        ...

    async def save_message(
        self,
        conversation_id: str,
        role: Literal["user", "assistant"],
        content: str,
    ) -> None:
        """Acrescenta uma mensagem ao histórico."""
        ...
