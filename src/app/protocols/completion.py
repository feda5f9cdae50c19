"""Contrato do serviço de completions (LLM)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from app.domain.sheet_records import ChatMessage, PromptSettings


@runtime_checkable
class CompletionServiceProtocol(Protocol):
    """Gera o texto da resposta a partir da lista de mensagens."""

    async def generate(
        self,
        messages: Sequence[ChatMessage],
        settings: PromptSettings | None = None,
    ) -> str:
        """Retorna o texto gerado.

        Raises:
            CompletionError: Falha do provedor ou resposta vazia.
        """
        ...
