"""correlation_id por mensagem processada.

Cada mensagem inbound recebe um id (ContextVar, seguro para asyncio) que
o CorrelationIdFilter injeta em todos os logs emitidos durante o roteamento.
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o id do contexto atual ou string vazia."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o id do contexto; gera um UUID4 quando nenhum é informado."""
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return uuid.uuid4().hex
