"""Configuração do logging raiz do serviço.

Chamado uma única vez pelo composition root (app/bootstrap/).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "sheetflow_bot"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala um único handler JSON no logger raiz.

    Args:
        level: Nível de log (case insensitive).
        service_name: Valor do campo `service` em todos os registros.
        correlation_id_getter: Fonte do correlation_id da conversa atual.

    Raises:
        ValueError: Se o nível não for reconhecido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Atalho para logging.getLogger; o filter do handler injeta o contexto."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """Registra que um fallback determinístico foi usado.

    Ex.: tabela de flows vazia por planilha indisponível, resposta de IA vazia.
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason
    if elapsed_ms is not None:
        extra["elapsed_ms"] = elapsed_ms

    logger.info("fallback_applied", extra=extra)
