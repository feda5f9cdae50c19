"""Logging estruturado em JSON para o sheetflow-bot.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="sheetflow_bot")
    logger = get_logger(__name__)
    logger.info("flow_matched", extra={"tier": "exact"})

Todo registro carrega: asctime, level, logger, message, service, correlation_id.
Corpo de mensagens e telefones nunca vão para o log.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
