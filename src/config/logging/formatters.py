"""Formatter JSON padrão (python-json-logger)."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o JsonFormatter com os campos obrigatórios renomeados.

    Campos passados em `extra` são serializados junto, ex.:
        {"level": "INFO", "logger": "app.services.flow_matcher",
         "message": "flow_matched", "tier": "exact", ...}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
