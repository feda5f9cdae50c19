"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging, valida settings e monta as
dependências concretas.

Uso:
    from app.bootstrap import initialize_app, build_dependencies

    initialize_app()
    deps = build_dependencies()
    result = await deps.router.execute("hola", conversation_id="50255501234")
"""

from __future__ import annotations

import logging

from app.bootstrap.dependencies import AppDependencies, build_dependencies
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_google_sheets_settings,
    get_openai_settings,
)
from utils.errors import MalformedCredentialsError

SERVICE_NAME = "sheetflow_bot"

logger = logging.getLogger(__name__)

__all__ = [
    "SERVICE_NAME",
    "AppDependencies",
    "build_dependencies",
    "initialize_app",
    "validate_runtime_settings",
]


def initialize_app() -> None:
    """Configura logging JSON com correlation_id. Chamar uma vez no startup."""
    configure_logging(
        level=get_base_settings().log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Credenciais da planilha inválidas são sempre fatais. Demais erros
    bloqueiam o boot apenas em staging/production.
    """
    base = get_base_settings()
    sheets_errors = get_google_sheets_settings().validate()
    if sheets_errors:
        logger.error(
            "sheets_settings_invalid",
            extra={"component": "bootstrap", "result": "failed", "errors": sheets_errors},
        )
        raise MalformedCredentialsError("; ".join(sheets_errors))

    errors = [f"base: {error}" for error in base.validate()]
    errors.extend(f"openai: {error}" for error in get_openai_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
