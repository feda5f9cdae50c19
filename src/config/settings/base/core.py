"""Settings base do sheetflow-bot.

Configurações comuns a todos os componentes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs
        debug: Modo debug ativo
        log_level: Nível do logger raiz
    """

    environment: Environment = "development"
    service_name: str = "sheetflow-bot"
    debug: bool = False
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_strict(self) -> bool:
        """Ambientes onde configuração inválida impede o boot."""
        return self.environment in ("staging", "production")

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if self.environment not in ("development", "staging", "production"):
            errors.append(f"ENVIRONMENT inválido: {self.environment}")
        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")
        if self.log_level not in _LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")
        return errors


def _parse_environment(env_str: str) -> Environment:
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _load_base_from_env() -> BaseSettings:
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "sheetflow-bot"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
