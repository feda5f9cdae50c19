"""Settings de IA derivados da aba de prompts.

A coerção é uniforme: todo valor cujo texto é inteiramente numérico vira
int/float; o resto permanece string (inclusive o system_prompt).
"""

from __future__ import annotations

import asyncio
import logging
import re
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain.sheet_records import PromptSettings, PromptValue
    from app.services.configuration_store import ConfigurationStore

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?\d+")
_DECIMAL = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")


def coerce_value(raw: object) -> PromptValue:
    """Converte texto numérico em int/float; caso contrário devolve str."""
    if isinstance(raw, bool):
        return str(raw)
    if isinstance(raw, int | float):
        return raw
    text = str(raw)
    candidate = text.strip()
    if _INTEGER.fullmatch(candidate):
        return int(candidate)
    if _DECIMAL.fullmatch(candidate):
        return float(candidate)
    return text


def coerce_prompt_settings(raw: Mapping[str, object]) -> PromptSettings:
    """Passo único de coerção; o resultado é somente leitura."""
    return MappingProxyType({key: coerce_value(value) for key, value in raw.items()})


class PromptSettingsResolver:
    """Carrega os settings uma única vez por sessão do chamador.

    `load()` é idempotente: a primeira chamada bem-sucedida busca na
    ConfigurationStore (sujeita ao TTL dela) e as seguintes devolvem o valor
    já resolvido. Resultado vazio não é fixado. `reset()` força nova carga.
    """

    def __init__(self, store: ConfigurationStore) -> None:
        self._store = store
        self._settings: PromptSettings | None = None
        self._lock = asyncio.Lock()

    @property
    def loaded(self) -> bool:
        return self._settings is not None

    async def load(self) -> PromptSettings:
        if self._settings is not None:
            return self._settings
        async with self._lock:
            if self._settings is not None:
                return self._settings
            settings = coerce_prompt_settings(await self._store.get_prompts())
            if not settings:
                # Aba vazia ou indisponível: não fixa o resultado
                logger.warning(
                    "prompt_settings_empty",
                    extra={"component": "prompt_settings", "action": "load", "result": "empty"},
                )
                return settings
            self._settings = settings
            logger.info(
                "prompt_settings_loaded",
                extra={
                    "component": "prompt_settings",
                    "action": "load",
                    "result": "ok",
                    "keys": sorted(settings),
                },
            )
            return settings

    def reset(self) -> None:
        self._settings = None
