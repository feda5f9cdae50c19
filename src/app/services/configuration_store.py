"""Configuração do bot lida da planilha, com cache TTL por recurso.

Três recursos independentes, cada um atrás do seu próprio TTLCache:
- flows (tabela de keywords -> resposta)
- prompts (system prompt + parâmetros do modelo)
- mensagens programadas

Falhas de leitura nunca sobem: o chamador recebe o fallback vazio do recurso
e o próximo `get` é a nova tentativa. Escritas invalidam apenas o recurso
afetado.
"""

from __future__ import annotations

import logging
import time
from datetime import UTC, datetime
from types import MappingProxyType
from typing import TYPE_CHECKING, Any
from zoneinfo import ZoneInfo

from app.domain.sheet_records import FIRST_DATA_ROW
from app.infra.cache import TTLCache
from app.infra.sheets.row_parsers import (
    parse_flow_rows,
    parse_prompt_rows,
    parse_scheduled_rows,
)
from app.observability import get_correlation_id

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping

    from app.domain.sheet_records import FlowRecord, ScheduledMessageRecord
    from app.protocols.sheet_source import SheetSourceProtocol
    from config.settings.google_sheets import GoogleSheetsSettings

logger = logging.getLogger(__name__)

_COMPONENT = "configuration_store"
_LOG_TIMESTAMP_FORMAT = "%d/%m/%Y, %H:%M:%S"


class ConfigurationStore:
    """Fachada de leitura/escrita da configuração remota.

    Instância explícita com tempo de vida do processo, injetada nos
    consumidores (sem singleton de módulo).

    Args:
        source: Fonte tabular (ex.: GoogleSheetsClient)
        settings: Ranges, TTL e fuso horário
        clock: Relógio monotônico dos caches (injetável em testes)
        wall_clock: Relógio de parede para o timestamp da aba de logs
    """

    def __init__(
        self,
        source: SheetSourceProtocol,
        settings: GoogleSheetsSettings,
        *,
        clock: Callable[[], float] = time.monotonic,
        wall_clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._source = source
        self._settings = settings
        self._wall_clock = wall_clock or (lambda: datetime.now(UTC))
        self._zone = ZoneInfo(settings.timezone)
        ttl = settings.cache_ttl_seconds

        self._flows: TTLCache[tuple[FlowRecord, ...]] = TTLCache(
            "flows",
            self._fetch_flows,
            ttl_seconds=ttl,
            fallback=tuple,
            clock=clock,
        )
        self._prompts: TTLCache[Mapping[str, str]] = TTLCache(
            "prompts",
            self._fetch_prompts,
            ttl_seconds=ttl,
            fallback=lambda: MappingProxyType({}),
            clock=clock,
        )
        self._scheduled: TTLCache[tuple[ScheduledMessageRecord, ...]] = TTLCache(
            "scheduled_messages",
            self._fetch_scheduled,
            ttl_seconds=ttl,
            fallback=tuple,
            clock=clock,
        )

    async def get_flows(self) -> tuple[FlowRecord, ...]:
        """Tabela de flows na ordem da planilha (vazia se indisponível)."""
        return await self._flows.get()

    async def get_prompts(self) -> Mapping[str, str]:
        """Settings brutos de IA_Prompts (vazio se indisponível)."""
        return await self._prompts.get()

    async def get_scheduled_messages(self) -> tuple[ScheduledMessageRecord, ...]:
        return await self._scheduled.get()

    async def update_message_status(self, row_index: int, new_status: str) -> bool:
        """Atualiza a célula de estado de uma mensagem programada.

        Em sucesso invalida apenas o cache de mensagens programadas, para que a
        escrita nunca seja mascarada por uma leitura obsoleta. Em falha o cache
        permanece como está, pois a linha pode não ter mudado.
        """
        if row_index < FIRST_DATA_ROW:
            logger.warning(
                "scheduled_status_invalid_row",
                extra={
                    "component": _COMPONENT,
                    "action": "update_message_status",
                    "result": "rejected",
                    "row_index": row_index,
                },
            )
            return False

        ok = await self._safe_write(
            "update_message_status",
            self._source.write_cell(self._settings.status_cell(row_index), new_status),
        )
        if not ok:
            logger.warning(
                "scheduled_status_update_failed",
                extra={
                    "component": _COMPONENT,
                    "action": "update_message_status",
                    "result": "error",
                    "row_index": row_index,
                    "correlation_id": get_correlation_id(),
                },
            )
            return False

        self._scheduled.invalidate()
        logger.info(
            "scheduled_status_updated",
            extra={
                "component": _COMPONENT,
                "action": "update_message_status",
                "result": "ok",
                "row_index": row_index,
                "status": new_status,
            },
        )
        return True

    def invalidate_all(self) -> None:
        """Limpa os três caches. Uso administrativo."""
        for cache in self._caches():
            cache.invalidate()
        logger.info(
            "configuration_cache_cleared",
            extra={"component": _COMPONENT, "action": "invalidate_all", "result": "ok"},
        )

    async def log_message(
        self,
        phone: str,
        message: str,
        direction: str = "IN",
        role: str = "user",
        status: str = "OK",
    ) -> bool:
        """Acrescenta a mensagem à aba de logs da planilha.

        Colunas: timestamp local, telefone, direção (IN/OUT), papel,
        mensagem, estado. Falha é registrada e devolvida como False.
        """
        timestamp = self._wall_clock().astimezone(self._zone).strftime(_LOG_TIMESTAMP_FORMAT)
        row = [timestamp, phone, direction, role, message, status]
        ok = await self._safe_write(
            "log_message",
            self._source.append_row(self._settings.logs_range, row),
        )
        logger.log(
            logging.DEBUG if ok else logging.WARNING,
            "transcript_row_appended" if ok else "transcript_row_append_failed",
            extra={
                "component": _COMPONENT,
                "action": "log_message",
                "result": "ok" if ok else "error",
                "direction": direction,
                "role": role,
            },
        )
        return ok

    def cache_stats(self) -> dict[str, dict[str, Any]]:
        return {cache.name: cache.stats() for cache in self._caches()}

    async def _safe_write(self, action: str, write: Awaitable[bool]) -> bool:
        """Escrita na fonte; exceção inesperada conta como falha."""
        try:
            return bool(await write)
        except Exception:
            logger.exception(
                "sheet_write_unexpected_error",
                extra={"component": _COMPONENT, "action": action, "result": "error"},
            )
            return False

    def _caches(self) -> tuple[TTLCache[Any], ...]:
        return (self._flows, self._prompts, self._scheduled)

    async def _fetch_flows(self) -> tuple[FlowRecord, ...]:
        rows = await self._source.fetch_range(self._settings.flows_range)
        return parse_flow_rows(rows)

    async def _fetch_prompts(self) -> Mapping[str, str]:
        rows = await self._source.fetch_range(self._settings.prompts_range)
        return parse_prompt_rows(rows)

    async def _fetch_scheduled(self) -> tuple[ScheduledMessageRecord, ...]:
        rows = await self._source.fetch_range(self._settings.scheduled_range)
        return parse_scheduled_rows(rows, self._settings.scheduled_first_row)
