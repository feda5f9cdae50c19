"""Cache TTL assíncrono para um único recurso remoto.

Cada instância guarda no máximo um valor (e o instante em que foi lido)
na frente de uma função de fetch. Usado pela ConfigurationStore para as
tabelas de flows, prompts e mensagens programadas.

Regras:
- Hit somente se `now - fetched_at < ttl` (estritamente menor).
- Fetch com falha não altera a entrada atual e devolve o fallback.
- `invalidate()` limpa valor e timestamp sem chamar o fetch.
- Misses concorrentes compartilham um único fetch (lock por recurso).
- Um fetch iniciado antes de um `invalidate()` não grava seu resultado.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from utils.errors import SourceUnavailableError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

T = TypeVar("T")

_COMPONENT = "ttl_cache"


@dataclass(frozen=True, slots=True)
class CacheEntry(Generic[T]):
    """Valor em cache e o instante (clock do cache) em que foi lido."""

    value: T
    fetched_at: float


class TTLCache(Generic[T]):
    """Cache de um recurso com janela de frescor fixa.

    Args:
        name: Nome do recurso (aparece nos logs e nas estatísticas)
        fetch: Corrotina que lê o recurso; falhas via exceção
        ttl_seconds: Janela de frescor
        fallback: Fábrica do valor devolvido quando o fetch falha
        clock: Relógio monotônico em segundos (injetável para testes)
    """

    def __init__(
        self,
        name: str,
        fetch: Callable[[], Awaitable[T]],
        *,
        ttl_seconds: float,
        fallback: Callable[[], T],
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds deve ser positivo")
        self._name = name
        self._fetch = fetch
        self._ttl_seconds = ttl_seconds
        self._fallback = fallback
        self._clock = clock
        self._entry: CacheEntry[T] | None = None
        self._lock = asyncio.Lock()
        self._generation = 0
        self._hits = 0
        self._misses = 0
        self._failures = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    async def get(self) -> T:
        """Retorna o valor em cache se fresco; senão faz o fetch."""
        entry = self._fresh_entry()
        if entry is not None:
            self._record_hit(entry)
            return entry.value

        async with self._lock:
            # Outro chamador pode ter completado o fetch enquanto esperávamos
            entry = self._fresh_entry()
            if entry is not None:
                self._record_hit(entry)
                return entry.value
            return await self._refresh()

    def invalidate(self) -> None:
        """Descarta valor e timestamp. Idempotente."""
        self._generation += 1
        had_value = self._entry is not None
        self._entry = None
        logger.debug(
            "cache_invalidated",
            extra={
                "component": _COMPONENT,
                "action": "invalidate",
                "result": "ok",
                "resource": self._name,
                "had_value": had_value,
            },
        )

    def is_fresh(self) -> bool:
        return self._fresh_entry() is not None

    def age_seconds(self) -> float | None:
        """Idade da entrada atual, fresca ou não; None se vazio."""
        if self._entry is None:
            return None
        return self._clock() - self._entry.fetched_at

    def stats(self) -> dict[str, Any]:
        age = self.age_seconds()
        return {
            "resource": self._name,
            "cached": self._entry is not None,
            "fresh": self.is_fresh(),
            "age_seconds": round(age, 2) if age is not None else None,
            "ttl_seconds": self._ttl_seconds,
            "hits": self._hits,
            "misses": self._misses,
            "failures": self._failures,
        }

    def _fresh_entry(self) -> CacheEntry[T] | None:
        entry = self._entry
        if entry is None:
            return None
        if self._clock() - entry.fetched_at < self._ttl_seconds:
            return entry
        return None

    async def _refresh(self) -> T:
        self._misses += 1
        generation = self._generation
        started_at = self._clock()
        logger.info(
            "cache_miss",
            extra={
                "component": _COMPONENT,
                "action": "get",
                "result": "miss",
                "resource": self._name,
            },
        )
        try:
            value = await self._fetch()
        except SourceUnavailableError as exc:
            self._record_failure(exc)
            return self._fallback()
        except Exception as exc:
            self._record_failure(exc, unexpected=True)
            return self._fallback()

        if generation != self._generation:
            # invalidate() chegou durante o fetch: o valor pode estar obsoleto
            logger.info(
                "cache_write_discarded",
                extra={
                    "component": _COMPONENT,
                    "action": "get",
                    "result": "invalidated_during_fetch",
                    "resource": self._name,
                },
            )
            return value

        self._entry = CacheEntry(value=value, fetched_at=started_at)
        logger.info(
            "cache_refreshed",
            extra={
                "component": _COMPONENT,
                "action": "get",
                "result": "ok",
                "resource": self._name,
                "size": _size_of(value),
            },
        )
        return value

    def _record_hit(self, entry: CacheEntry[T]) -> None:
        self._hits += 1
        logger.debug(
            "cache_hit",
            extra={
                "component": _COMPONENT,
                "action": "get",
                "result": "hit",
                "resource": self._name,
                "age_seconds": round(self._clock() - entry.fetched_at, 2),
            },
        )

    def _record_failure(self, exc: Exception, *, unexpected: bool = False) -> None:
        self._failures += 1
        extra = {
            "component": _COMPONENT,
            "action": "get",
            "result": "fallback",
            "resource": self._name,
            "error_type": type(exc).__name__,
            "kept_previous": self._entry is not None,
        }
        if unexpected:
            logger.exception("cache_fetch_unexpected_error", extra=extra)
            return
        logger.warning("cache_fetch_failed", extra=extra)


def _size_of(value: object) -> int | None:
    try:
        return len(value)  # type: ignore[arg-type]
    except TypeError:
        return None
