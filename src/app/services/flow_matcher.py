"""Resolução determinística de flows por keyword.

Política (primeiro match vence), por flow na ordem da planilha e por
keyword na ordem em que aparece na célula:
1. exata: mensagem normalizada == keyword normalizada
2. palavra inteira: keyword delimitada por fronteira de palavra
3. parcial: keyword contida em qualquer ponto da mensagem

Os três níveis são testados para uma keyword antes de passar à próxima.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from app.services.text_normalizer import normalize

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from app.domain.sheet_records import FlowRecord
    from app.services.configuration_store import ConfigurationStore

logger = logging.getLogger(__name__)

_COMPONENT = "flow_matcher"


class MatchTier(Enum):
    """Nível de comparação que produziu o match."""

    EXACT = "exact"
    WHOLE_WORD = "whole_word"
    SUBSTRING = "substring"


@dataclass(frozen=True, slots=True)
class FlowMatch:
    """Flow resolvido com a keyword e o nível que o selecionaram."""

    flow: FlowRecord
    keyword: str
    tier: MatchTier
    flow_position: int


def split_keywords(keywords_raw: str | None) -> list[str]:
    """Keywords normalizadas e não vazias, na ordem original."""
    if not keywords_raw:
        return []
    normalized = (normalize(keyword) for keyword in keywords_raw.split(","))
    return [keyword for keyword in normalized if keyword]


def match_tier(message: str, keyword: str) -> MatchTier | None:
    """Aplica os três níveis a textos já normalizados."""
    if message == keyword:
        return MatchTier.EXACT
    if re.search(rf"\b{re.escape(keyword)}\b", message):
        return MatchTier.WHOLE_WORD
    if keyword in message:
        return MatchTier.SUBSTRING
    return None


def resolve_flow(user_message: str | None, flows: Sequence[FlowRecord]) -> FlowMatch | None:
    """Retorna o primeiro flow cuja keyword casa com a mensagem, ou None."""
    message = normalize(user_message)
    for position, flow, keyword in _candidates(flows):
        tier = match_tier(message, keyword)
        if tier is None:
            continue
        logger.info(
            "flow_matched",
            extra={
                "component": _COMPONENT,
                "action": "match",
                "result": "match",
                "tier": tier.value,
                "flow_position": position,
            },
        )
        return FlowMatch(flow=flow, keyword=keyword, tier=tier, flow_position=position)

    logger.info(
        "flow_not_matched",
        extra={
            "component": _COMPONENT,
            "action": "match",
            "result": "no_match",
            "flows_checked": len(flows),
        },
    )
    return None


def match_flow(user_message: str | None, flows: Sequence[FlowRecord]) -> FlowRecord | None:
    """Versão enxuta de `resolve_flow` que devolve apenas o flow."""
    resolved = resolve_flow(user_message, flows)
    return resolved.flow if resolved else None


async def find_flow_answer(
    user_message: str | None,
    store: ConfigurationStore,
) -> FlowMatch | None:
    """Busca a tabela (possivelmente em cache) e resolve o flow da mensagem."""
    flows = await store.get_flows()
    return resolve_flow(user_message, flows)


def _candidates(flows: Sequence[FlowRecord]) -> Iterator[tuple[int, FlowRecord, str]]:
    for position, flow in enumerate(flows):
        for keyword in split_keywords(flow.keywords_raw):
            yield position, flow, keyword
