"""Parsing posicional das linhas retornadas pela API de planilhas.

Linhas curtas são esperadas (a API omite células vazias no final):
célula ausente ou vazia vira None, nunca erro.
"""

from __future__ import annotations

from collections.abc import Sequence
from types import MappingProxyType
from typing import Any

from app.domain.sheet_records import (
    FIRST_DATA_ROW,
    SYSTEM_PROMPT_KEY,
    FlowRecord,
    ScheduledMessageRecord,
)

Row = Sequence[Any]


def cell(row: Row, index: int) -> str | None:
    """Retorna a célula como str ou None se ausente/vazia."""
    if index >= len(row):
        return None
    value = row[index]
    if value is None or value == "":
        return None
    return value if isinstance(value, str) else str(value)


def parse_flow_rows(rows: Sequence[Row]) -> tuple[FlowRecord, ...]:
    """Colunas: keywords, resposta, mídia. A ordem da planilha é preservada."""
    return tuple(
        FlowRecord(
            add_keyword=cell(row, 0),
            add_answer=cell(row, 1),
            media=cell(row, 2),
        )
        for row in rows
    )


def parse_prompt_rows(rows: Sequence[Row]) -> MappingProxyType[str, str]:
    """Monta o mapeamento bruto de settings da aba de prompts.

    A coluna A da primeira linha é o system prompt; as colunas B/C de cada
    linha formam pares chave/valor (última ocorrência prevalece).
    """
    settings: dict[str, str] = {}
    if rows:
        system_prompt = cell(rows[0], 0)
        if system_prompt is not None:
            settings[SYSTEM_PROMPT_KEY] = system_prompt

    for row in rows:
        key = cell(row, 1)
        value = cell(row, 2)
        if key is not None and value is not None:
            settings[key] = value
    return MappingProxyType(settings)


def parse_scheduled_rows(
    rows: Sequence[Row],
    first_row: int = FIRST_DATA_ROW,
) -> tuple[ScheduledMessageRecord, ...]:
    """Colunas: fecha, hora, phone, resposta, mídia, estado.

    `row_index` é a linha real na planilha; `first_row` é a linha onde o
    range lido começa.
    """
    return tuple(
        ScheduledMessageRecord(
            row_index=offset + first_row,
            fecha=cell(row, 0),
            hora=cell(row, 1),
            phone=cell(row, 2),
            add_answer=cell(row, 3),
            media=cell(row, 4),
            estado=cell(row, 5),
        )
        for offset, row in enumerate(rows)
    )
