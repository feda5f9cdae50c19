"""Contrato da fonte tabular de configuração (planilha).

Mantemos apenas o protocolo aqui para permitir troca de provider sem
impactar a ConfigurationStore.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class SheetSourceProtocol(Protocol):
    """Leitura e escrita de células por range A1 (ex.: "Flujos!A2:C")."""

    async def fetch_range(self, range_a1: str) -> list[list[str]]:
        """Retorna as linhas do range; linhas curtas vêm sem as células finais.

        Raises:
            SourceUnavailableError: Falha de rede, autenticação ou quota.
        """
        ...

    async def write_cell(self, cell_ref: str, value: str) -> bool:
        """Escreve um valor bruto em uma célula; False em caso de falha."""
        ...

    async def append_row(self, range_a1: str, values: Sequence[str]) -> bool:
        """Acrescenta uma linha ao final do range; False em caso de falha."""
        ...
