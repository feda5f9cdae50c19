"""Registros de domínio lidos da planilha de configuração do bot.

Cada registro é imutável e construído a partir de uma linha da planilha;
células ausentes viram None (nunca string vazia).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, TypeAlias

PromptValue: TypeAlias = str | int | float
PromptSettings: TypeAlias = Mapping[str, PromptValue]

SYSTEM_PROMPT_KEY = "system_prompt"

# A primeira linha de dados da planilha é a 2 (linha 1 = cabeçalhos)
FIRST_DATA_ROW = 2


@dataclass(frozen=True, slots=True)
class FlowRecord:
    """Flow configurado: keywords separadas por vírgula -> resposta fixa.

    Atributos:
        add_keyword: Keywords brutas, ex.: "hola, buenos dias"
        add_answer: Texto da resposta
        media: URL de mídia anexada à resposta
    """

    add_keyword: str | None = None
    add_answer: str | None = None
    media: str | None = None

    @property
    def keywords_raw(self) -> str:
        return self.add_keyword or ""


@dataclass(frozen=True, slots=True)
class ScheduledMessageRecord:
    """Mensagem programada; `row_index` só tem uso na atualização de estado."""

    row_index: int
    fecha: str | None = None
    hora: str | None = None
    phone: str | None = None
    add_answer: str | None = None
    media: str | None = None
    estado: str | None = None

    def __post_init__(self) -> None:
        if self.row_index < FIRST_DATA_ROW:
            raise ValueError(f"row_index deve ser >= {FIRST_DATA_ROW}: {self.row_index}")


@dataclass(frozen=True, slots=True)
class ChatMessage:
    """Mensagem no formato consumido pelo provedor de completions."""

    role: Literal["system", "user", "assistant"]
    content: str

    def as_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}
