"""Settings da integração com Google Sheets.

A planilha é a fonte da configuração do bot:
- Flujos: keywords -> resposta fixa (+ mídia)
- IA_Prompts: system prompt e parâmetros do modelo
- Mensajes_Programados: mensagens agendadas e seu estado
- Logs: transcrição append-only das mensagens
"""

from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from utils.errors import MalformedCredentialsError

SHEETS_API_VERSION: str = "v4"
SHEETS_SCOPE: str = "https://www.googleapis.com/auth/spreadsheets"

DEFAULT_CACHE_TTL_SECONDS: float = 300.0
DEFAULT_FLOWS_RANGE = "Flujos!A2:C"
DEFAULT_PROMPTS_RANGE = "IA_Prompts!A2:C"
DEFAULT_SCHEDULED_RANGE = "Mensajes_Programados!A2:F"
DEFAULT_LOGS_RANGE = "Logs!A:F"
DEFAULT_TIMEZONE = "America/Guatemala"

# Primeira linha de dados quando o range não fixa uma (ex.: "Aba!A:F")
DEFAULT_FIRST_DATA_ROW = 2

_RANGE_START_ROW = re.compile(r"^[A-Za-z]+(\d+)")


@dataclass(frozen=True)
class GoogleSheetsSettings:
    """Configurações de acesso à planilha.

    Attributes:
        credentials_json: JSON da service account (conteúdo, não caminho)
        sheet_id: ID da planilha
        cache_ttl_seconds: Janela de frescor compartilhada pelos três caches
        flows_range: Range A1 da tabela de flows (linha 1 = cabeçalho)
        prompts_range: Range A1 da tabela de prompts
        scheduled_range: Range A1 das mensagens programadas
        scheduled_status_column: Coluna do estado das mensagens programadas
        logs_range: Range A1 usado no append de transcrições
        timezone: Fuso usado no timestamp da aba de logs
        log_transcripts: Registra entrada/saída de cada mensagem na aba de logs
    """

    credentials_json: str = ""
    sheet_id: str = ""
    cache_ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS
    flows_range: str = DEFAULT_FLOWS_RANGE
    prompts_range: str = DEFAULT_PROMPTS_RANGE
    scheduled_range: str = DEFAULT_SCHEDULED_RANGE
    scheduled_status_column: str = "F"
    logs_range: str = DEFAULT_LOGS_RANGE
    timezone: str = DEFAULT_TIMEZONE
    log_transcripts: bool = False

    @property
    def scheduled_sheet(self) -> str:
        """Nome da aba das mensagens programadas (prefixo do range A1)."""
        return self.scheduled_range.split("!", 1)[0]

    @property
    def scheduled_first_row(self) -> int:
        """Linha da planilha correspondente à primeira linha do range.

        "Mensajes_Programados!A3:F" -> 3; sem número de linha -> 2.
        """
        cells = self.scheduled_range.split("!", 1)[-1]
        match = _RANGE_START_ROW.match(cells)
        return int(match.group(1)) if match else DEFAULT_FIRST_DATA_ROW

    def status_cell(self, row_index: int) -> str:
        """Célula A1 do estado de uma linha, ex.: Mensajes_Programados!F7."""
        return f"{self.scheduled_sheet}!{self.scheduled_status_column}{row_index}"

    def parsed_credentials(self) -> dict[str, Any]:
        """Retorna as credenciais como dict.

        Raises:
            MalformedCredentialsError: JSON ausente, inválido ou não-objeto.
        """
        if not self.credentials_json.strip():
            raise MalformedCredentialsError(
                "GOOGLE_APPLICATION_CREDENTIALS_JSON não configurado"
            )
        try:
            info = json.loads(self.credentials_json)
        except json.JSONDecodeError as exc:
            raise MalformedCredentialsError(
                "GOOGLE_APPLICATION_CREDENTIALS_JSON não é um JSON válido"
            ) from exc
        if not isinstance(info, dict):
            raise MalformedCredentialsError(
                "GOOGLE_APPLICATION_CREDENTIALS_JSON deve ser um objeto JSON"
            )
        return info

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Google Sheets."""
        errors: list[str] = []
        try:
            self.parsed_credentials()
        except MalformedCredentialsError as exc:
            errors.append(str(exc))
        if not self.sheet_id:
            errors.append("SHEET_ID não configurado")
        if self.cache_ttl_seconds <= 0:
            errors.append("SHEETS_CACHE_TTL_SECONDS deve ser positivo")
        if self.scheduled_first_row < DEFAULT_FIRST_DATA_ROW:
            errors.append("SHEETS_SCHEDULED_RANGE não pode incluir a linha de cabeçalho")
        return errors


def _load_from_env() -> GoogleSheetsSettings:
    return GoogleSheetsSettings(
        credentials_json=os.getenv("GOOGLE_APPLICATION_CREDENTIALS_JSON", ""),
        sheet_id=os.getenv("SHEET_ID", ""),
        cache_ttl_seconds=float(
            os.getenv("SHEETS_CACHE_TTL_SECONDS", str(DEFAULT_CACHE_TTL_SECONDS))
        ),
        flows_range=os.getenv("SHEETS_FLOWS_RANGE", DEFAULT_FLOWS_RANGE),
        prompts_range=os.getenv("SHEETS_PROMPTS_RANGE", DEFAULT_PROMPTS_RANGE),
        scheduled_range=os.getenv("SHEETS_SCHEDULED_RANGE", DEFAULT_SCHEDULED_RANGE),
        scheduled_status_column=os.getenv("SHEETS_SCHEDULED_STATUS_COLUMN", "F"),
        logs_range=os.getenv("SHEETS_LOGS_RANGE", DEFAULT_LOGS_RANGE),
        timezone=os.getenv("SHEETS_TIMEZONE", DEFAULT_TIMEZONE),
        log_transcripts=os.getenv("SHEETS_LOG_TRANSCRIPTS", "").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_google_sheets_settings() -> GoogleSheetsSettings:
    """Retorna instância cacheada de GoogleSheetsSettings."""
    return _load_from_env()
