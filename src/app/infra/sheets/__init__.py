"""Integração com a planilha de configuração (Google Sheets)."""

from app.infra.sheets.google_sheets_client import GoogleSheetsClient
from app.infra.sheets.row_parsers import (
    parse_flow_rows,
    parse_prompt_rows,
    parse_scheduled_rows,
)

__all__ = [
    "GoogleSheetsClient",
    "parse_flow_rows",
    "parse_prompt_rows",
    "parse_scheduled_rows",
]
