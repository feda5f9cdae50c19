"""Client concreto de Google Sheets (API v4) para a configuração do bot."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from app.observability import get_correlation_id
from app.protocols.sheet_source import SheetSourceProtocol
from config.settings.google_sheets import SHEETS_API_VERSION, SHEETS_SCOPE
from utils.errors import MalformedCredentialsError, SourceUnavailableError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from config.settings.google_sheets import GoogleSheetsSettings

logger = logging.getLogger(__name__)

_COMPONENT = "google_sheets_client"


class GoogleSheetsClient(SheetSourceProtocol):
    """Implementação do protocolo de fonte tabular usando a API do Google.

    A construção falha imediatamente se as credenciais ou o ID da planilha
    estiverem ausentes/ilegíveis.
    """

    __slots__ = ("_service", "_sheet_id")

    def __init__(self, *, settings: GoogleSheetsSettings) -> None:
        if not settings.sheet_id:
            raise MalformedCredentialsError("SHEET_ID não configurado")
        info = settings.parsed_credentials()
        try:
            credentials = service_account.Credentials.from_service_account_info(
                info,
                scopes=[SHEETS_SCOPE],
            )
        except (KeyError, ValueError) as exc:
            raise MalformedCredentialsError(
                "GOOGLE_APPLICATION_CREDENTIALS_JSON não é uma service account válida"
            ) from exc
        self._sheet_id = settings.sheet_id
        self._service = build(
            "sheets",
            SHEETS_API_VERSION,
            credentials=credentials,
            cache_discovery=False,
        )

    async def fetch_range(self, range_a1: str) -> list[list[str]]:
        try:
            response = await asyncio.to_thread(self._get_values_sync, range_a1)
        except HttpError as exc:
            self._log_error(action="fetch_range", range_a1=range_a1, exc=exc)
            raise SourceUnavailableError(range_a1, f"http_{_http_status(exc)}") from exc
        except Exception as exc:
            self._log_error(action="fetch_range", range_a1=range_a1)
            raise SourceUnavailableError(range_a1, type(exc).__name__) from exc
        values = response.get("values") if isinstance(response, dict) else None
        return values if isinstance(values, list) else []

    async def write_cell(self, cell_ref: str, value: str) -> bool:
        try:
            await asyncio.to_thread(self._update_values_sync, cell_ref, [[value]])
            return True
        except HttpError as exc:
            self._log_error(action="write_cell", range_a1=cell_ref, exc=exc)
            return False
        except Exception:
            self._log_error(action="write_cell", range_a1=cell_ref)
            return False

    async def append_row(self, range_a1: str, values: Sequence[str]) -> bool:
        try:
            await asyncio.to_thread(self._append_values_sync, range_a1, [list(values)])
            return True
        except HttpError as exc:
            self._log_error(action="append_row", range_a1=range_a1, exc=exc)
            return False
        except Exception:
            self._log_error(action="append_row", range_a1=range_a1)
            return False

    def _values(self) -> Any:
        return self._service.spreadsheets().values()

    def _get_values_sync(self, range_a1: str) -> dict[str, Any]:
        return self._values().get(spreadsheetId=self._sheet_id, range=range_a1).execute()

    def _update_values_sync(self, range_a1: str, values: list[list[str]]) -> dict[str, Any]:
        return self._values().update(
            spreadsheetId=self._sheet_id,
            range=range_a1,
            valueInputOption="RAW",
            body={"values": values},
        ).execute()

    def _append_values_sync(self, range_a1: str, values: list[list[str]]) -> dict[str, Any]:
        return self._values().append(
            spreadsheetId=self._sheet_id,
            range=range_a1,
            valueInputOption="RAW",
            body={"values": values},
        ).execute()

    def _log_error(
        self,
        *,
        action: str,
        range_a1: str,
        exc: HttpError | None = None,
    ) -> None:
        extra: dict[str, Any] = {
            "component": _COMPONENT,
            "action": action,
            "result": "error",
            "range": range_a1,
            "correlation_id": get_correlation_id(),
        }
        if exc is not None:
            extra["status_code"] = _http_status(exc)
            extra["error_type"] = type(exc).__name__
            logger.error("google_sheets_http_error", extra=extra)
            return
        logger.exception("google_sheets_unexpected_error", extra=extra)


def _http_status(exc: HttpError) -> int | None:
    response = getattr(exc, "resp", None)
    return int(response.status) if response and getattr(response, "status", None) else None
