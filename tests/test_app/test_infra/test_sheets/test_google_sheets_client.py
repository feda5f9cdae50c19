"""Testes unitarios para o client de Google Sheets."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any
from unittest.mock import MagicMock

import pytest
from googleapiclient.errors import HttpError

from app.infra.sheets import google_sheets_client as module
from app.infra.sheets.google_sheets_client import GoogleSheetsClient
from config.settings.google_sheets import GoogleSheetsSettings
from utils.errors import MalformedCredentialsError, SourceUnavailableError

CREDENTIALS = '{"type": "service_account", "client_email": "bot@example.com"}'


def _build_client(
    monkeypatch: pytest.MonkeyPatch,
    service: Any | None = None,
) -> GoogleSheetsClient:
    # Evita autenticacao real para manter o teste deterministico e sem rede.
    monkeypatch.setattr(
        module.service_account.Credentials,
        "from_service_account_info",
        lambda info, scopes: SimpleNamespace(info=info, scopes=scopes),
    )
    monkeypatch.setattr(module, "build", lambda *args, **kwargs: service or MagicMock())
    settings = GoogleSheetsSettings(credentials_json=CREDENTIALS, sheet_id="sheet-1")
    return GoogleSheetsClient(settings=settings)


def _build_http_error(status: int) -> HttpError:
    response = SimpleNamespace(status=status, reason="error")
    return HttpError(resp=response, content=b"error")


def test_init_requires_sheet_id() -> None:
    settings = GoogleSheetsSettings(credentials_json=CREDENTIALS, sheet_id="")

    with pytest.raises(MalformedCredentialsError, match="SHEET_ID"):
        GoogleSheetsClient(settings=settings)


@pytest.mark.parametrize("credentials_json", ["", "{not json", "[1, 2]"])
def test_init_rejects_malformed_credentials(credentials_json: str) -> None:
    settings = GoogleSheetsSettings(credentials_json=credentials_json, sheet_id="sheet-1")

    with pytest.raises(MalformedCredentialsError):
        GoogleSheetsClient(settings=settings)


def test_init_wraps_invalid_service_account(monkeypatch: pytest.MonkeyPatch) -> None:
    def _reject(info: dict[str, Any], scopes: list[str]) -> object:
        _ = (info, scopes)
        raise ValueError("missing fields")

    monkeypatch.setattr(module.service_account.Credentials, "from_service_account_info", _reject)
    settings = GoogleSheetsSettings(credentials_json=CREDENTIALS, sheet_id="sheet-1")

    with pytest.raises(MalformedCredentialsError, match="service account"):
        GoogleSheetsClient(settings=settings)


@pytest.mark.asyncio
async def test_fetch_range_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    service = MagicMock()
    values_api = service.spreadsheets.return_value.values.return_value
    values_api.get.return_value.execute.return_value = {"values": [["hola", "Hola!"]]}
    client = _build_client(monkeypatch, service)

    rows = await client.fetch_range("Flujos!A2:C")

    assert rows == [["hola", "Hola!"]]
    values_api.get.assert_called_once_with(spreadsheetId="sheet-1", range="Flujos!A2:C")


@pytest.mark.asyncio
async def test_fetch_range_without_values_is_empty(monkeypatch: pytest.MonkeyPatch) -> None:
    client = _build_client(monkeypatch)
    monkeypatch.setattr(client, "_get_values_sync", lambda range_a1: {"range": range_a1})

    assert await client.fetch_range("Flujos!A2:C") == []


@pytest.mark.asyncio
async def test_fetch_range_http_error_raises_source_unavailable(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    client = _build_client(monkeypatch)
    error = _build_http_error(503)

    def _raise_http_error(range_a1: str) -> dict[str, Any]:
        _ = range_a1
        raise error

    monkeypatch.setattr(client, "_get_values_sync", _raise_http_error)

    with pytest.raises(SourceUnavailableError) as exc_info:
        await client.fetch_range("Flujos!A2:C")

    assert exc_info.value.range_a1 == "Flujos!A2:C"
    assert exc_info.value.reason == "http_503"


@pytest.mark.asyncio
async def test_fetch_range_network_error_raises_source_unavailable(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    client = _build_client(monkeypatch)

    def _raise_timeout(range_a1: str) -> dict[str, Any]:
        _ = range_a1
        raise TimeoutError("slow")

    monkeypatch.setattr(client, "_get_values_sync", _raise_timeout)

    with pytest.raises(SourceUnavailableError, match="TimeoutError"):
        await client.fetch_range("IA_Prompts!A2:C")


@pytest.mark.asyncio
async def test_write_cell_sends_raw_value(monkeypatch: pytest.MonkeyPatch) -> None:
    service = MagicMock()
    values_api = service.spreadsheets.return_value.values.return_value
    client = _build_client(monkeypatch, service)

    ok = await client.write_cell("Mensajes_Programados!F3", "enviado")

    assert ok is True
    values_api.update.assert_called_once_with(
        spreadsheetId="sheet-1",
        range="Mensajes_Programados!F3",
        valueInputOption="RAW",
        body={"values": [["enviado"]]},
    )


@pytest.mark.asyncio
async def test_write_cell_returns_false_on_http_error(monkeypatch: pytest.MonkeyPatch) -> None:
    client = _build_client(monkeypatch)
    error = _build_http_error(403)

    def _raise_http_error(range_a1: str, values: list[list[str]]) -> dict[str, Any]:
        _ = (range_a1, values)
        raise error

    monkeypatch.setattr(client, "_update_values_sync", _raise_http_error)

    assert await client.write_cell("Mensajes_Programados!F3", "enviado") is False


@pytest.mark.asyncio
async def test_append_row_sends_single_row(monkeypatch: pytest.MonkeyPatch) -> None:
    service = MagicMock()
    values_api = service.spreadsheets.return_value.values.return_value
    client = _build_client(monkeypatch, service)

    ok = await client.append_row("Logs!A:F", ["ts", "502", "IN", "user", "hola", "OK"])

    assert ok is True
    values_api.append.assert_called_once_with(
        spreadsheetId="sheet-1",
        range="Logs!A:F",
        valueInputOption="RAW",
        body={"values": [["ts", "502", "IN", "user", "hola", "OK"]]},
    )


@pytest.mark.asyncio
async def test_append_row_returns_false_on_unexpected_error(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    client = _build_client(monkeypatch)

    def _raise(range_a1: str, values: list[list[str]]) -> dict[str, Any]:
        _ = (range_a1, values)
        raise ConnectionError("reset")

    monkeypatch.setattr(client, "_append_values_sync", _raise)

    assert await client.append_row("Logs!A:F", ["x"]) is False
