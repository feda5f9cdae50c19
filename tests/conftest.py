"""Configuração do pytest para o sheetflow-bot."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings.google_sheets import GoogleSheetsSettings  # noqa: E402
from tests.fakes.fake_sheet_source import (  # noqa: E402
    FLOWS_RANGE,
    PROMPTS_RANGE,
    SCHEDULED_RANGE,
    FakeClock,
    FakeSheetSource,
)


@pytest.fixture
def sheets_settings() -> GoogleSheetsSettings:
    return GoogleSheetsSettings(
        credentials_json='{"type": "service_account"}',
        sheet_id="sheet-123",
        cache_ttl_seconds=300.0,
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sheet_source() -> FakeSheetSource:
    return FakeSheetSource(
        {
            FLOWS_RANGE: [
                ["hola, buenas", "¡Hola! ¿En qué te ayudo?"],
                ["precio, costo", "Nuestros precios...", "https://cdn.example.com/precios.png"],
            ],
            PROMPTS_RANGE: [
                ["Eres el asistente de la tienda.", "temperature", "0.4"],
                ["", "max_tokens", "300"],
                ["", "model", "llama-3.1-8b-instant"],
            ],
            SCHEDULED_RANGE: [
                ["2026-10-20", "09:00", "50255501234", "Recordatorio", "", "pendiente"],
                ["2026-10-21", "10:30", "50255505678", "Promo"],
            ],
        }
    )
