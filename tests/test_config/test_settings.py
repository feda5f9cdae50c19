"""Testes das settings carregadas do ambiente."""

from __future__ import annotations

import pytest

from app.bootstrap import validate_runtime_settings
from config.settings import (
    BaseSettings,
    GoogleSheetsSettings,
    OpenAISettings,
    get_base_settings,
    get_google_sheets_settings,
    get_openai_settings,
)
from utils.errors import ConfigurationError, MalformedCredentialsError

VALID_CREDENTIALS = '{"type": "service_account"}'


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    for getter in (get_base_settings, get_google_sheets_settings, get_openai_settings):
        getter.cache_clear()
    yield
    for getter in (get_base_settings, get_google_sheets_settings, get_openai_settings):
        getter.cache_clear()


class TestGoogleSheetsSettings:
    def test_defaults(self) -> None:
        settings = GoogleSheetsSettings()

        assert settings.cache_ttl_seconds == 300.0
        assert settings.flows_range == "Flujos!A2:C"
        assert settings.prompts_range == "IA_Prompts!A2:C"
        assert settings.scheduled_range == "Mensajes_Programados!A2:F"
        assert settings.timezone == "America/Guatemala"

    def test_status_cell(self) -> None:
        assert GoogleSheetsSettings().status_cell(7) == "Mensajes_Programados!F7"

    @pytest.mark.parametrize(
        ("scheduled_range", "expected"),
        [
            ("Mensajes_Programados!A2:F", 2),
            ("Mensajes_Programados!A10:F", 10),
            ("Mensajes_Programados!A:F", 2),
        ],
    )
    def test_scheduled_first_row(self, scheduled_range: str, expected: int) -> None:
        assert GoogleSheetsSettings(scheduled_range=scheduled_range).scheduled_first_row == expected

    def test_scheduled_range_over_header_is_invalid(self) -> None:
        settings = GoogleSheetsSettings(
            credentials_json=VALID_CREDENTIALS,
            sheet_id="abc",
            scheduled_range="Mensajes_Programados!A1:F",
        )

        assert settings.validate() == [
            "SHEETS_SCHEDULED_RANGE não pode incluir a linha de cabeçalho"
        ]

    @pytest.mark.parametrize(
        ("credentials_json", "message"),
        [
            ("", "não configurado"),
            ("{broken", "JSON válido"),
            ('"texto"', "objeto JSON"),
        ],
    )
    def test_parsed_credentials_rejects(self, credentials_json: str, message: str) -> None:
        settings = GoogleSheetsSettings(credentials_json=credentials_json)

        with pytest.raises(MalformedCredentialsError, match=message):
            settings.parsed_credentials()

    def test_malformed_credentials_is_configuration_error(self) -> None:
        assert issubclass(MalformedCredentialsError, ConfigurationError)

    def test_validate_collects_errors(self) -> None:
        errors = GoogleSheetsSettings(cache_ttl_seconds=0).validate()

        assert len(errors) == 3

    def test_validate_ok(self) -> None:
        settings = GoogleSheetsSettings(credentials_json=VALID_CREDENTIALS, sheet_id="abc")

        assert settings.validate() == []

    def test_loaded_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SHEET_ID", "sheet-env")
        monkeypatch.setenv("SHEETS_CACHE_TTL_SECONDS", "60")
        monkeypatch.setenv("SHEETS_LOG_TRANSCRIPTS", "true")

        settings = get_google_sheets_settings()

        assert settings.sheet_id == "sheet-env"
        assert settings.cache_ttl_seconds == 60.0
        assert settings.log_transcripts is True


class TestOpenAISettings:
    def test_groq_key_is_accepted(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        monkeypatch.setenv("GROQ_API_KEY", "gsk-test")

        settings = get_openai_settings()

        assert settings.api_key == "gsk-test"
        assert settings.enabled is True

    def test_missing_key_is_reported(self) -> None:
        assert OpenAISettings().validate() == ["OPENAI_API_KEY (ou GROQ_API_KEY) não configurado"]


class TestBaseSettings:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("prod", "production"), ("stage", "staging"), ("qualquer", "development")],
    )
    def test_environment_aliases(
        self,
        monkeypatch: pytest.MonkeyPatch,
        raw: str,
        expected: str,
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", raw)

        assert get_base_settings().environment == expected

    def test_is_strict(self) -> None:
        assert BaseSettings(environment="staging").is_strict is True
        assert BaseSettings().is_strict is False

    def test_invalid_log_level_is_reported(self) -> None:
        assert BaseSettings(log_level="LOUD").validate() == ["LOG_LEVEL inválido: LOUD"]


class TestValidateRuntimeSettings:
    def test_bad_sheet_credentials_always_abort(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.setenv("GOOGLE_APPLICATION_CREDENTIALS_JSON", "{broken")
        monkeypatch.setenv("SHEET_ID", "abc")

        with pytest.raises(MalformedCredentialsError):
            validate_runtime_settings()

    def test_missing_ai_key_only_warns_in_development(
        self,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.setenv("GOOGLE_APPLICATION_CREDENTIALS_JSON", VALID_CREDENTIALS)
        monkeypatch.setenv("SHEET_ID", "abc")
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        monkeypatch.delenv("GROQ_API_KEY", raising=False)

        validate_runtime_settings()

    def test_missing_ai_key_aborts_in_production(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("GOOGLE_APPLICATION_CREDENTIALS_JSON", VALID_CREDENTIALS)
        monkeypatch.setenv("SHEET_ID", "abc")
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        monkeypatch.delenv("GROQ_API_KEY", raising=False)

        with pytest.raises(RuntimeError, match="openai"):
            validate_runtime_settings()
