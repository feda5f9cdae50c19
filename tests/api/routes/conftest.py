"""Fixtures HTTP: app FastAPI com planilha e LLM falsos."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.app import create_app
from app.bootstrap import AppDependencies, build_dependencies
from config.settings import OpenAISettings
from tests.fakes.fake_sheet_source import FakeCompletion


@pytest.fixture
def completion() -> FakeCompletion:
    return FakeCompletion(answer="Con gusto te ayudo.")


@pytest.fixture
def deps(sheet_source, sheets_settings, completion) -> AppDependencies:
    return build_dependencies(
        source=sheet_source,
        completion=completion,
        sheets_settings=sheets_settings,
        openai_settings=OpenAISettings(api_key="sk-test"),
    )


@pytest.fixture
def client(deps: AppDependencies):
    with TestClient(create_app(deps)) as test_client:
        yield test_client
