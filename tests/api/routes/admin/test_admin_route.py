"""Testes dos endpoints administrativos de cache."""

from __future__ import annotations

from fastapi.testclient import TestClient

from app.app import create_app
from tests.fakes.fake_sheet_source import FLOWS_RANGE, PROMPTS_RANGE


def test_cache_stats_after_message(client: TestClient) -> None:
    client.post("/messages", json={"text": "hola"})

    response = client.get("/admin/cache")

    assert response.status_code == 200
    caches = response.json()["caches"]
    assert caches["flows"]["cached"] is True
    assert caches["scheduled_messages"]["cached"] is False


def test_invalidate_forces_refetch(client: TestClient, sheet_source) -> None:
    client.post("/messages", json={"text": "algo sin flow"})

    response = client.post("/admin/cache/invalidate")
    client.post("/messages", json={"text": "otra cosa sin flow"})

    assert response.status_code == 200
    assert response.json()["status"] == "invalidated"
    assert sheet_source.calls_for(FLOWS_RANGE) == 2
    assert sheet_source.calls_for(PROMPTS_RANGE) == 2


def test_not_ready_without_dependencies() -> None:
    # Sem `with`: o lifespan não roda e app.state.deps permanece None
    response = TestClient(create_app()).get("/admin/cache")

    assert response.status_code == 503
