"""Factories: criação das implementações concretas e wiring.

Cada chamada cria instâncias novas; o ciclo de vida (processo) é dado por
quem as guarda, normalmente `app.state` no lifespan do FastAPI.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.infra.ai import OpenAICompletionClient
from app.infra.sheets import GoogleSheetsClient
from app.infra.stores import MemoryChatHistory
from app.services.ai_responder import AIResponder
from app.services.configuration_store import ConfigurationStore
from app.services.prompt_settings import PromptSettingsResolver
from app.use_cases.messages import RouteInboundMessageUseCase
from config.settings import get_google_sheets_settings, get_openai_settings

if TYPE_CHECKING:
    from app.protocols import (
        ChatHistoryProtocol,
        CompletionServiceProtocol,
        SheetSourceProtocol,
    )
    from config.settings import GoogleSheetsSettings, OpenAISettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AppDependencies:
    """Grafo de objetos do serviço."""

    store: ConfigurationStore
    prompt_settings: PromptSettingsResolver
    ai_responder: AIResponder
    router: RouteInboundMessageUseCase


def create_sheet_source(settings: GoogleSheetsSettings | None = None) -> SheetSourceProtocol:
    """Cria o client da planilha.

    Raises:
        MalformedCredentialsError: credenciais ou SHEET_ID ausentes/inválidos.
    """
    client = GoogleSheetsClient(settings=settings or get_google_sheets_settings())
    logger.info("sheet_source_created", extra={"backend": "google_sheets"})
    return client


def create_configuration_store(
    source: SheetSourceProtocol | None = None,
    settings: GoogleSheetsSettings | None = None,
) -> ConfigurationStore:
    cfg = settings or get_google_sheets_settings()
    return ConfigurationStore(source or create_sheet_source(cfg), cfg)


def create_completion_client(settings: OpenAISettings | None = None) -> CompletionServiceProtocol:
    return OpenAICompletionClient(settings=settings or get_openai_settings())


def build_dependencies(
    *,
    source: SheetSourceProtocol | None = None,
    completion: CompletionServiceProtocol | None = None,
    history: ChatHistoryProtocol | None = None,
    sheets_settings: GoogleSheetsSettings | None = None,
    openai_settings: OpenAISettings | None = None,
    log_transcripts: bool = False,
) -> AppDependencies:
    """Monta o grafo completo; colaboradores podem ser injetados (testes)."""
    ai_cfg = openai_settings or get_openai_settings()
    store = create_configuration_store(source, sheets_settings)
    resolver = PromptSettingsResolver(store)
    responder = AIResponder(
        settings_resolver=resolver,
        completion=completion or create_completion_client(ai_cfg),
        history=history if history is not None else MemoryChatHistory(),
        default_system_prompt=ai_cfg.default_system_prompt,
    )
    router = RouteInboundMessageUseCase(
        store=store,
        ai_responder=responder,
        log_transcripts=log_transcripts,
    )
    return AppDependencies(
        store=store,
        prompt_settings=resolver,
        ai_responder=responder,
        router=router,
    )
