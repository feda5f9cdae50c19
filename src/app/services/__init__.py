"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.ai_responder import AIResponder
from app.services.configuration_store import ConfigurationStore
from app.services.flow_matcher import FlowMatch, MatchTier, find_flow_answer, match_flow
from app.services.prompt_settings import PromptSettingsResolver, coerce_prompt_settings
from app.services.text_normalizer import normalize

__all__ = [
    "AIResponder",
    "ConfigurationStore",
    "FlowMatch",
    "MatchTier",
    "PromptSettingsResolver",
    "coerce_prompt_settings",
    "find_flow_answer",
    "match_flow",
    "normalize",
]
