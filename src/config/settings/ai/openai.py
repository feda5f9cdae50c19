"""Settings do provedor de completions (API compatível com OpenAI).

Groq expõe a mesma API; basta apontar OPENAI_BASE_URL para
https://api.groq.com/openai/v1 e usar GROQ_API_KEY.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_MODEL = "llama-3.1-8b-instant"
DEFAULT_SYSTEM_PROMPT = "Eres un asistente útil."


@dataclass(frozen=True)
class OpenAISettings:
    """Configurações do cliente de completions.

    Attributes:
        api_key: Chave da API
        base_url: URL base alternativa (vazio = api.openai.com)
        model: Modelo padrão quando a planilha não define `model`
        timeout_seconds: Timeout por chamada
        max_retries: Tentativas do SDK em erros transitórios
        temperature: Temperatura padrão
        max_tokens: Limite padrão de tokens da resposta
        default_system_prompt: Usado quando IA_Prompts não define system_prompt
    """

    api_key: str = ""
    base_url: str = ""
    model: str = DEFAULT_MODEL
    timeout_seconds: float = 15.0
    max_retries: int = 2
    temperature: float = 0.7
    max_tokens: int = 500
    default_system_prompt: str = DEFAULT_SYSTEM_PROMPT

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.api_key:
            errors.append("OPENAI_API_KEY (ou GROQ_API_KEY) não configurado")
        if self.timeout_seconds <= 0:
            errors.append("OPENAI_TIMEOUT_SECONDS deve ser positivo")
        if self.max_retries < 0:
            errors.append("OPENAI_MAX_RETRIES deve ser >= 0")
        return errors


def _load_from_env() -> OpenAISettings:
    return OpenAISettings(
        api_key=os.getenv("OPENAI_API_KEY", "") or os.getenv("GROQ_API_KEY", ""),
        base_url=os.getenv("OPENAI_BASE_URL", ""),
        model=os.getenv("OPENAI_MODEL", DEFAULT_MODEL),
        timeout_seconds=float(os.getenv("OPENAI_TIMEOUT_SECONDS", "15")),
        max_retries=int(os.getenv("OPENAI_MAX_RETRIES", "2")),
        temperature=float(os.getenv("OPENAI_TEMPERATURE", "0.7")),
        max_tokens=int(os.getenv("OPENAI_MAX_TOKENS", "500")),
        default_system_prompt=os.getenv("AI_DEFAULT_SYSTEM_PROMPT", DEFAULT_SYSTEM_PROMPT),
    )


@lru_cache(maxsize=1)
def get_openai_settings() -> OpenAISettings:
    """Retorna instância cacheada de OpenAISettings."""
    return _load_from_env()
